"""An index from the words of movie titles to the documents that hold them."""

from __future__ import annotations

from cinedex.docset import DocumentSet
from cinedex.hashtable import Hashtable, fnv_hash64
from cinedex.record import clean_string

_INITIAL_BUCKETS = 128
_WORD_DELIMITER = " "


class MovieTitleIndex:
    """Maps each lower-cased, cleaned title word to a DocumentSet."""

    def __init__(self) -> None:
        self._table = Hashtable(_INITIAL_BUCKETS)

    def add_movie_title(self, title: str, doc_id: int, row_id: int) -> None:
        """Index every word of ``title`` as found in row ``row_id`` of ``doc_id``.

        Words are split on spaces, lower-cased and stripped of whitespace and
        punctuation; words left empty are skipped.
        """
        for word in title.split(_WORD_DELIMITER):
            token = clean_string(word.lower())
            if not token:
                continue
            key = fnv_hash64(token)
            if key in self._table:
                document_set = self._table.lookup(key).value
            else:
                document_set = DocumentSet(token)
                self._table.put(key, document_set)
            document_set.add_doc_info(doc_id, row_id)

    def get_document_set(self, term: str) -> DocumentSet | None:
        """Return the set for ``term`` (case-insensitive), or None if absent.

        The term is lower-cased but not cleaned, so punctuation in it makes
        the lookup fail.
        """
        key = fnv_hash64(term.lower())
        if key in self._table:
            return self._table.lookup(key).value
        return None

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"MovieTitleIndex(words={len(self)})"
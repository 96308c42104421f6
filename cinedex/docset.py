"""Sets of document locations: which rows of which files hold related titles."""

from __future__ import annotations

from typing import Iterator

from cinedex.hashtable import Hashtable

_INITIAL_BUCKETS = 16


def format_offset_list(rows) -> str:
    """Return the debugging text for a list of row ids."""
    return "Printing offset list\n" + "".join(f"{row}\t" for row in rows)


class DocumentSet:
    """A description plus, for each document id, the rows that match it."""

    def __init__(self, desc: str) -> None:
        self.desc = desc
        self.doc_index = Hashtable(_INITIAL_BUCKETS)

    def add_doc_info(self, doc_id: int, row_id: int) -> bool:
        """Record that row ``row_id`` of document ``doc_id`` belongs here.

        Returns False, changing nothing, if that row is already recorded.
        """
        if doc_id in self.doc_index:
            rows = self.doc_index.lookup(doc_id).value
            if row_id in rows:
                return False
            rows.append(row_id)
        else:
            self.doc_index.put(doc_id, [row_id])
        return True

    def rows(self, doc_id: int) -> list[int]:
        """Return the row ids recorded for ``doc_id``; raise KeyError if none."""
        return list(self.doc_index.lookup(doc_id).value)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self.doc_index

    def __len__(self) -> int:
        return len(self.doc_index)

    def __iter__(self) -> Iterator[int]:
        """Yield the document ids in the set."""
        for item in self.doc_index:
            yield item.key

    def __repr__(self) -> str:
        return f"DocumentSet(desc={self.desc!r}, docs={len(self)})"
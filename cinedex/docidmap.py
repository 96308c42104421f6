"""A map from unique document ids to the files they name."""

from __future__ import annotations

from typing import Iterator

from cinedex.hashtable import Hashtable

_INITIAL_BUCKETS = 64


class DocIdMap:
    """Assigns each added file a unique id, counting up from 1."""

    def __init__(self) -> None:
        self._table = Hashtable(_INITIAL_BUCKETS)

    def put_file(self, filename: str) -> int:
        """Add ``filename`` under the next free id and return that id."""
        doc_id = len(self._table) + 1
        if doc_id not in self._table:
            self._table.put(doc_id, filename)
        return doc_id

    def get_file(self, doc_id: int) -> str:
        """Return the filename for ``doc_id``; raise KeyError if unknown."""
        return self._table.lookup(doc_id).value

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        """Yield ``(doc_id, filename)`` pairs."""
        for item in self._table:
            yield item.key, item.value

    def __repr__(self) -> str:
        return f"DocIdMap(files={len(self)})"
"""A chained hash table keyed by unsigned 64-bit integers, plus FNV-1a hashing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

_MASK64 = (1 << 64) - 1
_FNV1_64_INIT = 0xCBF29CE484222325
_FNV_64_PRIME = 0x100000001B3

# The table grows when its load factor reaches this value.
_MAX_LOAD = 3
# Factor by which the bucket count grows on resize.
_GROWTH = 9


def fnv_hash64(data: bytes | str) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (strings are UTF-8 encoded)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    hval = _FNV1_64_INIT
    for octet in data:
        hval ^= octet
        hval = (hval * _FNV_64_PRIME) & _MASK64
    return hval


def fnv_hash_int64(value: int) -> int:
    """Hash a 64-bit integer through its eight little-endian bytes."""
    return fnv_hash64((value & _MASK64).to_bytes(8, "little"))


@dataclass(frozen=True)
class KeyValue:
    """A key/value pair stored in a :class:`Hashtable`."""

    key: int
    value: Any


class Hashtable:
    """A hash table with separate chaining that grows as it fills."""

    def __init__(self, num_buckets: int) -> None:
        if num_buckets <= 0:
            raise ValueError("a hashtable needs at least one bucket")
        self.num_buckets = num_buckets
        self._buckets: list[list[KeyValue]] = [[] for _ in range(num_buckets)]
        self._count = 0

    @staticmethod
    def _normalize(key: int) -> int:
        return key & _MASK64

    def bucket_index(self, key: int) -> int:
        """Return the index of the bucket that holds ``key``."""
        return self._normalize(key) % self.num_buckets

    def bucket_sizes(self) -> list[int]:
        """Return the number of entries in each bucket, in bucket order."""
        return [len(bucket) for bucket in self._buckets]

    def _find(self, key: int) -> tuple[list[KeyValue], int | None]:
        bucket = self._buckets[self.bucket_index(key)]
        for position, item in enumerate(bucket):
            if item.key == key:
                return bucket, position
        return bucket, None

    def _resize(self) -> None:
        if self._count < _MAX_LOAD * self.num_buckets:
            return
        items = list(self)
        self.num_buckets *= _GROWTH
        self._buckets = [[] for _ in range(self.num_buckets)]
        for item in items:
            self._buckets[self.bucket_index(item.key)].append(item)

    def put(self, key: int, value: Any) -> KeyValue | None:
        """Store ``value`` under ``key``.

        Returns the pair that was replaced, or None if the key was new.
        """
        self._resize()
        key = self._normalize(key)
        bucket, position = self._find(key)
        new_item = KeyValue(key, value)
        if position is not None:
            old = bucket[position]
            bucket[position] = new_item
            return old
        bucket.append(new_item)
        self._count += 1
        return None

    def lookup(self, key: int) -> KeyValue:
        """Return the pair stored under ``key``; raise KeyError if absent."""
        key = self._normalize(key)
        bucket, position = self._find(key)
        if position is None:
            raise KeyError(key)
        return bucket[position]

    def remove(self, key: int) -> KeyValue:
        """Remove and return the pair stored under ``key``; raise KeyError if absent."""
        key = self._normalize(key)
        bucket, position = self._find(key)
        if position is None:
            raise KeyError(key)
        self._count -= 1
        return bucket.pop(position)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return self._find(self._normalize(key))[1] is not None

    def __iter__(self) -> Iterator[KeyValue]:
        for bucket in self._buckets:
            yield from list(bucket)

    def __repr__(self) -> str:
        return f"Hashtable(num_buckets={self.num_buckets}, size={self._count})"
"""A small string-to-string hash table with chained buckets."""

from __future__ import annotations

from dataclasses import dataclass

BUCKET_COUNT = 10


def _as_c_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def bucket_index(key: str) -> int:
    """Return the bucket for ``key``.

    The hash multiplies by 33 and adds each byte as a signed char,
    wrapping as a 32-bit signed integer; the result is folded into
    ``range(BUCKET_COUNT)``.
    """
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = _as_c_int(value * 33 + signed)
    return value % BUCKET_COUNT


@dataclass
class _Entry:
    key: str
    value: str


class HashTable:
    """Maps string keys to string values using ``BUCKET_COUNT`` chains."""

    def __init__(self) -> None:
        self._buckets: list[list[_Entry]] = [[] for _ in range(BUCKET_COUNT)]

    def insert(self, key: str, value: str) -> int:
        """Store ``value`` under ``key``, replacing any old value; return the bucket."""
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError("keys and values must be strings")
        index = bucket_index(key)
        bucket = self._buckets[index]
        for entry in bucket:
            if entry.key == key:
                entry.value = value
                return index
        bucket.append(_Entry(key, value))
        return index

    def _bucket_for(self, key: str) -> list[_Entry]:
        if not isinstance(key, str):
            raise TypeError("keys must be strings")
        return self._buckets[bucket_index(key)]

    def _entry(self, key: str) -> _Entry | None:
        return next(
            (entry for entry in self._bucket_for(key) if entry.key == key),
            None,
        )

    def find(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None."""
        entry = self._entry(key)
        return entry.value if entry else None

    def count(self, key: str) -> int:
        """Return 1 if ``key`` is present, else 0."""
        bucket = self._bucket_for(key)
        for entry in bucket:
            if entry.key == key:
                return 1
        return 0

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._entry(key) is not None

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def clear(self) -> None:
        """Remove every entry."""
        for bucket in self._buckets:
            bucket.clear()

    def display(self) -> str:
        """Return a line per bucket listing its entries."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            entries = "".join(f"{e.key} = {e.value}\t\t" for e in bucket)
            lines.append(f"bucket[{index}]:{entries}\n")
        return "".join(lines)
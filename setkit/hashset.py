"""A separate-chaining hash set that grows as it fills."""

from __future__ import annotations

from collections.abc import Hashable

INITIAL_CAPACITY = 5
MAX_FILL = 0.8


class HashSet:
    """A set of hashable items stored in chained buckets.

    The table starts with ``INITIAL_CAPACITY`` buckets. Before each
    insertion, if the fill factor has reached ``MAX_FILL``, the table
    grows to ``2 * capacity + 1`` buckets and every item is rehashed.
    New items go to the front of their bucket.
    """

    def __init__(self) -> None:
        self._buckets: list[list[Hashable]] = [[] for _ in range(INITIAL_CAPACITY)]
        self._size = 0

    @property
    def capacity(self) -> int:
        """Current number of buckets."""
        return len(self._buckets)

    def insert(self, item: Hashable) -> bool:
        """Add ``item``; return False if it was already present."""
        if self._size / self.capacity >= MAX_FILL:
            self._grow()
        bucket = self._bucket(item)
        if item in bucket:
            return False
        bucket.insert(0, item)
        self._size += 1
        return True

    def remove(self, item: Hashable) -> bool:
        """Remove ``item``; return False if it was not present."""
        try:
            self._bucket(item).remove(item)
        except ValueError:
            return False
        self._size -= 1
        return True

    def contains(self, item: Hashable) -> bool:
        """Return True if ``item`` is in the set."""
        return item in self._bucket(item)

    def __contains__(self, item: Hashable) -> bool:
        return self.contains(item)

    def clear(self) -> None:
        """Remove every item and shrink back to the initial capacity."""
        self._buckets = [[] for _ in range(INITIAL_CAPACITY)]
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def _bucket(self, item: Hashable) -> list[Hashable]:
        return self._buckets[hash(item) % len(self._buckets)]

    def _grow(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old) + 1)]
        for bucket in old:
            for item in bucket:
                self._bucket(item).insert(0, item)
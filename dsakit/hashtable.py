"""A hash table of integers using separate chaining."""

from __future__ import annotations

from collections import deque
from itertools import chain
from typing import Iterator

DEFAULT_BUCKETS = 5


class ChainedHashTable:
    """Integers hashed by remainder into a fixed number of chained buckets.

    New values go to the head of their bucket; duplicates are kept.
    Iteration walks the buckets in order, each from its head.
    """

    def __init__(self, buckets: int = DEFAULT_BUCKETS) -> None:
        if buckets < 1:
            raise ValueError("a hash table needs at least one bucket")
        self._buckets: list[deque[int]] = [deque() for _ in range(buckets)]

    def _bucket(self, value: int) -> deque[int]:
        return self._buckets[value % len(self._buckets)]

    def insert(self, value: int) -> None:
        """Add value at the head of its bucket."""
        self._bucket(value).appendleft(value)

    def remove(self, value: int) -> None:
        """Remove the first occurrence of value; KeyError if it is absent."""
        try:
            self._bucket(value).remove(value)
        except ValueError:
            raise KeyError(value) from None

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        return value in self._bucket(value)

    def __iter__(self) -> Iterator[int]:
        return chain.from_iterable(self._buckets)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
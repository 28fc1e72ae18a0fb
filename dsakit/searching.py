"""Sequential and binary searches returning the index of a match."""

from __future__ import annotations

from typing import Any, Optional, Sequence


def binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of target in ascending items, or None if absent."""
    begin, end = 0, len(items) - 1
    while begin <= end:
        mid = (begin + end) // 2
        if target > items[mid]:
            begin = mid + 1
        elif target < items[mid]:
            end = mid - 1
        else:
            return mid
    return None


def recursive_binary_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return an index of target in ascending items, or None if absent."""

    def search(first: int, last: int) -> Optional[int]:
        if last < first:
            return None
        mid = (first + last) // 2
        if target < items[mid]:
            return search(first, mid - 1)
        if target > items[mid]:
            return search(mid + 1, last)
        return mid

    return search(0, len(items) - 1)


def sequential_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to target, or None."""
    return next((index for index, item in enumerate(items) if item == target), None)


def recursive_sequential_search(items: Sequence[Any], target: Any) -> Optional[int]:
    """Return the index of the first item equal to target, or None.

    Walks the sequence recursively, one element per call.
    """

    def search(index: int) -> Optional[int]:
        if index >= len(items):
            return None
        if items[index] == target:
            return index
        return search(index + 1)

    return search(0)
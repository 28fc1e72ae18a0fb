"""Comparison sorts that return a new, ascending list."""

from __future__ import annotations

from typing import Any, Iterable


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted with bubble sort.

    Each pass carries the smallest remaining value from the end towards the
    front. Sorting stops early once a pass makes no swap. The sort is stable.
    """
    result = list(items)
    last = len(result) - 1
    for current in range(len(result)):
        swapped = False
        for walker in range(last, current, -1):
            if result[walker] < result[walker - 1]:
                result[walker], result[walker - 1] = result[walker - 1], result[walker]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items in ascending order, sorted with insertion sort.

    The sort is stable.
    """
    result = list(items)
    for current in range(1, len(result)):
        hold = result[current]
        walker = current - 1
        while walker >= 0 and hold < result[walker]:
            result[walker + 1] = result[walker]
            walker -= 1
        result[walker + 1] = hold
    return result
"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator


class LinkedQueue:
    """A FIFO queue; iteration runs from front to rear."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque(items)

    def _require_items(self, action: str) -> None:
        if not self._items:
            raise IndexError(f"{action} on empty queue")

    def enqueue(self, item: Any) -> None:
        """Add item at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item; IndexError if the queue is empty."""
        self._require_items("dequeue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front item without removing it; IndexError if empty."""
        self._require_items("front")
        return self._items[0]

    def rear(self) -> Any:
        """Return the rear item without removing it; IndexError if empty."""
        self._require_items("rear")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the queue holds nothing."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"
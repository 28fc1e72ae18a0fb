"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterable, Iterator


class Stack:
    """A LIFO stack; iteration runs from the top down."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def _require_items(self, action: str) -> None:
        if not self._items:
            raise IndexError(f"{action} on empty stack")

    def push(self, item: Any) -> None:
        """Put item on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; IndexError if the stack is empty."""
        self._require_items("pop")
        return self._items.pop()

    def top(self) -> Any:
        """Return the top item without removing it; IndexError if empty."""
        self._require_items("top")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
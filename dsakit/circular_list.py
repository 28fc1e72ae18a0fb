"""A circular doubly linked list that keeps unique values in ascending order."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from dsakit.doubly_linked_list import _TwoWaySorted
from dsakit.ordered_list import _Node


class SortedCircularList(_TwoWaySorted):
    """Unique values in ascending order, linked in a ring.

    The head holds the smallest value and the rear, just before the head in
    the ring, holds the largest.
    """

    def insert(self, value: Any) -> None:
        """Insert value in order; ValueError if it is already present."""
        self._add(value)

    def remove(self, value: Any) -> None:
        """Remove value; KeyError if it is absent."""
        self._discard(value)

    def position_from_head(self, target: Any) -> Optional[int]:
        """Return target's 1-based position counted from the head, or None."""
        return self._head_position(target)

    def position_from_rear(self, target: Any) -> Optional[int]:
        """Return target's 1-based position counted from the rear, or None."""
        return self._rear_position(target)

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._count == 0

    def clear(self) -> None:
        """Remove every value."""
        self._reset()

    def __contains__(self, value: object) -> bool:
        return self._has(value)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        return self._backward()

    def __len__(self) -> int:
        return self._count

    def _last(self) -> Optional[_Node]:
        return None if self._head is None else self._head.prev

    def _link(self, node: _Node, previous: Optional[_Node], current: Optional[_Node]) -> None:
        if self._head is None:
            node.prev = node.next = node
            self._head = node
            return
        at = current if current is not None else self._head
        assert at.prev is not None
        node.prev, node.next = at.prev, at
        at.prev.next = node
        at.prev = node
        if current is self._head:
            self._head = node

    def _unlink(self, previous: Optional[_Node], node: _Node) -> None:
        if self._count == 1:
            self._head = None
            return
        assert node.prev is not None and node.next is not None
        node.prev.next = node.next
        node.next.prev = node.prev
        if node is self._head:
            self._head = node.next
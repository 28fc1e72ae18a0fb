"""A doubly linked list that keeps unique values in ascending order."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Optional

from dsakit.ordered_list import _Node, _SortedBase


def _first_position(
    values: Iterable[Any], target: Any, passes: Callable[[Any, Any], bool]
) -> Optional[int]:
    """Walk values while target passes them; report the stopping place if it matches."""
    for position, value in enumerate(values, 1):
        if not passes(target, value):
            return position if value == target else None
    return None


class _TwoWaySorted(_SortedBase):
    """A sorted list whose nodes also link backwards; subclasses supply _last."""

    def _last(self) -> Optional[_Node]:
        raise NotImplementedError  # pragma: no cover - overridden

    def _backward(self) -> Iterator[Any]:
        node = self._last()
        for _ in range(self._count):
            assert node is not None
            yield node.value
            node = node.prev

    def _head_position(self, target: Any) -> Optional[int]:
        return _first_position(self._values(), target, operator.gt)

    def _rear_position(self, target: Any) -> Optional[int]:
        return _first_position(self._backward(), target, operator.lt)


class SortedDoublyLinkedList(_TwoWaySorted):
    """Unique values in ascending order, walkable from either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._rear: Optional[_Node] = None
        super().__init__(items)

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
        self._rear = None

    def __contains__(self, value: object) -> bool:
        return self._has(value)

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __reversed__(self) -> Iterator[Any]:
        return self._backward()

    def __len__(self) -> int:
        return self._count

    def _last(self) -> Optional[_Node]:
        return self._rear

    def _link(self, node: _Node, previous: Optional[_Node], current: Optional[_Node]) -> None:
        node.prev, node.next = previous, current
        if previous is None:
            self._head = node
        else:
            previous.next = node
        if current is None:
            self._rear = node
        else:
            current.prev = node

    def _unlink(self, previous: Optional[_Node], node: _Node) -> None:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._rear = node.prev
        else:
            node.next.prev = node.prev
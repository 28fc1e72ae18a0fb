"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from itertools import islice
from typing import Any, Iterable, Iterator

from dsakit.ordered_list import _LinkedBase, _Node


class SinglyLinkedList(_LinkedBase):
    """Values in insertion order; positions are counted from 1 at the head."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        for item in items:
            self.append(item)

    def _node_at(self, position: int) -> _Node:
        return next(islice(self._nodes(), position - 1, None))

    def _check_inner_position(self, position: int) -> None:
        if self._head is None:
            raise IndexError("list is empty")
        if not 2 <= position <= self._count:
            raise IndexError(f"invalid position {position}")

    def insert_at_begin(self, value: Any) -> None:
        """Put value at the head."""
        self._head = _Node(value, next=self._head)
        self._count += 1

    def insert_at(self, value: Any, position: int) -> None:
        """Insert value so that it occupies position.

        Only positions from 2 up to the current length are accepted; the head
        and the end have their own methods. IndexError otherwise.
        """
        self._check_inner_position(position)
        previous = self._node_at(position - 1)
        previous.next = _Node(value, next=previous.next)
        self._count += 1

    def append(self, value: Any) -> None:
        """Put value at the end."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._count).next = node
        self._count += 1

    def delete_at_begin(self) -> Any:
        """Remove and return the head value; IndexError if empty."""
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        self._head = node.next
        self._count -= 1
        return node.value

    def delete_at(self, position: int) -> Any:
        """Remove and return the value at position.

        Only positions from 2 up to the current length are accepted;
        IndexError otherwise.
        """
        self._check_inner_position(position)
        previous = self._node_at(position - 1)
        node = previous.next
        assert node is not None
        previous.next = node.next
        self._count -= 1
        return node.value

    def index(self, target: Any) -> int:
        """Return the 1-based position of the first value equal to target.

        ValueError if target is absent.
        """
        for position, value in enumerate(self, 1):
            if value == target:
                return position
        raise ValueError(f"{target!r} is not in the list")

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        node = self._head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self._head = previous

    def is_empty(self) -> bool:
        """Return True if the list holds no values."""
        return self._count == 0

    def clear(self) -> None:
        """Remove every value."""
        self._reset()

    def __iter__(self) -> Iterator[Any]:
        return self._values()

    def __len__(self) -> int:
        return self._count
"""Linked-list plumbing and a singly linked list kept in ascending order."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(
        self,
        value: Any,
        prev: Optional[_Node] = None,
        next: Optional[_Node] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next


class _LinkedBase:
    """A chain of nodes starting at the head and holding a counted number of values."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._count = 0

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        for _ in range(self._count):
            assert node is not None
            yield node
            node = node.next

    def _values(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def _reset(self) -> None:
        self._head = None
        self._count = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._values())!r})"


class _SortedBase(_LinkedBase):
    """Unique values in ascending order; subclasses supply insert, _link and _unlink."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        super().__init__()
        for item in items:
            self.insert(item)

    def insert(self, value: Any) -> None:  # pragma: no cover - overridden
        raise NotImplementedError

    def _search(self, target: Any) -> tuple[Optional[_Node], Optional[_Node]]:
        """Return the last node below target and the first node not below it."""
        previous: Optional[_Node] = None
        for node in self._nodes():
            if not target > node.value:
                return previous, node
            previous = node
        return previous, None

    def _link(self, node: _Node, previous: Optional[_Node], current: Optional[_Node]) -> None:
        raise NotImplementedError  # pragma: no cover - overridden

    def _unlink(self, previous: Optional[_Node], node: _Node) -> None:
        raise NotImplementedError  # pragma: no cover - overridden

    def _add(self, value: Any) -> None:
        previous, current = self._search(value)
        if current is not None and current.value == value:
            raise ValueError(f"{value!r} is already in the list")
        self._link(_Node(value), previous, current)
        self._count += 1

    def _discard(self, value: Any) -> None:
        previous, current = self._search(value)
        if current is None or current.value != value:
            raise KeyError(value)
        self._unlink(previous, current)
        self._count -= 1

    def _has(self, value: object) -> bool:
        try:
            _, current = self._search(value)
        except TypeError:
            return False
        return current is not None and current.value == value


class OrderedList(_SortedBase):
    """Unique values kept in ascending order in a singly linked chain."""

    def insert(self, value: Any) -> None:
        """Insert value in order; ValueError if it is already present."""
        self._add(value)

    def remove(self, value: Any) -> None:
        """Remove value; KeyError if it is absent."""
        self._discard(value)

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

    def __len__(self) -> int:
        return self._count

    def _link(self, node: _Node, previous: Optional[_Node], current: Optional[_Node]) -> None:
        node.next = current
        if previous is None:
            self._head = node
        else:
            previous.next = node

    def _unlink(self, previous: Optional[_Node], node: _Node) -> None:
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
"""An unbalanced binary search tree."""

from __future__ import annotations

from typing import Any, Iterable, Optional


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class BinarySearchTree:
    """A binary search tree; values equal to a node go to its right."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._root: Optional[_Node] = None
        for item in items:
            self.insert(item)

    def insert(self, value: Any) -> None:
        """Add value to the tree; duplicates are kept."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def _replace_child(
        self, parent: Optional[_Node], child: _Node, new: Optional[_Node]
    ) -> None:
        if parent is None:
            self._root = new
        elif parent.left is child:
            parent.left = new
        else:
            parent.right = new

    def remove(self, value: Any) -> None:
        """Remove one occurrence of value; KeyError if it is absent.

        A node with two children takes the largest value of its left subtree.
        """
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)
        if node.left is None:
            self._replace_child(parent, node, node.right)
        elif node.right is None:
            self._replace_child(parent, node, node.left)
        else:
            pred_parent = node
            pred = node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            if pred_parent is node:
                node.left = pred.left
            else:
                pred_parent.right = pred.left

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order (ascending)."""
        result: list[Any] = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        result: list[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def smallest(self) -> Any:
        """Return the smallest value; ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("smallest of empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def largest(self) -> Any:
        """Return the largest value; ValueError if the tree is empty."""
        if self._root is None:
            raise ValueError("largest of empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def __contains__(self, value: object) -> bool:
        node = self._root
        try:
            while node is not None:
                if value < node.value:
                    node = node.left
                elif value > node.value:
                    node = node.right
                else:
                    return True
        except TypeError:
            return False
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"
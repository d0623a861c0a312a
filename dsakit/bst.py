"""An unbalanced binary search tree of comparable keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("key", "left", "right")

    def __init__(self, key: Any) -> None:
        self.key = key
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """A binary search tree; keys equal to a node go into its right subtree."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending (in-order) sequence."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def __contains__(self, key: Any) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def insert(self, key: Any) -> None:
        """Add ``key`` to the tree, duplicates included."""
        new = _Node(key)
        if self._root is None:
            self._root = new
        else:
            node = self._root
            while True:
                if key < node.key:
                    if node.left is None:
                        node.left = new
                        break
                    node = node.left
                else:
                    if node.right is None:
                        node.right = new
                        break
                    node = node.right
        self._size += 1

    def _replace_child(self, parent: _Node | None, old: _Node, new: _Node | None) -> None:
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def delete(self, key: Any) -> bool:
        """Remove one occurrence of ``key``; return False if it was absent.

        A node with two children takes the key of its in-order successor,
        which is then removed in its place.
        """
        parent: _Node | None = None
        node = self._root
        while node is not None and key != node.key:
            parent = node
            node = node.left if key < node.key else node.right
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.key = successor.key
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        self._size -= 1
        return True

    def minimum(self) -> Any:
        """Return the smallest key; raises ValueError for an empty tree."""
        if self._root is None:
            raise ValueError("tree is empty")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.key

    def inorder(self) -> list[Any]:
        """Return the keys in ascending order."""
        return list(self)
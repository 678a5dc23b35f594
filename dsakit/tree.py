"""An unbalanced binary search tree with the classic traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Any)


@dataclass
class _Node(Generic[T]):
    value: T
    left: _Node[T] | None = None
    right: _Node[T] | None = None


class BinarySearchTree(Generic[T]):
    """Binary search tree; equal values go to the right subtree."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return iter(self.inorder())

    def insert(self, value: T) -> None:
        """Add a value to the tree."""
        new = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = new
            return
        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = new
                    return
                node = node.right

    def inorder(self) -> list[T]:
        """Return values left subtree, node, right subtree."""
        return list(_inorder(self._root))

    def preorder(self) -> list[T]:
        """Return values node, left subtree, right subtree."""
        return list(_preorder(self._root))

    def postorder(self) -> list[T]:
        """Return values left subtree, right subtree, node."""
        return list(_postorder(self._root))

    def dfs(self) -> list[T]:
        """Return values in depth-first order, visiting each node first."""
        return self.preorder()


def _inorder(node: _Node[T] | None) -> Iterator[T]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: _Node[T] | None) -> Iterator[T]:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node[T] | None) -> Iterator[T]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value
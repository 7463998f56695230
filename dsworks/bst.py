"""Unbalanced binary search tree of distinct integer keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(slots=True)
class _Node:
    key: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


class BinarySearchTree:
    """Plain binary search tree: no rebalancing, duplicates are ignored."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.left if key < node.key else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def minimum(self) -> int:
        """Smallest stored key."""
        node = self._root
        if node is None:
            raise ValueError("minimum of empty tree")
        while node.left is not None:
            node = node.left
        return node.key

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        if self._root is None:
            self._root = _Node(key)
            return True
        node = self._root
        while True:
            if key < node.key:
                if node.left is None:
                    node.left = _Node(key)
                    return True
                node = node.left
            elif key > node.key:
                if node.right is None:
                    node.right = _Node(key)
                    return True
                node = node.right
            else:
                return False

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        parent: Optional[_Node] = None
        node = self._root
        while node is not None and node.key != key:
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
                successor_parent.right = successor.right
            else:
                successor_parent.left = successor.right
            return True

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return True
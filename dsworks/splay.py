"""Top-down recursive splay tree of distinct integer keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(slots=True)
class _Node:
    key: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    assert child is not None
    node.left = child.right
    child.right = node
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    assert child is not None
    node.right = child.left
    child.left = node
    return child


def _finish_left(node: _Node) -> _Node:
    return node if node.left is None else _rotate_right(node)


def _finish_right(node: _Node) -> _Node:
    return node if node.right is None else _rotate_left(node)


def _splay(root: Optional[_Node], key: int) -> Optional[_Node]:
    """Bring ``key`` or the last node on its search path to the root."""
    frames: list[tuple[_Node, str]] = []
    node = root
    result: Optional[_Node]
    while True:
        if node is None or node.key == key:
            result = node
            break
        if key < node.key:
            child = node.left
            if child is None:
                result = node
                break
            if key < child.key:
                frames.append((node, "LL"))
                node = child.left
            elif key > child.key:
                frames.append((node, "LR"))
                node = child.right
            else:
                result = _rotate_right(node)
                break
        else:
            child = node.right
            if child is None:
                result = node
                break
            if key < child.key:
                frames.append((node, "RL"))
                node = child.left
            elif key > child.key:
                frames.append((node, "RR"))
                node = child.right
            else:
                result = _rotate_left(node)
                break

    for node, case in reversed(frames):
        if case == "LL":
            node.left.left = result  # type: ignore[union-attr]
            result = _finish_left(_rotate_right(node))
        elif case == "LR":
            node.left.right = result  # type: ignore[union-attr]
            if result is not None:
                node.left = _rotate_left(node.left)  # type: ignore[arg-type]
            result = _finish_left(node)
        elif case == "RL":
            node.right.left = result  # type: ignore[union-attr]
            if result is not None:
                node.right = _rotate_right(node.right)  # type: ignore[arg-type]
            result = _finish_right(node)
        else:
            node.right.right = result  # type: ignore[union-attr]
            result = _finish_right(_rotate_left(node))
    return result


class SplayTree:
    """Splay tree: every access moves the touched key to the root."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def root_key(self) -> Optional[int]:
        """Key at the root, or None when the tree is empty."""
        return None if self._root is None else self._root.key

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

    def search(self, key: int) -> bool:
        """Splay on ``key`` and report whether it is stored."""
        self._root = _splay(self._root, key)
        return self._root is not None and self._root.key == key

    def insert(self, key: int) -> bool:
        """Add ``key`` as the new root; return False if it was already present."""
        if self._root is None:
            self._root = _Node(key)
            return True
        root = _splay(self._root, key)
        assert root is not None
        if root.key == key:
            self._root = root
            return False
        node = _Node(key)
        if key < root.key:
            node.left = root.left
            node.right = root
            root.left = None
        else:
            node.right = root.right
            node.left = root
            root.right = None
        self._root = node
        return True

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        if self._root is None:
            return False
        root = _splay(self._root, key)
        assert root is not None
        if root.key != key:
            self._root = root
            return False
        if root.left is None:
            self._root = root.right
        else:
            new_root = _splay(root.left, key)
            assert new_root is not None
            new_root.right = root.right
            self._root = new_root
        return True
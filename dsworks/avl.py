"""AVL tree of integer keys with a lower-bound query and a command interpreter."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Iterator, Optional

MOD = 1000000000
_COMMAND_RE = re.compile(r"\s*(\S)\s*([+-]?\d+)")
_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(slots=True)
class _Node:
    key: int
    height: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[_Node]) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    assert child is not None
    node.left = child.right
    child.right = node
    _update(node)
    _update(child)
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    assert child is not None
    node.right = child.left
    child.left = node
    _update(node)
    _update(child)
    return child


class AVLTree:
    """Self-balancing binary search tree that keeps distinct integer keys."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def height(self) -> int:
        """Height of the tree; zero when empty."""
        return _height(self._root)

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

    def insert(self, key: int) -> bool:
        """Add ``key``; return False if it was already present."""
        if key in self:
            return False
        self._root = self._insert(self._root, key)
        self._size += 1
        return True

    def _insert(self, node: Optional[_Node], key: int) -> _Node:
        if node is None:
            return _Node(key)
        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        _update(node)
        balance = _balance(node)
        if balance > 1 and node.left is not None and key < node.left.key:
            return _rotate_right(node)
        if balance < -1 and node.right is not None and key > node.right.key:
            return _rotate_left(node)
        if balance > 1 and node.left is not None and key > node.left.key:
            node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balance < -1 and node.right is not None and key < node.right.key:
            node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        if key not in self:
            return False
        self._root = self._delete(self._root, key)
        self._size -= 1
        return True

    def _delete(self, root: Optional[_Node], key: int) -> Optional[_Node]:
        if root is None:
            return None
        if key < root.key:
            root.left = self._delete(root.left, key)
        elif key > root.key:
            root.right = self._delete(root.right, key)
        elif root.left is None or root.right is None:
            root = root.left if root.left is not None else root.right
        else:
            successor = root.right
            while successor.left is not None:
                successor = successor.left
            root.key = successor.key
            root.right = self._delete(root.right, successor.key)

        if root is None:
            return None

        _update(root)
        balance = _balance(root)
        if balance > 1 and _balance(root.left) >= 0:
            root = _rotate_right(root)
        if balance < -1 and _balance(root.right) <= 0:
            root = _rotate_left(root)
        if balance > 1 and root.left is not None and _balance(root.left) < 0:
            root.left = _rotate_left(root.left)
            root = _rotate_right(root)
        if balance < -1 and root.right is not None and _balance(root.right) > 0:
            root.right = _rotate_right(root.right)
            root = _rotate_left(root)
        return root

    def lower_bound(self, key: int) -> Optional[int]:
        """Smallest stored key not less than ``key``, or None."""
        node = self._root
        result: Optional[int] = None
        while node is not None:
            if node.key >= key:
                result = node.key
                node = node.left
            else:
                node = node.right
        return result


def _c_remainder(value: int, modulus: int) -> int:
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def run(text: str) -> str:
    """Execute ``+ x`` and ``? x`` commands after a leading count; return the output."""
    count_match = re.match(r"\s*([+-]?\d+)", text)
    if count_match is None:
        return ""
    count = int(count_match.group(1))
    position = count_match.end()

    tree = AVLTree()
    last = 0
    lines: list[str] = []

    for _ in range(count):
        match = _COMMAND_RE.match(text, position)
        if match is None:
            break
        position = match.end()
        operation, value = match.group(1), int(match.group(2))
        if operation == "+":
            tree.insert(_c_remainder(value + last, MOD))
            last = 0
        elif operation == "?":
            found = tree.lower_bound(value)
            result = -1 if found is None else found
            lines.append(str(result))
            last = result
        else:
            break

    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run AVL tree queries from stdin.")
    parser.parse_args(argv if argv is not None else [])
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
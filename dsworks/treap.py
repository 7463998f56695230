"""Treap (randomised search tree) with order statistics and a command interpreter."""

from __future__ import annotations

import argparse
import random
import re
import sys
from dataclasses import dataclass
from typing import Iterator, Optional

TOKEN_LIMIT = 30
PRIORITY_LIMIT = 2**31
_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(slots=True, eq=False)
class _Node:
    key: int
    priority: int
    size: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _size(node: Optional[_Node]) -> int:
    return node.size if node is not None else 0


def _resize(node: Optional[_Node]) -> None:
    if node is not None:
        node.size = _size(node.left) + _size(node.right) + 1


def _rotate_right(node: _Node) -> _Node:
    child = node.left
    assert child is not None
    node.left = child.right
    child.right = node
    _resize(node)
    _resize(child)
    return child


def _rotate_left(node: _Node) -> _Node:
    child = node.right
    assert child is not None
    node.right = child.left
    child.left = node
    _resize(node)
    _resize(child)
    return child


def _insert(node: Optional[_Node], key: int, priority: int) -> _Node:
    if node is None:
        return _Node(key, priority)
    if key > node.key:
        node.right = _insert(node.right, key, priority)
        if node.right.priority > node.priority:
            node = _rotate_left(node)
    elif key < node.key:
        node.left = _insert(node.left, key, priority)
        if node.left.priority > node.priority:
            node = _rotate_right(node)
    _resize(node)
    return node


def _restore(node: _Node) -> _Node:
    """Rotate the higher-priority child up when the heap order is broken."""
    left, right = node.left, node.right
    broken = ((left is not None and left.priority > node.priority)
              or (right is not None and right.priority > node.priority))
    if broken and left is not None and right is not None:
        return _rotate_right(node) if left.priority > right.priority else _rotate_left(node)
    return node


def _delete(node: Optional[_Node], key: int) -> Optional[_Node]:
    if node is None:
        return None
    if key > node.key:
        node.right = _delete(node.right, key)
    elif key < node.key:
        node.left = _delete(node.left, key)
    elif node.left is None or node.right is None:
        return node.left if node.left is not None else node.right
    else:
        predecessor = node.left
        while predecessor.right is not None:
            predecessor = predecessor.right
        node.key = predecessor.key
        node.left = _delete(node.left, predecessor.key)

    node = _restore(node)
    _resize(node)
    return node


def _split(node: Optional[_Node], key: int) -> tuple[Optional[_Node], Optional[_Node]]:
    if node is None:
        return None, None
    if node.key >= key:
        left, node.left = _split(node.left, key)
        _resize(node)
        return left, node
    node.right, right = _split(node.right, key)
    _resize(node)
    return node, right


def _merge(left: Optional[_Node], right: Optional[_Node]) -> Optional[_Node]:
    if left is None:
        return right
    if right is None:
        return left
    if left.priority <= right.priority:
        right.left = _merge(left, right.left)
        _resize(right)
        return right
    left.right = _merge(left.right, right)
    _resize(left)
    return left


class Treap:
    """Search tree of distinct integer keys, heap-ordered by random priorities."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)
        self._root: Optional[_Node] = None

    @classmethod
    def _wrap(cls, root: Optional[_Node], rng: random.Random) -> "Treap":
        treap = cls()
        treap._rng = rng
        treap._root = root
        return treap

    def __len__(self) -> int:
        return _size(self._root)

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            if key == node.key:
                return True
            node = node.right if key > node.key else node.left  # type: ignore[operator]
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

    def insert(self, key: int, priority: Optional[int] = None) -> bool:
        """Add ``key``; a random priority is drawn when none is given.

        Returns False if the key was already present.
        """
        if key in self:
            return False
        if priority is None:
            priority = self._rng.randrange(PRIORITY_LIMIT)
        self._root = _insert(self._root, key, priority)
        return True

    def delete(self, key: int) -> bool:
        """Remove ``key``; return False if it was not present."""
        if key not in self:
            return False
        self._root = _delete(self._root, key)
        return True

    def successor(self, key: int) -> Optional[int]:
        """Smallest stored key not less than ``key``, or None."""
        node = self._root
        found: Optional[int] = None
        while node is not None:
            if key < node.key:
                found = node.key
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node.key
        return found

    def predecessor(self, key: int) -> Optional[int]:
        """Largest stored key not greater than ``key``, or None."""
        node = self._root
        found: Optional[int] = None
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                found = node.key
                node = node.right
            else:
                return node.key
        return found

    def kth(self, k: int) -> int:
        """Key at zero-based position ``k`` in ascending order."""
        if k < 0 or k >= len(self):
            raise IndexError("kth index out of range")
        node = self._root
        while node is not None:
            left_size = _size(node.left)
            if k == left_size:
                return node.key
            if k < left_size:
                node = node.left
            else:
                k -= left_size + 1
                node = node.right
        raise IndexError("kth index out of range")

    def split(self, key: int) -> tuple["Treap", "Treap"]:
        """Split into keys below ``key`` and keys from ``key`` up; empties this treap."""
        left, right = _split(self._root, key)
        self._root = None
        return Treap._wrap(left, self._rng), Treap._wrap(right, self._rng)


def merge(left: Treap, right: Treap) -> Treap:
    """Join two treaps whose keys are all ordered left before right; empties both."""
    if len(left) and len(right):
        *_, largest = iter(left)
        smallest = next(iter(right))
        if largest >= smallest:
            raise ValueError("every key of the left treap must be below the right treap")
    root = _merge(left._root, right._root)
    left._root = None
    right._root = None
    return Treap._wrap(root, left._rng)


def _tokens(text: str) -> Iterator[str]:
    for word in text.split():
        for start in range(0, len(word), TOKEN_LIMIT):
            yield word[start:start + TOKEN_LIMIT]


def run(text: str, seed: Optional[int] = None) -> str:
    """Execute ``<command> <number>`` pairs until input or a known command runs out."""
    tokens = _tokens(text)
    treap = Treap(seed)
    lines: list[str] = []

    while True:
        operation = next(tokens, None)
        argument = next(tokens, None)
        if operation is None or argument is None or not _INT_RE.fullmatch(argument):
            break
        value = int(argument)
        if operation == "insert":
            treap.insert(value)
        elif operation == "delete":
            treap.delete(value)
        elif operation == "exists":
            lines.append("true" if value in treap else "false")
        elif operation == "next":
            found = treap.successor(value)
            lines.append("none" if found is None else str(found))
        elif operation == "prev":
            found = treap.predecessor(value)
            lines.append("none" if found is None else str(found))
        elif operation == "kth":
            try:
                key = treap.kth(value)
            except IndexError:
                lines.append("none")
            else:
                lines.append(str(key) if key >= 0 else "none")
        else:
            break

    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run treap commands from a file.")
    parser.add_argument("input", nargs="?", default="input.txt")
    args = parser.parse_args(argv if argv is not None else [])
    with open(args.input, encoding="utf-8") as source:
        sys.stdout.write(run(source.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
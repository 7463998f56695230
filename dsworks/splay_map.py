"""String-keyed splay tree with parent links and a pilot/ship lookup interpreter."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import Iterator, Optional

TOKEN_LIMIT = 1000
_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(slots=True, eq=False)
class _Node:
    key: str
    value: str
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    parent: Optional["_Node"] = None


class SplayMap:
    """Map from strings to strings; lookups splay the found node to the root.

    Inserting does not splay, and equal keys are kept: a new one goes to the
    right, so a lookup returns the value inserted first.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def root_key(self) -> Optional[str]:
        """Key at the root, or None when the map is empty."""
        return None if self._root is None else self._root.key

    def _replace_child(self, node: _Node, child: _Node) -> None:
        parent = node.parent
        child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _rotate_right(self, node: _Node) -> None:
        child = node.left
        assert child is not None
        node.left = child.right
        if child.right is not None:
            child.right.parent = node
        self._replace_child(node, child)
        child.right = node
        node.parent = child

    def _rotate_left(self, node: _Node) -> None:
        child = node.right
        assert child is not None
        node.right = child.left
        if child.left is not None:
            child.left.parent = node
        self._replace_child(node, child)
        child.left = node
        node.parent = child

    def _splay(self, node: _Node) -> None:
        while node.parent is not None:
            parent = node.parent
            grand = parent.parent
            if grand is None:
                if node is parent.left:
                    self._rotate_right(parent)
                else:
                    self._rotate_left(parent)
            elif node is parent.left and parent is grand.left:
                self._rotate_right(grand)
                self._rotate_right(parent)
            elif node is parent.right and parent is grand.right:
                self._rotate_left(grand)
                self._rotate_left(parent)
            elif node is parent.right and parent is grand.left:
                self._rotate_left(parent)
                self._rotate_right(node.parent)  # type: ignore[arg-type]
            else:
                self._rotate_right(parent)
                self._rotate_left(node.parent)  # type: ignore[arg-type]

    def insert(self, key: str, value: str) -> None:
        """Attach a new node for ``key`` as a leaf."""
        new = _Node(key, value)
        if self._root is None:
            self._root = new
            return
        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = new
                    break
                current = current.left
            else:
                if current.right is None:
                    current.right = new
                    break
                current = current.right
        new.parent = current

    def search(self, key: str) -> Optional[str]:
        """Value stored under ``key`` (splayed to the root), or None."""
        node = self._root
        while node is not None and node.key != key:
            node = node.left if key < node.key else node.right
        if node is None:
            return None
        self._splay(node)
        return node.value


def _tokens(text: str) -> Iterator[str]:
    for word in text.split():
        for start in range(0, len(word), TOKEN_LIMIT):
            yield word[start:start + TOKEN_LIMIT]


def run(text: str) -> str:
    """Read pilot/ship pairs and then names to look up; return the answers."""
    tokens = _tokens(text)
    lines: list[str] = []

    count = next(tokens, None)
    if count is None or not _INT_RE.fullmatch(count):
        return ""
    tree = SplayMap()
    for _ in range(int(count)):
        pilot = next(tokens, None)
        ship = next(tokens, None)
        if pilot is None or ship is None:
            return ""
        tree.insert(pilot, ship)
        tree.insert(ship, pilot)

    requests = next(tokens, None)
    if requests is None or not _INT_RE.fullmatch(requests):
        return ""
    for _ in range(int(requests)):
        request = next(tokens, None)
        if request is None:
            break
        found = tree.search(request)
        if found is not None:
            lines.append(found)

    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Look up pilots and ships from stdin.")
    parser.parse_args(argv if argv is not None else [])
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
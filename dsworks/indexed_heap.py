"""Binary min-heap whose elements can be addressed by their insertion number."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

from dsworks.kheap import HeapEmptyError

_INT_RE = re.compile(r"[+-]?\d+")


@dataclass(slots=True)
class _Entry:
    value: int
    number: int


class IndexedMinHeap:
    """Min-heap that supports decreasing the key of an element by its number."""

    def __init__(self) -> None:
        self._items: list[_Entry] = []
        self._positions: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._items)

    def _swap(self, a: int, b: int) -> None:
        items = self._items
        items[a], items[b] = items[b], items[a]
        self._positions[items[a].number] = a
        self._positions[items[b].number] = b

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if items[index].value >= items[parent].value:
                return
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while 2 * index + 1 < size:
            smallest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child].value < items[smallest].value:
                    smallest = child
            if smallest == index:
                return
            self._swap(index, smallest)
            index = smallest

    def insert(self, value: int, number: int) -> None:
        """Add ``value`` under the identifier ``number``."""
        if number in self._positions:
            raise KeyError(f"number {number} is already in the heap")
        self._items.append(_Entry(value, number))
        self._positions[number] = len(self._items) - 1
        self._sift_up(len(self._items) - 1)

    def get_min(self) -> int:
        if not self._items:
            raise HeapEmptyError("heap is empty")
        return self._items[0].value

    def extract_min(self) -> int:
        """Remove and return the smallest value."""
        if not self._items:
            raise HeapEmptyError("extract from empty heap")
        root = self._items[0].value
        self._swap(0, len(self._items) - 1)
        removed = self._items.pop()
        del self._positions[removed.number]
        self._sift_down(0)
        return root

    def decrease_key(self, number: int, delta: int) -> None:
        """Subtract ``delta`` from the value stored under ``number``."""
        try:
            index = self._positions[number]
        except KeyError:
            raise KeyError(f"no element with number {number}") from None
        self._items[index].value -= delta
        self._sift_up(index)


def run(text: str) -> str:
    """Execute a command count followed by that many commands; return the output."""
    tokens = iter(text.split())
    count_token = next(tokens, None)
    if count_token is None or not _INT_RE.fullmatch(count_token):
        return ""

    heap = IndexedMinHeap()
    lines: list[str] = []

    for number in range(1, int(count_token) + 1):
        operation = next(tokens, None)
        if operation is None:
            break
        if operation == "insert":
            argument = next(tokens, None)
            if argument is None or not _INT_RE.fullmatch(argument):
                break
            heap.insert(int(argument), number)
        elif operation == "getMin":
            lines.append(str(heap.get_min()))
        elif operation == "extractMin":
            heap.extract_min()
        elif operation == "decreaseKey":
            target = next(tokens, None)
            delta = next(tokens, None)
            if (target is None or delta is None
                    or not _INT_RE.fullmatch(target) or not _INT_RE.fullmatch(delta)):
                break
            heap.decrease_key(int(target), int(delta))
        else:
            break

    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run indexed heap commands from stdin.")
    parser.parse_args(argv if argv is not None else [])
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
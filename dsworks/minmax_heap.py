"""Min-max heap with a command interpreter for insert/get/extract queries."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Optional

from dsworks.kheap import HeapEmptyError, HeapFullError

DEFAULT_CAPACITY = 200005
_INT_RE = re.compile(r"[+-]?\d+")


def _is_min_level(index: int) -> bool:
    return (index + 1).bit_length() % 2 == 1


def _parent(index: int) -> int:
    return 0 if index < 1 else (index - 1) // 2


def _grandparent(index: int) -> int:
    return 0 if index < 3 else _parent(_parent(index))


class MinMaxHeap:
    """Double-ended priority queue with alternating min and max levels."""

    def __init__(self, capacity: Optional[int] = DEFAULT_CAPACITY) -> None:
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def _descendants(self, index: int) -> list[int]:
        size = len(self._items)
        left = 2 * index + 1 if 2 * index + 1 < size else index
        right = 2 * index + 2 if 2 * index + 2 < size else left
        l_left = 2 * left + 1 if 2 * left + 1 < size else left
        l_right = 2 * left + 2 if 2 * left + 2 < size else l_left
        r_left = 2 * right + 1 if 2 * right + 1 < size else l_right
        r_right = 2 * right + 2 if 2 * right + 2 < size else r_left
        return [left, right, l_left, l_right, r_left, r_right]

    def _pick(self, candidates: list[int], want_min: bool) -> int:
        items = self._items
        best = candidates[0]
        for candidate in candidates[1:]:
            if (items[candidate] < items[best]) if want_min else (items[candidate] > items[best]):
                best = candidate
        return best

    def _top_index(self, want_min: bool) -> int:
        size = len(self._items)
        if size == 0:
            raise HeapEmptyError("heap is empty")
        candidates = [index for index in (0, 1, 2) if index < size]
        return self._pick(candidates, want_min)

    def _swap(self, a: int, b: int) -> None:
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def _sift_down(self, index: int) -> None:
        items = self._items
        while 2 * index + 1 < len(items):
            want_min = _is_min_level(index)
            target = self._pick(self._descendants(index), want_min)
            better = items[target] < items[index] if want_min else items[target] > items[index]
            if not better:
                break
            self._swap(index, target)
            if target < 4 * index + 3:
                break
            parent = _parent(target)
            misplaced = (items[target] > items[parent] if want_min
                         else items[target] < items[parent])
            if misplaced:
                self._swap(target, parent)
            index = target

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index != 0:
            parent = _parent(index)
            grand = _grandparent(index)
            if _is_min_level(index):
                if items[index] > items[parent]:
                    self._swap(index, parent)
                    index = parent
                elif grand != parent and items[index] < items[grand]:
                    self._swap(index, grand)
                    index = grand
                else:
                    return
            else:
                if items[index] < items[parent]:
                    self._swap(index, parent)
                    index = parent
                elif grand != parent and items[index] > items[grand]:
                    self._swap(index, grand)
                    index = grand
                else:
                    return

    def insert(self, value: int) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise HeapFullError("heap is full")
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def get_min(self) -> int:
        return self._items[self._top_index(True)]

    def get_max(self) -> int:
        return self._items[self._top_index(False)]

    def _extract(self, want_min: bool) -> int:
        index = self._top_index(want_min)
        items = self._items
        value = items[index]
        last = items.pop()
        if index < len(items):
            items[index] = last
            self._sift_down(index)
        return value

    def extract_min(self) -> int:
        """Remove and return the smallest element."""
        return self._extract(True)

    def extract_max(self) -> int:
        """Remove and return the largest element."""
        return self._extract(False)

    def clear(self) -> None:
        self._items.clear()


def run(text: str) -> str:
    """Execute a command count followed by that many commands; return the output."""
    tokens = iter(text.split())
    count_token = next(tokens, None)
    if count_token is None or not _INT_RE.fullmatch(count_token):
        return ""

    heap = MinMaxHeap(DEFAULT_CAPACITY)
    lines: list[str] = []
    queries = {
        "extract_min": heap.extract_min,
        "get_min": heap.get_min,
        "extract_max": heap.extract_max,
        "get_max": heap.get_max,
    }

    for _ in range(int(count_token)):
        operation = next(tokens, None)
        if operation is None:
            break
        if operation == "insert":
            argument = next(tokens, None)
            if argument is None or not _INT_RE.fullmatch(argument):
                break
            try:
                heap.insert(int(argument))
            except HeapFullError:
                pass
            lines.append("ok")
        elif operation in queries:
            try:
                lines.append(str(queries[operation]()))
            except HeapEmptyError:
                lines.append("error")
        elif operation == "size":
            lines.append(str(len(heap)))
        elif operation == "clear":
            heap.clear()
            lines.append("ok")

    return "".join(f"{line}\n" for line in lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run min-max heap commands from stdin.")
    parser.parse_args(argv if argv is not None else [])
    sys.stdout.write(run(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
"""Quicksort with a middle-element pivot and two-pointer partitioning."""

from __future__ import annotations

import sys
from typing import Iterable

EXIT_SIZE = 1
EXIT_INPUT = 2


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a new list with ``items`` sorted in ascending order."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        i, j = low, high
        pivot = result[(low + high) // 2]
        while i <= j:
            while result[i] < pivot:
                i += 1
            while result[j] > pivot:
                j -= 1
            if i <= j:
                result[i], result[j] = result[j], result[i]
                i += 1
                j -= 1
        pending.append((low, j))
        pending.append((i, high))
    return result


def main(argv: list[str] | None = None) -> int:
    """Read a count and that many integers from stdin; print them sorted."""
    tokens = sys.stdin.read().split()
    try:
        count = int(tokens[0])
    except (IndexError, ValueError):
        return EXIT_INPUT
    if count <= 0:
        return EXIT_SIZE

    raw = tokens[1:count + 1]
    if len(raw) < count:
        return EXIT_INPUT
    try:
        values = [int(token) for token in raw]
    except ValueError:
        return EXIT_INPUT

    sys.stdout.write("".join(f"{value} " for value in quick_sort(values)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Two stack implementations: a resizable array stack and a linked stack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

GROWTH_FACTOR = 2
SHRINK_FACTOR = 0.5
SHRINK_THRESHOLD = 0.25


class StackEmptyError(IndexError):
    """Raised when an element is requested from an empty stack."""


class ArrayStack:
    """Stack on a contiguous buffer that doubles when full and halves when sparse."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def _resize(self, factor: float) -> None:
        self._capacity = int(factor * self._capacity)

    def push(self, value: Any) -> None:
        if len(self._items) == self._capacity:
            self._resize(GROWTH_FACTOR)
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise StackEmptyError("pop from empty stack")
        if len(self._items) == int(SHRINK_THRESHOLD * self._capacity):
            self._resize(SHRINK_FACTOR)
        return self._items.pop()

    def top(self) -> Any:
        if not self._items:
            raise StackEmptyError("top of empty stack")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"]


class LinkedStack:
    """Stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self._head is None:
            raise StackEmptyError("pop from empty stack")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def top(self) -> Any:
        if self._head is None:
            raise StackEmptyError("top of empty stack")
        return self._head.value

    def __len__(self) -> int:
        return self._size
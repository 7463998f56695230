"""Array-backed max-heap where every node has ``children`` children."""

from __future__ import annotations

from typing import Iterable, Optional


class HeapEmptyError(IndexError):
    """Raised when an element is requested from an empty heap."""


class HeapFullError(OverflowError):
    """Raised when inserting into a heap that has reached its capacity."""


class KHeap:
    """Max-heap with a configurable branching factor and optional capacity."""

    def __init__(self, children: int = 2, capacity: Optional[int] = None) -> None:
        if children < 1:
            raise ValueError("children must be at least 1")
        if capacity is not None and capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.children = children
        self.capacity = capacity
        self._items: list[int] = []

    @classmethod
    def from_values(cls, values: Iterable[int], children: int = 2) -> "KHeap":
        """Build a heap over ``values`` in linear time, sized to fit them exactly."""
        items = list(values)
        heap = cls(children, len(items))
        heap._items = items
        heap.heapify()
        return heap

    def __len__(self) -> int:
        return len(self._items)

    def _parent(self, index: int) -> int:
        return 0 if index < 1 else (index - 1) // self.children

    def max_child(self, index: int) -> int:
        """Index of the largest child of ``index``, or ``index`` if it has none."""
        first = index * self.children + 1
        last = min(index * self.children + self.children, len(self._items) - 1)
        best_index = index
        best_value: Optional[int] = None
        for child in range(first, last + 1):
            value = self._items[child]
            if best_value is None or value > best_value:
                best_index, best_value = child, value
        return best_index

    def _sift_down(self, index: int) -> None:
        items = self._items
        while index * self.children + 1 < len(items):
            largest = self.max_child(index)
            if items[index] >= items[largest]:
                break
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index != 0:
            parent = self._parent(index)
            if items[index] <= items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def heapify(self) -> None:
        """Restore the heap order over the whole storage, bottom up."""
        if len(self._items) < 2:
            return
        for index in range((len(self._items) - 2) // self.children, -1, -1):
            self._sift_down(index)

    def insert(self, value: int) -> None:
        if self.capacity is not None and len(self._items) >= self.capacity:
            raise HeapFullError("heap is full")
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_max(self) -> int:
        """Remove and return the largest element."""
        if not self._items:
            raise HeapEmptyError("extract from empty heap")
        items = self._items
        root = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down(0)
        return root
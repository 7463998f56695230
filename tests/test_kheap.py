import random

import pytest

from dsworks.kheap import HeapEmptyError, HeapFullError, KHeap


def _drain(heap):
    return [heap.extract_max() for _ in range(len(heap))]


@pytest.mark.parametrize("children", [1, 2, 3, 5])
def test_inserts_then_extract_descending(children):
    rng = random.Random(7)
    values = [rng.randint(-1000, 1000) for _ in range(300)]
    heap = KHeap(children, len(values))
    for value in values:
        heap.insert(value)
    assert len(heap) == len(values)
    assert _drain(heap) == sorted(values, reverse=True)
    assert len(heap) == 0


@pytest.mark.parametrize("children", [1, 2, 3, 4, 7])
def test_from_values_heapify_orders(children):
    rng = random.Random(children)
    values = [rng.randint(0, 500) for _ in range(257)]
    heap = KHeap.from_values(values, children)
    assert heap.capacity == len(values)
    assert _drain(heap) == sorted(values, reverse=True)


def test_from_values_root_is_maximum():
    values = [4, 9, 1, 9, 3, 7]
    heap = KHeap.from_values(values, 2)
    assert heap.extract_max() == max(values)
    assert len(heap) == len(values) - 1


def test_insert_beyond_capacity_raises():
    heap = KHeap(2, 2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(HeapFullError):
        heap.insert(3)
    assert len(heap) == 2


def test_extract_from_empty_raises():
    heap = KHeap(3)
    with pytest.raises(HeapEmptyError):
        heap.extract_max()


def test_max_child_picks_largest_or_self():
    heap = KHeap(2)
    for value in (5, 3, 4):
        heap.insert(value)
    assert heap.max_child(0) == 2
    assert heap.max_child(1) == 1


def test_invalid_children_rejected():
    with pytest.raises(ValueError):
        KHeap(0)


def test_unbounded_heap_accepts_many():
    heap = KHeap(4)
    for value in range(100):
        heap.insert(value)
    assert heap.extract_max() == 99
    assert len(heap) == 99
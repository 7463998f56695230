import pytest

from dsworks.indexed_heap import IndexedMinHeap, run
from dsworks.kheap import HeapEmptyError


def _filled(values):
    heap = IndexedMinHeap()
    for number, value in enumerate(values, start=1):
        heap.insert(value, number)
    return heap


def test_get_min_returns_smallest_inserted():
    heap = _filled([7, 2, 9, 4])
    assert heap.get_min() == 2
    assert len(heap) == 4


def test_extract_min_yields_sorted_order():
    values = [15, -3, 8, 8, 0, 42, 7, -10]
    heap = _filled(values)
    extracted = [heap.extract_min() for _ in range(len(values))]
    assert extracted == sorted(values)
    assert len(heap) == 0


def test_decrease_key_moves_element_to_top():
    heap = _filled([10, 20, 30])
    heap.decrease_key(3, 25)
    assert heap.get_min() == 30 - 25
    assert heap.extract_min() == 30 - 25
    assert heap.extract_min() == 10


def test_decrease_key_after_swaps_tracks_element():
    values = [50, 40, 30, 20, 10]
    heap = _filled(values)
    heap.extract_min()
    heap.decrease_key(1, 45)
    assert heap.get_min() == 50 - 45
    remaining = [heap.extract_min() for _ in range(len(heap))]
    assert remaining == sorted([5, 40, 30, 20])


def test_decrease_key_unknown_number_raises():
    heap = _filled([1, 2])
    with pytest.raises(KeyError):
        heap.decrease_key(99, 1)


def test_decrease_key_on_extracted_element_raises():
    heap = _filled([1, 2])
    heap.extract_min()
    with pytest.raises(KeyError):
        heap.decrease_key(1, 1)


def test_empty_heap_errors():
    heap = IndexedMinHeap()
    with pytest.raises(HeapEmptyError):
        heap.get_min()
    with pytest.raises(HeapEmptyError):
        heap.extract_min()


def test_run_uses_command_index_as_number():
    text = "6\ninsert 5\ninsert 3\ngetMin\ndecreaseKey 1 4\ngetMin\nextractMin\n"
    assert run(text) == "3\n1\n"


def test_run_stops_at_unknown_command():
    text = "4\ninsert 8\nbogus\ngetMin\ngetMin\n"
    assert run(text) == ""


def test_run_large_values():
    big = 10 ** 15
    text = f"3\ninsert {big}\ninsert {big + 1}\ngetMin\n"
    assert run(text) == f"{big}\n"
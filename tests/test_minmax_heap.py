import io
import random

import pytest

from dsworks.kheap import HeapEmptyError, HeapFullError
from dsworks.minmax_heap import MinMaxHeap, main, run


def _filled(values):
    heap = MinMaxHeap(None)
    for value in values:
        heap.insert(value)
    return heap


def test_extract_min_ascending():
    rng = random.Random(1)
    values = [rng.randint(-100, 100) for _ in range(400)]
    heap = _filled(values)
    assert [heap.extract_min() for _ in values] == sorted(values)
    assert len(heap) == 0


def test_extract_max_descending():
    rng = random.Random(2)
    values = [rng.randint(-100, 100) for _ in range(400)]
    heap = _filled(values)
    assert [heap.extract_max() for _ in values] == sorted(values, reverse=True)


def test_mixed_operations_match_sorted_model():
    rng = random.Random(3)
    first = [rng.randint(0, 50) for _ in range(200)]
    heap = _filled(first)
    model = sorted(first)
    assert heap.get_min() == model[0]
    assert heap.get_max() == model[-1]

    mins = [heap.extract_min() for _ in range(50)]
    assert mins == model[:50]
    model = model[50:]
    assert heap.get_min() == model[0]
    assert len(heap) == len(model)

    second = [rng.randint(0, 50) for _ in range(200)]
    for value in second:
        heap.insert(value)
    model = sorted(model + second)
    assert heap.get_min() == model[0]
    assert heap.get_max() == model[-1]

    maxes = [heap.extract_max() for _ in range(80)]
    assert maxes == list(reversed(model))[:80]
    model = model[:-80]
    assert heap.get_min() == model[0]
    assert heap.get_max() == model[-1]
    assert len(heap) == len(model)


def test_empty_heap_raises():
    heap = MinMaxHeap()
    for operation in (heap.get_min, heap.get_max, heap.extract_min, heap.extract_max):
        with pytest.raises(HeapEmptyError):
            operation()


def test_clear_empties_heap():
    heap = _filled([3, 1, 2])
    heap.clear()
    assert len(heap) == 0
    with pytest.raises(HeapEmptyError):
        heap.get_min()


def test_capacity_limit():
    heap = MinMaxHeap(1)
    heap.insert(10)
    with pytest.raises(HeapFullError):
        heap.insert(20)
    assert heap.get_max() == 10


def test_run_worked_example():
    text = "9 insert 5 insert 2 get_min get_max size extract_min extract_max size get_min"
    assert run(text) == "ok\nok\n2\n5\n2\n2\n5\n0\nerror\n"


def test_run_clear_and_size():
    assert run("4 insert 7 clear size get_max") == "ok\nok\n0\nerror\n"


def test_run_stops_on_bad_number():
    assert run("3 insert x size size") == ""


def test_run_ignores_unknown_commands():
    assert run("3 foo insert 4 get_min") == "ok\n4\n"


def test_run_without_count_outputs_nothing():
    assert run("") == ""


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 insert 8 get_max\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "ok\n8\n"
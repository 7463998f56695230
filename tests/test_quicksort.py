import io
import random

import pytest

from dsworks.quicksort import main, quick_sort


@pytest.mark.parametrize("seed", range(5))
def test_matches_builtin_sort(seed):
    rng = random.Random(seed)
    values = [rng.randint(-1000, 1000) for _ in range(500)]
    assert quick_sort(values) == sorted(values)


def test_does_not_mutate_input():
    values = [3, 1, 2]
    quick_sort(values)
    assert values == [3, 1, 2]


def test_handles_empty_and_single():
    assert quick_sort([]) == []
    assert quick_sort([42]) == [42]


def test_handles_duplicates():
    values = [5, 5, 1, 5, 1, 5]
    assert quick_sort(values) == sorted(values)


def test_main_prints_sorted(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n3 1 2\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "1 2 3 "


def test_main_rejects_nonpositive_count(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1


def test_main_rejects_missing_numbers(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2\n"))
    assert main([]) == 2


def test_main_rejects_garbage(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc"))
    assert main([]) == 2
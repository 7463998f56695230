import pytest

from dsworks.array_gen import generate_array, main, write_test_file

FULL_RANGE = 2**31 - 1


def test_seed_one_matches_c_library_sequence():
    assert generate_array(3, FULL_RANGE, 1) == [1804289383, 846930886, 1681692777]


def test_seed_zero_behaves_like_seed_one():
    assert generate_array(5, FULL_RANGE, 0) == generate_array(5, FULL_RANGE, 1)


def test_values_within_bounds():
    values = generate_array(1000, 9, 42)
    assert len(values) == 1000
    assert all(0 <= value <= 9 for value in values)


def test_seed_one_modulo_hundred_sequence():
    assert generate_array(5, 99, 1) == [83, 86, 77, 15, 93]


def test_prefix_stable_across_lengths():
    assert generate_array(100, 100, 7)[:10] == generate_array(10, 100, 7)


def test_negative_max_rejected():
    with pytest.raises(ValueError):
        generate_array(3, -1, 42)


def test_write_file_round_trip(tmp_path):
    path = write_test_file(20, 3, 500, tmp_path)
    assert path.name == "20_3.in"
    text = path.read_text(encoding="ascii")
    assert text.endswith(" \n")
    assert [int(token) for token in text.split()] == generate_array(20, 500, 42)


def test_main_requires_three_arguments(capsys):
    assert main(["10", "1"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_main_writes_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["6", "0", "50"]) == 0
    content = (tmp_path / "6_0.in").read_text(encoding="ascii").split()
    assert [int(token) for token in content] == generate_array(6, 50, 42)
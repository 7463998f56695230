import random

from dsworks.splay_map import SplayMap, run


def test_search_returns_value_and_splays():
    tree = SplayMap()
    for key, value in [("m", "1"), ("c", "2"), ("x", "3"), ("a", "4")]:
        tree.insert(key, value)
    assert tree.root_key() == "m"
    assert tree.search("a") == "4"
    assert tree.root_key() == "a"
    assert tree.search("x") == "3"
    assert tree.root_key() == "x"


def test_search_missing_returns_none_and_keeps_root():
    tree = SplayMap()
    tree.insert("k", "v")
    tree.insert("z", "w")
    assert tree.search("b") is None
    assert tree.root_key() == "k"


def test_empty_map():
    tree = SplayMap()
    assert tree.root_key() is None
    assert tree.search("any") is None


def test_duplicate_keys_return_first_value():
    tree = SplayMap()
    tree.insert("k", "first")
    tree.insert("k", "second")
    assert tree.search("k") == "first"


def test_all_values_found_after_many_splays():
    rng = random.Random(3)
    keys = [f"key{n}" for n in range(300)]
    rng.shuffle(keys)
    tree = SplayMap()
    for key in keys:
        tree.insert(key, key.upper())
    for _ in range(3):
        rng.shuffle(keys)
        for key in keys:
            assert tree.search(key) == key.upper()
            assert tree.root_key() == key


def test_run_looks_up_both_directions():
    text = "2\nAnakin Podracer\nLuke XWing\n3\nLuke\nPodracer\nYoda\n"
    assert run(text) == "XWing\nAnakin\n"


def test_run_with_no_requests():
    assert run("1\nA B\n0\n") == ""


def test_run_rejects_missing_count():
    assert run("") == ""


def test_run_splits_overlong_tokens():
    long_name = "a" * 1000
    text = f"1\n{long_name}b\n1\nb\n"
    assert run(text) == long_name + "\n"
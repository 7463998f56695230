import random

from dsworks.splay import SplayTree


def _tree(keys):
    tree = SplayTree()
    for key in keys:
        tree.insert(key)
    return tree


def test_empty_tree():
    tree = SplayTree()
    assert tree.root_key() is None
    assert tree.search(3) is False
    assert tree.delete(3) is False
    assert list(tree) == []


def test_insert_puts_key_at_root():
    tree = _tree([10, 5, 20])
    assert tree.root_key() == 20
    tree.insert(7)
    assert tree.root_key() == 7
    assert list(tree) == [5, 7, 10, 20]


def test_insert_duplicate():
    tree = _tree([4, 8])
    assert tree.insert(4) is False
    assert tree.root_key() == 4
    assert list(tree) == [4, 8]


def test_search_splays_found_key():
    tree = _tree([1, 2, 3, 4, 5, 6])
    assert tree.search(2) is True
    assert tree.root_key() == 2
    assert list(tree) == [1, 2, 3, 4, 5, 6]


def test_search_missing_splays_neighbour():
    tree = _tree([10, 20, 30])
    assert tree.search(25) is False
    assert tree.root_key() in (20, 30)
    assert list(tree) == [10, 20, 30]


def test_contains_does_not_change_root():
    tree = _tree([1, 2, 3])
    root = tree.root_key()
    assert 1 in tree
    assert 9 not in tree
    assert tree.root_key() == root


def test_delete():
    tree = _tree([5, 3, 8, 1, 4])
    assert tree.delete(3) is True
    assert list(tree) == [1, 4, 5, 8]
    assert tree.delete(3) is False
    assert list(tree) == [1, 4, 5, 8]


def test_long_chain_is_handled():
    tree = _tree(range(5000))
    assert tree.search(0) is True
    assert tree.root_key() == 0
    assert tree.delete(2500) is True
    assert 2500 not in tree
    assert len(list(tree)) == 4999


def test_random_operations_match_set():
    rng = random.Random(11)
    tree = SplayTree()
    reference = set()
    for _ in range(3000):
        key = rng.randrange(400)
        action = rng.random()
        if action < 0.5:
            assert tree.insert(key) == (key not in reference)
            reference.add(key)
            assert tree.root_key() == key
        elif action < 0.8:
            assert tree.delete(key) == (key in reference)
            reference.discard(key)
        else:
            assert tree.search(key) == (key in reference)
    assert list(tree) == sorted(reference)
import random

from sckit.bstree import SearchTree


def make(values):
    tree = SearchTree()
    for v in values:
        tree.add(v)
    return tree


def test_add_and_iterate_sorted():
    tree = make([50, 30, 70, 20, 40, 60, 80])
    assert list(tree) == [20, 30, 40, 50, 60, 70, 80]
    assert len(tree) == 7


def test_duplicate_is_ignored():
    tree = make([5, 3])
    assert tree.add(5) is False
    assert tree.add(4) is True
    assert list(tree) == [3, 4, 5]
    assert len(tree) == 3


def test_get_and_contains():
    tree = make([10, 5, 15])
    assert tree.get(5) == 5
    assert tree.get(99) is None
    assert tree.get(99, "none") == "none"
    assert 15 in tree
    assert 7 not in tree


def test_key_function_keeps_first_item():
    tree = SearchTree(key=lambda pair: pair[0])
    tree.add(("heoo", "world"))
    tree.add(("end", "last"))
    assert tree.add(("heoo", "other")) is False
    assert tree.get("heoo") == ("heoo", "world")
    assert list(tree) == [("end", "last"), ("heoo", "world")]


def test_remove_leaf_one_child_two_children():
    tree = make([50, 30, 70, 20, 40, 60, 80, 65])
    assert tree.remove(20) is True
    assert list(tree) == [30, 40, 50, 60, 65, 70, 80]
    assert tree.remove(60) is True
    assert list(tree) == [30, 40, 50, 65, 70, 80]
    assert tree.remove(70) is True
    assert list(tree) == [30, 40, 50, 65, 80]
    assert len(tree) == 5


def test_remove_root_and_missing():
    tree = make([2, 1, 3])
    assert tree.remove(2) is True
    assert list(tree) == [1, 3]
    assert tree.remove(2) is False
    assert tree.remove(1) is True
    assert tree.remove(3) is True
    assert list(tree) == []
    assert len(tree) == 0


def test_remove_successor_deep_in_right_subtree():
    tree = make([10, 5, 20, 15, 25, 12, 17])
    assert tree.remove(10) is True
    assert list(tree) == [5, 12, 15, 17, 20, 25]
    assert 10 not in tree


def test_random_inserts_and_removes_stay_sorted():
    rng = random.Random(7)
    values = rng.sample(range(1000), 200)
    tree = make(values)
    removed = set(values[::3])
    for v in removed:
        assert tree.remove(v)
    expected = sorted(set(values) - removed)
    assert list(tree) == expected
    assert len(tree) == len(expected)


def test_clear():
    tree = make([1, 2, 3])
    tree.clear()
    assert len(tree) == 0
    assert list(tree) == []
    assert tree.add(4) is True
    assert list(tree) == [4]
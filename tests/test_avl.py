import random

import pytest

from labstructs.avl import AvlTree


def _real_height(node):
    if node is None:
        return -1
    return 1 + max(_real_height(node.left), _real_height(node.right))


def _check_balanced(node):
    if node is None:
        return
    assert abs(_real_height(node.left) - _real_height(node.right)) <= 1
    assert node.height == _real_height(node)
    _check_balanced(node.left)
    _check_balanced(node.right)


def _build(values):
    tree = AvlTree()
    for value in values:
        tree.insert(value)
    return tree


def test_small_rotation_preorder():
    tree = _build([1, 2, 3])
    assert list(tree.preorder()) == [2, 1, 3]
    assert list(tree.postorder()) == [1, 3, 2]


def test_sequential_inserts_are_balanced():
    tree = _build(range(1, 8))
    assert list(tree.preorder()) == [4, 2, 1, 3, 6, 5, 7]
    _check_balanced(tree.root)


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_random_inserts_sorted_and_balanced(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), 200)
    tree = _build(values)
    assert list(tree) == sorted(values)
    _check_balanced(tree.root)


def test_duplicates_are_kept():
    tree = _build([5, 5, 3])
    assert list(tree.inorder()) == [3, 5, 5]


def test_search_and_contains():
    tree = _build([10, 20, 30, 40])
    assert tree.search(30).num == 30
    assert tree.search(99) is None
    assert 20 in tree
    assert 21 not in tree


def test_search_counted_root_takes_one_comparison():
    tree = _build([1, 2, 3])
    node, count = tree.search_counted(2)
    assert node.num == 2
    assert count == 1
    missing, misses = tree.search_counted(100)
    assert missing is None
    assert misses == _real_height(tree.root) + 1


def test_delete_keeps_order():
    values = list(range(50))
    tree = _build(values)
    for value in range(0, 50, 3):
        tree.delete(value)
    expected = [v for v in values if v % 3 != 0]
    assert list(tree) == expected


def test_delete_all_empties_tree():
    rng = random.Random(7)
    values = rng.sample(range(500), 60)
    tree = _build(values)
    for value in values:
        tree.delete(value)
    assert tree.root is None
    assert list(tree) == []


def test_delete_missing_changes_nothing():
    tree = _build([4, 2, 6])
    tree.delete(100)
    assert list(tree.preorder()) == [4, 2, 6]


def test_clear():
    tree = _build([1, 2, 3])
    tree.clear()
    assert list(tree) == []
    assert 1 not in tree


def test_to_dot():
    tree = _build([1, 2, 3])
    assert tree.to_dot("T") == "digraph T {\n2 -> 1;\n2 -> 3;\n}\n"
    assert AvlTree().to_dot("T") == ""
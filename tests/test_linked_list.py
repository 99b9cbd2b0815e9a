import random

import pytest

from labstructs.linked_list import LinkedList, merge_sorted


def test_push_and_pop_order():
    items = LinkedList()
    items.push_back(1)
    items.push_back(2)
    items.push_front(0)
    assert list(items) == [0, 1, 2]
    assert len(items) == 3
    assert items.pop_back() == 2
    assert items.pop_front() == 0
    assert items.pop_back() == 1
    assert len(items) == 0


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_push_back_after_pop_back():
    items = LinkedList([1, 2, 3])
    items.pop_back()
    items.push_back(9)
    assert list(items) == [1, 2, 9]


def test_insert_before():
    items = LinkedList([1, 3])
    items.insert_before(2, 3)
    items.insert_before(0, 1)
    items.insert_before(4)
    assert list(items) == [0, 1, 2, 3, 4]
    assert len(items) == 5


def test_insert_before_missing_raises():
    items = LinkedList([1, 2])
    with pytest.raises(ValueError):
        items.insert_before(5, 42)
    assert list(items) == [1, 2]


def test_append_list_moves_elements():
    first = LinkedList([1, 2])
    second = LinkedList([3, 4])
    first.append_list(second)
    assert list(first) == [1, 2, 3, 4]
    assert list(second) == []
    first.push_back(5)
    assert list(first) == [1, 2, 3, 4, 5]


def test_copy_is_independent():
    original = LinkedList([1, 2, 3])
    duplicate = original.copy()
    duplicate.push_back(4)
    assert list(original) == [1, 2, 3]
    assert list(duplicate) == [1, 2, 3, 4]


@pytest.mark.parametrize("count", [0, 1, 2, 3, 4, 5, 10])
def test_split_halves(count):
    values = list(range(count))
    front = LinkedList(values)
    back = front.split()
    assert len(front) == (count + 1) // 2
    assert list(front) + list(back) == values
    assert len(back) == count - len(front)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_sort_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(100)]
    items = LinkedList(values)
    items.sort()
    assert list(items) == sorted(values)
    assert len(items) == len(values)
    items.push_back(1000)
    assert list(items)[-1] == 1000


def test_sort_is_stable_with_key():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    items = LinkedList(pairs)
    items.sort(key=lambda pair: pair[0])
    assert list(items) == sorted(pairs, key=lambda pair: pair[0])


def test_merge_sorted():
    left = LinkedList([1, 4, 6])
    right = LinkedList([2, 4, 7])
    merged = merge_sorted(left, right)
    assert list(merged) == sorted([1, 4, 6, 2, 4, 7])
    assert len(merged) == 6
    assert list(left) == []
    assert list(right) == []


def test_format_lines():
    assert LinkedList([1, 2]).format() == "1\n2\n"
    assert LinkedList().format() == ""
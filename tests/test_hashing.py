import pytest

from labstructs.hashing import (
    ChainedHashSet,
    OpenAddressingSet,
    bucket_index,
    hash_of,
    need_to_grow,
    need_to_shrink,
)


def test_hash_of_zero_is_zero():
    assert hash_of(0) == 0


def test_hash_is_deterministic_and_64_bit():
    for num in (-5, -1, 1, 7, 123456, 2**31 - 1):
        assert hash_of(num) == hash_of(num)
        assert 0 <= hash_of(num) < 2**64


def test_negative_number_wraps_like_unsigned():
    assert hash_of(-1) == hash_of(2**64 - 1)


def test_bucket_index_in_range():
    for num in range(-50, 50):
        assert 0 <= bucket_index(num, 7) < 7
        assert bucket_index(num, 7) == hash_of(num) % 7


def test_bucket_index_rejects_zero_capacity():
    with pytest.raises(ValueError):
        bucket_index(3, 0)


def test_grow_threshold():
    assert need_to_grow(8, 10) is True
    assert need_to_grow(7, 10) is False


def test_shrink_threshold():
    assert need_to_shrink(3, 10) is True
    assert need_to_shrink(4, 10) is False
    assert need_to_shrink(1, 10) is False


def test_open_set_starts_empty():
    table = OpenAddressingSet()
    assert len(table) == 0
    assert table.capacity == 2
    assert table.slots() == [None, None]


def test_open_set_insert_and_contains():
    table = OpenAddressingSet()
    for num in range(100):
        table.insert(num)
    assert len(table) == 100
    assert all(num in table for num in range(100))
    assert 100 not in table
    assert sorted(v for v in table.slots() if v is not None) == list(range(100))
    assert len(table.slots()) == table.capacity


def test_open_set_slots_never_wrap():
    table = OpenAddressingSet()
    for num in range(-30, 30):
        table.insert(num)
    for index, value in enumerate(table.slots()):
        if value is not None:
            assert index >= bucket_index(value, table.capacity)
            assert table.find(value) == index


def test_open_set_duplicate_rejected():
    table = OpenAddressingSet()
    table.insert(5)
    with pytest.raises(ValueError):
        table.insert(5)
    assert len(table) == 1


def test_open_set_remove():
    table = OpenAddressingSet()
    for num in range(10):
        table.insert(num)
    table.remove(4)
    assert 4 not in table
    assert len(table) == 9
    with pytest.raises(KeyError):
        table.remove(4)
    table.insert(4)
    assert 4 in table


def test_open_set_find_counted():
    table = OpenAddressingSet()
    for num in range(20):
        table.insert(num)
    index, count = table.find_counted(7)
    assert index == table.find(7)
    assert count >= 1
    missing, _ = table.find_counted(1000)
    assert missing is None


def test_chained_set_add_and_buckets():
    table = ChainedHashSet()
    for num in range(50):
        table.add(num)
    assert len(table) == 50
    buckets = table.buckets()
    assert len(buckets) == table.capacity
    assert sorted(v for b in buckets for v in b) == list(range(50))
    for index, bucket in enumerate(buckets):
        for value in bucket:
            assert bucket_index(value, table.capacity) == index


def test_chained_set_load_stays_below_limit():
    table = ChainedHashSet()
    for num in range(200):
        table.add(num)
        assert len(table) <= 0.8 * table.capacity + 1


def test_chained_set_duplicate_rejected():
    table = ChainedHashSet()
    table.add(-3)
    with pytest.raises(ValueError):
        table.add(-3)


def test_chained_set_remove_shrinks():
    table = ChainedHashSet()
    for num in range(40):
        table.add(num)
    largest = table.capacity
    for num in range(37):
        table.remove(num)
    assert table.capacity < largest
    assert sorted(v for b in table.buckets() for v in b) == [37, 38, 39]
    with pytest.raises(KeyError):
        table.remove(0)


def test_chained_set_find_counted_and_clear():
    table = ChainedHashSet()
    for num in range(10):
        table.add(num)
    index, count = table.find_counted(3)
    assert index == bucket_index(3, table.capacity)
    assert count >= 1
    assert table.find(99) is None
    capacity = table.capacity
    table.clear()
    assert len(table) == 0
    assert 3 not in table
    assert table.capacity == capacity
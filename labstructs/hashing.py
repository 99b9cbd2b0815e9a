"""Integer hash sets with open addressing and with separate chaining."""

from __future__ import annotations

from typing import Optional

START_SIZE = 2
FACTOR = 2
OPEN_LOAD_FACTOR = 0.6
PERCENTAGE_ADD = 0.8
PERCENTAGE_REM = 0.3

_MASK64 = (1 << 64) - 1
_MULTIPLIER = 0x45D9F3B


def hash_of(num: int) -> int:
    """64-bit integer hash of ``num``; negative numbers wrap around."""
    x = num & _MASK64
    x = (((x >> 16) ^ x) * _MULTIPLIER) & _MASK64
    x = (((x >> 16) ^ x) * _MULTIPLIER) & _MASK64
    return (x >> 16) ^ x


def bucket_index(num: int, capacity: int) -> int:
    """Slot of ``num`` in a table of ``capacity`` slots."""
    if capacity <= 0:
        raise ValueError("capacity must be positive")
    return hash_of(num) % capacity


def need_to_grow(count: int, capacity: int) -> bool:
    """Whether a chained table holding ``count`` items must be enlarged."""
    return float(count) >= PERCENTAGE_ADD * capacity


def need_to_shrink(count: int, capacity: int) -> bool:
    """Whether a chained table holding ``count`` items should be halved."""
    return float(count) <= PERCENTAGE_REM * capacity and count >= START_SIZE


class OpenAddressingSet:
    """Set of integers stored in one array with forward linear probing.

    Probing never wraps around: when no free slot follows the home slot the
    table is doubled and the item placed again.
    """

    def __init__(self) -> None:
        self._table: list[Optional[int]] = [None] * START_SIZE
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._table)

    def _grow(self) -> None:
        new_capacity = self.capacity * FACTOR
        while True:
            table: list[Optional[int]] = [None] * new_capacity
            for value in self._table:
                if value is None:
                    continue
                index = bucket_index(value, new_capacity)
                while index < new_capacity and table[index] is not None:
                    index += 1
                if index == new_capacity:
                    new_capacity *= FACTOR
                    break
                table[index] = value
            else:
                self._table = table
                return

    def _free_slot(self, data: int) -> Optional[int]:
        for index in range(bucket_index(data, self.capacity), self.capacity):
            if self._table[index] is None:
                return index
        return None

    def insert(self, data: int) -> None:
        """Add ``data``; raises ValueError when it is already present."""
        if self.find(data) is not None:
            raise ValueError(f"{data} is already in the set")
        while True:
            if self._size >= OPEN_LOAD_FACTOR * self.capacity:
                self._grow()
            index = self._free_slot(data)
            if index is not None:
                self._table[index] = data
                self._size += 1
                return
            self._grow()

    def find_counted(self, key: int) -> tuple[Optional[int], int]:
        """Slot holding ``key`` (or None) and the number of occupied slots compared."""
        count = 0
        for index in range(bucket_index(key, self.capacity), self.capacity):
            value = self._table[index]
            if value is not None:
                count += 1
                if value == key:
                    return index, count
        return None, count

    def find(self, key: int) -> Optional[int]:
        """Slot holding ``key``, or None."""
        return self.find_counted(key)[0]

    def remove(self, key: int) -> None:
        """Delete ``key``; raises KeyError when it is absent."""
        index = self.find(key)
        if index is None:
            raise KeyError(key)
        self._table[index] = None
        self._size -= 1

    def slots(self) -> list[Optional[int]]:
        """Contents of every slot, None for a free one."""
        return list(self._table)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, int) and self.find(key) is not None

    def __len__(self) -> int:
        return self._size


class ChainedHashSet:
    """Set of integers kept in buckets of chained items."""

    def __init__(self) -> None:
        self._buckets: list[list[int]] = [[] for _ in range(START_SIZE)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def _rebuild(self, new_capacity: int) -> None:
        buckets: list[list[int]] = [[] for _ in range(new_capacity)]
        for bucket in self._buckets:
            for value in bucket:
                buckets[bucket_index(value, new_capacity)].append(value)
        self._buckets = buckets

    def find_counted(self, num: int) -> tuple[Optional[int], int]:
        """Bucket holding ``num`` (or None) and the number of items compared."""
        index = bucket_index(num, self.capacity)
        count = 0
        for value in self._buckets[index]:
            count += 1
            if value == num:
                return index, count
        return None, count

    def find(self, num: int) -> Optional[int]:
        """Bucket holding ``num``, or None."""
        return self.find_counted(num)[0]

    def add(self, num: int) -> None:
        """Add ``num``; raises ValueError when it is already present."""
        if self.find(num) is not None:
            raise ValueError(f"{num} is already in the set")
        if need_to_grow(self._size, self.capacity):
            self._rebuild(self.capacity * FACTOR)
        self._buckets[bucket_index(num, self.capacity)].append(num)
        self._size += 1

    def remove(self, num: int) -> None:
        """Delete ``num``; raises KeyError when it is absent."""
        index = self.find(num)
        if index is None:
            raise KeyError(num)
        self._buckets[index].remove(num)
        self._size -= 1
        if need_to_shrink(self._size, self.capacity):
            self._rebuild(self.capacity // FACTOR)

    def clear(self) -> None:
        """Drop every item, keeping the current capacity."""
        self._buckets = [[] for _ in range(self.capacity)]
        self._size = 0

    def buckets(self) -> list[list[int]]:
        """Copies of all buckets in slot order."""
        return [list(bucket) for bucket in self._buckets]

    def __contains__(self, num: object) -> bool:
        return isinstance(num, int) and self.find(num) is not None

    def __len__(self) -> int:
        return self._size
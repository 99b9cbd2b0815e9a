"""Bounded FIFO queues backed by a ring buffer or by linked nodes."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional

MAX_QUEUE_LENGTH = 100_000


class QueueFullError(Exception):
    """Raised when an item is pushed into a queue that has no free slot."""

    def __init__(self, message: str = "Очередь полна!") -> None:
        super().__init__(message)


class QueueEmptyError(Exception):
    """Raised when an item is taken from an empty queue."""

    def __init__(self, message: str = "Очередь пуста!") -> None:
        super().__init__(message)


class ArrayQueue:
    """FIFO queue stored in a fixed-size circular array."""

    def __init__(self, capacity: int = MAX_QUEUE_LENGTH) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def push(self, item: Any) -> None:
        """Put ``item`` at the back of the queue."""
        if self.is_full():
            raise QueueFullError()
        self._slots[(self._head + self._size) % self.capacity] = item
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the item at the front of the queue."""
        if self.is_empty():
            raise QueueEmptyError()
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._size -= 1
        return item

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        ring = itertools.chain(self._slots[self._head:], self._slots[: self._head])
        return itertools.islice(ring, self._size)


@dataclass(slots=True)
class _Node:
    item: Any
    next: Optional["_Node"] = None


class LinkedQueue:
    """FIFO queue made of singly linked nodes.

    The identities of released nodes are kept in ``released`` until a newly
    created node turns out to occupy the same identity again, which is then
    counted in ``reused``.  Several queues may share one ``released`` log.
    """

    def __init__(self, released: Optional[dict[int, None]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        self._released: dict[int, None] = {} if released is None else released
        self.reused = 0

    @property
    def released(self) -> list[int]:
        """Identities of freed nodes that have not been reused, oldest first."""
        return list(self._released)

    def push(self, item: Any) -> None:
        """Put ``item`` at the back of the queue."""
        node = _Node(item)
        node_id = id(node)
        if node_id in self._released:
            del self._released[node_id]
            self.reused += 1
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the item at the front of the queue."""
        node = self._head
        if node is None:
            raise QueueEmptyError()
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        self._released[id(node)] = None
        return node.item

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next


@dataclass
class QueueStats:
    """Running statistics of a queue's length during a simulation."""

    name: str
    length: int = 0
    total_length: int = 0
    requests: int = field(default=0)
    arrivals: int = 0
    departures: int = 0

    def record_in(self) -> None:
        """Account for one item entering the queue."""
        self.length += 1
        self.total_length += self.length
        self.requests += 1
        self.arrivals += 1

    def record_out(self) -> None:
        """Account for one item leaving the queue."""
        self.length -= 1
        self.total_length += self.length
        self.requests += 1
        self.departures += 1

    def average_length(self) -> Optional[float]:
        """Mean length seen over all requests, or None before any request."""
        if self.requests <= 0:
            return None
        return self.total_length / self.requests

    def describe(self) -> list[str]:
        """Lines reporting the current and the average length."""
        lines = [f"Текущая длина очереди '{self.name}': {self.length}"]
        average = self.average_length()
        if average is not None:
            lines.append(f"Средняя длина очереди '{self.name}': {average:.6f}")
        return lines
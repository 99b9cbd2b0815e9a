"""Singly linked list with merge sort."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Key = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None


def _identity(value: Any) -> Any:
    return value


def _split_nodes(head: Optional[_Node]) -> Optional[_Node]:
    """Cut the chain after its first half (rounded up); return the back half."""
    if head is None or head.next is None:
        return None
    fast: Optional[_Node] = head
    half: Optional[_Node] = head
    before: Optional[_Node] = None
    while fast is not None:
        before = half
        half = half.next
        fast = fast.next
        if fast is not None:
            fast = fast.next
    before.next = None
    return half


def _merge_nodes(left: Optional[_Node], right: Optional[_Node], key: Callable) -> Optional[_Node]:
    anchor = _Node(None)
    tail = anchor
    while left is not None and right is not None:
        if key(left.data) <= key(right.data):
            tail.next, left = left, left.next
        else:
            tail.next, right = right, right.next
        tail = tail.next
    tail.next = left if left is not None else right
    return anchor.next


def _sort_nodes(head: Optional[_Node], key: Callable) -> Optional[_Node]:
    if head is None or head.next is None:
        return head
    back = _split_nodes(head)
    return _merge_nodes(_sort_nodes(head, key), _sort_nodes(back, key), key)


class LinkedList:
    """Singly linked list."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @classmethod
    def _from_chain(cls, head: Optional[_Node]) -> "LinkedList":
        result = cls()
        result._adopt(head)
        return result

    def _adopt(self, head: Optional[_Node]) -> None:
        self._head = head
        self._tail = None
        self._size = 0
        node = head
        while node is not None:
            self._tail = node
            self._size += 1
            node = node.next

    def _take(self) -> Optional[_Node]:
        head = self._head
        self._head = self._tail = None
        self._size = 0
        return head

    def push_front(self, data: Any) -> None:
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def push_back(self, data: Any) -> None:
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        if self._head is None:
            raise IndexError("pop from an empty list")
        if self._head.next is None:
            return self.pop_front()
        node = self._head
        while node.next.next is not None:
            node = node.next
        last = node.next
        node.next = None
        self._tail = node
        self._size -= 1
        return last.data

    def insert_before(self, data: Any, before: Any = None) -> None:
        """Insert ``data`` ahead of the first element equal to ``before``.

        With ``before`` None the element goes to the end.  Raises ValueError
        when ``before`` is not in the list.
        """
        if before is None:
            self.push_back(data)
            return
        if self._head is not None and self._head.data == before:
            self.push_front(data)
            return
        node = self._head
        while node is not None and node.next is not None:
            if node.next.data == before:
                node.next = _Node(data, node.next)
                self._size += 1
                return
            node = node.next
        raise ValueError(f"{before!r} is not in the list")

    def append_list(self, other: "LinkedList") -> None:
        """Move every element of ``other`` to the end; ``other`` ends empty."""
        if other is self:
            raise ValueError("cannot append a list to itself")
        size = other._size
        tail = other._tail
        head = other._take()
        if head is None:
            return
        if self._tail is None:
            self._head = head
        else:
            self._tail.next = head
        self._tail = tail
        self._size += size

    def copy(self) -> "LinkedList":
        return LinkedList(self)

    def split(self) -> "LinkedList":
        """Keep the first half (rounded up) and return the rest as a new list."""
        back = _split_nodes(self._head)
        self._adopt(self._head)
        return LinkedList._from_chain(back)

    def sort(self, key: Key = None) -> None:
        """Stable merge sort in place."""
        self._adopt(_sort_nodes(self._take(), key or _identity))

    def format(self) -> str:
        """Each element on its own line."""
        return "".join(f"{data}\n" for data in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


def merge_sorted(left: LinkedList, right: LinkedList, key: Key = None) -> LinkedList:
    """Merge two sorted lists into a new one; both inputs end empty.

    On equal keys the element of ``left`` comes first.
    """
    if left is right:
        raise ValueError("cannot merge a list with itself")
    return LinkedList._from_chain(
        _merge_nodes(left._take(), right._take(), key or _identity)
    )
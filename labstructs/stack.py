"""Linked stack of integers and the stack evaluation of the fixed expression."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence

NUMS_COUNT = 9
SEPARATOR = "=/=/=/=/=/=/\n"


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


class EmptyStackError(IndexError):
    """Raised when a value is taken from an empty stack."""

    def __init__(self, message: str = "stack is empty") -> None:
        super().__init__(message)


class Stack:
    """Last-in, first-out stack."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        self._items.append(value)

    def pop(self) -> Any:
        if not self._items:
            raise EmptyStackError()
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def format(self, fmt: str = "%d\n") -> str:
        """Values from the top down, each followed by a separator line."""
        if not self._items:
            return "Пусто\n"
        return SEPARATOR + "".join(fmt % value + SEPARATOR for value in self)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Values from the top down."""
        return reversed(self._items)


def _combine(operator: str, top: int, below: int) -> int:
    if operator == "+":
        return _int32(top + below)
    if operator == "-":
        return _int32(below - top)
    if operator == "*":
        return _int32(top * below)
    raise ValueError(f"unknown operator {operator!r}")


def _reduce(operands: Stack, operators: Stack) -> None:
    while len(operators):
        operator = operators.pop()
        top = operands.pop()
        below = operands.pop()
        operands.push(_combine(operator, top, below))


def evaluate_expression(values: Sequence[int]) -> int:
    """Value of ``A + (B * (C + (D * (E + F) - (G - H)) + I))`` using two stacks."""
    if len(values) != NUMS_COUNT:
        raise ValueError(f"exactly {NUMS_COUNT} values are required")
    numbers = [int(v) for v in values]
    operands = Stack(numbers[:6])
    operators = Stack("*+")
    _reduce(operands, operators)

    operators = Stack("+--")
    operands.push(numbers[6])
    operands.push(numbers[7])
    _reduce(operands, operators)

    operators = Stack("+*+")
    operands.push(numbers[8])
    _reduce(operands, operators)

    return operands.pop()
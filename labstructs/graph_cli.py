"""Command that reads a graph and shows its smallest disconnecting edge set."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterable, Iterator, Optional, TextIO

from labstructs.graph import (
    AdjacencyMatrix,
    InvalidVertexPairError,
    min_disconnecting_cut,
    render_dot,
    to_dot,
)

EOK = 0
EINVALIDINTEGER = 141
EINVALIDRANGE = 142
EINVALIDVERTEXPAIR = 151

INT_MAX = 2**31 - 1
DEFAULT_REPEAT = 1000

_BAD_VALUE = "Введено недопустимое значение! Повторите попытку."


class InputRangeError(ValueError):
    """Raised when an entered integer lies outside the allowed range."""

    def __init__(self, value: int, left: int, right: int) -> None:
        super().__init__(f"{value} is not in [{left}, {right}]")
        self.value = value
        self.left = left
        self.right = right


def read_int_in_range(tokens: Iterable[str], left: int, right: int) -> int:
    """Take the next token as an integer within ``[left, right]``.

    Raises ValueError when the input ends or the token is not an integer, and
    InputRangeError when the integer is out of range.
    """
    try:
        token = next(iter(tokens))
    except StopIteration:
        raise ValueError("input ended") from None
    try:
        value = int(token)
    except ValueError:
        raise ValueError(f"{token!r} is not an integer") from None
    if not left <= value <= right:
        raise InputRangeError(value, left, right)
    return value


def read_edges(tokens: Iterable[str], size: int) -> AdjacencyMatrix:
    """Read vertex pairs numbered from 1 until a lone 0 and build the graph."""
    stream = iter(tokens)
    matrix = AdjacencyMatrix(size)
    while True:
        first = read_int_in_range(stream, 0, size)
        if first == 0:
            return matrix
        second = read_int_in_range(stream, 1, size)
        if first == second:
            raise InvalidVertexPairError()
        matrix.add_edge(first - 1, second - 1)


def _stream_tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _failure(error: ValueError) -> int:
    if isinstance(error, InvalidVertexPairError):
        print(error)
        return EINVALIDVERTEXPAIR
    print(_BAD_VALUE)
    if isinstance(error, InputRangeError):
        return EINVALIDRANGE
    return EINVALIDINTEGER


def main(argv: Optional[list[str]] = None) -> int:
    """Read a graph from standard input and export its smallest cut."""
    parser = argparse.ArgumentParser(
        description="Find the fewest edges whose removal disconnects a graph."
    )
    parser.add_argument("--repeat", type=int, default=DEFAULT_REPEAT,
                        help="runs of the search used for timing")
    parser.add_argument("--viewer", default="gwenview",
                        help="image viewer to open; empty to skip")
    args = parser.parse_args(argv)

    tokens = _stream_tokens(sys.stdin)
    print("Введите число вершин графа: ", end="")
    try:
        size = read_int_in_range(tokens, 1, INT_MAX)
    except ValueError as error:
        return _failure(error)

    print(
        "Ввод совершать парами чисел. Пара чисел - это номера вершин графа, "
        "счет начинается от 1.\nДля окончания ввода написать 0"
    )
    try:
        matrix = read_edges(tokens, size)
    except ValueError as error:
        return _failure(error)

    repeat = max(args.repeat, 0)
    start = time.perf_counter()
    for _ in range(repeat):
        min_disconnecting_cut(matrix)
    elapsed_us = (time.perf_counter() - start) * 1_000_000

    result = min_disconnecting_cut(matrix)
    if result is None:
        print("Невозможно сделать граф несвязным!")
        return EOK

    print("Удаленные рёбра графа отмечены красным цветом.")
    render_dot(to_dot(matrix, result), viewer=args.viewer or None)
    average = elapsed_us / repeat if repeat else 0.0
    print(f"Время выполнения алгоритма: {average:.2f}")
    return EOK


if __name__ == "__main__":
    sys.exit(main())
"""Interactive menu for the two-queue service model."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Iterable, Optional, TextIO

from labstructs.queues import MAX_QUEUE_LENGTH, ArrayQueue, LinkedQueue
from labstructs.simulation import QueueKind, TimeRange, simulate

QUEUE_CONTROL_SIZE = 104
NODE_SIZE = 16
ITEM_SIZE = 1
POINTER_SIZE = 8
SHOWN_ADDRESSES = 30

DEFAULT_REQUESTS = 1000
DEFAULT_INTERVAL = 100

_MENU = (
    "\n\n================\n\n"
    " 1) Моделирование и характеристика для очереди в виде массива.\n"
    " 2) Моделирование и характеристика для очереди в виде списка.\n"
    " 3) Изменить время обработки заявки.\n"
    " 4) Вывод сравнения времени при выполнении операций.\n"
    " 0) Выход из программы.\n\n"
)
_BAD_COMMAND = "Введена некорректная команда, попробуйте снова"


class _Tokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def next(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self) -> None:
        self._pending.clear()

    def read_int(self) -> Optional[int]:
        token = self.next()
        try:
            return int(token)
        except ValueError:
            return None

    def read_float(self) -> Optional[float]:
        token = self.next()
        try:
            return float(token)
        except ValueError:
            return None


def measure_operations() -> dict[str, tuple[int, int]]:
    """Time one push and one pop on each queue kind.

    Returns a mapping of ``"push"`` and ``"pop"`` to a pair of nanosecond
    durations: the array queue first, the linked queue second.
    """
    array_queue = ArrayQueue(MAX_QUEUE_LENGTH)
    linked_queue = LinkedQueue()

    start = time.perf_counter_ns()
    array_queue.push("1")
    array_push = time.perf_counter_ns() - start
    start = time.perf_counter_ns()
    linked_queue.push("2")
    linked_push = time.perf_counter_ns() - start

    start = time.perf_counter_ns()
    array_queue.pop()
    array_pop = time.perf_counter_ns() - start
    start = time.perf_counter_ns()
    linked_queue.pop()
    linked_pop = time.perf_counter_ns() - start

    return {"push": (array_push, linked_push), "pop": (array_pop, linked_pop)}


def memory_report(sizes: Iterable[int] = (10, 100, 1000, 10000)) -> list[str]:
    """Lines comparing the memory taken by both queue layouts."""
    lines: list[str] = []
    for count in sizes:
        array_bytes = ITEM_SIZE * count + QUEUE_CONTROL_SIZE
        extra = (count - 1) * POINTER_SIZE
        array_total = ITEM_SIZE * POINTER_SIZE * count + QUEUE_CONTROL_SIZE
        list_bytes = NODE_SIZE * count + QUEUE_CONTROL_SIZE
        lines.extend(
            [
                f"Количество элементов = {count}",
                f"Очередь-массив \t {array_bytes} (+ {extra} = {array_total})",
                f"Очередь-список \t {list_bytes}",
                "",
                f"Queue control = {QUEUE_CONTROL_SIZE}, node_t = {NODE_SIZE}",
            ]
        )
    return lines


def _interval_lines(ranges: dict[int, TimeRange]) -> list[str]:
    def row(number: int, label: str) -> str:
        span = ranges[number]
        return f"{number} - {label}: min = {span.low:.6f}; max = {span.high:.6f}"

    return [
        "",
        "Время прибытия",
        row(1, "T1"),
        row(2, "T2"),
        "",
        "Время обработки",
        row(3, "T1"),
        row(4, "T2"),
        "Какой интервал изменить?",
    ]


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)


def _run_simulation(kind: QueueKind, ranges: dict[int, TimeRange],
                    rng: random.Random, show_memory: bool = False) -> None:
    result = simulate(
        kind, DEFAULT_REQUESTS, DEFAULT_INTERVAL,
        ranges[1], ranges[2], ranges[3], ranges[4],
        rng=rng, progress=print,
    )
    _print_lines(result.report_lines())
    if show_memory:
        print(f"Очищенные адреса (max {SHOWN_ADDRESSES}):")
        for address in result.freed_addresses[:SHOWN_ADDRESSES]:
            print(f"{address:#x}")


def _change_interval(tokens: _Tokens, ranges: dict[int, TimeRange]) -> None:
    print("Изменение времени обработки. (введите цифру для изменения времени)")
    _print_lines(_interval_lines(ranges))
    print("Ввод пункта меню: ", end="")
    token = tokens.next()
    choice = ord(token[0]) - ord("0")
    if not 1 <= choice <= 4:
        print("Введён некорректный номер!")
        return
    print("Введите левую и правую границы: ", end="")
    low = tokens.read_float()
    if low is None or low < 0:
        tokens.discard_line()
        print("Такого интервала нет!")
        return
    high = tokens.read_float()
    if high is None or high < 0:
        tokens.discard_line()
        print("Такого интервала нет!")
        return
    ranges[choice] = TimeRange(low, high)
    print("После изменений")
    _print_lines(_interval_lines(ranges))


def _compare_operations() -> None:
    print("Вывод сравнений по времени")
    timings = measure_operations()
    for title, key in (("ДОБАВЛЕНИЕ", "push"), ("УДАЛЕНИЕ", "pop")):
        array_ns, linked_ns = timings[key]
        print(title)
        print(f"Очередь-массив \t {array_ns}")
        print(f"Очередь-список \t {linked_ns}")
        print()
    print("ПАМЯТЬ")
    _print_lines(memory_report())


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu on standard input until the user chooses to quit."""
    parser = argparse.ArgumentParser(description="Queue service model.")
    parser.parse_args(argv)

    rng = random.Random()
    ranges = {
        1: TimeRange(1, 5),
        2: TimeRange(0, 3),
        3: TimeRange(0, 4),
        4: TimeRange(0, 1),
    }
    tokens = _Tokens(sys.stdin)

    while True:
        print(_MENU, end="")
        try:
            command = tokens.read_int()
            if command is None or not 0 <= command <= 4:
                tokens.discard_line()
                print(_BAD_COMMAND)
                continue
            if command == 0:
                break
            if command == 1:
                _run_simulation(QueueKind.ARRAY, ranges, rng)
            elif command == 2:
                print("Выводить информация о памяти? \n1 - да, 0 - нет\nВыбор: ", end="")
                flag = tokens.read_int()
                if flag not in (0, 1):
                    print("Некорректный выбор!")
                    continue
                _run_simulation(QueueKind.LIST, ranges, rng, show_memory=flag == 1)
            elif command == 3:
                _change_interval(tokens, ranges)
            else:
                _compare_operations()
        except EOFError:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
"""Interactive menu comparing search trees and hash tables on integers."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence, TextIO

from labstructs.avl import AvlTree
from labstructs.expr_tree import (
    NUMS_COUNT,
    TreeNode,
    bst_find_counted,
    bst_insert,
    build_expression_tree,
    evaluate,
    infix,
)
from labstructs.hashing import (
    ChainedHashSet,
    OpenAddressingSet,
    bucket_index,
    hash_of,
)

COUNT_TEST = 10000

TREE_NODE_SIZE = 24
AVL_NODE_SIZE = 32
LIST_NODE_SIZE = 16
POINTER_SIZE = 8
SLOT_SIZE = 8

_MENU = (
    "\n---------------------------\n"
    " 1) Ввести выражение\n"
    " 2) Посчитать с помощью дерева\n"
    " 3) Добавить в дерево узел\n"
    " 4) Удалить из дерева узел\n"
    " 5) Обойти введенное дерево префиксно\n"
    " 6) Обойти введенное дерево инфиксно\n"
    " 7) Обойти введенное дерево постфиксно\n"
    " 8) Выгрузить дерево в файл\n"
    " 9) Очистить дерево\n"
    " 10) Добавить элемент в хеш-таблицу с открытой адресацией\n"
    " 11) Удалить элемент из хеш-таблицы с открытой адресацией\n"
    " 12) Найти элемент в хеш-таблице с открытой адресацией\n"
    " 13) Добавить элемент в хеш-таблицу с закрытой адресацией\n"
    " 14) Удалить элемент из хеш-таблицы с закрытой адресацией\n"
    " 15) Найти элемент в хеш-таблице с закрытой адресацией\n"
    " 16) Посчитать эффективность\n"
    " 17) Вывести хеш-таблицу с открытой адресацией\n"
    " 18) Вывести хеш-таблицу с закрытой адресацией\n"
    " 19) Закончить работу программы\n"
    "\n---------------------------\n"
)
_EXIT = 19


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


def operator_values(root: TreeNode) -> list[int]:
    """Values of the operator nodes of an evaluated tree, in infix order."""
    return [node.value for node in infix(root) if node.is_operator()]


def describe_structures(values: Iterable[int]) -> tuple[list[str], str]:
    """Fill an AVL tree and both hash sets with ``values``.

    Returns the lines listing both hash tables and the Graphviz text of the
    AVL tree.  Repeated values are kept once by the hash sets.
    """
    avl = AvlTree()
    open_set = OpenAddressingSet()
    chained = ChainedHashSet()
    for value in values:
        avl.insert(value)
        try:
            open_set.insert(value)
        except ValueError:
            pass
        try:
            chained.add(value)
        except ValueError:
            pass

    lines = ["Для открытой адресации:"]
    for number, slot in enumerate(open_set.slots(), 1):
        text = f"{number}) "
        if slot is not None:
            text += f"Число: {slot}, хеш: {bucket_index(slot, open_set.capacity)}"
        lines.append(text)

    lines.append("Для закрытой адресации:")
    for number, bucket in enumerate(chained.buckets(), 1):
        links = "".join(
            f"Число: {value}, хеш: {bucket_index(value, chained.capacity)} -> "
            for value in bucket
        )
        lines.append(f"{number}) {links}NULL")

    return lines, avl.to_dot("AVL_tree")


def _measure(count: int, find: Callable[[int], tuple[object, int]]) -> tuple[float, float]:
    comparisons = 0
    start = time.perf_counter()
    for key in range(count):
        comparisons += find(key)[1]
    elapsed_us = (time.perf_counter() - start) * 1_000_000
    return elapsed_us / count, comparisons / count


def benchmark(count: int = COUNT_TEST) -> tuple[dict[str, tuple[float, float]], dict[str, int]]:
    """Search every key of ``0 .. count-1`` in four structures.

    Returns the average time in microseconds and the average number of
    comparisons per search, keyed ``bst``, ``avl``, ``open`` and ``chained``,
    and the estimated memory in bytes of each structure under the same keys.
    """
    if count <= 0:
        raise ValueError("count must be positive")
    bst_root: Optional[TreeNode] = None
    avl = AvlTree()
    open_set = OpenAddressingSet()
    chained = ChainedHashSet()
    for key in range(count):
        bst_root = bst_insert(bst_root, TreeNode(key))
        avl.insert(key)
        open_set.insert(key)
        chained.add(key)

    costs = {
        "bst": _measure(count, lambda key: bst_find_counted(bst_root, key)),
        "avl": _measure(count, avl.search_counted),
        "open": _measure(count, open_set.find_counted),
        "chained": _measure(count, chained.find_counted),
    }
    memory = {
        "bst": TREE_NODE_SIZE * count,
        "avl": AVL_NODE_SIZE * count,
        "chained": POINTER_SIZE * chained.capacity + LIST_NODE_SIZE * len(chained),
        "open": SLOT_SIZE * open_set.capacity,
    }
    return costs, memory


def _read_number(tokens: _Tokens) -> Optional[int]:
    print("Введите число: ", end="")
    value = tokens.read_int()
    tokens.discard_line()
    if value is None:
        print("Неверно введено число")
    return value


def _read_expression(tokens: _Tokens) -> Optional[list[int]]:
    print(f"Введите {NUMS_COUNT} целочисленных значений для A, B, C ... I: ", end="")
    values: list[int] = []
    while len(values) < NUMS_COUNT:
        value = tokens.read_int()
        if value is None:
            tokens.discard_line()
            print("Ошибка! Требуется целое число.")
            return None
        values.append(value)
    tokens.discard_line()
    print("\n\nПолученное выражение:")
    print("%d + (%d * (%d + (%d * (%d + %d) - (%d - %d)) + %d))\n" % tuple(values))
    return values


def _show_expression(values: Sequence[int]) -> None:
    root = build_expression_tree(values)
    print(f"Результат: {evaluate(root)}")
    operators = operator_values(root)
    print("".join(f"{value} " for value in operators))
    lines, dot_text = describe_structures(operators)
    for line in lines:
        print(line)
    Path("avl_tree.dot").write_text(dot_text, encoding="utf-8")


def _show_benchmark(count: int) -> None:
    costs, memory = benchmark(count)
    titles = (
        ("bst", "ДДП"),
        ("avl", "АВЛ"),
        ("open", "хеш-таблице (открытая)"),
        ("chained", "хеш-таблице (закрытая)"),
    )
    for key, title in titles:
        spent, compared = costs[key]
        print(
            f"Ср. Время на поиск любого эл-та в {title}: {spent:.2f}, "
            f"ср. кол-во сравнений {compared:.2f}"
        )
    print(f"ДДП: {memory['bst']}")
    print(f"АВЛ: {memory['avl']}")
    print(f"Хеш (закрытая): {memory['chained']}")
    print(f"Хеш (открытая): {memory['open']}")
    print(f"Тесты проводились для {count} упорядоченных чисел")


def _show_open(open_set: OpenAddressingSet) -> None:
    print("Для открытой адресации:")
    for number, slot in enumerate(open_set.slots(), 1):
        if slot is None:
            print(f" {number}) [ Пусто ]")
        else:
            print(f" {number}) Число: {slot}, хеш: {bucket_index(slot, open_set.capacity)}")


def _show_chained(chained: ChainedHashSet) -> None:
    print("Для закрытой адресации:")
    for number, bucket in enumerate(chained.buckets(), 1):
        links = "".join(
            f"[{value}, хеш: {bucket_index(value, chained.capacity)}] -> "
            for value in bucket
        )
        print(f" {number}) {links}[NULL]")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu on standard input until the user chooses to quit."""
    parser = argparse.ArgumentParser(
        description="Compare search trees and hash tables."
    )
    parser.add_argument("--count", type=int, default=COUNT_TEST,
                        help="ordered numbers used by the efficiency test")
    args = parser.parse_args(argv)

    tokens = _Tokens(sys.stdin)
    avl = AvlTree()
    open_set = OpenAddressingSet()
    chained = ChainedHashSet()
    expression: Optional[list[int]] = None

    while True:
        print(_MENU, end="")
        print(" Выберите команду: ", end="")
        try:
            command = tokens.read_int()
            if command is None:
                command = -1
                print("Неверно введена команда")
            tokens.discard_line()

            if command == _EXIT:
                break
            if command == 1:
                values = _read_expression(tokens)
                if values is not None:
                    expression = values
            elif command == 2:
                if expression is None:
                    print("Вы не ввели выражение")
                else:
                    _show_expression(expression)
            elif command == 3:
                value = _read_number(tokens)
                if value is None:
                    continue
                if value in avl:
                    print("Такой уже есть")
                else:
                    avl.insert(value)
            elif command == 4:
                value = _read_number(tokens)
                if value is None:
                    continue
                if value not in avl:
                    print("Такого нет")
                else:
                    avl.delete(value)
            elif command in (5, 6, 7):
                order = {5: avl.preorder, 6: avl.inorder, 7: avl.postorder}[command]
                print("".join(f"{value} " for value in order()))
            elif command == 8:
                try:
                    Path("tree.dot").write_text(avl.to_dot("OurTree"), encoding="utf-8")
                except OSError:
                    print("Непредвиденная ошибка!")
            elif command == 9:
                avl.clear()
            elif command == 10:
                value = _read_number(tokens)
                if value is None:
                    continue
                if value in open_set:
                    print("Такой уже есть!")
                else:
                    open_set.insert(value)
            elif command == 11:
                value = _read_number(tokens)
                if value is None:
                    continue
                if value not in open_set:
                    print("Такого нет!")
                else:
                    open_set.remove(value)
            elif command == 12:
                value = _read_number(tokens)
                if value is None:
                    continue
                index, count = open_set.find_counted(value)
                if index is None:
                    print("Такого нет!")
                else:
                    found = open_set.slots()[index]
                    print(
                        f"Искомое значение: {found}, нужно было {count} сравнений,"
                        f"его хаш: {hash_of(found)}"
                    )
            elif command == 13:
                value = _read_number(tokens)
                if value is None:
                    continue
                try:
                    chained.add(value)
                except ValueError:
                    print("Такой уже есть!")
            elif command == 14:
                value = _read_number(tokens)
                if value is None:
                    continue
                try:
                    chained.remove(value)
                except KeyError:
                    print("Такого не было!")
            elif command == 15:
                value = _read_number(tokens)
                if value is None:
                    continue
                index, count = chained.find_counted(value)
                if index is None:
                    print("Такого нет!")
                else:
                    print(
                        f"Искомое значение: {value}, нужно было {count} сравнений, "
                        f"его хаш: {hash_of(value)}"
                    )
            elif command == 16:
                _show_benchmark(args.count)
            elif command == 17:
                _show_open(open_set)
            elif command == 18:
                _show_chained(chained)
        except EOFError:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())
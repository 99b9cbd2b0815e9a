import pytest

from labstructs.stack import EmptyStackError, Stack, evaluate_expression


def test_push_pop_is_lifo():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert len(stack) == 0


def test_pop_empty_raises():
    with pytest.raises(EmptyStackError):
        Stack().pop()


def test_peek_keeps_top():
    stack = Stack([4, 7])
    assert stack.peek() == 7
    assert len(stack) == 2


def test_peek_empty_raises():
    with pytest.raises(EmptyStackError):
        Stack().peek()


def test_iter_from_top():
    assert list(Stack([1, 2, 3])) == [3, 2, 1]


def test_clear():
    stack = Stack([1, 2, 3])
    stack.clear()
    assert len(stack) == 0
    with pytest.raises(EmptyStackError):
        stack.pop()


def test_format_empty():
    assert Stack().format("%d\n") == "Пусто\n"


def test_format_values_keeps_stack():
    stack = Stack([1, 2])
    sep = "=/=/=/=/=/=/\n"
    assert stack.format("%d\n") == sep + "2\n" + sep + "1\n" + sep
    assert list(stack) == [2, 1]


def test_evaluate_worked_example():
    assert evaluate_expression(list(range(1, 10))) == 115


def test_evaluate_zero_multiplier_gives_first_value():
    assert evaluate_expression([7, 0, 3, 4, 5, 6, 7, 8, 9]) == 7


def test_evaluate_reduces_to_sum():
    a, i = 40, 2
    assert evaluate_expression([a, 1, 0, 0, 0, 0, 0, 0, i]) == a + i


def test_evaluate_symmetric_in_commutative_operands():
    base = [3, 5, 7, 2, 4, 9, 1, 6, 8]
    swapped = list(base)
    swapped[4], swapped[5] = swapped[5], swapped[4]
    swapped[2], swapped[8] = swapped[8], swapped[2]
    assert evaluate_expression(base) == evaluate_expression(swapped)


def test_evaluate_shift_by_a():
    rest = [2, 3, 4, 5, 6, 7, 8, 9]
    assert evaluate_expression([10] + rest) - evaluate_expression([0] + rest) == 10


def test_evaluate_wraps_to_32_bits():
    assert evaluate_expression([0, 65536, 65536, 0, 0, 0, 0, 0, 0]) == 0


def test_evaluate_wrong_length():
    with pytest.raises(ValueError):
        evaluate_expression([1, 2, 3])
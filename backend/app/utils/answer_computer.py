"""
answer_computer.py: deterministic arithmetic over operand sequences.

Every worksheet answer is computed here; prompts never carry their own maths.
"""
from math import prod
from typing import Sequence


def add(operands: Sequence[int]) -> int:
    return sum(operands)


def subtract(operands: Sequence[int]) -> int:
    """First minus second, in the order given. Extra operands are ignored."""
    first, second = operands[0], operands[1]
    return first - second


def multiply(operands: Sequence[int]) -> int:
    return prod(operands)


def divide(operands: Sequence[int]) -> int:
    """
    Floor of dividend / divisor. The divisor is clamped to at least 1,
    so a drawn 0 divides by 1 instead of failing:
        divide([17, 5]) → 3
        divide([9, 0])  → 9
    """
    dividend, divisor = operands[0], operands[1]
    return dividend // max(divisor, 1)


def digit_at_place(value: int, place: int) -> int:
    """Digit of `value` at place value `place` (1, 10, 100, ...)."""
    return (value // place) % 10


def has_carrying(operands: Sequence[int]) -> bool:
    """
    True if any column sum reaches 10, checked from the ones place up to
    the widest operand:
        has_carrying([23, 45])     → False
        has_carrying([27, 45])     → True   (7 + 5 = 12)
        has_carrying([12, 31, 46]) → False  (2 + 1 + 6 = 9, 1 + 3 + 4 = 8)
    """
    max_digits = len(str(max(operands)))
    place = 1
    for _ in range(max_digits):
        column = sum(digit_at_place(op, place) for op in operands)
        if column >= 10:
            return True
        place *= 10
    return False


def has_borrowing(minuend: int, subtrahend: int) -> bool:
    """True if any minuend digit is smaller than the subtrahend digit in the same place."""
    max_digits = len(str(max(minuend, subtrahend)))
    place = 1
    for _ in range(max_digits):
        if digit_at_place(minuend, place) < digit_at_place(subtrahend, place):
            return True
        place *= 10
    return False

"""
Tests for answer_computer.py: arithmetic and carry/borrow detection.
"""
from app.utils.answer_computer import (
    add, subtract, multiply, divide,
    digit_at_place, has_carrying, has_borrowing,
)


# ── arithmetic ────────────────────────────────────────────────────────────────

class TestArithmetic:
    def test_add_two(self):
        assert add([3, 4]) == 7

    def test_add_three(self):
        assert add([12, 31, 46]) == 89

    def test_subtract_keeps_order(self):
        assert subtract([57, 32]) == 25
        # No reordering: a smaller first operand gives a negative answer
        assert subtract([32, 57]) == -25

    def test_multiply_two(self):
        assert multiply([6, 7]) == 42

    def test_multiply_three(self):
        assert multiply([2, 3, 4]) == 24

    def test_multiply_by_zero(self):
        assert multiply([0, 99]) == 0

    def test_divide_floors(self):
        assert divide([17, 5]) == 3
        assert divide([20, 5]) == 4

    def test_divide_by_zero_uses_one(self):
        assert divide([9, 0]) == 9

    def test_divide_zero_dividend(self):
        assert divide([0, 3]) == 0

    def test_divide_ignores_third_operand(self):
        assert divide([100, 10, 7]) == 10


# ── digit helpers ─────────────────────────────────────────────────────────────

class TestDigitAtPlace:
    def test_places(self):
        assert digit_at_place(4732, 1) == 2
        assert digit_at_place(4732, 10) == 3
        assert digit_at_place(4732, 100) == 7
        assert digit_at_place(4732, 1000) == 4

    def test_beyond_width(self):
        assert digit_at_place(7, 10) == 0


class TestHasCarrying:
    def test_no_carry(self):
        assert has_carrying([23, 45]) is False

    def test_ones_carry(self):
        # 7 + 5 = 12
        assert has_carrying([27, 45]) is True

    def test_tens_carry(self):
        # ones 1 + 2 = 3, tens 6 + 5 = 11
        assert has_carrying([61, 52]) is True

    def test_column_sum_of_exactly_ten(self):
        assert has_carrying([5, 5]) is True

    def test_three_operands_no_carry(self):
        # ones 2 + 1 + 6 = 9, tens 1 + 3 + 4 = 8
        assert has_carrying([12, 31, 46]) is False

    def test_three_operands_carry(self):
        assert has_carrying([4, 3, 3]) is True

    def test_short_operand_against_long(self):
        assert has_carrying([100, 9]) is False
        assert has_carrying([101, 9]) is True

    def test_zeros(self):
        assert has_carrying([0, 0]) is False


class TestHasBorrowing:
    def test_no_borrow(self):
        assert has_borrowing(57, 32) is False

    def test_ones_borrow(self):
        assert has_borrowing(52, 37) is True

    def test_tens_borrow(self):
        # ones 8 >= 1, tens 1 < 4
        assert has_borrowing(118, 41) is True

    def test_borrow_across_zero(self):
        assert has_borrowing(100, 1) is True

    def test_equal_numbers(self):
        assert has_borrowing(44, 44) is False

    def test_zero_subtrahend(self):
        assert has_borrowing(5, 0) is False

"""Subtraction: OperationContract implementation.

Subtraction questions are always binary, whatever operandsPerQuestion says.
"""

from .base import OperationContract
from app.models.worksheet import Operation
from app.utils.answer_computer import subtract, has_borrowing


class SubtractionContract(OperationContract):
    operation = Operation.SUBTRACTION
    symbol = "−"

    def operand_count(self, config):
        return 2

    def accept(self, operands, config):
        if config.allow_borrowing:
            return operands
        # Checked as (larger, smaller); an accepted draw is stored in that order.
        minuend = max(operands)
        subtrahend = min(operands)
        if minuend >= subtrahend and not has_borrowing(minuend, subtrahend):
            return [minuend, subtrahend]
        return None

    def compute_answer(self, operands):
        return subtract(operands)

    def word_problem(self, operands, name_a, name_b, obj, activity):
        return (
            f"{name_a} collected {operands[0]} {obj}. They {activity} {operands[1]} to {name_b}. "
            f"How many {obj} are left?"
        )

"""Division: OperationContract implementation."""

from .base import OperationContract
from app.models.worksheet import Operation
from app.utils.answer_computer import divide


class DivisionContract(OperationContract):
    operation = Operation.DIVISION
    symbol = "÷"

    def compute_answer(self, operands):
        return divide(operands)

    def word_problem(self, operands, name_a, name_b, obj, activity):
        return (
            f"{name_a} has {operands[0]} {obj} and shares them equally with {operands[1]} friends. "
            f"How many {obj} does each person receive?"
        )

"""Multiplication: OperationContract implementation."""

from .base import OperationContract
from app.models.worksheet import Operation
from app.utils.answer_computer import multiply


class MultiplicationContract(OperationContract):
    operation = Operation.MULTIPLICATION
    symbol = "×"

    def compute_answer(self, operands):
        return multiply(operands)

    def word_problem(self, operands, name_a, name_b, obj, activity):
        return (
            f"{name_a} arranges {obj} into {operands[0]} groups with {operands[1]} in each group. "
            f"How many {obj} are there?"
        )

"""Addition: OperationContract implementation."""

from .base import OperationContract
from app.models.worksheet import Operation
from app.utils.answer_computer import add, has_carrying


class AdditionContract(OperationContract):
    operation = Operation.ADDITION
    symbol = "+"

    def accept(self, operands, config):
        if config.allow_carrying:
            return operands
        if not has_carrying(operands):
            return operands
        return None

    def compute_answer(self, operands):
        return add(operands)

    def word_problem(self, operands, name_a, name_b, obj, activity):
        return (
            f"{name_a} has {operands[0]} {obj}. {name_b} {activity} {operands[1]} more. "
            f"How many {obj} do they have altogether?"
        )

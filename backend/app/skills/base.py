"""Base operation contract for arithmetic question generation.

Every operation (addition, subtraction, ...) subclasses OperationContract
and overrides the relevant methods. The generator never branches on the
operation itself; it asks the registered contract.
"""

from typing import Sequence

from app.models.worksheet import Operation, WorksheetConfig


class OperationContract:
    operation: Operation
    symbol: str = ""

    def operand_count(self, config: WorksheetConfig) -> int:
        return config.operands_per_question

    def accept(self, operands: list[int], config: WorksheetConfig) -> list[int] | None:
        """
        Constraint check for one draw.
        Returns the operand list to keep (possibly reordered), or None to
        ask the generator for a fresh draw.
        """
        return operands

    def compute_answer(self, operands: Sequence[int]) -> int:
        raise NotImplementedError

    def word_problem(
        self,
        operands: Sequence[int],
        name_a: str,
        name_b: str,
        obj: str,
        activity: str,
    ) -> str:
        raise NotImplementedError

"""Prompt text for arithmetic questions, one layout per worksheet format."""
from typing import Sequence

from app.models.worksheet import Operation, WorksheetFormat
from app.skills.registry import operator_symbol

VERTICAL_RULE = "——"


def _vertical(operands: Sequence[int], symbol: str) -> str:
    lines = [
        str(operands[0]).rjust(4),
        f"{symbol} {str(operands[1]).rjust(2)}",
        VERTICAL_RULE,
    ]
    if len(operands) == 3:
        lines.insert(1, f"  {symbol} {str(operands[2]).rjust(2)}")
    return "\n".join(lines)


def format_prompt(operands: Sequence[int], operation: Operation, fmt: WorksheetFormat) -> str:
    symbol = operator_symbol(operation)
    if fmt == WorksheetFormat.VERTICAL:
        return _vertical(operands, symbol)

    expression = f" {symbol} ".join(str(op) for op in operands)
    if fmt == WorksheetFormat.FILL_BLANK:
        return f"{expression} = ____"
    if fmt == WorksheetFormat.MULTIPLE_CHOICE:
        return f"{expression} = ?"
    return f"{expression} ="

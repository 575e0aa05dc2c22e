"""Read-only operation registry mapping Operation to contract instance."""

from .addition import AdditionContract
from .subtraction import SubtractionContract
from .multiplication import MultiplicationContract
from .division import DivisionContract
from app.models.worksheet import Operation

OPERATION_REGISTRY = {
    Operation.ADDITION: AdditionContract(),
    Operation.SUBTRACTION: SubtractionContract(),
    Operation.MULTIPLICATION: MultiplicationContract(),
    Operation.DIVISION: DivisionContract(),
}


def contract_for(operation: Operation):
    return OPERATION_REGISTRY[operation]


def operator_symbol(operation: Operation) -> str:
    return OPERATION_REGISTRY[operation].symbol

from app.models.worksheet import Operation

OPERATION_LABELS = {
    Operation.ADDITION: "Addition",
    Operation.SUBTRACTION: "Subtraction",
    Operation.MULTIPLICATION: "Multiplication",
    Operation.DIVISION: "Division",
}


def label_for_operation(operation: Operation) -> str:
    return OPERATION_LABELS.get(operation, operation.value.title())

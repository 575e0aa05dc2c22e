"""
Operation and operand sampling, with carry/borrow enforcement.

All draws come from the caller's rng, in a fixed order. Changing the order
or the number of draws changes every worksheet generated from a seed.
"""
import logging
import math
import random

from app.models.worksheet import Operation, WorksheetConfig
from app.services.rng import random_int
from app.skills.registry import contract_for

logger = logging.getLogger("mathsheet.generator")

MAX_OPERAND_DRAWS = 50
MAX_CONSTRAINT_ATTEMPTS = 100


def select_operation(operations, rng: random.Random) -> Operation:
    """Uniform pick from the configured operations; addition when there are none."""
    if not operations:
        logger.debug("Empty operation set, falling back to addition")
        return Operation.ADDITION
    idx = math.floor(rng.random() * len(operations))
    return operations[idx]


def generate_operands(operation: Operation, config: WorksheetConfig, rng: random.Random) -> list[int]:
    operand_count = contract_for(operation).operand_count(config)
    operands: list[int] = []
    attempts = 0
    while len(operands) < operand_count and attempts < MAX_OPERAND_DRAWS:
        operands.append(random_int(rng, config.min_operand, config.max_operand))
        attempts += 1
    return operands


def draw_constrained_operands(
    operation: Operation,
    config: WorksheetConfig,
    rng: random.Random,
) -> list[int]:
    """
    Draw operands, redrawing the whole set until the operation's contract
    accepts it. Best effort: after MAX_CONSTRAINT_ATTEMPTS redraws the last
    draw is kept unchecked.
    """
    contract = contract_for(operation)
    operands = generate_operands(operation, config, rng)
    for _ in range(MAX_CONSTRAINT_ATTEMPTS):
        accepted = contract.accept(operands, config)
        if accepted is not None:
            return accepted
        operands = generate_operands(operation, config, rng)

    logger.debug(
        "Constraint budget exhausted for %s in [%s, %s]; keeping last draw %s",
        operation.value, config.min_operand, config.max_operand, operands,
    )
    return operands

"""Word problems built from fixed name, object and activity vocabularies."""
import random

from app.models.worksheet import (
    Operation,
    QuestionMetadata,
    WorksheetConfig,
    WorksheetFormat,
    WorksheetQuestion,
)
from app.services.operand_sampler import generate_operands
from app.services.rng import random_int
from app.skills.registry import contract_for

NAMES = [
    "Ava",
    "Noah",
    "Liam",
    "Sophia",
    "Ethan",
    "Mia",
    "Lucas",
    "Isla",
    "Oliver",
    "Amelia",
]

OBJECTS = [
    "shells",
    "marbles",
    "stickers",
    "books",
    "pencils",
    "apples",
    "balloons",
    "blocks",
]

ACTIVITIES = [
    "collects",
    "shares",
    "gives",
    "keeps",
    "finds",
    "loses",
]

# Offset used to pick a second, different name when both draws coincide.
NAME_COLLISION_OFFSET = 3


def pick_names(rng: random.Random) -> tuple[str, str]:
    name_a = NAMES[random_int(rng, 0, len(NAMES) - 1)]
    name_b = NAMES[random_int(rng, 0, len(NAMES) - 1)]
    if name_a == name_b:
        name_b = NAMES[(NAMES.index(name_a) + NAME_COLLISION_OFFSET) % len(NAMES)]
    return name_a, name_b


def generate_word_problem(
    qid: str,
    operation: Operation,
    config: WorksheetConfig,
    rng: random.Random,
) -> WorksheetQuestion:
    """Word problem for one operation. Operands are drawn without carry/borrow checks."""
    contract = contract_for(operation)
    name_a, name_b = pick_names(rng)
    obj = OBJECTS[random_int(rng, 0, len(OBJECTS) - 1)]
    activity = ACTIVITIES[random_int(rng, 0, len(ACTIVITIES) - 1)]
    operands = generate_operands(operation, config, rng)

    return WorksheetQuestion(
        id=qid,
        prompt=contract.word_problem(operands, name_a, name_b, obj, activity),
        answer=str(contract.compute_answer(operands)),
        operation=operation,
        format=WorksheetFormat.WORD,
        metadata=QuestionMetadata(operands=tuple(operands), operator_symbol=contract.symbol),
    )

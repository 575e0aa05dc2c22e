"""
Deterministic worksheet generator.

generate_worksheet(config, seed) walks questions 1..N on a single seeded
stream:

    select operation → word problem?  ──yes──→ word_problems.generate_word_problem
                                      ──no───→ draw_constrained_operands → format_prompt

The same config and seed always yield the same questions in the same order.
An empty operation set falls back to addition. The only exception raised is
InvalidRangeError (from rng.random_int) when min_operand > max_operand;
the caller rejects inverted ranges first (see api/worksheet.py).
"""
import logging
import random
from datetime import datetime, timezone

from app.models.worksheet import (
    Operation,
    QuestionMetadata,
    Topic,
    WorksheetConfig,
    WorksheetFormat,
    WorksheetPayload,
    WorksheetQuestion,
)
from app.services.operand_sampler import draw_constrained_operands, select_operation
from app.services.question_formatter import format_prompt
from app.services.rng import fallback_seed, make_rng
from app.services.word_problems import generate_word_problem
from app.skills.registry import contract_for

logger = logging.getLogger("mathsheet.generator")

WORD_PROBLEM_INTERVAL = 5


def question_id(index: int) -> str:
    return f"q-{index + 1}"


def uses_word_problem(config: WorksheetConfig, index: int) -> bool:
    """Every fifth question (0-based 4, 9, 14, ...) on number worksheets."""
    return (
        config.include_word_problems
        and index % WORD_PROBLEM_INTERVAL == WORD_PROBLEM_INTERVAL - 1
        and config.topic == Topic.NUMBER
    )


def generate_arithmetic_question(
    qid: str,
    operation: Operation,
    fmt: WorksheetFormat,
    config: WorksheetConfig,
    rng: random.Random,
) -> WorksheetQuestion:
    contract = contract_for(operation)
    operands = draw_constrained_operands(operation, config, rng)
    return WorksheetQuestion(
        id=qid,
        prompt=format_prompt(operands, operation, fmt),
        answer=str(contract.compute_answer(operands)),
        operation=operation,
        format=fmt,
        metadata=QuestionMetadata(operands=tuple(operands), operator_symbol=contract.symbol),
    )


def generate_worksheet(config: WorksheetConfig, seed: str | None = None) -> WorksheetPayload:
    """Build one worksheet payload.

    Args:
        config: Fully populated configuration (validated by the caller).
        seed: Explicit seed; falls back to config.seed, then to the clock.

    Returns:
        WorksheetPayload with exactly config.question_count questions.
    """
    if seed is None:
        seed = config.seed
    if seed is None:
        seed = fallback_seed()
        logger.debug("No seed supplied, using time-derived seed %s", seed)

    rng = make_rng(seed)
    questions: list[WorksheetQuestion] = []
    for i in range(config.question_count):
        operation = select_operation(config.operations, rng)
        qid = question_id(i)
        if uses_word_problem(config, i):
            question = generate_word_problem(qid, operation, config, rng)
        else:
            question = generate_arithmetic_question(qid, operation, config.format, config, rng)
        questions.append(question)

    return WorksheetPayload(
        config=config,
        questions=tuple(questions),
        generated_at=datetime.now(timezone.utc),
    )

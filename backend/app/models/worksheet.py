from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, Strict, model_validator
from pydantic.alias_generators import to_camel


class GradeLevel(str, Enum):
    PREP = "prep"
    YEAR_1 = "1"
    YEAR_2 = "2"
    YEAR_3 = "3"
    YEAR_4 = "4"
    YEAR_5 = "5"
    YEAR_6 = "6"


class Topic(str, Enum):
    NUMBER = "number"
    MEASUREMENT = "measurement"
    GEOMETRY = "geometry"
    STATISTICS = "statistics"


class Operation(str, Enum):
    ADDITION = "addition"
    SUBTRACTION = "subtraction"
    MULTIPLICATION = "multiplication"
    DIVISION = "division"


class WorksheetFormat(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    FILL_BLANK = "fill-blank"
    MULTIPLE_CHOICE = "multiple-choice"
    WORD = "word"


class DifficultyMode(str, Enum):
    FIXED = "fixed"
    ADAPTIVE = "adaptive"
    CURRICULUM = "curriculum"


class _CamelModel(BaseModel):
    """snake_case attributes, camelCase on the wire; either accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class WorksheetConfig(_CamelModel):
    """Generator input. Range and emptiness checks belong to the caller."""

    grade: GradeLevel
    term: int
    topic: Topic
    operations: tuple[Operation, ...]
    min_operand: int
    max_operand: int
    operands_per_question: Literal[2, 3]
    format: WorksheetFormat
    question_count: int
    allow_carrying: bool
    allow_borrowing: bool
    include_word_problems: bool
    include_time_limit: bool = False
    difficulty_mode: DifficultyMode
    seed: str | None = None


# Enum values arrive as JSON strings; everything else on the request is strict.
_Grade = Annotated[GradeLevel, Strict(False)]
_Topic = Annotated[Topic, Strict(False)]
_Operation = Annotated[Operation, Strict(False)]
_Format = Annotated[WorksheetFormat, Strict(False)]
_Mode = Annotated[DifficultyMode, Strict(False)]


class WorksheetConfigRequest(_CamelModel):
    """Schema enforced at the HTTP boundary before generation.

    Strict: "no" is not a bool and "10" is not an int.
    """

    model_config = ConfigDict(strict=True)

    grade: _Grade
    term: Literal[1, 2, 3, 4]
    topic: _Topic
    operations: list[_Operation] = Field(min_length=1)
    min_operand: int = Field(ge=0)
    max_operand: int = Field(gt=0)
    operands_per_question: Literal[2, 3]
    format: _Format
    question_count: int = Field(ge=5, le=50)
    allow_carrying: bool
    allow_borrowing: bool
    include_word_problems: bool
    include_time_limit: bool
    difficulty_mode: _Mode
    seed: str | None = None

    @model_validator(mode="after")
    def _check_operand_range(self):
        if self.min_operand > self.max_operand:
            raise ValueError("minOperand must be less than or equal to maxOperand")
        return self

    def to_config(self, seed: str | None = None) -> WorksheetConfig:
        data = self.model_dump()
        if seed is not None:
            data["seed"] = seed
        return WorksheetConfig(**data)


class QuestionMetadata(_CamelModel):
    operands: tuple[int, ...]
    operator_symbol: str = Field(alias="operator")


class WorksheetQuestion(_CamelModel):
    id: str
    prompt: str
    answer: str
    operation: Operation
    format: WorksheetFormat
    metadata: QuestionMetadata


class WorksheetPayload(_CamelModel):
    config: WorksheetConfig
    questions: tuple[WorksheetQuestion, ...]
    generated_at: datetime


class WorksheetRecord(BaseModel):
    """Row written to the `worksheets` table."""

    config: dict
    generated_at: datetime
    question_count: int
    seed: str | None

"""
Curriculum defaults per grade and term.

Storage: app/data/curriculum_defaults.json, loaded once at import time.
Holds the base configuration, per "grade-term" overrides, grade labels,
number-range presets and page densities.
"""
import json
from pathlib import Path

from pydantic import BaseModel

from app.models.worksheet import DifficultyMode, GradeLevel, WorksheetConfig

_DEFAULTS_PATH = Path(__file__).parent.parent / "data" / "curriculum_defaults.json"
with open(_DEFAULTS_PATH, "r") as f:
    _defaults = json.load(f)

TERMS = (1, 2, 3, 4)
_FALLBACK_RANGE = [1000, 10000]


class PageDensity(BaseModel):
    id: str
    label: str
    count: int
    columns: int
    rows: int


_DENSITIES = [PageDensity(**d) for d in _defaults["densities"]]
_STANDARD_DENSITY = next(d for d in _DENSITIES if d.id == "standard")
_GRADES = {g["value"]: g for g in _defaults["grades"]}


def default_config() -> WorksheetConfig:
    return WorksheetConfig.model_validate(_defaults["base_config"])


def curriculum_config(grade: GradeLevel, term: int) -> WorksheetConfig:
    """Base configuration with the grade/term overrides applied on top."""
    grade = GradeLevel(grade)
    overrides = _defaults["overrides"].get(f"{grade.value}-{term}", {})
    data = {
        **_defaults["base_config"],
        "grade": grade.value,
        "term": term,
        **overrides,
    }
    return WorksheetConfig.model_validate(data)


def rebase_config(previous: WorksheetConfig, grade: GradeLevel, term: int) -> WorksheetConfig:
    """Switch a configuration to another grade/term.

    Curriculum values (range, operations, carry/borrow, word problems) come
    from the new grade/term; layout choices and the seed are kept. A fixed
    difficulty mode becomes curriculum-driven.
    """
    base = curriculum_config(grade, term)
    difficulty_mode = previous.difficulty_mode
    if difficulty_mode == DifficultyMode.FIXED:
        difficulty_mode = DifficultyMode.CURRICULUM
    return base.model_copy(update={
        "format": previous.format,
        "question_count": previous.question_count,
        "include_time_limit": previous.include_time_limit,
        "difficulty_mode": difficulty_mode,
        "seed": previous.seed,
    })


def grade_options() -> list[dict]:
    return [{"value": g["value"], "label": g["label"]} for g in _defaults["grades"]]


def grade_label(grade: GradeLevel) -> str:
    return _GRADES[GradeLevel(grade).value]["label"]


def number_range_presets(grade: GradeLevel) -> list[int]:
    entry = _GRADES.get(GradeLevel(grade).value)
    if not entry:
        return list(_FALLBACK_RANGE)
    return list(entry["range_presets"])


def page_densities() -> list[PageDensity]:
    return list(_DENSITIES)


def density_for_count(count: int) -> PageDensity:
    for density in _DENSITIES:
        if density.count == count:
            return density
    return _STANDARD_DENSITY

from fastapi import APIRouter, HTTPException

from app.models.worksheet import GradeLevel, WorksheetConfig
from app.services.curriculum import (
    TERMS,
    curriculum_config,
    default_config,
    grade_label,
    grade_options,
    number_range_presets,
    page_densities,
    rebase_config,
)
from app.services.telemetry import instrument

router = APIRouter(prefix="/api/curriculum", tags=["curriculum"])


def _grade_or_404(grade: str) -> GradeLevel:
    try:
        return GradeLevel(grade.lower())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Grade {grade} not found")


def _term_or_404(term: int) -> int:
    if term not in TERMS:
        raise HTTPException(status_code=404, detail=f"Term {term} not found")
    return term


@router.get("/grades")
@instrument(route="/api/curriculum/grades", version="v1")
async def list_grades():
    """List supported grades with display labels."""
    return {"grades": grade_options()}


@router.get("/defaults")
@instrument(route="/api/curriculum/defaults", version="v1")
async def get_default_config():
    """Base configuration used before a grade/term is chosen."""
    return default_config().model_dump(mode="json", by_alias=True)


@router.get("/densities")
@instrument(route="/api/curriculum/densities", version="v1")
async def list_densities():
    """Page layouts (columns x rows) and the question count each one holds."""
    return {"densities": [d.model_dump() for d in page_densities()]}


@router.get("/{grade}/ranges")
@instrument(route="/api/curriculum/{grade}/ranges", version="v1")
async def get_range_presets(grade: str):
    """Suggested maximum operands for a grade."""
    level = _grade_or_404(grade)
    return {
        "grade": level.value,
        "label": grade_label(level),
        "presets": number_range_presets(level),
    }


@router.get("/{grade}/{term}")
@instrument(route="/api/curriculum/{grade}/{term}", version="v1")
async def get_curriculum_config(grade: str, term: int):
    """Curriculum-aligned configuration for a grade and term."""
    level = _grade_or_404(grade)
    return curriculum_config(level, _term_or_404(term)).model_dump(mode="json", by_alias=True)


@router.post("/{grade}/{term}/rebase")
@instrument(route="/api/curriculum/{grade}/{term}/rebase", version="v1")
async def rebase_to_curriculum(grade: str, term: int, config: WorksheetConfig):
    """Move a configuration to another grade/term, keeping layout choices and seed."""
    level = _grade_or_404(grade)
    rebased = rebase_config(config, level, _term_or_404(term))
    return rebased.model_dump(mode="json", by_alias=True)

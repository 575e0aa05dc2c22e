"""Worksheet API.

POST /api/worksheet
    Body: worksheet configuration (camelCase JSON). Query: pdf_type.
    Generates the worksheet, schedules best-effort persistence and returns
    the PDF with X-Worksheet-Seed.
    400 – body is not JSON.  422 – configuration invalid.  500 – PDF failed.

POST /api/worksheet/preview
    Same body and validation. Returns the generated payload as JSON.
"""
import logging
from typing import Literal

from fastapi import APIRouter, BackgroundTasks, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.exceptions import ConfigValidationError, MalformedInputError, RenderFailure
from app.models.worksheet import WorksheetConfigRequest, WorksheetPayload
from app.services.pdf import get_pdf_service
from app.services.rng import fallback_seed
from app.services.telemetry import emit_event, instrument
from app.services.worksheet_generator import generate_worksheet
from app.services.worksheet_store import persist_worksheet

logger = logging.getLogger("mathsheet.worksheet")
router = APIRouter(prefix="/api/worksheet", tags=["worksheet"])
pdf_service = get_pdf_service()

SEED_HEADER = "X-Worksheet-Seed"


def _validation_issues(exc: ValidationError) -> list[dict]:
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


async def parse_config_request(request: Request) -> WorksheetConfigRequest:
    """Read and validate the request body.

    Raises:
        MalformedInputError: body is not valid JSON.
        ConfigValidationError: body does not match the configuration schema.
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise MalformedInputError(e) from e
    try:
        return WorksheetConfigRequest.model_validate(body)
    except ValidationError as e:
        raise ConfigValidationError(_validation_issues(e)) from e


async def _generate_from_request(request: Request, route: str) -> WorksheetPayload:
    try:
        config_in = await parse_config_request(request)
    except (MalformedInputError, ConfigValidationError) as e:
        logger.info("Rejected worksheet request: %s", e)
        raise e.to_http_exception()

    seed = config_in.seed if config_in.seed is not None else fallback_seed()
    config = config_in.to_config(seed=seed)
    payload = generate_worksheet(config, seed)
    emit_event(
        "worksheet_generated", route=route, version="v1",
        grade=config.grade.value, term=config.term, seed=seed,
        question_count=len(payload.questions),
    )
    return payload


@router.post("")
@instrument(route="/api/worksheet", version="v1")
async def create_worksheet(
    request: Request,
    background_tasks: BackgroundTasks,
    pdf_type: Literal["full", "student", "answer_key"] = Query("full"),
):
    """Generate a worksheet and return it as a downloadable PDF."""
    payload = await _generate_from_request(request, "/api/worksheet")
    config = payload.config

    # Runs after the response is sent; failures are logged only.
    background_tasks.add_task(persist_worksheet, payload)

    try:
        pdf_bytes = pdf_service.generate_worksheet_pdf(payload, pdf_type=pdf_type)
    except RenderFailure as e:
        logger.error("PDF rendering failed for seed=%s: %s", config.seed, e, exc_info=True)
        http_exc = e.to_http_exception()
        return JSONResponse(
            status_code=http_exc.status_code,
            content={"detail": http_exc.detail},
            background=background_tasks,
        )

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=worksheet-{config.grade.value}-{config.term}.pdf",
            SEED_HEADER: config.seed,
        },
        background=background_tasks,
    )


@router.post("/preview")
@instrument(route="/api/worksheet/preview", version="v1")
async def preview_worksheet(request: Request, response: Response):
    """Generate a worksheet and return the payload as JSON (not persisted)."""
    payload = await _generate_from_request(request, "/api/worksheet/preview")
    response.headers[SEED_HEADER] = payload.config.seed
    return payload.model_dump(mode="json", by_alias=True)

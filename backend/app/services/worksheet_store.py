"""
Best-effort store for worksheet generation records.

Each generation writes one row to the Supabase `worksheets` table:
config, generated_at, question_count and seed. That is enough to
regenerate the same worksheet later from the same generator.

persist_worksheet() never raises; it is scheduled as a background task
so delivery of the PDF never waits on it.
"""
import logging

from pydantic import BaseModel

from app.core.config import get_settings
from app.core.exceptions import PersistenceFailure
from app.models.worksheet import WorksheetPayload, WorksheetRecord
from app.services.supabase_client import get_supabase_client

logger = logging.getLogger("mathsheet.persistence")

WORKSHEETS_TABLE = "worksheets"


class SaveResult(BaseModel):
    saved: bool
    reason: str | None = None


def build_worksheet_record(payload: WorksheetPayload) -> WorksheetRecord:
    return WorksheetRecord(
        config=payload.config.model_dump(mode="json", by_alias=True),
        generated_at=payload.generated_at,
        question_count=len(payload.questions),
        seed=payload.config.seed,
    )


def save_worksheet(payload: WorksheetPayload) -> SaveResult:
    """Insert a generation record. Raises PersistenceFailure if the insert fails."""
    if not get_settings().persist_worksheets:
        return SaveResult(saved=False, reason="Persistence disabled")

    client = get_supabase_client()
    if client is None:
        return SaveResult(saved=False, reason="Supabase credentials missing")

    record = build_worksheet_record(payload)
    try:
        client.table(WORKSHEETS_TABLE).insert(record.model_dump(mode="json")).execute()
    except Exception as e:
        raise PersistenceFailure(str(e), original_error=e) from e
    return SaveResult(saved=True)


def persist_worksheet(payload: WorksheetPayload) -> SaveResult:
    """
    Best-effort: never raises.
    Failures are logged and reported in the returned SaveResult only.
    """
    try:
        result = save_worksheet(payload)
    except PersistenceFailure as e:
        logger.error(f"[worksheet_store.persist_worksheet] {e}", exc_info=True)
        return SaveResult(saved=False, reason=e.reason)
    except Exception as e:
        logger.error(f"[worksheet_store.persist_worksheet] unexpected: {e}", exc_info=True)
        return SaveResult(saved=False, reason=str(e))

    if result.saved:
        logger.info("Persisted worksheet seed=%s questions=%d", payload.config.seed, len(payload.questions))
    else:
        logger.debug("Worksheet not persisted: %s", result.reason)
    return result

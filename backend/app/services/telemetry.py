"""Request telemetry as single-line JSON log records."""
import time
import json
import logging
import asyncio
from typing import Optional
from functools import wraps

logger = logging.getLogger("mathsheet.telemetry")


def emit_event(event: str, *, route: str, version: str, grade: Optional[str] = None,
               term: Optional[int] = None, seed: Optional[str] = None,
               question_count: Optional[int] = None, error_type: Optional[str] = None,
               latency_ms: Optional[int] = None, ok: Optional[bool] = None) -> dict:
    payload = {
        "event": event,
        "route": route,
        "version": version,
        "grade": grade,
        "term": term,
        "seed": seed,
        "question_count": question_count,
        "error_type": error_type,
        "latency_ms": latency_ms,
        "ok": ok,
        "ts": time.time(),
    }
    # drop unset fields so curriculum lookups don't log a row of nulls
    payload = {k: v for k, v in payload.items() if v is not None}
    logger.info("telemetry=%s", json.dumps(payload, separators=(",", ":")))
    return payload


def _error_type(exc: BaseException) -> str:
    # HTTPException carries the status that actually reached the client
    status_code = getattr(exc, "status_code", None)
    if status_code is not None:
        return f"{exc.__class__.__name__}:{status_code}"
    return exc.__class__.__name__


def instrument(route: str, version: str):
    """Emit one api_call event per handler invocation with latency and outcome."""
    def deco(fn):
        if not asyncio.iscoroutinefunction(fn):
            raise TypeError(f"instrument() expects an async handler, got {fn.__name__}")

        @wraps(fn)
        async def wrapped(*args, **kwargs):
            t0 = time.perf_counter()
            ok = True
            err = None
            try:
                return await fn(*args, **kwargs)
            except Exception as e:
                ok = False
                err = _error_type(e)
                raise
            finally:
                dt = int((time.perf_counter() - t0) * 1000)
                emit_event("api_call", route=route, version=version, latency_ms=dt, ok=ok,
                           error_type=err)
        return wrapped
    return deco

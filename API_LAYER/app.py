# app.py
import logging
import json
from dataclasses import replace
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from asyncio import Lock

from config import DEBUG, DEFAULT_WEEK_START, LOG_LEVEL, PORT
from core.period_kind import PeriodKind
from models.api import (
    ErrorResponse,
    OptionsPayload,
    PeriodResponse,
    RangeResolveRequest,
    RangeResolveResponse,
    SelectorResolveRequest,
    SelectorResolveResponse,
)
from models.date_range import DateRange, PeriodOptions
from services.calendar_date import to_calendar_date
from services.period_resolver import range_of_period
from services.range_catalog import range_choices, standard_range_kinds
from services.range_resolver import resolve_range
from services.selector_catalog import SELECTOR_KINDS, selector_choices
from services.selector_resolver import resolve_selector
from services.serialization import (
    range_kind_to_data_item,
    range_spec_from_data_item,
    selector_spec_from_data_item,
)
from services.utils import deep_serialize


# -----------------------------
# Structured Logging Setup
# -----------------------------
class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(
            {
                "time": self.formatTime(record, self.datefmt),
                "level": record.levelname,
                "name": record.name,
                "message": record.getMessage(),
                "exception": self.formatException(record.exc_info)
                if record.exc_info
                else None,
            }
        )


logger = logging.getLogger("period_range_api")
logger.setLevel(LOG_LEVEL)
handler = logging.StreamHandler()
handler.setFormatter(JSONFormatter())
if not logger.handlers:
    logger.addHandler(handler)

# -----------------------------
# FastAPI App
# -----------------------------
app = FastAPI(title="Period Range API", version="1.0")

# -----------------------------
# Metrics
# -----------------------------
metrics_lock = Lock()
request_counters = {
    "ranges": 0,
    "selectors": 0,
    "periods": 0,
    "total": 0,
    "errors": 0,
}


async def _count(key: str) -> None:
    async with metrics_lock:
        request_counters[key] += 1


# -----------------------------
# Helpers
# -----------------------------
def _options(payload: Optional[OptionsPayload]) -> PeriodOptions:
    if payload is None:
        return PeriodOptions(week_start=DEFAULT_WEEK_START)
    week_start = DEFAULT_WEEK_START if payload.week_start is None else payload.week_start
    return PeriodOptions(week_start=week_start, keep_dom=payload.keep_dom)


def _failure(status_code: int, error_type: str, message: str) -> JSONResponse:
    body = ErrorResponse(error={"type": error_type, "message": message})
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def _handle_error(e: Exception, context: str) -> JSONResponse:
    await _count("errors")

    if isinstance(e, ValueError):
        logger.warning(f"[BAD_REQUEST] {context}, error={e}")
        return _failure(422, type(e).__name__, str(e))

    logger.exception(f"[ERROR] {context}, exception={e}")
    return _failure(
        500,
        type(e).__name__,
        str(e) if DEBUG else "An unexpected error occurred",
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    await _count("total")
    await _count("errors")
    logger.warning(f"[BAD_REQUEST] path={request.url.path}, errors={exc.errors()}")
    messages = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return _failure(422, "RequestValidationError", "; ".join(messages))


# -----------------------------
# API Endpoints
# -----------------------------
@app.get("/")
async def root():
    return {"message": "Period Range API is running."}


@app.get("/health")
async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "range_kinds": len(standard_range_kinds()),
        "selector_kinds": len(SELECTOR_KINDS),
        "default_week_start": DEFAULT_WEEK_START,
    }


@app.get("/metrics")
async def metrics() -> Dict[str, Any]:
    async with metrics_lock:
        return request_counters.copy()


@app.get("/ranges")
async def list_ranges(exclude_future: bool = False, exclude_past: bool = False):
    return {
        "ranges": range_choices(
            exclude_future=exclude_future, exclude_past=exclude_past
        )
    }


@app.post(
    "/ranges/resolve",
    response_model=RangeResolveResponse,
    response_model_exclude_none=True,
)
async def resolve_range_request(request: RangeResolveRequest):
    await _count("total")

    try:
        logger.info(f"[REQUEST_START] range_kind={request.range_kind!r}")

        spec = range_spec_from_data_item(
            request.model_dump(
                include={"range_kind", "first_date", "last_date"}, exclude_none=True
            )
        )
        spec = replace(
            spec,
            reference_date=to_calendar_date(request.reference_date),
            options=_options(request.options),
        )
        result = resolve_range(spec)

        response = RangeResolveResponse(range_kind=range_kind_to_data_item(spec.range_kind))
        if isinstance(result, DateRange):
            response.range = result.to_data_item()
        else:
            response.date = deep_serialize(result)

        await _count("ranges")
        return response

    except Exception as e:
        return await _handle_error(e, f"range_kind={request.range_kind!r}")


@app.get("/selectors")
async def list_selectors(exclude_future: bool = False, exclude_past: bool = False):
    return {
        "selectors": selector_choices(
            exclude_future=exclude_future, exclude_past=exclude_past
        )
    }


@app.post(
    "/selectors/resolve",
    response_model=SelectorResolveResponse,
    response_model_exclude_none=True,
)
async def resolve_selector_request(request: SelectorResolveRequest):
    await _count("total")

    try:
        logger.info(f"[REQUEST_START] selector_kind={request.selector_kind!r}")

        spec = selector_spec_from_data_item(
            request.model_dump(include={"selector_kind", "custom_date"}, exclude_none=True)
        )
        spec = replace(
            spec,
            reference_date=to_calendar_date(request.reference_date),
            options=_options(request.options),
        )
        result = resolve_selector(spec)

        kind = spec.selector_kind
        await _count("selectors")
        return SelectorResolveResponse(
            selector_kind=getattr(kind, "name", kind),
            date=deep_serialize(result),
        )

    except Exception as e:
        return await _handle_error(e, f"selector_kind={request.selector_kind!r}")


@app.get(
    "/periods/{period_kind}",
    response_model=PeriodResponse,
    response_model_exclude_none=True,
)
async def period_request(
    period_kind: str,
    reference_date: Optional[str] = None,
    offset: int = 0,
    week_start: Optional[int] = None,
    keep_dom: bool = False,
):
    await _count("total")

    try:
        logger.info(
            f"[REQUEST_START] period_kind={period_kind}, offset={offset}"
        )

        if PeriodKind.from_name(period_kind) is None:
            logger.info(f"[UNKNOWN_KIND] period_kind={period_kind}")

        result = range_of_period(
            period_kind,
            to_calendar_date(reference_date),
            offset,
            _options(OptionsPayload(week_start=week_start, keep_dom=keep_dom)),
        )

        await _count("periods")
        return PeriodResponse(
            period_kind=period_kind,
            offset=offset,
            **result.to_data_item(),
        )

    except Exception as e:
        return await _handle_error(e, f"period_kind={period_kind}")


# -----------------------------
# Entrypoint
# -----------------------------
if __name__ == "__main__":
    uvicorn.run("API_LAYER.app:app", host="0.0.0.0", port=PORT, workers=1)

# models/api.py
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


class OptionsPayload(BaseModel):
    week_start: Optional[int] = Field(
        None, description="0 = Sunday ... 6 = Saturday, server default when omitted"
    )
    keep_dom: bool = False


# -----------------------------
# Requests
# -----------------------------
class RangeResolveRequest(BaseModel):
    """
    range_kind is a catalog name (e.g. "LAST_DAYS_30") or an ad-hoc kind:
    {"relation_kind": "PRECEDING", "period_kind": "MONTH", "result_kind": "LATEST_ONLY"}
    """

    range_kind: Union[str, Dict[str, Any]]
    first_date: Optional[str] = None
    last_date: Optional[str] = None
    reference_date: Optional[str] = None
    options: Optional[OptionsPayload] = None


class SelectorResolveRequest(BaseModel):
    selector_kind: Optional[str] = None
    custom_date: Optional[str] = None
    reference_date: Optional[str] = None
    options: Optional[OptionsPayload] = None


# -----------------------------
# Responses
# -----------------------------
class RangeResolveResponse(BaseModel):
    range_kind: Union[str, Dict[str, Any], None]
    range: Optional[Dict[str, str]] = None
    date: Optional[str] = None


class SelectorResolveResponse(BaseModel):
    selector_kind: Optional[str]
    date: Optional[str] = None


class PeriodResponse(BaseModel):
    period_kind: str
    offset: int
    earliest_date: Optional[str] = None
    latest_date: Optional[str] = None


class ErrorDetail(BaseModel):
    type: str
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail

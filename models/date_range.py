# FILE: models/date_range.py
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from core.range_kind import RangeKind
from core.selector_kind import SelectorKind
from services.calendar_date import DateLike, to_calendar_date, to_date_string


# -----------------------------
# Period Options
# -----------------------------
class PeriodOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    week_start: int = Field(
        0, description="Day the week starts on, 0 = Sunday ... 6 = Saturday"
    )
    keep_dom: bool = Field(
        False,
        description=(
            "Keep the day of the month when shifting by months instead of "
            "snapping to period boundaries"
        ),
    )

    @field_validator("week_start", mode="before")
    @classmethod
    def normalize_week_start(cls, v):
        if isinstance(v, bool) or not isinstance(v, int):
            return 0
        return v if 0 <= v <= 6 else 0

    @field_validator("keep_dom", mode="before")
    @classmethod
    def normalize_keep_dom(cls, v):
        return v if isinstance(v, bool) else False

    def with_keep_dom(self) -> "PeriodOptions":
        return self.model_copy(update={"keep_dom": True})

    @classmethod
    def coerce(cls, options: Any) -> "PeriodOptions":
        """Accept None, a mapping, or an existing PeriodOptions."""
        if isinstance(options, cls):
            return options
        if isinstance(options, dict):
            return cls(**options)
        return cls()


# -----------------------------
# Date Range
# -----------------------------
class DateRange(BaseModel):
    """
    Inclusive range of calendar days. Either bound may be None, meaning the
    range is open in that direction.
    """

    model_config = ConfigDict(frozen=True)

    earliest_date: Optional[date] = Field(None, description="Earliest date (inclusive)")
    latest_date: Optional[date] = Field(None, description="Latest date (inclusive)")

    @model_validator(mode="after")
    def check_order(self):
        if (
            self.earliest_date is not None
            and self.latest_date is not None
            and self.earliest_date > self.latest_date
        ):
            raise ValueError(
                f"earliest_date {self.earliest_date} is after latest_date {self.latest_date}"
            )
        return self

    def is_unbounded(self) -> bool:
        return self.earliest_date is None and self.latest_date is None

    def contains(self, value: Optional[date]) -> bool:
        if value is None:
            return False
        if self.earliest_date is not None and value < self.earliest_date:
            return False
        if self.latest_date is not None and value > self.latest_date:
            return False
        return True

    def to_data_item(self) -> Dict[str, str]:
        """String form, absent bounds are omitted."""
        item: Dict[str, str] = {}
        if self.earliest_date is not None:
            item["earliest_date"] = to_date_string(self.earliest_date)
        if self.latest_date is not None:
            item["latest_date"] = to_date_string(self.latest_date)
        return item

    @classmethod
    def from_data_item(cls, item: Optional[Dict[str, Any]]) -> "DateRange":
        if not item:
            return cls()
        return cls(
            earliest_date=to_calendar_date(item.get("earliest_date")),
            latest_date=to_calendar_date(item.get("latest_date")),
        )


# -----------------------------
# Resolution requests
# -----------------------------
@dataclass(frozen=True)
class RangeSpec:
    """
    Request for services.range_resolver.resolve_range.

    first_date / last_date are only used by SPECIFIED range kinds.
    reference_date defaults to today.
    """

    range_kind: Union[RangeKind, str, None]
    first_date: Optional[DateLike] = None
    last_date: Optional[DateLike] = None
    reference_date: Optional[DateLike] = None
    options: Optional[Union[PeriodOptions, Dict[str, Any]]] = None


@dataclass(frozen=True)
class SelectorSpec:
    """
    Request for services.selector_resolver.resolve_selector.
    """

    selector_kind: Union[SelectorKind, str, None]
    custom_date: Optional[DateLike] = None
    reference_date: Optional[DateLike] = None
    options: Optional[Union[PeriodOptions, Dict[str, Any]]] = None

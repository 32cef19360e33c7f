"""
Calendar Date Helpers

- Whole calendar days only, represented by datetime.date (no time, no zone)
- Day of week numbering: 0 = Sunday ... 6 = Saturday
- Month arithmetic pins the day of the month to the end of shorter months
- Dual string/date mode: callers may pass ISO "YYYY-MM-DD" strings, in which
  case results are rendered back to the same string form
"""

from datetime import date, datetime, timedelta
import calendar
import re
from typing import Any, Optional, Union

from dateutil.relativedelta import relativedelta


DateLike = Union[date, str]

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def get_today() -> date:
    """Return today's date (system clock)."""
    return date.today()


# -----------------------------
# Arithmetic
# -----------------------------
def add_days(value: date, days: int) -> date:
    if not days:
        return value
    return value + timedelta(days=days)


def add_months(value: date, months: int) -> date:
    """
    Shift by whole months, keeping the day of the month unless the target
    month is shorter, in which case it is pinned to the last day.
    """
    if not months:
        return value
    return value + relativedelta(months=months)


def day_of_week(value: date) -> int:
    """0 = Sunday, 6 = Saturday."""
    return value.isoweekday() % 7


def last_day_of_month(value: date) -> int:
    return calendar.monthrange(value.year, value.month)[1]


def first_of_month(year: int, month: int) -> date:
    return date(year, month, 1)


def end_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


# -----------------------------
# String <-> date adapter
# -----------------------------
def to_calendar_date(value: Optional[DateLike]) -> Optional[date]:
    """
    Coerce a date or ISO string into a date, None passes through.
    Raises ValueError for malformed strings.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not _DATE_PATTERN.fullmatch(text):
            raise ValueError(f"Expected a YYYY-MM-DD date, got {value!r}")
        return date.fromisoformat(text)
    raise ValueError(f"Unsupported calendar date value: {value!r}")


def to_date_string(value: Optional[DateLike]) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return to_calendar_date(value).isoformat()


def wants_strings(*values: Any) -> bool:
    """True if any supplied date argument is in string form."""
    return any(isinstance(v, str) for v in values)


def render_date(value: Optional[date], as_string: bool) -> Optional[DateLike]:
    if as_string:
        return to_date_string(value)
    return value

"""
Date Selector Resolver

- Produces a single date from a named selector and a reference date
- Reuses the range resolver with the selector's EARLIEST_ONLY / LATEST_ONLY
  result kind
- WORK_WEEK_* results are pulled off the weekend onto the nearest weekday
"""

import logging
from datetime import date
from typing import Any, Optional, Union

from core.selector_kind import SelectorKind
from models.date_range import PeriodOptions, SelectorSpec
from services.calendar_date import (
    DateLike,
    add_days,
    day_of_week,
    get_today,
    render_date,
    to_calendar_date,
    wants_strings,
)
from services.range_resolver import resolve_range_kind
from services.selector_catalog import get_selector_kind

logger = logging.getLogger("selector_resolver")

SUNDAY = 0
SATURDAY = 6


def adjust_to_work_week(value: date) -> date:
    """Sunday moves forward to Monday, Saturday back to Friday."""
    dow = day_of_week(value)
    if dow == SUNDAY:
        return add_days(value, 1)
    if dow == SATURDAY:
        return add_days(value, -1)
    return value


def resolve_selector_kind(
    kind: SelectorKind,
    ref: date,
    options: Optional[PeriodOptions] = None,
    custom: Optional[date] = None,
) -> Optional[date]:
    """Date-typed resolution of a selector kind."""
    if kind.has_custom_date:
        return custom

    result = resolve_range_kind(kind.to_range_kind(), ref, options or PeriodOptions())
    if not isinstance(result, date):
        return None

    if kind.is_work_week:
        result = adjust_to_work_week(result)
    return result


def resolve_selector(spec: Optional[SelectorSpec]) -> Optional[DateLike]:
    """
    Resolve a SelectorSpec to a single date.

    CUSTOM returns spec.custom_date as given. If any date in the spec is a
    string the result is a "YYYY-MM-DD" string. Unknown selectors give None.
    """
    if spec is None:
        return None

    kind = get_selector_kind(spec.selector_kind)
    if kind is None:
        logger.debug(f"Unknown selector kind {spec.selector_kind!r}")
        return None

    if kind.has_custom_date:
        return spec.custom_date

    ref = to_calendar_date(spec.reference_date) or get_today()
    result = resolve_selector_kind(kind, ref, PeriodOptions.coerce(spec.options))
    return render_date(result, wants_strings(spec.reference_date, spec.custom_date))


def resolve_named_selector(
    name: Union[SelectorKind, str],
    reference_date: Optional[DateLike] = None,
    options: Any = None,
) -> Optional[DateLike]:
    return resolve_selector(
        SelectorSpec(selector_kind=name, reference_date=reference_date, options=options)
    )

"""
Period Boundary Resolver

- Computes the earliest / latest day of the period containing a reference date
- offset shifts by whole periods of the same kind (weeks, months, quarters, ...)
- keep_dom turns month based periods into "pseudo-periods" that keep the day
  of the month instead of snapping to calendar boundaries
- Deterministic, never raises for valid dates
"""

import logging
from datetime import date
from typing import Any, Optional, Union

from core.period_kind import PeriodKind
from models.date_range import DateRange, PeriodOptions
from services.calendar_date import (
    DateLike,
    add_days,
    add_months,
    day_of_week,
    end_of_month,
    first_of_month,
    get_today,
    render_date,
    to_calendar_date,
    wants_strings,
)

logger = logging.getLogger("period_resolver")


# ---------------------------------------------------------------------
# Earliest date of a period
# ---------------------------------------------------------------------
def _earliest_week(ref: date, offset: int, options: PeriodOptions) -> date:
    week_start = options.week_start
    if offset:
        ref = add_days(ref, offset * 7)

    delta = week_start - day_of_week(ref)
    if delta > 0:
        delta -= 7
    return add_days(ref, delta)


def _earliest_month(ref: date, offset: int, options: PeriodOptions) -> date:
    if not options.keep_dom:
        ref = first_of_month(ref.year, ref.month)
    return add_months(ref, offset)


def _earliest_multi_month(
    ref: date, offset: int, options: PeriodOptions, width: int
) -> date:
    if options.keep_dom:
        return _earliest_month(ref, offset * width, options)

    month_index = ((ref.month - 1) // width) * width
    ref = first_of_month(ref.year, month_index + 1)
    return add_months(ref, offset * width)


def _earliest_year(ref: date, offset: int, options: PeriodOptions) -> date:
    if options.keep_dom:
        return _earliest_month(ref, offset * 12, options)
    return date(ref.year + offset, 1, 1)


def _earliest(kind: PeriodKind, ref: date, offset: int, options: PeriodOptions) -> date:
    if kind is PeriodKind.DAY:
        return add_days(ref, offset)
    if kind is PeriodKind.WEEK:
        return _earliest_week(ref, offset, options)
    if kind is PeriodKind.MONTH:
        return _earliest_month(ref, offset, options)
    if kind in (PeriodKind.QUARTER, PeriodKind.HALF):
        return _earliest_multi_month(ref, offset, options, kind.months_per_period())
    if kind is PeriodKind.YEAR:
        return _earliest_year(ref, offset, options)
    raise ValueError(f"Unknown period kind {kind!r}")


# ---------------------------------------------------------------------
# Latest date of a period
# ---------------------------------------------------------------------
def _latest_week(ref: date, offset: int, options: PeriodOptions) -> date:
    week_end = (options.week_start + 6) % 7
    if offset:
        ref = add_days(ref, offset * 7)

    delta = week_end - day_of_week(ref)
    if delta < 0:
        delta += 7
    return add_days(ref, delta)


def _latest_month(ref: date, offset: int, options: PeriodOptions) -> date:
    ref = add_months(ref, offset)
    if not options.keep_dom:
        ref = end_of_month(ref.year, ref.month)
    return ref


def _latest_multi_month(
    ref: date, offset: int, options: PeriodOptions, width: int
) -> date:
    if options.keep_dom:
        return _latest_month(ref, offset * width, options)

    ref = add_months(ref, offset * width)
    # Last month of the period, end_of_month recomputes its length.
    month_index = ((ref.month - 1) // width) * width + width - 1
    return end_of_month(ref.year, month_index + 1)


def _latest_year(ref: date, offset: int, options: PeriodOptions) -> date:
    if options.keep_dom:
        return _latest_month(ref, offset * 12, options)
    return date(ref.year + offset, 12, 31)


def _latest(kind: PeriodKind, ref: date, offset: int, options: PeriodOptions) -> date:
    if kind is PeriodKind.DAY:
        return add_days(ref, offset)
    if kind is PeriodKind.WEEK:
        return _latest_week(ref, offset, options)
    if kind is PeriodKind.MONTH:
        return _latest_month(ref, offset, options)
    if kind in (PeriodKind.QUARTER, PeriodKind.HALF):
        return _latest_multi_month(ref, offset, options, kind.months_per_period())
    if kind is PeriodKind.YEAR:
        return _latest_year(ref, offset, options)
    raise ValueError(f"Unknown period kind {kind!r}")


# ---------------------------------------------------------------------
# Date-typed entry points (used by the other resolvers)
# ---------------------------------------------------------------------
def period_earliest(
    kind: PeriodKind, ref: date, offset: int = 0, options: Optional[PeriodOptions] = None
) -> date:
    return _earliest(PeriodKind.from_name(kind), ref, offset or 0, options or PeriodOptions())


def period_latest(
    kind: PeriodKind, ref: date, offset: int = 0, options: Optional[PeriodOptions] = None
) -> date:
    return _latest(PeriodKind.from_name(kind), ref, offset or 0, options or PeriodOptions())


# ---------------------------------------------------------------------
# Public API (date or ISO string in, same form out)
# ---------------------------------------------------------------------
def earliest_of_period(
    kind: Union[PeriodKind, str],
    ref_date: Optional[DateLike] = None,
    offset: int = 0,
    options: Any = None,
) -> Optional[DateLike]:
    """
    Earliest date of the period `offset` periods away from the one
    containing ref_date. Returns ref_date unchanged for an unknown kind.
    """
    period_kind = PeriodKind.from_name(kind)
    if period_kind is None:
        logger.debug(f"Unknown period kind {kind!r}, returning reference date")
        return ref_date

    ref = to_calendar_date(ref_date) or get_today()
    result = period_earliest(period_kind, ref, offset, PeriodOptions.coerce(options))
    return render_date(result, wants_strings(ref_date))


def latest_of_period(
    kind: Union[PeriodKind, str],
    ref_date: Optional[DateLike] = None,
    offset: int = 0,
    options: Any = None,
) -> Optional[DateLike]:
    """
    Latest date of the period `offset` periods away from the one
    containing ref_date. Returns ref_date unchanged for an unknown kind.
    """
    period_kind = PeriodKind.from_name(kind)
    if period_kind is None:
        logger.debug(f"Unknown period kind {kind!r}, returning reference date")
        return ref_date

    ref = to_calendar_date(ref_date) or get_today()
    result = period_latest(period_kind, ref, offset, PeriodOptions.coerce(options))
    return render_date(result, wants_strings(ref_date))


def range_of_period(
    kind: Union[PeriodKind, str],
    ref_date: Optional[DateLike] = None,
    offset: int = 0,
    options: Any = None,
):
    """
    Both bounds of the period as a DateRange, or as a dict of strings when
    ref_date is a string. An unknown kind gives an empty range.
    """
    as_string = wants_strings(ref_date)
    period_kind = PeriodKind.from_name(kind)
    if period_kind is None:
        logger.debug(f"Unknown period kind {kind!r}, returning empty range")
        return {} if as_string else DateRange()

    ref = to_calendar_date(ref_date) or get_today()
    opts = PeriodOptions.coerce(options)
    result = DateRange(
        earliest_date=period_earliest(period_kind, ref, offset, opts),
        latest_date=period_latest(period_kind, ref, offset, opts),
    )
    return result.to_data_item() if as_string else result

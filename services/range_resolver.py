"""
Range Relation Resolver

- Combines a period kind with a relation (current / preceding / following /
  last / next / all / specified) to produce an open or closed DateRange
- result_kind narrows the output to a single bound when requested
- Unresolvable specs degrade to the empty (fully open) range, never an error
"""

import logging
from datetime import date
from typing import Any, Optional, Tuple, Union

from core.range_kind import RangeKind, RelationKind, ResultKind
from models.date_range import DateRange, PeriodOptions, RangeSpec
from services.calendar_date import (
    DateLike,
    get_today,
    render_date,
    to_calendar_date,
    wants_strings,
)
from services.period_resolver import period_earliest, period_latest
from services.range_catalog import get_standard_range_kind

logger = logging.getLogger("range_resolver")

_OFFSETS = {
    RelationKind.CURRENT: 0,
    RelationKind.PRECEDING: -1,
    RelationKind.FOLLOWING: 1,
}


# ---------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------
def _ordered(a: Optional[date], b: Optional[date]) -> Tuple[Optional[date], Optional[date]]:
    if a is not None and b is not None and a > b:
        return b, a
    return a, b


def make_valid_range(
    first_date: Optional[DateLike] = None,
    last_date: Optional[DateLike] = None,
):
    """
    Build a range from two optional dates, swapping them if inverted.
    A missing date leaves that side of the range open.
    """
    earliest, latest = _ordered(
        to_calendar_date(first_date), to_calendar_date(last_date)
    )
    result = DateRange(earliest_date=earliest, latest_date=latest)
    if wants_strings(first_date, last_date):
        return result.to_data_item()
    return result


def is_date_in_range(date_range: Any, value: Optional[DateLike]) -> bool:
    """
    Inclusive membership test. date_range may be a DateRange or its dict
    form; a None value is never in range.
    """
    if isinstance(date_range, DateRange):
        resolved = date_range
    else:
        resolved = DateRange.from_data_item(date_range)
    return resolved.contains(to_calendar_date(value))


def get_range_kind(range_kind: Union[RangeKind, str, None]) -> Optional[RangeKind]:
    """Resolve a catalog name to its entry, pass RangeKind values through."""
    if isinstance(range_kind, RangeKind):
        return range_kind
    if isinstance(range_kind, str):
        return get_standard_range_kind(range_kind)
    return None


# ---------------------------------------------------------------------
# Core resolution (date typed)
# ---------------------------------------------------------------------
def _resolve_bounds(
    kind: RangeKind,
    ref: date,
    options: PeriodOptions,
    first: Optional[date],
    last: Optional[date],
) -> Optional[Tuple[Optional[date], Optional[date]]]:
    """
    (earliest, latest) for the range kind, None when it cannot be resolved.
    """
    relation = kind.relation_kind

    if relation is RelationKind.ALL:
        return None, None

    if relation is RelationKind.SPECIFIED:
        return first, last

    period = kind.period_kind
    if relation.requires_period_kind() and period is None:
        logger.debug(f"Range kind {kind.name or kind} needs a period kind")
        return None

    if relation in _OFFSETS:
        offset = _OFFSETS[relation]
        return (
            period_earliest(period, ref, offset, options),
            period_latest(period, ref, offset, options),
        )

    pseudo = options.with_keep_dom()
    offset = kind.offset or 0

    if relation is RelationKind.LAST:
        latest = period_latest(period, ref, 0, pseudo)
        earliest = period_earliest(period, latest, offset, pseudo)
        return _ordered(earliest, latest)

    # NEXT
    earliest = period_earliest(period, ref, 0, pseudo)
    latest = period_latest(period, earliest, offset, pseudo)
    return _ordered(earliest, latest)


def resolve_range_kind(
    kind: RangeKind,
    ref: date,
    options: Optional[PeriodOptions] = None,
    first: Optional[date] = None,
    last: Optional[date] = None,
) -> Union[DateRange, date, None]:
    """
    Date-typed resolution. Returns a DateRange for RANGE results and a
    single date (or None) for EARLIEST_ONLY / LATEST_ONLY.
    """
    options = options or PeriodOptions()
    result_kind = kind.result_kind or ResultKind.RANGE
    single = result_kind.is_single_date()

    if kind.relation_kind is None:
        logger.debug(f"Range kind {kind.name or kind} has no known relation kind")
        return None if single else DateRange()

    if kind.relation_kind is RelationKind.SPECIFIED and single:
        # Explicit fields are returned as given.
        return first if result_kind is ResultKind.EARLIEST_ONLY else last

    bounds = _resolve_bounds(kind, ref, options, first, last)
    if bounds is None:
        return None if single else DateRange()

    earliest, latest = bounds
    if kind.relation_kind is RelationKind.SPECIFIED:
        earliest, latest = _ordered(earliest, latest)

    if result_kind is ResultKind.EARLIEST_ONLY:
        return earliest
    if result_kind is ResultKind.LATEST_ONLY:
        return latest
    return DateRange(earliest_date=earliest, latest_date=latest)


# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------
def resolve_range(spec: Optional[RangeSpec]):
    """
    Resolve a RangeSpec.

    Returns a DateRange (or a date for single-bound result kinds). If any
    date in the spec is a string the result is rendered as strings: a dict
    with "earliest_date" / "latest_date" keys, or a single "YYYY-MM-DD".
    Unknown range kinds give the empty range.
    """
    if spec is None:
        return DateRange()

    as_string = wants_strings(spec.reference_date, spec.first_date, spec.last_date)
    kind = get_range_kind(spec.range_kind)
    if kind is None:
        logger.debug(f"Unknown range kind {spec.range_kind!r}, returning empty range")
        return {} if as_string else DateRange()

    ref = to_calendar_date(spec.reference_date) or get_today()
    result = resolve_range_kind(
        kind,
        ref,
        PeriodOptions.coerce(spec.options),
        to_calendar_date(spec.first_date),
        to_calendar_date(spec.last_date),
    )

    if isinstance(result, DateRange):
        return result.to_data_item() if as_string else result
    return render_date(result, as_string)


def resolve_named_range(
    name: Union[RangeKind, str],
    reference_date: Optional[DateLike] = None,
    options: Any = None,
):
    """Shorthand for resolve_range with only a range kind and reference date."""
    return resolve_range(
        RangeSpec(range_kind=name, reference_date=reference_date, options=options)
    )


"""
Date Selector Catalog

Named single-date selectors (TODAY, WEEK_START, PRECEDING_QUARTER_END, ...).
Built once at import, looked up by exact name.
"""

from typing import Dict, List, Optional, Tuple

from core.period_kind import PeriodKind
from core.range_kind import RelationKind, ResultKind
from core.selector_kind import SelectorKind

_EARLIEST = ResultKind.EARLIEST_ONLY
_LATEST = ResultKind.LATEST_ONLY


SELECTOR_KINDS: Tuple[SelectorKind, ...] = (
    SelectorKind("TODAY", RelationKind.CURRENT, PeriodKind.DAY, _EARLIEST),
    SelectorKind(
        "CUSTOM", RelationKind.SPECIFIED, None, _EARLIEST, has_custom_date=True
    ),
    SelectorKind("WEEK_START", RelationKind.CURRENT, PeriodKind.WEEK, _EARLIEST, is_past=True),
    SelectorKind("WEEK_END", RelationKind.CURRENT, PeriodKind.WEEK, _LATEST, is_future=True),
    SelectorKind(
        "WORK_WEEK_START",
        RelationKind.CURRENT,
        PeriodKind.WEEK,
        _EARLIEST,
        is_work_week=True,
        is_past=True,
    ),
    SelectorKind(
        "WORK_WEEK_END",
        RelationKind.CURRENT,
        PeriodKind.WEEK,
        _LATEST,
        is_work_week=True,
        is_future=True,
    ),
    SelectorKind("MONTH_START", RelationKind.CURRENT, PeriodKind.MONTH, _EARLIEST, is_past=True),
    SelectorKind("MONTH_END", RelationKind.CURRENT, PeriodKind.MONTH, _LATEST, is_future=True),
    SelectorKind("QUARTER_START", RelationKind.CURRENT, PeriodKind.QUARTER, _EARLIEST, is_past=True),
    SelectorKind("QUARTER_END", RelationKind.CURRENT, PeriodKind.QUARTER, _LATEST, is_future=True),
    SelectorKind("HALF_START", RelationKind.CURRENT, PeriodKind.HALF, _EARLIEST, is_past=True),
    SelectorKind("HALF_END", RelationKind.CURRENT, PeriodKind.HALF, _LATEST, is_future=True),
    SelectorKind("YEAR_START", RelationKind.CURRENT, PeriodKind.YEAR, _EARLIEST, is_past=True),
    SelectorKind("YEAR_END", RelationKind.CURRENT, PeriodKind.YEAR, _LATEST, is_future=True),
    SelectorKind("PRECEDING_MONTH_END", RelationKind.PRECEDING, PeriodKind.MONTH, _LATEST, is_past=True),
    SelectorKind("PRECEDING_QUARTER_END", RelationKind.PRECEDING, PeriodKind.QUARTER, _LATEST, is_past=True),
    SelectorKind("PRECEDING_HALF_END", RelationKind.PRECEDING, PeriodKind.HALF, _LATEST, is_past=True),
    SelectorKind("PRECEDING_YEAR_END", RelationKind.PRECEDING, PeriodKind.YEAR, _LATEST, is_past=True),
)

_BY_NAME: Dict[str, SelectorKind] = {k.name: k for k in SELECTOR_KINDS}

CUSTOM = _BY_NAME["CUSTOM"]


def get_selector_kind(name) -> Optional[SelectorKind]:
    """Catalog entry by name or by entry, None when not found."""
    if isinstance(name, SelectorKind):
        name = name.name
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name)


def selector_kind_names() -> List[str]:
    return [k.name for k in SELECTOR_KINDS]


def selector_choices(
    *, exclude_future: bool = False, exclude_past: bool = False
) -> List[Dict[str, object]]:
    choices = []
    for kind in SELECTOR_KINDS:
        if exclude_future and kind.is_future:
            continue
        if exclude_past and kind.is_past:
            continue
        choices.append(
            {
                "name": kind.name,
                "has_custom_date": kind.has_custom_date,
                "is_work_week": kind.is_work_week,
                "is_future": kind.is_future,
                "is_past": kind.is_past,
            }
        )
    return choices

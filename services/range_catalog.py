"""
Standard Range Catalog

- Fixed table of named range kinds (CURRENT_MONTH, LAST_DAYS_30, ...)
- Built once at import, never mutated
- Lookup is by exact (case-sensitive) name; unknown names give None

NOTE: the *_WEEKS_n entries are DAY based (14 / 28 / 56 day windows), not
calendar-week aligned. Keep the offsets exactly as listed.
"""

from typing import Dict, List, Optional, Tuple

from core.period_kind import PeriodKind
from core.range_kind import RelationKind, StandardRangeKind


def _entry(
    name: str,
    relation_kind: RelationKind,
    period_kind: Optional[PeriodKind] = None,
    offset: Optional[int] = None,
) -> StandardRangeKind:
    return StandardRangeKind(
        name=name,
        relation_kind=relation_kind,
        period_kind=period_kind,
        offset=offset,
    )


# -----------------------------
# Calendar aligned periods
# -----------------------------
_CALENDAR_PERIODS = (
    PeriodKind.WEEK,
    PeriodKind.MONTH,
    PeriodKind.QUARTER,
    PeriodKind.HALF,
    PeriodKind.YEAR,
)

_CALENDAR_RELATIONS = (
    RelationKind.CURRENT,
    RelationKind.PRECEDING,
    RelationKind.FOLLOWING,
)

# -----------------------------
# Pseudo periods: (suffix, period kind, magnitude of offset)
# -----------------------------
_PSEUDO_PERIODS: Tuple[Tuple[str, PeriodKind, int], ...] = (
    ("DAYS_7", PeriodKind.DAY, 6),
    ("DAYS_30", PeriodKind.DAY, 29),
    ("DAYS_60", PeriodKind.DAY, 59),
    ("DAYS_90", PeriodKind.DAY, 89),
    ("DAYS_180", PeriodKind.DAY, 179),
    ("WEEKS_2", PeriodKind.DAY, 13),
    ("WEEKS_4", PeriodKind.DAY, 27),
    ("WEEKS_8", PeriodKind.DAY, 55),
    ("MONTHS_3", PeriodKind.MONTH, 3),
    ("MONTHS_6", PeriodKind.MONTH, 6),
    ("MONTHS_9", PeriodKind.MONTH, 9),
    ("MONTHS_12", PeriodKind.MONTH, 12),
    ("YEARS_1", PeriodKind.YEAR, 1),
    ("YEARS_2", PeriodKind.YEAR, 2),
    ("YEARS_3", PeriodKind.YEAR, 3),
    ("YEARS_5", PeriodKind.YEAR, 5),
    ("YEARS_10", PeriodKind.YEAR, 10),
)


def _build_catalog() -> Tuple[StandardRangeKind, ...]:
    entries: List[StandardRangeKind] = [
        _entry("ALL", RelationKind.ALL),
        _entry("CUSTOM", RelationKind.SPECIFIED),
    ]

    for relation in _CALENDAR_RELATIONS:
        for period in _CALENDAR_PERIODS:
            entries.append(_entry(f"{relation.value}_{period.value}", relation, period))

    for suffix, period, magnitude in _PSEUDO_PERIODS:
        entries.append(_entry(f"LAST_{suffix}", RelationKind.LAST, period, -magnitude))
    for suffix, period, magnitude in _PSEUDO_PERIODS:
        entries.append(_entry(f"NEXT_{suffix}", RelationKind.NEXT, period, magnitude))

    return tuple(entries)


STANDARD_RANGE_KINDS: Tuple[StandardRangeKind, ...] = _build_catalog()

_BY_NAME: Dict[str, StandardRangeKind] = {k.name: k for k in STANDARD_RANGE_KINDS}


# -----------------------------
# Lookup
# -----------------------------
def get_standard_range_kind(name) -> Optional[StandardRangeKind]:
    """
    Catalog entry for a name, or for an entry (or copy of one) carrying a
    catalog name. None when not found.
    """
    if isinstance(name, StandardRangeKind):
        name = name.name
    if not isinstance(name, str):
        return None
    return _BY_NAME.get(name)


def standard_range_kinds() -> Tuple[StandardRangeKind, ...]:
    return STANDARD_RANGE_KINDS


def standard_range_kind_names() -> List[str]:
    return [k.name for k in STANDARD_RANGE_KINDS]


def range_choices(
    *, exclude_future: bool = False, exclude_past: bool = False
) -> List[Dict[str, object]]:
    """
    Items for a range picker, in catalog order. Future looking relations
    (FOLLOWING / NEXT) and past looking ones (PRECEDING / LAST) can be left out.
    """
    choices = []
    for kind in STANDARD_RANGE_KINDS:
        relation = kind.relation_kind
        if exclude_future and relation.is_future():
            continue
        if exclude_past and relation.is_past():
            continue
        choices.append(
            {
                "name": kind.name,
                "relation_kind": relation.value,
                "period_kind": kind.period_kind.value if kind.period_kind else None,
                "offset": kind.offset,
                "is_future": relation.is_future(),
                "is_past": relation.is_past(),
            }
        )
    return choices

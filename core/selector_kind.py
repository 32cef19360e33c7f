# core/selector_kind.py
from dataclasses import dataclass
from typing import Optional

from core.period_kind import PeriodKind
from core.range_kind import RangeKind, RelationKind, ResultKind


@dataclass(frozen=True)
class SelectorKind:
    """
    A named rule producing a single date from a reference date.

    Every selector except CUSTOM is backed by a range kind narrowed to
    EARLIEST_ONLY or LATEST_ONLY.
    """

    name: str
    relation_kind: RelationKind
    period_kind: Optional[PeriodKind] = None
    result_kind: ResultKind = ResultKind.EARLIEST_ONLY
    has_custom_date: bool = False
    is_work_week: bool = False
    is_future: bool = False
    is_past: bool = False

    def to_range_kind(self) -> RangeKind:
        return RangeKind(
            relation_kind=self.relation_kind,
            period_kind=self.period_kind,
            result_kind=self.result_kind,
            name=self.name,
        )

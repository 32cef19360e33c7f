# core/range_kind.py
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.period_kind import PeriodKind


class RelationKind(str, Enum):
    """
    How a range relates to the reference date.

    CURRENT     the period containing the reference date
    PRECEDING   the period before it (reference date excluded)
    FOLLOWING   the period after it (reference date excluded)
    LAST        pseudo-periods ending on the reference date (included)
    NEXT        pseudo-periods starting on the reference date (included)
    ALL         unbounded
    SPECIFIED   explicit first/last dates
    """

    CURRENT = "CURRENT"
    PRECEDING = "PRECEDING"
    FOLLOWING = "FOLLOWING"
    LAST = "LAST"
    NEXT = "NEXT"
    ALL = "ALL"
    SPECIFIED = "SPECIFIED"

    @classmethod
    def from_name(cls, name) -> Optional["RelationKind"]:
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            return cls.__members__.get(name)
        return None

    def requires_period_kind(self) -> bool:
        return self not in {RelationKind.ALL, RelationKind.SPECIFIED}

    def is_past(self) -> bool:
        return self in {RelationKind.PRECEDING, RelationKind.LAST}

    def is_future(self) -> bool:
        return self in {RelationKind.FOLLOWING, RelationKind.NEXT}


class ResultKind(str, Enum):
    """
    Shape of a resolution's output.
    """

    RANGE = "RANGE"
    EARLIEST_ONLY = "EARLIEST_ONLY"
    LATEST_ONLY = "LATEST_ONLY"

    @classmethod
    def from_name(cls, name) -> Optional["ResultKind"]:
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            return cls.__members__.get(name)
        return None

    def is_single_date(self) -> bool:
        return self is not ResultKind.RANGE


# ---------------------------------------------------------------------
# Range kinds
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class RangeKind:
    """
    A pure description of a range, independent of any reference date.

    offset is only used by LAST (negative) and NEXT (positive), where it
    counts day/month/year pseudo-periods.
    """

    relation_kind: RelationKind
    period_kind: Optional[PeriodKind] = None
    result_kind: ResultKind = ResultKind.RANGE
    offset: Optional[int] = None
    name: Optional[str] = None

    def __post_init__(self):
        # Names are accepted wherever a kind is expected; unknown names become None.
        object.__setattr__(self, "relation_kind", RelationKind.from_name(self.relation_kind))
        object.__setattr__(self, "period_kind", PeriodKind.from_name(self.period_kind))
        object.__setattr__(
            self, "result_kind", ResultKind.from_name(self.result_kind) or ResultKind.RANGE
        )

    def with_result_kind(self, result_kind: ResultKind) -> "RangeKind":
        return RangeKind(
            relation_kind=self.relation_kind,
            period_kind=self.period_kind,
            result_kind=result_kind,
            offset=self.offset,
            name=self.name,
        )


@dataclass(frozen=True)
class StandardRangeKind(RangeKind):
    """
    A named catalog entry, see services/range_catalog.py.
    """

    def __post_init__(self):
        super().__post_init__()
        if not self.name:
            raise ValueError("StandardRangeKind requires a name")

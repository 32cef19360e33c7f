# core/period_kind.py
from enum import Enum
from typing import Optional


class PeriodKind(str, Enum):
    """
    Calendar period granularities.

    With the exception of DAY these are the usual accounting periods.
    The boundary arithmetic lives in services/period_resolver.py.
    """

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    QUARTER = "QUARTER"
    HALF = "HALF"
    YEAR = "YEAR"

    # -----------------------------
    # Semantic helpers (SAFE)
    # -----------------------------
    @classmethod
    def from_name(cls, name) -> Optional["PeriodKind"]:
        """Case-sensitive lookup, None for anything unknown."""
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            return cls.__members__.get(name)
        return None

    def months_per_period(self) -> int:
        return _MONTHS_PER_PERIOD[self]


_MONTHS_PER_PERIOD = {
    PeriodKind.DAY: 0,
    PeriodKind.WEEK: 0,
    PeriodKind.MONTH: 1,
    PeriodKind.QUARTER: 3,
    PeriodKind.HALF: 6,
    PeriodKind.YEAR: 12,
}

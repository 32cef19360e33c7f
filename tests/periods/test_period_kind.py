import pytest

from core.period_kind import PeriodKind
from core.range_kind import RelationKind, ResultKind


@pytest.mark.parametrize(
    "kind, months",
    [
        (PeriodKind.DAY, 0),
        (PeriodKind.WEEK, 0),
        (PeriodKind.MONTH, 1),
        (PeriodKind.QUARTER, 3),
        (PeriodKind.HALF, 6),
        (PeriodKind.YEAR, 12),
    ],
)
def test_months_per_period(kind, months):
    assert kind.months_per_period() == months


def test_from_name_is_case_sensitive():
    assert PeriodKind.from_name("QUARTER") is PeriodKind.QUARTER
    assert PeriodKind.from_name(PeriodKind.HALF) is PeriodKind.HALF
    assert PeriodKind.from_name("quarter") is None
    assert PeriodKind.from_name(3) is None


def test_relation_kind_helpers():
    assert not RelationKind.ALL.requires_period_kind()
    assert not RelationKind.SPECIFIED.requires_period_kind()
    assert RelationKind.LAST.requires_period_kind()

    assert {r for r in RelationKind if r.is_past()} == {RelationKind.PRECEDING, RelationKind.LAST}
    assert {r for r in RelationKind if r.is_future()} == {RelationKind.FOLLOWING, RelationKind.NEXT}


def test_result_kind_helpers():
    assert ResultKind.from_name("LATEST_ONLY") is ResultKind.LATEST_ONLY
    assert ResultKind.from_name("LATEST") is None
    assert not ResultKind.RANGE.is_single_date()
    assert ResultKind.EARLIEST_ONLY.is_single_date()

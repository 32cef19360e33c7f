from datetime import date

import pytest

from models.date_range import SelectorSpec
from services.selector_catalog import (
    SELECTOR_KINDS,
    get_selector_kind,
    selector_choices,
    selector_kind_names,
)
from services.selector_resolver import (
    adjust_to_work_week,
    resolve_named_selector,
    resolve_selector,
)


def select(name, ref, **kwargs):
    return resolve_selector(SelectorSpec(selector_kind=name, reference_date=ref, **kwargs))


# ---------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------
def test_selector_catalog():
    today = get_selector_kind("TODAY")
    assert len(SELECTOR_KINDS) == 18
    assert selector_kind_names()[:2] == ["TODAY", "CUSTOM"]
    assert get_selector_kind(today) is today
    assert get_selector_kind("today") is None
    assert get_selector_kind(None) is None


def test_selector_choices_filters_future_and_past():
    no_future = [c["name"] for c in selector_choices(exclude_future=True)]
    assert "MONTH_END" not in no_future
    assert "PRECEDING_MONTH_END" in no_future

    neither = [c["name"] for c in selector_choices(exclude_future=True, exclude_past=True)]
    assert neither == ["TODAY", "CUSTOM"]


# ---------------------------------------------------------------------
# TODAY / CUSTOM
# ---------------------------------------------------------------------
def test_today_returns_reference_date_in_its_own_form():
    assert select("TODAY", "2021-07-17") == "2021-07-17"
    assert select(get_selector_kind("TODAY"), date(2021, 7, 17)) == date(2021, 7, 17)


def test_custom_returns_custom_date_verbatim():
    assert select("CUSTOM", "2021-07-17", custom_date="2021-01-02") == "2021-01-02"
    assert select("CUSTOM", None, custom_date=date(2021, 1, 2)) == date(2021, 1, 2)
    assert select("CUSTOM", "2021-07-17") is None


# ---------------------------------------------------------------------
# Period selectors
# ---------------------------------------------------------------------
@pytest.mark.parametrize(
    "name, ref, expected",
    [
        ("WEEK_START", "2021-07-17", "2021-07-11"),
        ("WEEK_START", "2021-07-11", "2021-07-11"),
        ("WEEK_END", "2021-07-11", "2021-07-17"),
        ("MONTH_START", "2021-07-31", "2021-07-01"),
        ("MONTH_END", "2021-02-17", "2021-02-28"),
        ("MONTH_END", "2020-02-28", "2020-02-29"),
        ("QUARTER_START", "2021-06-30", "2021-04-01"),
        ("QUARTER_END", "2021-07-01", "2021-09-30"),
        ("HALF_START", "2021-12-31", "2021-07-01"),
        ("HALF_END", "2021-01-01", "2021-06-30"),
        ("YEAR_START", "2021-12-31", "2021-01-01"),
        ("YEAR_END", "2021-01-01", "2021-12-31"),
        ("PRECEDING_MONTH_END", "2021-03-01", "2021-02-28"),
        ("PRECEDING_MONTH_END", "2021-03-31", "2021-02-28"),
        ("PRECEDING_MONTH_END", "2020-03-01", "2020-02-29"),
        ("PRECEDING_QUARTER_END", "2021-03-31", "2020-12-31"),
        ("PRECEDING_QUARTER_END", "2021-10-01", "2021-09-30"),
        ("PRECEDING_HALF_END", "2021-06-30", "2020-12-31"),
        ("PRECEDING_YEAR_END", "2021-12-31", "2020-12-31"),
    ],
)
def test_period_selectors(name, ref, expected):
    assert select(name, ref) == expected


def test_week_selectors_honour_week_start():
    options = {"week_start": 2}
    assert select("WEEK_START", "2021-07-17", options=options) == "2021-07-13"
    assert select("WEEK_END", "2021-07-17", options=options) == "2021-07-19"


# ---------------------------------------------------------------------
# Work week
# ---------------------------------------------------------------------
@pytest.mark.parametrize("ref", ["2021-07-11", "2021-07-12", "2021-07-16", "2021-07-17"])
def test_work_week_selectors_land_on_weekdays(ref):
    assert select("WORK_WEEK_START", ref) == "2021-07-12"
    assert select("WORK_WEEK_END", ref) == "2021-07-16"


def test_adjust_to_work_week():
    assert adjust_to_work_week(date(2021, 7, 11)) == date(2021, 7, 12)
    assert adjust_to_work_week(date(2021, 7, 17)) == date(2021, 7, 16)
    assert adjust_to_work_week(date(2021, 7, 14)) == date(2021, 7, 14)


def test_work_week_rule_uses_absolute_weekend_days():
    # Monday start: week is Mon 12th .. Sun 18th, a Sunday end moves forward
    options = {"week_start": 1}
    assert select("WORK_WEEK_START", "2021-07-14", options=options) == "2021-07-12"
    assert select("WORK_WEEK_END", "2021-07-14", options=options) == "2021-07-19"


# ---------------------------------------------------------------------
# Degradation and defaults
# ---------------------------------------------------------------------
def test_unknown_or_missing_selector_gives_none():
    assert resolve_selector(None) is None
    assert select("FORTNIGHT_START", "2021-07-14") is None
    assert select(None, "2021-07-14") is None


def test_reference_date_defaults_to_today(fixed_today):
    assert resolve_named_selector("TODAY") == fixed_today
    assert resolve_named_selector("MONTH_END") == date(2021, 7, 31)
    assert resolve_named_selector("YEAR_START", "2021-07-14") == "2021-01-01"

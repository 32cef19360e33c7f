# services/serialization.py
"""
Plain-dict forms of range and selector specs, for storing user choices
(e.g. a report's date filter) in JSON config.

- Catalog entries are stored by name, ad-hoc range kinds as a nested dict
- Dates are stored as "YYYY-MM-DD"
- Absent values are omitted
"""

from typing import Any, Dict, Optional, Union

from core.period_kind import PeriodKind
from core.range_kind import RangeKind, RelationKind, ResultKind
from core.selector_kind import SelectorKind
from models.date_range import RangeSpec, SelectorSpec
from services.calendar_date import to_calendar_date, to_date_string
from services.range_catalog import get_standard_range_kind
from services.selector_catalog import CUSTOM, get_selector_kind


# -----------------------------
# Range kinds
# -----------------------------
def range_kind_to_data_item(
    kind: Union[RangeKind, str, None],
) -> Union[str, Dict[str, Any], None]:
    if kind is None or isinstance(kind, str):
        return kind

    if kind.name and get_standard_range_kind(kind.name) == kind:
        return kind.name

    if kind.relation_kind is None:
        return None

    item: Dict[str, Any] = {"relation_kind": kind.relation_kind.value}
    if kind.period_kind is not None:
        item["period_kind"] = kind.period_kind.value
    if kind.result_kind is not ResultKind.RANGE:
        item["result_kind"] = kind.result_kind.value
    if kind.offset is not None:
        item["offset"] = kind.offset
    if kind.name:
        item["name"] = kind.name
    return item


def range_kind_from_data_item(item: Any) -> Union[RangeKind, str, None]:
    """
    Names are kept as names (resolved at resolution time), dicts become
    RangeKind values. Anything unrecognised gives None.
    """
    if item is None or isinstance(item, (RangeKind, str)):
        return item
    if not isinstance(item, dict):
        return None

    relation = RelationKind.from_name(item.get("relation_kind"))
    if relation is None:
        return None

    offset = item.get("offset")
    return RangeKind(
        relation_kind=relation,
        period_kind=PeriodKind.from_name(item.get("period_kind")),
        result_kind=ResultKind.from_name(item.get("result_kind")) or ResultKind.RANGE,
        offset=offset if isinstance(offset, int) else None,
        name=item.get("name"),
    )


# -----------------------------
# Range specs
# -----------------------------
def range_spec_to_data_item(spec: Optional[RangeSpec]) -> Optional[Dict[str, Any]]:
    if spec is None:
        return None

    item: Dict[str, Any] = {}
    range_kind = range_kind_to_data_item(spec.range_kind)
    if range_kind is not None:
        item["range_kind"] = range_kind
    first = to_date_string(spec.first_date)
    if first:
        item["first_date"] = first
    last = to_date_string(spec.last_date)
    if last:
        item["last_date"] = last
    return item


def range_spec_from_data_item(item: Optional[Dict[str, Any]]) -> Optional[RangeSpec]:
    if item is None:
        return None
    return RangeSpec(
        range_kind=range_kind_from_data_item(item.get("range_kind")),
        first_date=to_calendar_date(item.get("first_date")),
        last_date=to_calendar_date(item.get("last_date")),
    )


# -----------------------------
# Selector specs
# -----------------------------
def selector_spec_to_data_item(spec: Optional[SelectorSpec]) -> Optional[Dict[str, Any]]:
    if spec is None:
        return None

    item: Dict[str, Any] = {}
    kind = spec.selector_kind
    if isinstance(kind, SelectorKind):
        kind = kind.name
    if kind is not None:
        item["selector_kind"] = kind
    custom = to_date_string(spec.custom_date)
    if custom:
        item["custom_date"] = custom
    return item


def selector_spec_from_data_item(item: Optional[Dict[str, Any]]) -> Optional[SelectorSpec]:
    if item is None:
        return None

    name = item.get("selector_kind")
    kind = get_selector_kind(name)
    custom = to_calendar_date(item.get("custom_date"))
    if kind is None and name is None and custom is not None:
        # A bare custom date implies the CUSTOM selector.
        kind = CUSTOM
    return SelectorSpec(
        selector_kind=kind if kind is not None else name,
        custom_date=custom,
    )

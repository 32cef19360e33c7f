from dataclasses import asdict, is_dataclass
from datetime import date
from enum import Enum
from typing import Any


def deep_serialize(obj: Any) -> Any:
    """
    Recursively convert objects to JSON-safe primitives.
    Dates become "YYYY-MM-DD", enums their value.
    """
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, date):
        return obj.isoformat()
    if hasattr(obj, "model_dump"):
        return deep_serialize(obj.model_dump(exclude_none=True))
    if is_dataclass(obj) and not isinstance(obj, type):
        return deep_serialize(asdict(obj))
    if isinstance(obj, dict):
        return {k: deep_serialize(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [deep_serialize(v) for v in obj]
    if isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)

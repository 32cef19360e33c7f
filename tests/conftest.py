# tests/conftest.py
import sys
from pathlib import Path

# ---------------------------------------------------------
# Ensure project root is on PYTHONPATH BEFORE app imports
# ---------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from datetime import date


@pytest.fixture
def fixed_today(monkeypatch):
    """
    Pin "today" for every resolver that defaults its reference date.
    Returns the pinned date.
    """
    today = date(2021, 7, 14)
    for target in (
        "services.period_resolver.get_today",
        "services.range_resolver.get_today",
        "services.selector_resolver.get_today",
    ):
        monkeypatch.setattr(target, lambda: today)
    return today

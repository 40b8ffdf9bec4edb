"""
Shared test fixtures for the date picker test suite.

"Today" is pinned to Monday 2024-04-15 so month grids, shortcuts and the
reverse sync are deterministic.
"""

from datetime import date

import pytest

from datepicker.core.calendar_state import CalendarState
from datepicker.core.synchronizer import DatePicker

FIXED_TODAY = date(2024, 4, 15)


def fixed_clock() -> date:
    return FIXED_TODAY


@pytest.fixture
def clock():
    return fixed_clock


@pytest.fixture
def state() -> CalendarState:
    """Calendar state viewing April 2024 with nothing selected."""
    return CalendarState(viewing=date(2024, 4, 1), clock=fixed_clock)


@pytest.fixture
def picker(state) -> DatePicker:
    """Picker viewing April 2024 with nothing selected."""
    return DatePicker(state=state, clock=fixed_clock)


@pytest.fixture
def today() -> date:
    return FIXED_TODAY

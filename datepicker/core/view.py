"""
Picker view payload.

Describes everything a client needs to draw the picker: the input text,
the month header, the weekday header and the day grid with per-cell flags.
The client renders it; no layout decisions are made here.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field

from datepicker.core.synchronizer import DatePicker

PLACEHOLDER = "Select a Date"

# Fixed English names: the picker is not locale-aware
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


# --- View Models ---


class DayCell(BaseModel):
    """One day in the month grid."""

    date: date
    label: str = Field(..., description="Two-digit day of month")
    in_range: bool = Field(..., description="Day belongs to the viewed month")
    selected: bool
    today: bool


class PickerView(BaseModel):
    """Full picker snapshot returned to the client."""

    input_value: str
    placeholder: str = PLACEHOLDER
    viewing: date
    month_label: str
    weekdays: list[str]
    weeks: list[list[DayCell]]
    selected: list[date]


# --- View Builders ---


def month_label(day: date) -> str:
    """Format the grid header, e.g. "April 2024"."""
    return f"{MONTH_NAMES[day.month - 1]} {day.year}"


def weekday_labels(first_weekday: int) -> list[str]:
    """Weekday header names starting from `first_weekday` (0 = Monday)."""
    return [WEEKDAY_NAMES[(first_weekday + i) % 7] for i in range(7)]


def build_picker_view(picker: DatePicker) -> dict[str, Any]:
    """Build the JSON-ready view of a picker.

    Args:
        picker: The picker to describe.

    Returns:
        A dict matching the PickerView model, with dates as ISO strings.
    """
    state = picker.state
    start, end = state.start_of_month(), state.end_of_month()

    weeks = [
        [
            DayCell(
                date=day,
                label=f"{day.day:02d}",
                in_range=state.in_range(day, start, end),
                selected=state.is_selected(day),
                today=state.is_today(day),
            )
            for day in week
        ]
        for week in state.calendar
    ]

    view = PickerView(
        input_value=picker.input_value,
        viewing=state.viewing,
        month_label=month_label(state.viewing),
        weekdays=weekday_labels(state.first_weekday),
        weeks=weeks,
        selected=list(state.selected),
    )
    return view.model_dump(mode="json")

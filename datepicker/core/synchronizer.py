"""
Date picker controller: keeps the input text, the selected date and the
viewed month consistent.

Two directions:
- Commit (input loses focus): text -> normalize -> parse -> selection.
- Selection changed (commit, cell click, shortcut): selection -> text and
  viewed month, via `sync_from_selection`.

Every handler that changes the selection calls `sync_from_selection`
itself once the mutation is done; there are no observers.
"""

import logging
from collections.abc import Callable
from datetime import date, timedelta

from datepicker.core.calendar_state import (
    DEFAULT_FIRST_WEEKDAY,
    CalendarState,
    clear_time,
)
from datepicker.core.normalizer import normalize_date_text
from datepicker.core.parser import InvalidDateError, format_date, parse_date_text
from datepicker.core.sanitizer import sanitize_input

logger = logging.getLogger(__name__)


def sync_from_selection(state: CalendarState, today: date) -> str:
    """Retarget the viewed month to the selection and return the new input text.

    Args:
        state: The calendar state whose selection just changed.
        today: Where to point the viewed month when nothing is selected.

    Returns:
        The canonical text of the first selected date, or "".
    """
    if state.selected:
        first = state.selected[0]
        state.set_viewing(first)
        return format_date(first)

    state.set_viewing(today)
    return ""


class DatePicker:
    """A single-date picker: one text input bound to a calendar state.

    Args:
        state: Calendar state to drive. A fresh one is created if omitted.
        clock: Returns "today". Injected so tests can pin the date.
    """

    def __init__(
        self,
        state: CalendarState | None = None,
        clock: Callable[[], date] = date.today,
        first_weekday: int = DEFAULT_FIRST_WEEKDAY,
    ):
        self._clock = clock
        self.state = state or CalendarState(first_weekday=first_weekday, clock=clock)
        self.input_value = ""

    @property
    def selected_date(self) -> date | None:
        return self.state.selected[0] if self.state.selected else None

    # -----------------------------------------------------------------
    # Input field events
    # -----------------------------------------------------------------

    def on_input_change(self, raw: str) -> str:
        """Store the sanitized keystroke text. No parsing happens here."""
        self.input_value = sanitize_input(raw)
        return self.input_value

    def commit(self) -> date | None:
        """Resolve the typed text into a selection (input lost focus).

        Empty text clears the selection. Text that can't be resolved to a
        real date is reverted to the current selection (or emptied); the
        failure is never raised.

        Returns:
            The selected date after the commit, or None.
        """
        text = sanitize_input(self.input_value)

        if text == "":
            self.state.clear_selected()
            self._selection_changed()
            return None

        normalized = normalize_date_text(text, self.state.viewing)
        try:
            parsed = parse_date_text(normalized)
        except InvalidDateError as e:
            logger.debug("Rejected input %r (normalized %r): %s", text, normalized, e.message)
            current = self.selected_date
            self.input_value = format_date(current) if current else ""
            return current

        self.state.select(parsed, replace=True)
        self._selection_changed()
        return parsed

    # -----------------------------------------------------------------
    # Calendar events
    # -----------------------------------------------------------------

    def activate_cell(self, day: date) -> date | None:
        """Toggle a day cell in replace mode."""
        self.state.toggle(clear_time(day), replace=True)
        self._selection_changed()
        return self.selected_date

    def select_today(self) -> date:
        today = clear_time(self._clock())
        self.state.select(today, replace=True)
        self._selection_changed()
        return today

    def select_tomorrow(self) -> date:
        """Select the day after today (today itself on date.max)."""
        today = clear_time(self._clock())
        tomorrow = today + timedelta(days=1) if today < date.max else today
        self.state.select(tomorrow, replace=True)
        self._selection_changed()
        return tomorrow

    def view_next_month(self) -> None:
        self.state.view_next_month()

    def view_previous_month(self) -> None:
        self.state.view_previous_month()

    def view_today(self) -> None:
        self.state.view_today()

    # -----------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------

    def _selection_changed(self) -> None:
        self.input_value = sync_from_selection(self.state, clear_time(self._clock()))

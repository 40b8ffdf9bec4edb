"""
Calendar state for a single picker.

Owns the viewed month and the selected dates, and derives the month grid
shown under the input field. The grid always spans whole weeks, so it
starts and ends with days from the neighbouring months.
"""

import calendar
from collections.abc import Callable
from datetime import date, datetime

from dateutil.relativedelta import relativedelta

# Sunday-first weeks, like a US wall calendar
DEFAULT_FIRST_WEEKDAY = calendar.SUNDAY


def clear_time(value: date | datetime) -> date:
    """Drop the time-of-day part, leaving the calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


class CalendarState:
    """Viewed month, selection and derived month grid.

    Args:
        viewing: Any date in the month to show first. Defaults to today.
        first_weekday: Weekday each grid row starts on (0 = Monday).
        clock: Returns "today". Injected so tests can pin the date.
    """

    def __init__(
        self,
        viewing: date | None = None,
        first_weekday: int = DEFAULT_FIRST_WEEKDAY,
        clock: Callable[[], date] = date.today,
    ):
        self._clock = clock
        self.first_weekday = first_weekday
        self.viewing: date = clear_time(viewing) if viewing else clock()
        self.selected: list[date] = []

    # -----------------------------------------------------------------
    # Derived grid
    # -----------------------------------------------------------------

    @property
    def calendar(self) -> list[list[date]]:
        """Weeks (seven dates each) overlapping the viewed month.

        In January of year 1 and December of year 9999 the outer weeks
        are shorter: days before date.min or after date.max are left out.
        """
        cal = calendar.Calendar(firstweekday=self.first_weekday)
        days = [
            date(y, m, d)
            for y, m, d in cal.itermonthdays3(self.viewing.year, self.viewing.month)
            if date.min.year <= y <= date.max.year
        ]
        weeks: list[list[date]] = []
        for day in days:
            if not weeks or day.weekday() == self.first_weekday:
                weeks.append([])
            weeks[-1].append(day)
        return weeks

    def start_of_month(self) -> date:
        return self.viewing.replace(day=1)

    def end_of_month(self) -> date:
        last_day = calendar.monthrange(self.viewing.year, self.viewing.month)[1]
        return self.viewing.replace(day=last_day)

    # -----------------------------------------------------------------
    # Predicates
    # -----------------------------------------------------------------

    def in_range(self, day: date, start: date, end: date) -> bool:
        """Check whether `day` falls within [start, end], inclusive."""
        return clear_time(start) <= clear_time(day) <= clear_time(end)

    def is_selected(self, day: date) -> bool:
        return clear_time(day) in self.selected

    def is_today(self, day: date) -> bool:
        return clear_time(day) == self.today()

    def today(self) -> date:
        return self._clock()

    # -----------------------------------------------------------------
    # Selection
    # -----------------------------------------------------------------

    def select(self, day: date, replace: bool = False) -> None:
        """Select `day`. In replace mode it becomes the only selected date."""
        day = clear_time(day)
        if replace:
            self.selected = [day]
        elif day not in self.selected:
            self.selected.append(day)

    def deselect(self, day: date) -> None:
        day = clear_time(day)
        self.selected = [d for d in self.selected if d != day]

    def toggle(self, day: date, replace: bool = False) -> None:
        """Deselect `day` if it is selected, otherwise select it."""
        if self.is_selected(day):
            self.deselect(day)
        else:
            self.select(day, replace=replace)

    def clear_selected(self) -> None:
        self.selected = []

    # -----------------------------------------------------------------
    # Navigation
    # -----------------------------------------------------------------

    def set_viewing(self, day: date) -> None:
        self.viewing = clear_time(day)

    def view_next_month(self) -> None:
        """Step one month forward. December 9999 is the last month."""
        if (self.viewing.year, self.viewing.month) == (date.max.year, date.max.month):
            return
        self.viewing = self.viewing + relativedelta(months=1)

    def view_previous_month(self) -> None:
        """Step one month back. January of year 1 is the first month."""
        if (self.viewing.year, self.viewing.month) == (date.min.year, date.min.month):
            return
        self.viewing = self.viewing - relativedelta(months=1)

    def view_today(self) -> None:
        self.viewing = self.today()

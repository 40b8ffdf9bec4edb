"""
Unit tests for CalendarState.

Tests cover:
- Month grid shape and first weekday
- Range, selection and today predicates
- select / deselect / toggle / clear in replace and additive mode
- Month navigation
- clear_time
"""

import calendar
from datetime import date, datetime

from datepicker.core.calendar_state import CalendarState, clear_time


class TestGrid:

    def test_sunday_first_grid_for_april_2024(self, state):
        weeks = state.calendar
        assert len(weeks) == 5
        assert all(len(week) == 7 for week in weeks)
        assert weeks[0][0] == date(2024, 3, 31)
        assert weeks[-1][-1] == date(2024, 5, 4)

    def test_monday_first_grid(self, clock):
        state = CalendarState(
            viewing=date(2024, 4, 10),
            first_weekday=calendar.MONDAY,
            clock=clock,
        )
        assert state.calendar[0][0] == date(2024, 4, 1)
        assert all(week[0].weekday() == calendar.MONDAY for week in state.calendar)

    def test_grid_covers_every_day_of_month(self, state):
        days = {d for week in state.calendar for d in week}
        for n in range(1, 31):
            assert date(2024, 4, n) in days

    def test_month_bounds(self, clock):
        state = CalendarState(viewing=date(2024, 2, 14), clock=clock)
        assert state.start_of_month() == date(2024, 2, 1)
        assert state.end_of_month() == date(2024, 2, 29)


class TestPredicates:

    def test_in_range_is_inclusive(self, state):
        start, end = date(2024, 4, 1), date(2024, 4, 30)
        assert state.in_range(start, start, end)
        assert state.in_range(end, start, end)
        assert not state.in_range(date(2024, 3, 31), start, end)
        assert not state.in_range(date(2024, 5, 1), start, end)

    def test_is_today_uses_clock(self, state, today):
        assert state.is_today(today)
        assert state.is_today(datetime(2024, 4, 15, 18, 30))
        assert not state.is_today(date(2024, 4, 16))

    def test_default_viewing_is_today(self, clock, today):
        assert CalendarState(clock=clock).viewing == today


class TestSelection:

    def test_replace_mode_keeps_single_date(self, state):
        state.select(date(2024, 4, 2), replace=True)
        state.select(date(2024, 4, 9), replace=True)
        assert state.selected == [date(2024, 4, 9)]

    def test_additive_mode_appends(self, state):
        state.select(date(2024, 4, 2))
        state.select(date(2024, 4, 9))
        state.select(date(2024, 4, 2))
        assert state.selected == [date(2024, 4, 2), date(2024, 4, 9)]

    def test_select_clears_time(self, state):
        state.select(datetime(2024, 4, 2, 13, 45), replace=True)
        assert state.selected == [date(2024, 4, 2)]
        assert state.is_selected(date(2024, 4, 2))

    def test_toggle_selects_then_deselects(self, state):
        state.toggle(date(2024, 4, 2), replace=True)
        assert state.selected == [date(2024, 4, 2)]
        state.toggle(date(2024, 4, 2), replace=True)
        assert state.selected == []

    def test_toggle_other_day_replaces(self, state):
        state.toggle(date(2024, 4, 2), replace=True)
        state.toggle(date(2024, 4, 3), replace=True)
        assert state.selected == [date(2024, 4, 3)]

    def test_clear_selected(self, state):
        state.select(date(2024, 4, 2), replace=True)
        state.clear_selected()
        assert state.selected == []
        assert not state.is_selected(date(2024, 4, 2))


class TestNavigation:

    def test_next_and_previous_month(self, state):
        state.view_next_month()
        assert (state.viewing.year, state.viewing.month) == (2024, 5)
        state.view_previous_month()
        state.view_previous_month()
        assert (state.viewing.year, state.viewing.month) == (2024, 3)

    def test_year_boundaries(self, clock):
        state = CalendarState(viewing=date(2023, 12, 5), clock=clock)
        state.view_next_month()
        assert state.viewing == date(2024, 1, 5)
        state.view_previous_month()
        state.view_previous_month()
        assert state.viewing == date(2023, 11, 5)

    def test_day_is_clamped_to_shorter_month(self, clock):
        state = CalendarState(viewing=date(2024, 1, 31), clock=clock)
        state.view_next_month()
        assert state.viewing == date(2024, 2, 29)

    def test_view_today(self, clock, today):
        state = CalendarState(viewing=date(1999, 1, 1), clock=clock)
        state.view_today()
        assert state.viewing == today


class TestClearTime:

    def test_datetime_becomes_date(self):
        assert clear_time(datetime(2024, 4, 2, 23, 59, 59)) == date(2024, 4, 2)

    def test_date_unchanged(self):
        assert clear_time(date(2024, 4, 2)) == date(2024, 4, 2)


class TestDateRangeLimits:

    def test_last_month_grid_stops_at_date_max(self, clock):
        state = CalendarState(viewing=date(9999, 12, 31), clock=clock)
        weeks = state.calendar
        assert weeks[-1][-1] == date.max
        # 9999-12-31 is a Friday, so the Sunday-first row has no Saturday
        assert len(weeks[-1]) == 6
        assert all(len(week) == 7 for week in weeks[:-1])

    def test_first_month_grid_starts_at_date_min(self, clock):
        state = CalendarState(viewing=date(1, 1, 1), clock=clock)
        weeks = state.calendar
        assert weeks[0][0] == date.min
        # 0001-01-01 is a Monday, so the Sunday-first row has no Sunday
        assert len(weeks[0]) == 6
        assert weeks[1][0].weekday() == calendar.SUNDAY

    def test_month_bounds_at_limits(self, clock):
        assert CalendarState(viewing=date(9999, 12, 5), clock=clock).end_of_month() == date.max
        assert CalendarState(viewing=date(1, 1, 20), clock=clock).start_of_month() == date.min

    def test_navigation_stays_inside_date_range(self, clock):
        state = CalendarState(viewing=date(9999, 12, 30), clock=clock)
        state.view_next_month()
        assert state.viewing == date(9999, 12, 30)
        state.view_previous_month()
        assert state.viewing == date(9999, 11, 30)

        state.set_viewing(date(1, 1, 9))
        state.view_previous_month()
        assert state.viewing == date(1, 1, 9)
        state.view_next_month()
        assert state.viewing == date(1, 2, 9)

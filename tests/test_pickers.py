"""Tests for the date, time and date-time picker models."""

from datetime import datetime

import pytest

from rentcal.clock import FixedClock
from rentcal.conventions import Period
from rentcal.pickers import DatePicker, DateTimeDropdown, TimePicker
from rentcal.schema import CalendarMonth, DisplayTime


class TestDatePicker:
    """Tests for the commit-on-select DatePicker."""

    def test_opens_on_today_when_unset(self, clock):
        """Test opening on the current month when unset."""
        picker = DatePicker(clock=clock)
        assert not picker.is_open
        picker.open()
        assert picker.view == CalendarMonth(2025, 6)
        assert picker.title == "June 2025"

    def test_opens_on_committed_month(self, clock):
        """Test opening on the committed month."""
        picker = DatePicker("2025-12-15", clock=clock)
        picker.open()
        assert picker.view == CalendarMonth(2025, 12)

    def test_day_click_commits_and_closes(self, clock):
        """Test that a day click commits and closes."""
        changes = []
        picker = DatePicker(min_date="2025-06-10", clock=clock, on_change=changes.append)
        picker.open()
        assert picker.select_day(12)
        assert picker.value == "2025-06-12"
        assert not picker.is_open
        assert changes == ["2025-06-12"]

    def test_disabled_day_is_rejected(self, clock):
        """Test that a day before the minimum is ignored."""
        changes = []
        picker = DatePicker(min_date="2025-06-10", clock=clock, on_change=changes.append)
        picker.open()
        assert not picker.select_day(9)
        assert picker.is_open
        assert picker.value == ""
        assert picker.select_day(10)
        assert changes == ["2025-06-10"]

    def test_day_outside_month_is_rejected(self, clock):
        """Test that a day past the month end is ignored."""
        picker = DatePicker(clock=clock)
        picker.open()
        assert not picker.select_day(31)  # June has 30 days
        assert picker.is_open

    def test_select_when_closed(self, clock):
        """Test that selecting while closed does nothing."""
        picker = DatePicker(clock=clock)
        assert not picker.select_day(1)

    def test_navigation(self, clock):
        """Test month navigation without committing."""
        picker = DatePicker("2025-12-15", clock=clock)
        picker.open()
        picker.next_month()
        assert picker.title == "January 2026"
        picker.previous_month()
        picker.previous_month()
        assert picker.view == CalendarMonth(2025, 11)
        assert picker.select_day(3)
        assert picker.value == "2025-11-03"

    def test_clear_commits_empty(self, clock):
        """Test that Clear commits the empty value."""
        changes = []
        picker = DatePicker("2025-06-12", clock=clock, on_change=changes.append)
        picker.open()
        picker.clear()
        assert picker.value == ""
        assert not picker.is_open
        assert changes == [""]
        assert picker.display_text == "Select date"

    def test_today_commits_local_date(self):
        """Test that Today commits the local date."""
        late = FixedClock(datetime(2025, 6, 10, 23, 45))
        picker = DatePicker(clock=late)
        picker.open()
        assert picker.select_today()
        assert picker.value == "2025-06-10"
        assert not picker.is_open

    def test_today_respects_minimum(self, clock):
        """Test that Today is blocked by the minimum date."""
        picker = DatePicker(min_date="2025-06-12", clock=clock)
        picker.open()
        assert not picker.select_today()
        assert picker.is_open

    def test_outside_click_commits_nothing(self, clock):
        """Test that dismissing keeps the committed value."""
        changes = []
        picker = DatePicker("2025-06-12", clock=clock, on_change=changes.append)
        picker.open()
        picker.next_month()
        picker.dismiss()
        assert not picker.is_open
        assert picker.value == "2025-06-12"
        assert changes == []

    def test_toggle(self, clock):
        """Test toggling open and closed."""
        picker = DatePicker(clock=clock)
        picker.toggle()
        assert picker.is_open
        picker.toggle()
        assert not picker.is_open

    def test_cells(self, clock):
        """Test cells of the visible month."""
        picker = DatePicker("2025-06-12", min_date="2025-06-10", clock=clock)
        assert picker.cells() == []
        picker.open()
        cells = picker.cells()
        assert len(cells) == 30
        assert cells[8].is_disabled
        assert cells[9].is_today
        assert cells[11].is_selected

    def test_display_text(self, clock):
        """Test the committed date display."""
        assert DatePicker("2025-06-10", clock=clock).display_text == "Jun 10, 2025"

    def test_weekday_headers_start_on_sunday(self):
        """Test the Sunday-first weekday headers."""
        assert DatePicker.weekday_headers[0] == "Su"
        assert len(DatePicker.weekday_headers) == 7

    def test_malformed_initial_value_is_unset(self, clock):
        """Test that a malformed initial value is unset."""
        picker = DatePicker("2025-02-30", clock=clock)
        assert picker.value == ""
        assert picker.selected is None


class TestTimePicker:
    """Tests for the stage-then-apply TimePicker."""

    def test_default_draft(self):
        """Test the default staged time."""
        picker = TimePicker()
        picker.open()
        assert picker.draft == DisplayTime(10, 0, Period.AM)

    def test_apply_commits_24_hour_value(self):
        """Test that Apply commits a 24-hour value."""
        changes = []
        picker = TimePicker(on_change=changes.append)
        picker.open()
        picker.set_hour(1)
        picker.set_minute(30)
        picker.set_period("PM")
        assert picker.value == ""  # still staged
        assert picker.apply() == "13:30"
        assert not picker.is_open
        assert changes == ["13:30"]
        assert picker.display_text == "1:30 PM"

    def test_twelve_am_is_midnight(self):
        """Test that 12 AM commits as 00."""
        picker = TimePicker()
        picker.open()
        picker.set_hour(12)
        picker.set_period(Period.AM)
        assert picker.apply() == "00:00"

    def test_dismiss_discards_draft(self):
        """Test that dismissing discards staged edits."""
        changes = []
        picker = TimePicker("08:15", on_change=changes.append)
        picker.open()
        assert picker.draft == DisplayTime(8, 15, Period.AM)
        picker.set_hour(11)
        picker.set_period("PM")
        picker.dismiss()
        assert picker.value == "08:15"
        assert picker.draft is None
        assert changes == []
        picker.open()
        assert picker.draft == DisplayTime(8, 15, Period.AM)

    def test_staging_requires_open_picker(self):
        """Test that staging needs an open picker."""
        picker = TimePicker()
        with pytest.raises(RuntimeError):
            picker.set_hour(3)
        with pytest.raises(RuntimeError):
            picker.apply()

    def test_invalid_selection(self):
        """Test rejecting out-of-range hours and minutes."""
        picker = TimePicker()
        picker.open()
        with pytest.raises(ValueError):
            picker.set_hour(13)
        with pytest.raises(ValueError):
            picker.set_minute(60)

    def test_display_text(self):
        """Test the placeholder and committed time display."""
        assert TimePicker().display_text == "Select time"
        assert TimePicker("00:05").display_text == "12:05 AM"

    def test_options(self):
        """Test the hour and minute option lists."""
        assert TimePicker.hour_options()[0] == "01"
        assert TimePicker.minute_options()[-1] == "59"


class TestDateTimeDropdown:
    """Tests for DateTimeDropdown."""

    def test_now_stages_without_committing(self, clock):
        """Test that Now only stages the current time."""
        dropdown = DateTimeDropdown(clock=clock)
        dropdown.open()
        dropdown.set_now()
        assert (dropdown.draft_date, dropdown.draft_time) == ("2025-06-10", "08:30")
        assert dropdown.value is None
        dropdown.dismiss()
        assert dropdown.value is None
        assert dropdown.draft_date == ""

    def test_apply(self, clock):
        """Test that Apply commits the staged date and time."""
        changes = []
        dropdown = DateTimeDropdown(clock=clock, on_change=changes.append)
        dropdown.open()
        dropdown.set_now()
        assert dropdown.apply()
        assert dropdown.value == "2025-06-10T08:30"
        assert not dropdown.is_open
        assert dropdown.display_text == "10/06/2025 08:30"
        assert changes == ["2025-06-10T08:30"]

    def test_apply_needs_a_date(self, clock):
        """Test that Apply does nothing without a date."""
        dropdown = DateTimeDropdown(clock=clock)
        dropdown.open()
        dropdown.draft_time = "09:00"
        assert not dropdown.can_apply
        assert not dropdown.apply()
        assert dropdown.is_open

    def test_apply_without_time_uses_midnight(self, clock):
        """Test that a missing time commits as midnight."""
        dropdown = DateTimeDropdown(clock=clock)
        dropdown.open()
        dropdown.draft_date = "2025-07-01"
        assert dropdown.apply()
        assert dropdown.value == "2025-07-01T00:00"

    def test_clear_keeps_open(self, clock):
        """Test that Clear commits empty and stays open."""
        changes = []
        dropdown = DateTimeDropdown("2025-06-10T08:30", clock=clock, on_change=changes.append)
        dropdown.open()
        dropdown.clear()
        assert dropdown.value is None
        assert dropdown.is_open
        assert changes == [None]
        assert dropdown.display_text == "dd/mm/yyyy --:-- --"

    def test_reopen_loads_committed_value(self, clock):
        """Test that reopening reloads the committed value."""
        dropdown = DateTimeDropdown("2025-06-10T08:30", clock=clock)
        dropdown.open()
        dropdown.draft_date = "2025-07-01"
        dropdown.dismiss()
        dropdown.open()
        assert dropdown.draft_date == "2025-06-10"
        assert dropdown.draft_time == "08:30"

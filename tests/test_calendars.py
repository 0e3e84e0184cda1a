"""Tests for Gregorian month arithmetic."""

import pytest

from rentcal.conventions import (
    DurationUnit,
    Period,
    days_in_month,
    first_weekday_offset,
    is_end_of_month,
    is_leap_year,
    is_valid_day,
    month_abbreviation,
    month_name,
    shift_month,
)


class TestLeapYears:
    """Tests for leap years and month lengths."""

    def test_gregorian_rules(self):
        """Test the Gregorian century rules."""
        assert is_leap_year(2024)
        assert not is_leap_year(2023)
        assert not is_leap_year(1900)  # century not divisible by 400
        assert is_leap_year(2000)

    def test_february_length(self):
        """Test February length in leap and common years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28
        assert days_in_month(2100, 2) == 28

    def test_month_lengths(self):
        """Test every month length in a common year."""
        assert [days_in_month(2025, m) for m in range(1, 13)] == [
            31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31
        ]

    def test_invalid_month_raises(self):
        """Test rejecting month numbers outside 1-12."""
        with pytest.raises(ValueError):
            days_in_month(2025, 13)
        with pytest.raises(ValueError):
            first_weekday_offset(2025, 0)


class TestWeekdayOffset:
    """Tests for first_weekday_offset."""

    def test_sunday_first(self):
        """Test Sunday-first offsets of the first day."""
        assert first_weekday_offset(2025, 6) == 0  # June 1, 2025 is a Sunday
        assert first_weekday_offset(2025, 3) == 6  # Saturday
        assert first_weekday_offset(2024, 2) == 4  # Thursday
        assert first_weekday_offset(2023, 2) == 3  # Wednesday


class TestHelpers:
    """Tests for calendar helper functions."""

    def test_is_valid_day(self):
        """Test day existence checks."""
        assert is_valid_day(2024, 2, 29)
        assert not is_valid_day(2023, 2, 29)
        assert not is_valid_day(2025, 4, 31)
        assert not is_valid_day(2025, 0, 1)
        assert not is_valid_day(0, 1, 1)

    def test_is_end_of_month(self):
        """Test detecting the last day of a month."""
        assert is_end_of_month(2025, 2, 28)
        assert not is_end_of_month(2024, 2, 28)

    def test_shift_month_crosses_years(self):
        """Test month shifting across year boundaries."""
        assert shift_month(2025, 12, 1) == (2026, 1)
        assert shift_month(2025, 1, -1) == (2024, 12)
        assert shift_month(2025, 6, -18) == (2023, 12)

    def test_names(self):
        """Test month name lookups."""
        assert month_name(6) == "June"
        assert month_abbreviation(6) == "Jun"
        with pytest.raises(ValueError):
            month_name(13)


class TestEnums:
    """Tests for Period and DurationUnit."""

    def test_period_coerce(self):
        """Test coercing strings to Period."""
        assert Period.coerce("pm") is Period.PM
        assert Period.coerce(Period.AM) is Period.AM
        with pytest.raises(ValueError):
            Period.coerce("noon")

    def test_unit_coerce(self):
        """Test coercing strings to DurationUnit."""
        assert DurationUnit.coerce("Month") is DurationUnit.MONTH
        assert DurationUnit.YEAR.months() == 12
        with pytest.raises(ValueError):
            DurationUnit.coerce("week")

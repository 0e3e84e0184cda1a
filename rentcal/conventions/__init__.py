"""Calendar conventions: units, periods, name tables and month arithmetic."""

from .calendars import (
    days_in_month,
    first_weekday_offset,
    is_end_of_month,
    is_leap_year,
    is_valid_day,
    shift_month,
)
from .names import (
    MONTH_ABBREVIATIONS,
    MONTH_NAMES,
    WEEKDAY_HEADERS,
    month_abbreviation,
    month_name,
)
from .types import DurationUnit, Period

__all__ = [
    # Enums
    "DurationUnit",
    "Period",
    # Month arithmetic
    "days_in_month",
    "first_weekday_offset",
    "is_end_of_month",
    "is_leap_year",
    "is_valid_day",
    "shift_month",
    # Name tables
    "MONTH_NAMES",
    "MONTH_ABBREVIATIONS",
    "WEEKDAY_HEADERS",
    "month_name",
    "month_abbreviation",
]

"""
Gregorian month arithmetic on plain integers.

Nothing here touches a timezone-aware object: weekday and month length are
derived from (year, month) alone, so a grid can never shift by a day near a
UTC offset boundary.
"""

import calendar
from typing import Tuple


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")


def is_leap_year(year: int) -> bool:
    """Divisible by 4, except centuries not divisible by 400."""
    return calendar.isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    _check_month(month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def first_weekday_offset(year: int, month: int) -> int:
    """Weekday index of day 1 of the month, 0 = Sunday."""
    _check_month(month)
    # calendar.weekday is Monday-first
    return (calendar.weekday(year, month, 1) + 1) % 7


def is_valid_day(year: int, month: int, day: int) -> bool:
    """True if (year, month, day) names a real Gregorian date."""
    if not 1 <= year <= 9999 or not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def is_end_of_month(year: int, month: int, day: int) -> bool:
    """Check if the day is the last calendar day of its month."""
    return day == days_in_month(year, month)


def shift_month(year: int, month: int, months_to_add: int) -> Tuple[int, int]:
    """Move (year, month) by a signed number of months."""
    _check_month(month)
    index = year * 12 + (month - 1) + months_to_add
    return index // 12, index % 12 + 1

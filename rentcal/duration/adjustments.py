"""
Calendar-unit addition.

Month and year overflow is resolved by clamping: when the start day does not
exist in the destination month, the result is that month's last day
(Jan 31 + 1 month = Feb 28/29, Feb 29 + 1 year = Feb 28). The time of day is
carried over unchanged.
"""

import logging

from dateutil.relativedelta import relativedelta

from rentcal.conventions.calendars import is_end_of_month
from rentcal.conventions.types import DurationUnit
from rentcal.schema.types import DateTimePoint

logger = logging.getLogger(__name__)


def add_days(point: DateTimePoint, days: int) -> DateTimePoint:
    """Add whole days."""
    return DateTimePoint.from_datetime(point.to_datetime() + relativedelta(days=days))


def add_months(point: DateTimePoint, months: int) -> DateTimePoint:
    """Add calendar months, clamping to the destination month's last day."""
    result = DateTimePoint.from_datetime(
        point.to_datetime() + relativedelta(months=months)
    )
    if result.date.day != point.date.day and is_end_of_month(*result.date.as_tuple()):
        logger.debug("Clamped %s + %s months to %s", point, months, result)
    return result


def add_years(point: DateTimePoint, years: int) -> DateTimePoint:
    """Add calendar years; Feb 29 lands on Feb 28 in a common year."""
    return add_months(point, years * 12)


def add_units(point: DateTimePoint, unit: DurationUnit, quantity: int) -> DateTimePoint:
    if unit == DurationUnit.DAY:
        return add_days(point, quantity)
    elif unit == DurationUnit.MONTH:
        return add_months(point, quantity)
    elif unit == DurationUnit.YEAR:
        return add_years(point, quantity)
    else:
        raise ValueError(f"Unknown duration unit: {unit}")


def months_between_indices(start: DateTimePoint, end: DateTimePoint) -> int:
    """Signed count of month boundaries from start's month to end's month."""
    start_index = start.date.year * 12 + start.date.month
    end_index = end.date.year * 12 + end.date.month
    return end_index - start_index


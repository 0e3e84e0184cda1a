"""
Rental duration arithmetic.

``duration_between`` is the inverse of ``add_calendar_units`` for the same
unit: for any point ``p`` and ``n >= 0``,
``duration_between(p, add_calendar_units(p, unit, n), unit) == n``.
Both use the clamping month policy from ``adjustments``.
"""

import logging
import math
from typing import Optional, Union

from rentcal.conventions.types import DurationUnit
from rentcal.schema.types import (
    CanonicalDate,
    DateRange,
    DateTimePoint,
    DurationBreakdown,
    RentalDuration,
)
from rentcal.utils.date import PointLike, parse_point, to_point

from .adjustments import add_units, months_between_indices

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60
SECONDS_PER_HOUR = 60 * 60

UnitLike = Union[DurationUnit, str]


def add_calendar_units(value: PointLike, unit: UnitLike, quantity: int):
    """
    Add ``quantity`` days, months or years to a date or date+time.

    The result has the same shape as the input: a canonical string comes
    back as a canonical string, a CanonicalDate as a CanonicalDate, anything
    else as a DateTimePoint.
    """
    unit = DurationUnit.coerce(unit)
    point = to_point(value)
    result = add_units(point, unit, quantity)

    if isinstance(value, CanonicalDate):
        return result.date
    if isinstance(value, str):
        return result.date.isoformat() if "T" not in value else str(result)
    return result


def _whole_days(seconds: float) -> int:
    # Half-up rounding of the day count
    return int(math.floor(seconds / SECONDS_PER_DAY + 0.5))


def _whole_calendar_units(start: DateTimePoint, end: DateTimePoint, months_per_unit: int) -> int:
    """Largest n with start + n units <= end, for start <= end."""
    unit = DurationUnit.MONTH if months_per_unit == 1 else DurationUnit.YEAR
    n = months_between_indices(start, end) // months_per_unit
    while n > 0 and add_units(start, unit, n) > end:
        n -= 1
    return n


def duration_between(start: PointLike, end: PointLike, unit: UnitLike) -> int:
    """
    Elapsed whole units between two points.

    day: round(abs(end - start) in days), half up.
    month/year: whole calendar units from the earlier to the later point.
    An empty or malformed endpoint string gives 0.
    """
    unit = DurationUnit.coerce(unit)
    a, b = parse_point(start), parse_point(end)
    if a is None or b is None:
        logger.debug("Unset endpoint in %r -> %r, duration is 0", start, end)
        return 0
    if b < a:
        a, b = b, a

    if unit == DurationUnit.DAY:
        seconds = (b.to_datetime() - a.to_datetime()).total_seconds()
        return _whole_days(seconds)
    elif unit in (DurationUnit.MONTH, DurationUnit.YEAR):
        return _whole_calendar_units(a, b, unit.months())
    else:
        raise ValueError(f"Unknown duration unit: {unit}")


def rental_duration(window: DateRange, unit: UnitLike) -> Optional[RentalDuration]:
    """
    Rental length of a pick-up/drop-off window.

    A violating window (end before start) or one shorter than a single unit
    has zero duration and yields None.
    """
    unit = DurationUnit.coerce(unit)
    if window.is_violating:
        logger.debug("Violating range %s -> %s treated as zero", window.start, window.end)
        return None
    quantity = duration_between(window.start, window.end, unit)
    if quantity < 1:
        return None
    return RentalDuration(unit, quantity)


def duration_breakdown(start: PointLike, end: PointLike) -> DurationBreakdown:
    """
    Split abs(end - start) into full days and leftover hours rounded up.

    An empty or malformed endpoint string gives an all-zero breakdown.
    """
    a, b = parse_point(start), parse_point(end)
    if a is None or b is None:
        return DurationBreakdown(total_hours=0.0, days=0, hours=0)
    seconds = abs((b.to_datetime() - a.to_datetime()).total_seconds())
    total_hours = seconds / SECONDS_PER_HOUR
    days = int(total_hours // 24)
    hours = int(math.ceil(total_hours - days * 24))
    return DurationBreakdown(total_hours=total_hours, days=days, hours=hours)


def format_duration(breakdown: DurationBreakdown) -> str:
    """``"2 days 3 hours"``, ``"1 day"`` or ``"5 hours"``."""

    def plural(n: int, word: str) -> str:
        return f"{n} {word}" if n == 1 else f"{n} {word}s"

    if breakdown.days > 0:
        text = plural(breakdown.days, "day")
        if breakdown.hours > 0:
            text += " " + plural(breakdown.hours, "hour")
        return text
    return plural(breakdown.hours, "hour")

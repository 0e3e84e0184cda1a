"""
Core value types for calendar and rental-duration computations.

All values are immutable: any change produces a new instance, never an
in-place mutation. Ordering on dates and times is plain integer-tuple
ordering, independent of any runtime timezone.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Tuple

from rentcal.conventions.calendars import (
    days_in_month,
    first_weekday_offset,
    is_valid_day,
    shift_month,
)
from rentcal.conventions.names import month_abbreviation, month_name
from rentcal.conventions.types import DurationUnit, Period


@dataclass(frozen=True, order=True)
class CanonicalDate:
    """A valid Gregorian date whose textual form is ``YYYY-MM-DD``."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        if not is_valid_day(self.year, self.month, self.day):
            raise ValueError(
                f"Invalid calendar date: {self.year}-{self.month}-{self.day}"
            )

    def __str__(self) -> str:
        return self.isoformat()

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    @classmethod
    def from_date(cls, value: date) -> "CanonicalDate":
        return cls(value.year, value.month, value.day)

    @property
    def display(self) -> str:
        """Human form, e.g. ``Jun 10, 2025``."""
        return f"{month_abbreviation(self.month)} {self.day}, {self.year}"


@dataclass(frozen=True, order=True)
class CanonicalTime:
    """24-hour wall-clock time, stored as ``HH:MM``."""

    hour: int
    minute: int = 0

    def __post_init__(self):
        if not 0 <= self.hour <= 23:
            raise ValueError(f"Hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Minute out of range: {self.minute}")

    def __str__(self) -> str:
        return self.isoformat()

    def isoformat(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


MIDNIGHT = CanonicalTime(0, 0)


@dataclass(frozen=True)
class DisplayTime:
    """12-hour view of a CanonicalTime. Derived only, never stored as state."""

    hour12: int
    minute: int
    period: Period

    def __post_init__(self):
        if not 1 <= self.hour12 <= 12:
            raise ValueError(f"12-hour value out of range: {self.hour12}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"Minute out of range: {self.minute}")

    def __str__(self) -> str:
        return f"{self.hour12}:{self.minute:02d} {self.period.value}"


@dataclass(frozen=True)
class CalendarMonth:
    """A month shown by an open date picker."""

    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    @property
    def first_weekday_offset(self) -> int:
        return first_weekday_offset(self.year, self.month)

    @property
    def title(self) -> str:
        return f"{month_name(self.month)} {self.year}"

    def shifted(self, months: int) -> "CalendarMonth":
        year, month = shift_month(self.year, self.month, months)
        return CalendarMonth(year, month)

    def next(self) -> "CalendarMonth":
        return self.shifted(1)

    def previous(self) -> "CalendarMonth":
        return self.shifted(-1)

    def contains(self, value: CanonicalDate) -> bool:
        return value.year == self.year and value.month == self.month

    @classmethod
    def of(cls, value: CanonicalDate) -> "CalendarMonth":
        return cls(value.year, value.month)


@dataclass(frozen=True, order=True)
class DateTimePoint:
    """A wall-clock date plus time, with no timezone attached."""

    date: CanonicalDate
    time: CanonicalTime = field(default=MIDNIGHT)

    def __str__(self) -> str:
        return f"{self.date.isoformat()}T{self.time.isoformat()}"

    def to_datetime(self) -> datetime:
        """Naive datetime; arithmetic on it is pure wall-clock arithmetic."""
        return datetime(
            self.date.year, self.date.month, self.date.day, self.time.hour, self.time.minute
        )

    @classmethod
    def from_datetime(cls, value: datetime) -> "DateTimePoint":
        return cls(
            CanonicalDate(value.year, value.month, value.day),
            CanonicalTime(value.hour, value.minute),
        )


@dataclass(frozen=True)
class DateRange:
    """Pick-up to drop-off window. A range with end before start is violating."""

    start: DateTimePoint
    end: DateTimePoint

    @property
    def is_violating(self) -> bool:
        return self.end < self.start


@dataclass(frozen=True)
class RentalDuration:
    """Quantity of whole rental units, consumed by pricing."""

    unit: DurationUnit
    quantity: int

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"Rental quantity must be >= 1, got {self.quantity}")


@dataclass(frozen=True)
class DurationBreakdown:
    """Elapsed time split into full days and leftover (rounded up) hours."""

    total_hours: float
    days: int
    hours: int

"""
Value types for the rental calendar core.
"""

from .types import (
    MIDNIGHT,
    CalendarMonth,
    CanonicalDate,
    CanonicalTime,
    DateRange,
    DateTimePoint,
    DisplayTime,
    DurationBreakdown,
    RentalDuration,
)

__all__ = [
    "CanonicalDate",
    "CanonicalTime",
    "DisplayTime",
    "CalendarMonth",
    "DateTimePoint",
    "DateRange",
    "RentalDuration",
    "DurationBreakdown",
    "MIDNIGHT",
]

"""
Calendar-unit addition and elapsed rental durations.
"""

from .adjustments import add_days, add_months, add_units, add_years
from .calculator import (
    add_calendar_units,
    duration_between,
    duration_breakdown,
    format_duration,
    rental_duration,
)

__all__ = [
    # Addition
    "add_days",
    "add_months",
    "add_years",
    "add_units",
    "add_calendar_units",
    # Elapsed durations
    "duration_between",
    "rental_duration",
    "duration_breakdown",
    "format_duration",
]

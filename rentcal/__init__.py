"""Rental Calendar Core.

This package provides the date/time logic behind car-rental booking forms:
calendar grids, minimum-date gating, 12/24-hour time conversion and
calendar-correct rental duration arithmetic. All dates are wall-clock values
handled as plain integers, independent of the runtime timezone.

Key modules:
- dates: canonical date parsing/formatting, constraints and grids
- times: 12/24-hour conversion
- duration: calendar-unit addition and elapsed durations
- pickers: UI-independent date and time picker models
- pricing: quote engine and booking helpers
"""

from .dates import (
    compute_calendar_grid,
    format_canonical_date,
    is_date_disabled,
    parse_canonical_date,
)
from .duration import add_calendar_units, duration_between
from .times import to_12_hour, to_24_hour

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "compute_calendar_grid",
    "is_date_disabled",
    "parse_canonical_date",
    "format_canonical_date",
    "to_12_hour",
    "to_24_hour",
    "add_calendar_units",
    "duration_between",
]

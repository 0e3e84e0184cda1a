"""
Date serialization, minimum-date gating and calendar grids.
"""

from .grid import DayCell, calendar_weeks, compute_calendar_grid, render_cells
from .serializer import (
    format_canonical_date,
    format_iso_local,
    parse_canonical_date,
    parse_date_time,
    parse_iso_local,
    to_display,
    today,
)
from .validation import effective_min_date, is_date_disabled

__all__ = [
    # Serialization
    "parse_canonical_date",
    "format_canonical_date",
    "parse_date_time",
    "parse_iso_local",
    "format_iso_local",
    "to_display",
    "today",
    # Constraints
    "is_date_disabled",
    "effective_min_date",
    # Grid
    "compute_calendar_grid",
    "calendar_weeks",
    "render_cells",
    "DayCell",
]

"""
Calendar grid layout for a date picker.

The grid is a flat sequence: ``first_weekday_offset`` blank cells (``None``)
followed by the day numbers ``1..days_in_month``. Everything is derived from
integer year/month, never from a timezone-aware date object.
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from rentcal.config import get_settings
from rentcal.schema.types import CalendarMonth, CanonicalDate

from .validation import DateInput, is_date_disabled

GridCell = Optional[int]


def compute_calendar_grid(
    year: int, month: int, pad_trailing: Optional[bool] = None
) -> List[GridCell]:
    """
    Build the cell sequence for one month.

    Args:
        year: Calendar year
        month: Month number (1-12)
        pad_trailing: Pad with blanks to whole weeks (defaults to settings)

    Returns:
        Leading ``None`` cells, then day numbers in order
    """
    view = CalendarMonth(year, month)
    cells: List[GridCell] = [None] * view.first_weekday_offset
    cells.extend(range(1, view.days_in_month + 1))

    if pad_trailing is None:
        pad_trailing = get_settings().pad_trailing_cells
    if pad_trailing:
        cells.extend([None] * (-len(cells) % 7))
    return cells


def calendar_weeks(year: int, month: int) -> List[List[GridCell]]:
    """The month's cells split into Sunday-first week rows of seven."""
    cells = compute_calendar_grid(year, month, pad_trailing=True)
    rows = np.array(cells, dtype=object).reshape(-1, 7)
    return rows.tolist()


@dataclass(frozen=True)
class DayCell:
    """A rendered grid cell. ``day`` and ``date`` are None for blanks."""

    day: Optional[int]
    date: Optional[CanonicalDate] = None
    is_disabled: bool = False
    is_today: bool = False
    is_selected: bool = False

    @property
    def is_blank(self) -> bool:
        return self.day is None


def render_cells(
    view: CalendarMonth,
    today: Optional[CanonicalDate] = None,
    selected: Optional[CanonicalDate] = None,
    min_date: DateInput = None,
    pad_trailing: Optional[bool] = None,
) -> List[DayCell]:
    """Decorate a month's grid with disabled/today/selected flags."""
    cells = []
    for day in compute_calendar_grid(view.year, view.month, pad_trailing):
        if day is None:
            cells.append(DayCell(day=None))
            continue
        value = CanonicalDate(view.year, view.month, day)
        cells.append(
            DayCell(
                day=day,
                date=value,
                is_disabled=is_date_disabled(value, min_date),
                is_today=value == today,
                is_selected=value == selected,
            )
        )
    return cells

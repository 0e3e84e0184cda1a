"""
Date picker state machine.

``Closed -> Open(CalendarMonth) -> Closed``. A day click, "Clear" and "Today"
commit and close immediately; an outside interaction closes without
committing. Month navigation only changes the view.
"""

import logging
from typing import Callable, List, Optional

from rentcal.clock import Clock, default_clock
from rentcal.conventions.names import WEEKDAY_HEADERS
from rentcal.schema.types import CalendarMonth, CanonicalDate
from rentcal.dates.grid import DayCell, render_cells
from rentcal.dates.serializer import parse_canonical_date, to_display, today
from rentcal.dates.validation import DateInput, is_date_disabled

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]


class DatePicker:
    """Commit-on-select date picker bound to a canonical ``YYYY-MM-DD`` value."""

    weekday_headers = WEEKDAY_HEADERS

    def __init__(
        self,
        value: str = "",
        min_date: DateInput = None,
        clock: Optional[Clock] = None,
        on_change: Optional[ChangeListener] = None,
    ):
        self.min_date = min_date
        self.clock = clock or default_clock()
        self.on_change = on_change
        self._value = parse_canonical_date(value)
        self._view: Optional[CalendarMonth] = None

    @property
    def value(self) -> str:
        """Committed canonical string, empty when unset."""
        return self._value.isoformat() if self._value else ""

    @property
    def selected(self) -> Optional[CanonicalDate]:
        return self._value

    @property
    def is_open(self) -> bool:
        return self._view is not None

    @property
    def view(self) -> Optional[CalendarMonth]:
        return self._view

    @property
    def display_text(self) -> str:
        return to_display(self.value)

    @property
    def title(self) -> str:
        if self._view is None:
            return ""
        return self._view.title

    def set_value(self, value: str) -> None:
        """Replace the committed value from outside (e.g. a parent form)."""
        self._value = parse_canonical_date(value)
        if self._view is not None:
            self._view = self._initial_view()

    def _initial_view(self) -> CalendarMonth:
        anchor = self._value or today(self.clock)
        return CalendarMonth.of(anchor)

    def open(self) -> None:
        self._view = self._initial_view()
        logger.debug("Date picker opened on %s", self._view.title)

    def toggle(self) -> None:
        if self.is_open:
            self.dismiss()
        else:
            self.open()

    def dismiss(self) -> None:
        """Close without committing."""
        self._view = None

    def previous_month(self) -> None:
        if self._view is not None:
            self._view = self._view.previous()

    def next_month(self) -> None:
        if self._view is not None:
            self._view = self._view.next()

    def _commit(self, value: Optional[CanonicalDate]) -> None:
        self._value = value
        self._view = None
        logger.debug("Date picker committed %r", self.value)
        if self.on_change is not None:
            self.on_change(self.value)

    def select_day(self, day: int) -> bool:
        """
        Commit a day of the visible month and close.

        Returns False (and stays open) when the picker is closed, the day does
        not exist, or the day is before the minimum date.
        """
        if self._view is None:
            return False
        if not 1 <= day <= self._view.days_in_month:
            logger.debug("Ignoring day %s outside %s", day, self._view.title)
            return False
        candidate = CanonicalDate(self._view.year, self._view.month, day)
        if is_date_disabled(candidate, self.min_date):
            logger.debug("Rejected disabled day %s (min %s)", candidate, self.min_date)
            return False
        self._commit(candidate)
        return True

    def clear(self) -> None:
        """Commit the empty value and close."""
        self._commit(None)

    def select_today(self) -> bool:
        """Commit today's local date and close, unless it is disabled."""
        candidate = today(self.clock)
        if is_date_disabled(candidate, self.min_date):
            logger.debug("Rejected today %s (min %s)", candidate, self.min_date)
            return False
        self._commit(candidate)
        return True

    def cells(self) -> List[DayCell]:
        """Grid cells of the visible month; empty while closed."""
        if self._view is None:
            return []
        return render_cells(
            self._view,
            today=today(self.clock),
            selected=self._value,
            min_date=self.min_date,
        )

"""
Combined date + time dropdown.

Both fields are staged as raw strings while open. "Now" fills the draft from
the clock, "Apply" commits it, "Clear" commits an unset value without closing,
and dismissing discards the draft.
"""

import logging
from typing import Callable, Optional

from rentcal.clock import Clock, default_clock
from rentcal.config import get_settings
from rentcal.dates.serializer import format_iso_local, parse_date_time, parse_iso_local
from rentcal.schema.types import DateTimePoint

logger = logging.getLogger(__name__)

ChangeListener = Callable[[Optional[str]], None]


class DateTimeDropdown:
    def __init__(
        self,
        value: Optional[str] = None,
        clock: Optional[Clock] = None,
        on_change: Optional[ChangeListener] = None,
    ):
        self.clock = clock or default_clock()
        self.on_change = on_change
        self._value = parse_iso_local(value)
        self.is_open = False
        self.draft_date = ""
        self.draft_time = ""
        self._reset_draft()

    @property
    def value(self) -> Optional[str]:
        """Committed ``YYYY-MM-DDTHH:MM`` string, None when unset."""
        return format_iso_local(self._value) if self._value else None

    @property
    def point(self) -> Optional[DateTimePoint]:
        return self._value

    @property
    def display_text(self) -> str:
        if self._value is None:
            return get_settings().datetime_placeholder
        d, t = self._value.date, self._value.time
        return f"{d.day:02d}/{d.month:02d}/{d.year:04d} {t.isoformat()}"

    @property
    def can_apply(self) -> bool:
        return bool(self.draft_date)

    def _reset_draft(self) -> None:
        if self._value is None:
            self.draft_date, self.draft_time = "", ""
        else:
            self.draft_date = self._value.date.isoformat()
            self.draft_time = self._value.time.isoformat()

    def _commit(self, value: Optional[DateTimePoint]) -> None:
        self._value = value
        logger.debug("Date-time dropdown committed %r", self.value)
        if self.on_change is not None:
            self.on_change(self.value)

    def open(self) -> None:
        self._reset_draft()
        self.is_open = True

    def toggle(self) -> None:
        if self.is_open:
            self.dismiss()
        else:
            self.open()

    def dismiss(self) -> None:
        self.is_open = False
        self._reset_draft()

    def set_now(self) -> None:
        """Fill the draft with the current local date and time."""
        now = DateTimePoint.from_datetime(self.clock.now())
        self.draft_date = now.date.isoformat()
        self.draft_time = now.time.isoformat()

    def clear(self) -> None:
        self.draft_date, self.draft_time = "", ""
        self._commit(None)

    def apply(self) -> bool:
        """
        Commit the draft and close.

        Returns False and stays open when no draft date is set or the draft
        does not parse.
        """
        if not self.can_apply:
            return False
        point = parse_date_time(self.draft_date, self.draft_time)
        if point is None:
            logger.debug(
                "Rejected draft %r %r", self.draft_date, self.draft_time
            )
            return False
        self._commit(point)
        self.is_open = False
        return True

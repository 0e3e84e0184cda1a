"""
Time picker state machine.

Hour, minute and period choices are staged while the picker is open. Only
``apply`` commits the staged triple to the 24-hour value; closing any other
way discards the draft.
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Union

from rentcal.config import get_settings
from rentcal.conventions.types import Period
from rentcal.schema.types import CanonicalTime, DisplayTime
from rentcal.times.converter import (
    format_display_time,
    from_display_time,
    hour_options,
    minute_options,
    parse_canonical_time,
    to_display_time,
)

logger = logging.getLogger(__name__)

ChangeListener = Callable[[str], None]


class TimePicker:
    """Stage-then-apply time picker bound to a canonical ``HH:MM`` value."""

    def __init__(self, value: str = "", on_change: Optional[ChangeListener] = None):
        self.on_change = on_change
        self._value = parse_canonical_time(value)
        self._draft: Optional[DisplayTime] = None

    @property
    def value(self) -> str:
        return self._value.isoformat() if self._value else ""

    @property
    def committed(self) -> Optional[CanonicalTime]:
        return self._value

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def draft(self) -> Optional[DisplayTime]:
        """Staged selection; None while closed."""
        return self._draft

    @property
    def display_text(self) -> str:
        return format_display_time(self.value)

    def set_value(self, value: str) -> None:
        self._value = parse_canonical_time(value)

    def _initial_draft(self) -> DisplayTime:
        if self._value is not None:
            return to_display_time(self._value)
        settings = get_settings()
        return to_display_time(CanonicalTime(settings.default_hour, settings.default_minute))

    def open(self) -> None:
        self._draft = self._initial_draft()

    def toggle(self) -> None:
        if self.is_open:
            self.dismiss()
        else:
            self.open()

    def _require_open(self) -> DisplayTime:
        if self._draft is None:
            raise RuntimeError("Time picker is closed")
        return self._draft

    def set_hour(self, hour12: int) -> None:
        self._draft = replace(self._require_open(), hour12=hour12)

    def set_minute(self, minute: int) -> None:
        self._draft = replace(self._require_open(), minute=minute)

    def set_period(self, period: Union[Period, str]) -> None:
        self._draft = replace(self._require_open(), period=Period.coerce(period))

    def apply(self) -> str:
        """Commit the staged time, close, and return the canonical value."""
        draft = self._require_open()
        self._value = from_display_time(draft)
        self._draft = None
        logger.debug("Time picker committed %s", self._value)
        if self.on_change is not None:
            self.on_change(self.value)
        return self.value

    def dismiss(self) -> None:
        """Close and discard the staged draft."""
        if self._draft is not None:
            logger.debug("Time picker draft %s discarded", self._draft)
        self._draft = None

    cancel = dismiss

    @staticmethod
    def hour_options() -> List[str]:
        return hour_options()

    @staticmethod
    def minute_options() -> List[str]:
        return minute_options()

"""
Two-way mapping between 24-hour storage and the 12-hour picker display.

Storage is always 24-hour. ``to_12_hour`` and ``to_24_hour`` are inverse
over every hour in [0, 23].
"""

import logging
import re
from typing import List, NamedTuple, Optional, Union

from rentcal.config import get_settings
from rentcal.conventions.types import Period
from rentcal.schema.types import CanonicalTime, DisplayTime

logger = logging.getLogger(__name__)

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2}(?:\.\d+)?)?$")


class TwelveHour(NamedTuple):
    hour12: int
    period: Period


def to_12_hour(hour24: int) -> TwelveHour:
    """Map a 24-hour value to its 12-hour value and period."""
    if not 0 <= hour24 <= 23:
        raise ValueError(f"Hour out of range: {hour24}")
    if hour24 == 0:
        hour12 = 12
    elif hour24 > 12:
        hour12 = hour24 - 12
    else:
        hour12 = hour24
    period = Period.PM if hour24 >= 12 else Period.AM
    return TwelveHour(hour12, period)


def to_24_hour(hour12: int, period: Union[Period, str]) -> int:
    """Map a 12-hour value and period back to 24-hour storage."""
    if not 1 <= hour12 <= 12:
        raise ValueError(f"12-hour value out of range: {hour12}")
    period = Period.coerce(period)
    if period == Period.PM and hour12 != 12:
        return hour12 + 12
    if period == Period.AM and hour12 == 12:
        return 0
    return hour12


def to_display_time(value: CanonicalTime) -> DisplayTime:
    hour12, period = to_12_hour(value.hour)
    return DisplayTime(hour12, value.minute, period)


def from_display_time(value: DisplayTime) -> CanonicalTime:
    return CanonicalTime(to_24_hour(value.hour12, value.period), value.minute)


def parse_canonical_time(text: Optional[str]) -> Optional[CanonicalTime]:
    """
    Parse ``HH:MM`` (seconds tolerated and dropped).

    Returns None for empty or malformed input instead of raising.
    """
    if not text:
        return None
    match = _TIME_RE.match(text.strip())
    if match is None:
        logger.debug("Unparseable time string: %r", text)
        return None
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        logger.debug("Time out of range: %r", text)
        return None
    return CanonicalTime(hour, minute)


def format_canonical_time(hour: int, minute: int) -> str:
    return CanonicalTime(hour, minute).isoformat()


def format_display_time(text: Optional[str]) -> str:
    """``"13:05"`` -> ``"1:05 PM"``; placeholder for unset input."""
    parsed = parse_canonical_time(text)
    if parsed is None:
        return get_settings().time_placeholder
    return str(to_display_time(parsed))


def hour_options() -> List[str]:
    """Hour buttons of the time picker: ``"01"`` .. ``"12"``."""
    return [f"{h:02d}" for h in range(1, 13)]


def minute_options(step: Optional[int] = None) -> List[str]:
    """Minute buttons of the time picker: ``"00"`` .. ``"59"``."""
    if step is None:
        step = get_settings().minute_step
    if not 1 <= step <= 60:
        raise ValueError(f"Minute step out of range: {step}")
    return [f"{m:02d}" for m in range(0, 60, step)]

"""
Canonical ``YYYY-MM-DD`` parsing and formatting.

Dates are always split into integer components by hand. A date-only string
is never handed to a timezone-aware constructor, which is where off-by-one
day shifts near UTC offset boundaries come from.
"""

import logging
import re
from typing import Optional

from rentcal.clock import Clock, default_clock
from rentcal.config import get_settings
from rentcal.conventions.calendars import is_valid_day
from rentcal.schema.types import MIDNIGHT, CanonicalDate, DateTimePoint
from rentcal.times.converter import parse_canonical_time

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_ISO_LOCAL_RE = re.compile(r"^(\d{4}-\d{1,2}-\d{1,2})[T ](\d{1,2}:\d{2}(?::\d{2}(?:\.\d+)?)?)$")


def parse_canonical_date(text: Optional[str]) -> Optional[CanonicalDate]:
    """
    Parse ``YYYY-MM-DD`` into a CanonicalDate.

    Returns None ("unset") for empty input, malformed input, or a day that
    does not exist in the given month.
    """
    if not text:
        return None
    match = _DATE_RE.match(text.strip())
    if match is None:
        logger.debug("Unparseable date string: %r", text)
        return None
    year, month, day = (int(part) for part in match.groups())
    if not is_valid_day(year, month, day):
        logger.debug("Date out of range: %r", text)
        return None
    return CanonicalDate(year, month, day)


def format_canonical_date(year: int, month: int, day: int) -> str:
    """Zero-padded ``YYYY-MM-DD``. Raises ValueError for an invalid date."""
    return CanonicalDate(year, month, day).isoformat()


def to_display(text: Optional[str]) -> str:
    """``"2025-06-10"`` -> ``"Jun 10, 2025"``; placeholder when unset."""
    parsed = parse_canonical_date(text)
    if parsed is None:
        return get_settings().date_placeholder
    return parsed.display


def today(clock: Optional[Clock] = None) -> CanonicalDate:
    """The local wall-clock date."""
    now = (clock or default_clock()).now()
    return CanonicalDate(now.year, now.month, now.day)


def parse_date_time(
    date_text: Optional[str], time_text: Optional[str] = None
) -> Optional[DateTimePoint]:
    """
    Combine a date string and an optional time string.

    A missing time means 00:00; a malformed time makes the whole point unset.
    """
    parsed_date = parse_canonical_date(date_text)
    if parsed_date is None:
        return None
    if not time_text:
        return DateTimePoint(parsed_date, MIDNIGHT)
    parsed_time = parse_canonical_time(time_text)
    if parsed_time is None:
        return None
    return DateTimePoint(parsed_date, parsed_time)


def parse_iso_local(text: Optional[str]) -> Optional[DateTimePoint]:
    """
    Parse a local ``YYYY-MM-DDTHH:MM[:SS]`` string.

    Strings carrying a UTC offset or ``Z`` are rejected: values here are wall
    clock only.
    """
    if not text:
        return None
    match = _ISO_LOCAL_RE.match(text.strip())
    if match is None:
        logger.debug("Unparseable local date-time string: %r", text)
        return None
    return parse_date_time(match.group(1), match.group(2))


def format_iso_local(point: DateTimePoint) -> str:
    return str(point)

"""12/24-hour time conversion."""

from .converter import (
    TwelveHour,
    format_canonical_time,
    format_display_time,
    from_display_time,
    hour_options,
    minute_options,
    parse_canonical_time,
    to_12_hour,
    to_24_hour,
    to_display_time,
)

__all__ = [
    "TwelveHour",
    "to_12_hour",
    "to_24_hour",
    "to_display_time",
    "from_display_time",
    "parse_canonical_time",
    "format_canonical_time",
    "format_display_time",
    "hour_options",
    "minute_options",
]

"""
Basic types and enums used across the rental calendar system.
"""

from enum import Enum


class Period(Enum):
    """12-hour clock period."""

    AM = "AM"
    PM = "PM"

    @classmethod
    def coerce(cls, value) -> "Period":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise ValueError(f"Unknown period: {value!r}")


class DurationUnit(Enum):
    """Rental duration units."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    def months(self) -> int:
        """Calendar months per unit (0 for day-based units)."""
        return {"day": 0, "month": 1, "year": 12}[self.value]

    @classmethod
    def coerce(cls, value) -> "DurationUnit":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Unknown duration unit: {value!r}")

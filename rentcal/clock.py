"""
Wall-clock sources.

Every "today" or "now" in the package is read through a ``Clock`` passed in
by the caller, so calendar computations stay deterministic under test.
"""

from datetime import date, datetime
from typing import Protocol, Union, runtime_checkable

import pandas as pd


@runtime_checkable
class Clock(Protocol):
    """Protocol for wall-clock time sources."""

    def now(self) -> datetime:
        """
        Current local wall-clock time.

        Returns:
            Naive datetime in the user's local time (never a UTC slice)
        """
        ...


class SystemClock:
    """Reads the host's local wall clock."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """Always returns the same instant; used by tests and previews."""

    def __init__(self, value: Union[str, date, datetime, pd.Timestamp]):
        if isinstance(value, pd.Timestamp):
            value = value.to_pydatetime()
        if isinstance(value, str):
            value = datetime.fromisoformat(value)
        if isinstance(value, datetime):
            value = value.replace(tzinfo=None)
        elif isinstance(value, date):
            value = datetime(value.year, value.month, value.day)
        else:
            raise TypeError(f"Unsupported type for clock value: {type(value)}")
        self._value = value

    def now(self) -> datetime:
        return self._value

    def __repr__(self) -> str:
        return f"FixedClock({self._value.isoformat()!r})"


_DEFAULT_CLOCK = SystemClock()


def default_clock() -> Clock:
    return _DEFAULT_CLOCK

"""
Per-unit rental periods for long rentals.
"""

from dataclasses import dataclass
from typing import List, Union

import pandas as pd

from rentcal.conventions.types import DurationUnit
from rentcal.duration.adjustments import add_units
from rentcal.schema.types import DateTimePoint
from rentcal.utils.date import PointLike, to_point


@dataclass
class RentalPeriod:
    """Represents a single billing period of a rental."""

    index: int
    start: DateTimePoint
    end: DateTimePoint

    @property
    def days(self) -> int:
        """Number of calendar days in the period."""
        return (self.end.to_datetime() - self.start.to_datetime()).days


def generate_rental_periods(
    start: PointLike, unit: Union[DurationUnit, str], quantity: int
) -> List[RentalPeriod]:
    """
    Split a rental into ``quantity`` consecutive unit periods.

    Every boundary is computed from the original start, so a clamped month
    end (Jan 31 -> Feb 28) does not pull later boundaries back to the 28th.
    """
    unit = DurationUnit.coerce(unit)
    if quantity < 1:
        raise ValueError(f"Rental quantity must be >= 1, got {quantity}")
    origin = to_point(start)
    boundaries = [add_units(origin, unit, i) for i in range(quantity + 1)]
    return [
        RentalPeriod(index=i + 1, start=boundaries[i], end=boundaries[i + 1])
        for i in range(quantity)
    ]


def periods_to_frame(periods: List[RentalPeriod]) -> pd.DataFrame:
    """Tabulate periods with one row per period."""
    rows = [
        {
            "period": p.index,
            "start": p.start.to_datetime(),
            "end": p.end.to_datetime(),
            "days": p.days,
        }
        for p in periods
    ]
    return pd.DataFrame(rows, columns=["period", "start", "end", "days"])

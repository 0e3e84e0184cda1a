"""
Rental quotes from a duration and a per-unit rate card.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from rentcal.config import get_settings
from rentcal.conventions.types import DurationUnit
from rentcal.duration.calculator import duration_breakdown, rental_duration
from rentcal.schema.types import DateRange, RentalDuration

Amount = Union[Decimal, int, float, str]


def _to_decimal(value: Amount) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps float inputs like 0.1 from carrying binary noise
    return Decimal(str(value))


@dataclass(frozen=True)
class RateCard:
    """Per-unit prices for one vehicle."""

    per_day: Decimal
    per_month: Optional[Decimal] = None
    per_year: Optional[Decimal] = None
    per_hour: Optional[Decimal] = None

    def rate_for(self, unit: DurationUnit) -> Decimal:
        rate = {
            DurationUnit.DAY: self.per_day,
            DurationUnit.MONTH: self.per_month,
            DurationUnit.YEAR: self.per_year,
        }[unit]
        if rate is None:
            raise ValueError(f"No {unit.value} rate on this rate card")
        return _to_decimal(rate)


@dataclass(frozen=True)
class Quote:
    """Total price of a rental."""

    duration: Optional[RentalDuration]
    unit_rate: Decimal
    total: Decimal


class RentalQuoteEngine:
    """Combines a rental duration with a rate card into a total."""

    def __init__(self, rates: RateCard, deposit_rate: Optional[float] = None):
        self.rates = rates
        self.deposit_rate = deposit_rate

    def quote(self, duration: Optional[RentalDuration], unit: Optional[DurationUnit] = None) -> Quote:
        """
        Price a duration. A missing duration quotes zero.

        Args:
            duration: Rental duration (None for a zero-length rental)
            unit: Unit whose rate to report when ``duration`` is None
        """
        if duration is None:
            rate = self.rates.rate_for(unit) if unit is not None else Decimal(0)
            return Quote(duration=None, unit_rate=rate, total=Decimal(0))
        rate = self.rates.rate_for(duration.unit)
        return Quote(duration=duration, unit_rate=rate, total=rate * duration.quantity)

    def quote_range(self, window: DateRange, unit: Union[DurationUnit, str]) -> Quote:
        unit = DurationUnit.coerce(unit)
        return self.quote(rental_duration(window, unit), unit)

    def quote_hourly(self, window: DateRange) -> Decimal:
        """Full days at the day rate plus leftover hours at the hour rate."""
        if window.is_violating:
            return Decimal(0)
        breakdown = duration_breakdown(window.start, window.end)
        total = _to_decimal(self.rates.per_day) * breakdown.days
        if breakdown.hours > 0:
            if self.rates.per_hour is None:
                raise ValueError("No hour rate on this rate card")
            total += _to_decimal(self.rates.per_hour) * breakdown.hours
        return total

    def deposit(self, valuation: Optional[Amount]) -> Decimal:
        """Deposit as a rounded share of the vehicle valuation."""
        if not valuation:
            return Decimal(0)
        rate = self.deposit_rate
        if rate is None:
            rate = get_settings().deposit_rate
        amount = _to_decimal(valuation) * _to_decimal(rate)
        return amount.quantize(Decimal(1), rounding=ROUND_HALF_UP)

"""
Booking-form helpers: drop-off resolution, request payloads and hold expiry.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Optional, Union

from dateutil.tz import tzlocal
from pandas import Timestamp, isna

from rentcal.clock import Clock, default_clock
from rentcal.conventions.types import DurationUnit
from rentcal.duration.adjustments import add_units
from rentcal.duration.calculator import duration_between
from rentcal.schema.types import DateRange, DateTimePoint
from rentcal.utils.date import PointLike, to_point

logger = logging.getLogger(__name__)


class BookingWindowError(ValueError):
    """Raised when drop-off is not strictly after pick-up."""


@dataclass(frozen=True)
class BookingRequest:
    """Payload handed to the pricing/booking service."""

    pickupDate: str
    pickupTime: str
    dropoffDate: str
    dropoffTime: str
    unit: str
    quantity: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return asdict(self)


def resolve_dropoff(
    pickup: PointLike,
    unit: Union[DurationUnit, str],
    quantity: int = 1,
    dropoff: Optional[PointLike] = None,
) -> DateTimePoint:
    """
    Drop-off point for a rental tab.

    Month and year rentals end ``quantity`` units after pick-up. Day rentals
    use the chosen drop-off, falling back to the pick-up itself.
    """
    unit = DurationUnit.coerce(unit)
    start = to_point(pickup)
    if unit == DurationUnit.DAY:
        return to_point(dropoff) if dropoff is not None else start
    if quantity < 1:
        raise ValueError(f"Rental quantity must be >= 1, got {quantity}")
    return add_units(start, unit, quantity)


def validate_window(window: DateRange) -> None:
    if not window.start < window.end:
        raise BookingWindowError("Return date/time must be after pickup date/time")


def build_booking_request(window: DateRange, unit: Union[DurationUnit, str]) -> BookingRequest:
    """Validate the window and build the booking payload."""
    unit = DurationUnit.coerce(unit)
    validate_window(window)
    quantity = duration_between(window.start, window.end, unit)
    if quantity < 1:
        raise BookingWindowError(f"Rental is shorter than one {unit.value}")
    return BookingRequest(
        pickupDate=window.start.date.isoformat(),
        pickupTime=window.start.time.isoformat(),
        dropoffDate=window.end.date.isoformat(),
        dropoffTime=window.end.time.isoformat(),
        unit=unit.value,
        quantity=quantity,
    )


def _parse_hold_expiry(text: str) -> Optional[DateTimePoint]:
    """
    Parse a server hold timestamp into local wall-clock time.

    Accepts local ``YYYY-MM-DDTHH:MM[:SS]`` values as well as ISO strings with
    ``Z`` or a UTC offset, which are converted to the local zone.
    """
    try:
        stamp = Timestamp(text)
    except (TypeError, ValueError):
        logger.debug("Ignoring unparseable hold expiry: %r", text)
        return None
    if isna(stamp):
        return None
    if stamp.tzinfo is not None:
        stamp = stamp.tz_convert(tzlocal()).tz_localize(None)
    return DateTimePoint.from_datetime(stamp.to_pydatetime())


def is_hold_expired(hold_expires_at: Optional[str], clock: Optional[Clock] = None) -> bool:
    """
    True when a booking hold's expiry time has passed.

    Unset holds never expire; an unparseable expiry is treated as unset.
    """
    if not hold_expires_at:
        return False
    expires = _parse_hold_expiry(hold_expires_at)
    if expires is None:
        return False
    now = DateTimePoint.from_datetime((clock or default_clock()).now())
    return expires < now

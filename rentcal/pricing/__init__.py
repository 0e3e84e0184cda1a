"""Pricing and booking consumers of the duration core."""

from .booking import (
    BookingRequest,
    BookingWindowError,
    build_booking_request,
    is_hold_expired,
    resolve_dropoff,
    validate_window,
)
from .quote import Quote, RateCard, RentalQuoteEngine
from .schedule import RentalPeriod, generate_rental_periods, periods_to_frame

__all__ = [
    "RateCard",
    "Quote",
    "RentalQuoteEngine",
    "BookingRequest",
    "BookingWindowError",
    "build_booking_request",
    "validate_window",
    "resolve_dropoff",
    "is_hold_expired",
    "RentalPeriod",
    "generate_rental_periods",
    "periods_to_frame",
]

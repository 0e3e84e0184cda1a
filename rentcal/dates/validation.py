"""Minimum-date gating for date pickers."""

import logging
from typing import Optional, Union

from rentcal.schema.types import CanonicalDate

from .serializer import parse_canonical_date

logger = logging.getLogger(__name__)

DateInput = Union[CanonicalDate, str, None]


def _as_date(value: DateInput) -> Optional[CanonicalDate]:
    if value is None or isinstance(value, CanonicalDate):
        return value
    if isinstance(value, str):
        return parse_canonical_date(value)
    raise TypeError(f"Unsupported type for date: {type(value)}")


def is_date_disabled(candidate: DateInput, min_date: DateInput = None) -> bool:
    """
    True when ``candidate`` falls before the inclusive ``min_date``.

    Comparison is (year, month, day) tuple ordering. An absent or unparseable
    minimum never disables anything. With a minimum present, an unparseable
    candidate is disabled since it cannot be ordered.
    """
    minimum = _as_date(min_date)
    if min_date is not None and minimum is None:
        logger.debug("Ignoring unparseable minimum date: %r", min_date)
    if minimum is None:
        return False
    value = _as_date(candidate)
    if value is None:
        return True
    return value.as_tuple() < minimum.as_tuple()


def effective_min_date(*bounds: DateInput) -> Optional[CanonicalDate]:
    """
    Latest of the given lower bounds, ignoring unset ones.

    Chains "today" and a chosen pick-up date into the drop-off picker's
    minimum.
    """
    parsed = [b for b in (_as_date(bound) for bound in bounds) if b is not None]
    if not parsed:
        return None
    return max(parsed)

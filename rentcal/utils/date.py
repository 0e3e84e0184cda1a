from datetime import date, datetime
from typing import Optional, Union

from pandas import Timestamp

from rentcal.dates.serializer import (
    parse_canonical_date,
    parse_date_time,
    parse_iso_local,
)
from rentcal.schema.types import CanonicalDate, DateTimePoint

DateLike = Union[str, date, datetime, Timestamp, CanonicalDate]
PointLike = Union[DateLike, DateTimePoint]


def to_canonical_date(date_like: DateLike) -> CanonicalDate:
    """
    Convert a date-like value to a CanonicalDate.
    Accepts 'YYYY-MM-DD' strings, date/datetime and pandas Timestamps.
    Datetimes keep their wall-clock date; no timezone conversion is applied.
    """
    if isinstance(date_like, CanonicalDate):
        return date_like
    if isinstance(date_like, DateTimePoint):
        return date_like.date
    if isinstance(date_like, Timestamp):
        return CanonicalDate(date_like.year, date_like.month, date_like.day)
    if isinstance(date_like, (date, datetime)):
        return CanonicalDate(date_like.year, date_like.month, date_like.day)
    if isinstance(date_like, str):
        parsed = parse_canonical_date(date_like)
        if parsed is None:
            raise ValueError(f"Unsupported date string format: {date_like!r}")
        return parsed
    raise TypeError(f"Unsupported type for date: {type(date_like)}")


def to_point(point_like: PointLike) -> DateTimePoint:
    """
    Convert a date or date+time value to a DateTimePoint.
    Date-only inputs get a 00:00 time.
    """
    if isinstance(point_like, DateTimePoint):
        return point_like
    if isinstance(point_like, Timestamp):
        point_like = point_like.to_pydatetime()
    if isinstance(point_like, datetime):
        return DateTimePoint.from_datetime(point_like)
    if isinstance(point_like, str) and "T" in point_like:
        parsed = parse_iso_local(point_like)
        if parsed is None:
            raise ValueError(f"Unsupported date-time string format: {point_like!r}")
        return parsed
    return DateTimePoint(to_canonical_date(point_like))


def parse_point(point_like: PointLike) -> Optional[DateTimePoint]:
    """
    Lenient counterpart of ``to_point`` for form values.
    Empty or malformed strings come back as None instead of raising.
    """
    if isinstance(point_like, str):
        if "T" in point_like:
            return parse_iso_local(point_like)
        return parse_date_time(point_like)
    return to_point(point_like)

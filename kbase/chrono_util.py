"""Breaking time points down into calendar fields, and timespec conversions."""

from __future__ import annotations

import dataclasses
import enum
import time
from datetime import datetime, timedelta, timezone
from typing import Callable

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NS_PER_SECOND = 1_000_000_000


class Resolution(enum.IntEnum):
    """Sub-second resolution of the remainder, as ticks per second."""

    SECONDS = 1
    MILLISECONDS = 1_000
    MICROSECONDS = 1_000_000
    NANOSECONDS = 1_000_000_000


@dataclasses.dataclass(frozen=True)
class TimeExplode:
    """Calendar fields of a time point."""

    year: int           # 4-digit year
    month: int          # 1 ~ 12
    day_of_month: int   # 1 ~ 31
    day_of_week: int    # 0 ~ 6, Sunday ~ Saturday
    hour: int           # 0 ~ 23
    minute: int         # 0 ~ 59
    second: int         # 0 ~ 60
    remainder: int      # sub-second value in the requested resolution


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def _nanoseconds_since_epoch(time_point: datetime) -> int:
    if not isinstance(time_point, datetime):
        raise TypeError(f"expected a datetime, got {type(time_point).__name__}")
    if time_point.tzinfo is None:
        time_point = time_point.astimezone()
    delta = time_point - _EPOCH
    return (delta.days * 86_400 + delta.seconds) * _NS_PER_SECOND + delta.microseconds * 1_000


def _explode(time_point: datetime, resolution: Resolution,
             convert: Callable[[int], time.struct_time]) -> TimeExplode:
    ticks_per_second = Resolution(resolution).value
    nanoseconds = _nanoseconds_since_epoch(time_point)

    in_resolution = _trunc_div(nanoseconds, _NS_PER_SECOND // ticks_per_second)
    remainder = in_resolution - _trunc_div(in_resolution, ticks_per_second) * ticks_per_second

    tm = convert(_trunc_div(nanoseconds, _NS_PER_SECOND))
    return TimeExplode(
        year=tm.tm_year,
        month=tm.tm_mon,
        day_of_month=tm.tm_mday,
        day_of_week=(tm.tm_wday + 1) % 7,
        hour=tm.tm_hour,
        minute=tm.tm_min,
        second=tm.tm_sec,
        remainder=remainder,
    )


def time_point_to_local_time_explode(time_point: datetime,
                                     resolution: Resolution = Resolution.SECONDS) -> TimeExplode:
    """Break `time_point` down in local time; naive datetimes are taken as local."""
    return _explode(time_point, resolution, time.localtime)


def time_point_to_utc_time_explode(time_point: datetime,
                                   resolution: Resolution = Resolution.SECONDS) -> TimeExplode:
    """Break `time_point` down in UTC; naive datetimes are taken as local."""
    return _explode(time_point, resolution, time.gmtime)


def time_point_from_timespec(seconds: int, nanoseconds: int) -> datetime:
    """Return the UTC datetime for a timespec; precision is truncated to microseconds."""
    return _EPOCH + timedelta(seconds=seconds, microseconds=_trunc_div(nanoseconds, 1_000))


def time_point_to_timespec(time_point: datetime) -> tuple[int, int]:
    """Return (seconds, nanoseconds) since the epoch, both truncated toward zero."""
    nanoseconds = _nanoseconds_since_epoch(time_point)
    seconds = _trunc_div(nanoseconds, _NS_PER_SECOND)
    return seconds, nanoseconds - seconds * _NS_PER_SECOND
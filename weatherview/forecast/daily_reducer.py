"""Daily forecast reducer: one representative 3-hour sample per local calendar day.

The city's UTC offset is applied arithmetically to each timestamp before the
date and hour are extracted. No timezone database is consulted, so a single
static offset covers the whole series.
"""

from collections.abc import Iterable
from datetime import date, timedelta

from weatherview.models.common import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    OffsetSeconds,
    UnixSeconds,
)
from weatherview.models.weather import DailySummary, RawForecastPoint

NOON_HOUR = 12
DEFAULT_MAX_DAYS = 5

_EPOCH = date(1970, 1, 1)


def local_date(timestamp_utc: UnixSeconds, utc_offset_seconds: OffsetSeconds) -> date:
    """Calendar date of the shifted timestamp, read as if it were UTC."""
    local_ts = timestamp_utc + utc_offset_seconds
    return _EPOCH + timedelta(days=local_ts // SECONDS_PER_DAY)


def local_hour(timestamp_utc: UnixSeconds, utc_offset_seconds: OffsetSeconds) -> int:
    local_ts = timestamp_utc + utc_offset_seconds
    return (local_ts // SECONDS_PER_HOUR) % 24


def reduce_daily(
    points: Iterable[RawForecastPoint],
    utc_offset_seconds: OffsetSeconds,
    max_days: int = DEFAULT_MAX_DAYS,
) -> list[DailySummary]:
    """Collapse a chronological forecast series to at most max_days daily entries.

    Each day keeps the point closest to local noon. On equal distance the
    earlier point is kept. Days appear in the order they are first seen.
    """
    if max_days < 1:
        raise ValueError(f"max_days must be positive, got {max_days}")

    best: dict[date, DailySummary] = {}
    for point in points:
        day = local_date(point.timestamp_utc, utc_offset_seconds)
        hour = local_hour(point.timestamp_utc, utc_offset_seconds)
        current = best.get(day)
        if current is None or _noon_distance(hour) < _noon_distance(current.local_hour):
            best[day] = DailySummary(local_date=day, point=point, local_hour=hour)

    return list(best.values())[:max_days]


def _noon_distance(hour: int) -> int:
    return abs(hour - NOON_HOUR)

# gridpulse/core/utils.py
from __future__ import annotations
import math
import numbers
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

import numpy as np
import pandas as pd

from . import canon


def local_now(tz: str = canon.DEFAULT_TZ, now: Optional[datetime] = None) -> pd.Timestamp:
    """Return `now` (or the current time) as a tz-aware Timestamp in `tz`.

    Naive inputs are taken as wall time in `tz`.
    """
    ts = pd.Timestamp.now(tz=ZoneInfo(tz)) if now is None else pd.Timestamp(now)
    if ts.tz is None:
        return ts.tz_localize(ZoneInfo(tz))
    return ts.tz_convert(ZoneInfo(tz))


def floor_hour(ts: pd.Timestamp) -> pd.Timestamp:
    """Drop minutes, seconds and sub-second parts."""
    return ts.replace(minute=0, second=0, microsecond=0, nanosecond=0)


def standard_zone(ts: pd.Timestamp) -> timezone:
    """Fixed-offset zone for the standard (non-DST) time of `ts`'s zone."""
    offset = ts.utcoffset() - (ts.dst() or timedelta(0))
    return timezone(offset)


def hourly_window(
    days: int, tz: str = canon.DEFAULT_TZ, now: Optional[datetime] = None
) -> pd.DatetimeIndex:
    """
    Hourly index covering the `days` whole calendar days before the day of `now`.

    Laid out in the zone's standard time (no DST), as interval meter data
    usually is: every day runs 00:00..23:00, days * 24 points one hour apart.
    """
    local = local_now(tz, now)
    start = pd.Timestamp(local.date()) - pd.DateOffset(days=days)
    idx = pd.date_range(
        start=start, periods=days * canon.HOURS_PER_DAY, freq="h", name="timestamp"
    )
    return idx.tz_localize(standard_zone(local))


def relative_hours(
    start: int, stop: int, tz: str = canon.DEFAULT_TZ, now: Optional[datetime] = None
) -> pd.DatetimeIndex:
    """Timestamps floor_hour(now) + h for h in [start, stop), stepped in UTC."""
    anchor = floor_hour(local_now(tz, now)).tz_convert("UTC")
    idx = pd.date_range(start=anchor + pd.Timedelta(hours=start), periods=stop - start, freq="h")
    return idx.tz_convert(ZoneInfo(tz)).rename("timestamp")


def weekend_mask(idx: pd.DatetimeIndex) -> np.ndarray:
    """Boolean mask of timestamps falling on Saturday or Sunday."""
    dow = np.asarray(idx.dayofweek)  # Mon=0..Sun=6
    return dow >= 5


def is_real_number(value: Any) -> bool:
    """True for finite ints/floats (numpy included); bools are not numbers here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return math.isfinite(float(value))


def to_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """Parse a datetime or ISO string; return None when it can't be read."""
    if value is None or isinstance(value, (bool, numbers.Number)):
        return None
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(ts):
        return None
    return ts


def day_label(ts: pd.Timestamp) -> str:
    """YYYY-MM-DD of the timestamp in its own zone."""
    return ts.strftime("%Y-%m-%d")

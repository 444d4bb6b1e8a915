"""
Day normalisation shared by the builder and the query engine.

Every date-like input is reduced to a ``numpy.datetime64`` with day unit,
the calendar day as seen in the configured reference timezone.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Sequence, Union

import numpy as np

from holidaytable.config import settings

DateLike = Union[date, datetime, np.datetime64, str]
DatesLike = Union[DateLike, Sequence[DateLike], "np.ndarray"]

DAY = np.timedelta64(1, "D")

_EPOCH_WEEKDAY = 3  # 1970-01-01 was a Thursday (Monday == 0)


def to_day(value: Any) -> np.datetime64:
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]")
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(settings.tzinfo)
        return np.datetime64(value.date(), "D")
    if isinstance(value, date):
        return np.datetime64(value, "D")
    if isinstance(value, str):
        return to_day(datetime.fromisoformat(value))
    raise TypeError(f"Expected a date-like value; got {type(value).__name__}.")


def to_date(value: Any) -> date:
    return to_day(value).item()


def as_days(value: Any) -> tuple[np.ndarray, bool]:
    """
    Normalise a scalar or array-like of dates.

    Returns a ``datetime64[D]`` array (at least 1-D for scalars) and whether
    the input was a scalar.
    """
    if isinstance(value, np.ndarray) and value.ndim == 0:
        # datetime64[ns].item() is an int, so index instead
        value = value[()] if value.dtype.kind == "M" else value.item()
    if np.ndim(value) == 0:
        return np.atleast_1d(to_day(value)), True

    arr = np.asarray(value)
    if arr.dtype.kind == "M":
        return arr.astype("datetime64[D]"), False
    days = np.array([to_day(v) for v in arr.ravel()], dtype="datetime64[D]")
    return days.reshape(arr.shape), False


def weekday(days: np.ndarray) -> np.ndarray:
    """Day of week, Monday == 0 ... Sunday == 6."""
    return (days.astype(np.int64) + _EPOCH_WEEKDAY) % 7


def year(days: np.ndarray) -> np.ndarray:
    return days.astype("datetime64[Y]").astype(np.int64) + 1970


def day_range(start: np.datetime64, end: np.datetime64) -> np.ndarray:
    """Every day from ``start`` to ``end``, both inclusive."""
    if end < start:
        return np.array([], dtype="datetime64[D]")
    return np.arange(start, end + DAY, dtype="datetime64[D]")


def to_dates(days: np.ndarray) -> list[date]:
    return [d.item() for d in days]

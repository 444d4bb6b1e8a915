from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from holidaytable.dates import DateLike, DatesLike, as_days, day_range, to_dates, to_day, weekday, year
from holidaytable.holiday import Holiday
from ._exceptions import UnsupportedDateError

if TYPE_CHECKING:
    from holidaytable.arrangement.builder import Arrangement

logger = logging.getLogger(__name__)

BoolLike = Union[bool, "np.ndarray"]


def _day_index(table: dict[date, Holiday]) -> np.ndarray:
    return np.array(sorted(table), dtype="datetime64[D]")


class Calendar:
    """
    Read-only classification of days against built holiday tables.

    Point queries take a single date or an array-like of dates; an array
    in gives a boolean array of the same shape out.  Days in years outside
    the tables are neither workdays nor holidays.
    """

    def __init__(self, arrangement: "Arrangement") -> None:
        self._arrangement = arrangement
        self._holidays = dict(arrangement.holidays)
        self._workdays = dict(arrangement.workdays)
        self._in_lieu_days = dict(arrangement.in_lieu_days)

        self._holiday_index = _day_index(self._holidays)
        self._workday_index = _day_index(self._workdays)
        self._in_lieu_index = _day_index(self._in_lieu_days)

        self._min_year = arrangement.min_date.year
        self._max_year = arrangement.max_date.year

    # ── range ────────────────────────────────────────────────────────────

    def validate_range(self, day: DateLike) -> tuple[Optional[date], bool]:
        d = to_day(day)
        if not bool(self._in_range(np.atleast_1d(d))[0]):
            return None, False
        return d.item(), True

    def _in_range(self, days: np.ndarray) -> np.ndarray:
        years = year(days)
        return (years >= self._min_year) & (years <= self._max_year)

    def _check_bounds(self, start: DateLike, end: DateLike) -> tuple[np.datetime64, np.datetime64]:
        bounds = np.array([to_day(start), to_day(end)], dtype="datetime64[D]")
        if not self._in_range(bounds).all():
            logger.debug("Rejected range query %s - %s", bounds[0], bounds[1])
            raise UnsupportedDateError(self.min_date, self.max_date)
        return bounds[0], bounds[1]

    # ── classification ───────────────────────────────────────────────────

    def _workday_mask(self, days: np.ndarray) -> np.ndarray:
        override = np.isin(days, self._workday_index)
        holiday = np.isin(days, self._holiday_index)
        weekday_ = weekday(days) < 5
        return self._in_range(days) & (override | (~holiday & weekday_))

    def _holiday_mask(self, days: np.ndarray) -> np.ndarray:
        return self._in_range(days) & ~self._workday_mask(days)

    def _in_lieu_mask(self, days: np.ndarray) -> np.ndarray:
        return self._in_range(days) & np.isin(days, self._in_lieu_index)

    @staticmethod
    def _result(mask: np.ndarray, scalar: bool) -> BoolLike:
        return bool(mask.flat[0]) if scalar else mask

    def is_workday(self, day: DatesLike) -> BoolLike:
        days, scalar = as_days(day)
        return self._result(self._workday_mask(days), scalar)

    def is_holiday(self, day: DatesLike) -> BoolLike:
        days, scalar = as_days(day)
        return self._result(self._holiday_mask(days), scalar)

    def is_in_lieu(self, day: DatesLike) -> BoolLike:
        days, scalar = as_days(day)
        return self._result(self._in_lieu_mask(days), scalar)

    def get_holiday_detail(self, day: DateLike) -> tuple[Optional[Holiday], bool]:
        """
        Return ``(holiday, is_rest_day)``.

        A named holiday gives ``(holiday, True)``; an ordinary weekend gives
        ``(None, True)``; a workday, including a weekend turned workday, or a
        day outside the supported years gives ``(None, False)``.
        """
        d, ok = self.validate_range(day)
        if not ok:
            return None, False
        if d in self._workdays:
            return None, False
        if d in self._holidays:
            return self._holidays[d], True
        return None, d.weekday() >= 5

    # ── range listings ───────────────────────────────────────────────────

    def get_holidays(
        self,
        start: DateLike,
        end: DateLike,
        include_weekends: bool = True,
    ) -> list[date]:
        """
        Rest days from ``start`` to ``end``, both inclusive, ascending.

        With ``include_weekends=False`` only named statutory holidays are
        listed.  Raises UnsupportedDateError if either bound is outside the
        supported years.
        """
        first, last = self._check_bounds(start, end)
        days = day_range(first, last)
        if include_weekends:
            mask = self._holiday_mask(days)
        else:
            mask = np.isin(days, self._holiday_index)
        return to_dates(days[mask])

    def get_workdays(self, start: DateLike, end: DateLike) -> list[date]:
        first, last = self._check_bounds(start, end)
        days = day_range(first, last)
        return to_dates(days[self._workday_mask(days)])

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def arrangement(self) -> "Arrangement":
        return self._arrangement

    @property
    def min_date(self) -> date:
        return self._arrangement.min_date

    @property
    def max_date(self) -> date:
        return self._arrangement.max_date

    def __repr__(self) -> str:
        return (
            f"Calendar(min_date={self.min_date}, "
            f"max_date={self.max_date}, "
            f"holidays={len(self._holidays)}, "
            f"workdays={len(self._workdays)}, "
            f"in_lieu_days={len(self._in_lieu_days)})"
        )

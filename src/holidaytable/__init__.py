"""
holidaytable
~~~~~~~~~~~~

Chinese statutory holiday calendar, 2004 onwards, built from the State
Council's yearly holiday notices.

Basic usage::

    from datetime import date
    import holidaytable

    holidaytable.is_workday(date(2022, 2, 25))          # → True
    holidaytable.is_holiday(date(2022, 2, 26))          # → True
    holidaytable.is_in_lieu(date(2022, 2, 3))           # → True
    holidaytable.get_holiday_detail(date(2022, 1, 1))   # → (NEW_YEARS_DAY, True)

The module-level functions share one Calendar, built on first use.
"""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from typing import Optional

from holidaytable.arrangement import all_decrees, build_arrangement
from holidaytable.calendar.calendar import BoolLike
from holidaytable.calendar import (
    ArrangementError,
    Calendar,
    CalendarError,
    UnsupportedDateError,
)
from holidaytable.dates import DateLike, DatesLike
from holidaytable.holiday import (
    ANTI_FASCIST_70TH_DAY,
    DRAGON_BOAT_FESTIVAL,
    HOLIDAYS,
    LABOUR_DAY,
    MID_AUTUMN_FESTIVAL,
    NATIONAL_DAY,
    NEW_YEARS_DAY,
    SPRING_FESTIVAL,
    TOMB_SWEEPING_DAY,
    Holiday,
)


@lru_cache(maxsize=None)
def get_calendar() -> Calendar:
    return Calendar(build_arrangement(all_decrees()))


def is_workday(day: DatesLike) -> BoolLike:
    return get_calendar().is_workday(day)


def is_holiday(day: DatesLike) -> BoolLike:
    return get_calendar().is_holiday(day)


def is_in_lieu(day: DatesLike) -> BoolLike:
    return get_calendar().is_in_lieu(day)


def get_holiday_detail(day: DateLike) -> tuple[Optional[Holiday], bool]:
    return get_calendar().get_holiday_detail(day)


def get_holidays(start: DateLike, end: DateLike, include_weekends: bool = True) -> list[date]:
    return get_calendar().get_holidays(start, end, include_weekends)


def get_workdays(start: DateLike, end: DateLike) -> list[date]:
    return get_calendar().get_workdays(start, end)


__all__ = [
    "ANTI_FASCIST_70TH_DAY",
    "ArrangementError",
    "Calendar",
    "CalendarError",
    "DRAGON_BOAT_FESTIVAL",
    "HOLIDAYS",
    "Holiday",
    "LABOUR_DAY",
    "MID_AUTUMN_FESTIVAL",
    "NATIONAL_DAY",
    "NEW_YEARS_DAY",
    "SPRING_FESTIVAL",
    "TOMB_SWEEPING_DAY",
    "UnsupportedDateError",
    "get_calendar",
    "get_holiday_detail",
    "get_holidays",
    "get_workdays",
    "is_holiday",
    "is_in_lieu",
    "is_workday",
]

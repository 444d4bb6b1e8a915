"""
holidaytable.calendar
~~~~~~~~~~~~~~~~~~~~~

Workday / holiday / in-lieu classification against built holiday tables.
A Calendar wraps an Arrangement and answers point and range queries,
falling back to the Monday–Friday rule for days the tables do not mention.

Basic usage::

    from datetime import date
    from holidaytable.arrangement import all_decrees, build_arrangement
    from holidaytable.calendar import Calendar

    cal = Calendar(build_arrangement(all_decrees()))
    cal.is_workday(date(2022, 1, 29))                  # → True (make-up Saturday)
    cal.get_holiday_detail(date(2022, 10, 3))          # → (Holiday(name='国庆节', ...), True)
    cal.get_workdays(date(2022, 10, 1), date(2022, 10, 9))

NumPy arrays are accepted by the point queries::

    import numpy as np
    days = np.arange("2022-01-29", "2022-02-08", dtype="datetime64[D]")
    cal.is_holiday(days)                                # → array([False, False,  True, ...])

Public API
----------
Calendar              The query engine.
CalendarError         Base exception for all calendar-related errors.
ArrangementError      Decree data cannot be built into tables.
UnsupportedDateError  Range query outside the supported years.
"""

from __future__ import annotations

from holidaytable.calendar._exceptions import (
    ArrangementError,
    CalendarError,
    UnsupportedDateError,
)
from holidaytable.calendar.calendar import Calendar

__all__ = [
    "ArrangementError",
    "Calendar",
    "CalendarError",
    "UnsupportedDateError",
]

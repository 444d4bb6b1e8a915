from __future__ import annotations

from datetime import date

DATE_FORMAT = "%Y-%m-%d"


class CalendarError(Exception):
    """Base exception for all calendar-related errors."""


class ArrangementError(CalendarError):
    """Decree data is malformed; the holiday tables cannot be built."""


class UnsupportedDateError(CalendarError):
    """A range query bound lies outside the years covered by the tables."""

    def __init__(self, min_date: date, max_date: date) -> None:
        self.min_date = min_date
        self.max_date = max_date
        super().__init__(
            "unsupported date, supported date range is "
            f"{min_date.strftime(DATE_FORMAT)} - {max_date.strftime(DATE_FORMAT)}"
        )

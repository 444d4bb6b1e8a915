from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Iterator, Optional

from holidaytable.calendar._exceptions import ArrangementError
from holidaytable.holiday import Holiday


class DayType(enum.Enum):
    REST = "rest"
    WORK = "work"
    IN_LIEU = "in_lieu"


@dataclass(frozen=True)
class Decree:
    """One line of a holiday notice: ``day_type`` for every day in [start, end]."""

    holiday: Holiday
    day_type: DayType
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ArrangementError(
                f"{self.holiday.english_name}: end date {self.end} is before "
                f"start date {self.start}."
            )

    @property
    def year(self) -> int:
        return self.start.year

    def days(self) -> Iterator[date]:
        for offset in range((self.end - self.start).days + 1):
            yield self.start + timedelta(days=offset)


class DecreeWriter:
    """
    Fluent shorthand for writing a year's notice as Decree records::

        (DecreeWriter()
            .select_year(2022)
            .mark_holiday(NATIONAL_DAY)
            .rest(10, 1).extend_to(10, 7)
            .work(10, 8).work(10, 9)
            .in_lieu(10, 6).extend_to(10, 7)
            .decrees)

    ``extend_to`` widens the record written by the call right before it.
    Any out-of-order call raises ArrangementError straight away.
    """

    def __init__(self) -> None:
        self._year: Optional[int] = None
        self._holiday: Optional[Holiday] = None
        self._decrees: list[Decree] = []
        self._extendable = False

    # ── context ──────────────────────────────────────────────────────────

    def select_year(self, year: int) -> "DecreeWriter":
        if not date.min.year <= year <= date.max.year:
            raise ArrangementError(f"Year out of range: {year}.")
        self._year = year
        self._extendable = False
        return self

    def mark_holiday(self, holiday: Holiday) -> "DecreeWriter":
        if not isinstance(holiday, Holiday):
            raise ArrangementError(f"Expected a Holiday; got {holiday!r}.")
        self._holiday = holiday
        self._extendable = False
        return self

    # ── single days ──────────────────────────────────────────────────────

    def rest(self, month: int, day: int) -> "DecreeWriter":
        return self._save(month, day, DayType.REST)

    def work(self, month: int, day: int) -> "DecreeWriter":
        return self._save(month, day, DayType.WORK)

    def in_lieu(self, month: int, day: int) -> "DecreeWriter":
        return self._save(month, day, DayType.IN_LIEU)

    # ── ranges ───────────────────────────────────────────────────────────

    def extend_to(self, month: int, day: int) -> "DecreeWriter":
        if not self._extendable:
            raise ArrangementError(
                "extend_to() must directly follow rest(), work() or in_lieu()."
            )
        last = self._decrees[-1]
        self._decrees[-1] = replace(last, end=self._date(month, day))
        self._extendable = False
        return self

    @property
    def decrees(self) -> tuple[Decree, ...]:
        return tuple(self._decrees)

    # ── internals ────────────────────────────────────────────────────────

    def _save(self, month: int, day: int, day_type: DayType) -> "DecreeWriter":
        when = self._date(month, day)
        if self._holiday is None:
            raise ArrangementError("mark_holiday() must be called before saving a day.")
        self._decrees.append(Decree(self._holiday, day_type, when, when))
        self._extendable = True
        return self

    def _date(self, month: int, day: int) -> date:
        if self._year is None:
            raise ArrangementError("select_year() must be called before saving a day.")
        try:
            return date(self._year, month, day)
        except ValueError as exc:
            raise ArrangementError(
                f"Invalid date {self._year}-{month}-{day}: {exc}"
            ) from exc

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from holidaytable.arrangement.decree import Decree, DayType
from holidaytable.calendar._exceptions import ArrangementError
from holidaytable.config import settings
from holidaytable.holiday import Holiday

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arrangement:
    """
    Expanded holiday tables.

    holidays      statutory rest days
    workdays      weekend days turned into working days
    in_lieu_days  days of rest given in exchange for a moved holiday
    """

    holidays: Mapping[date, Holiday]
    workdays: Mapping[date, Holiday]
    in_lieu_days: Mapping[date, Holiday]
    min_date: date
    max_date: date
    decrees: tuple[Decree, ...] = ()

    def holiday_dates(self) -> list[date]:
        return sorted(self.holidays)

    def workday_dates(self) -> list[date]:
        return sorted(self.workdays)

    def in_lieu_dates(self) -> list[date]:
        return sorted(self.in_lieu_days)

    @property
    def years(self) -> list[int]:
        return sorted({d.year for d in self.decrees})

    def decrees_for(self, year: int) -> list[Decree]:
        return [d for d in self.decrees if d.year == year]

    def __repr__(self) -> str:
        return (
            f"Arrangement(min_date={self.min_date}, "
            f"max_date={self.max_date}, "
            f"holidays={len(self.holidays)}, "
            f"workdays={len(self.workdays)}, "
            f"in_lieu_days={len(self.in_lieu_days)})"
        )


def build_arrangement(
    decrees: Iterable[Decree],
    strict: Optional[bool] = None,
) -> Arrangement:
    """
    Expand decree records into the three day tables.

    Records are applied in order and a later record overwrites an earlier
    one for the same day and table.  A day that ends up both a holiday and
    a workday raises ArrangementError when ``strict`` (default taken from
    settings), otherwise it is logged and left as is.
    """
    if strict is None:
        strict = settings.strict

    decrees = tuple(decrees)
    if not decrees:
        raise ArrangementError("No decrees given; nothing to build.")

    tables: dict[DayType, dict[date, Holiday]] = {t: {} for t in DayType}
    for decree in decrees:
        table = tables[decree.day_type]
        for day in decree.days():
            table[day] = decree.holiday

    holidays = tables[DayType.REST]
    workdays = tables[DayType.WORK]
    in_lieu_days = tables[DayType.IN_LIEU]

    overlap = sorted(holidays.keys() & workdays.keys())
    if overlap:
        listed = ", ".join(d.isoformat() for d in overlap)
        if strict:
            raise ArrangementError(f"Days marked both holiday and workday: {listed}.")
        logger.warning("Days marked both holiday and workday: %s", listed)

    keys = holidays.keys() | workdays.keys() | in_lieu_days.keys()
    arrangement = Arrangement(
        holidays=MappingProxyType(holidays),
        workdays=MappingProxyType(workdays),
        in_lieu_days=MappingProxyType(in_lieu_days),
        min_date=min(keys),
        max_date=max(keys),
        decrees=decrees,
    )
    logger.info("Built %r from %d decrees", arrangement, len(decrees))
    return arrangement

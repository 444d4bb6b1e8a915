"""
holidaytable.arrangement
~~~~~~~~~~~~~~~~~~~~~~~~

Holiday notices as data, and their expansion into day tables.

A notice is written as a chain of DecreeWriter calls, which produce
immutable Decree records.  build_arrangement() expands the records into
three tables (holidays, compensatory workdays, in-lieu days) plus the
covered date range.

Basic usage::

    from holidaytable.arrangement import DecreeWriter, build_arrangement
    from holidaytable.holiday import NATIONAL_DAY

    decrees = (
        DecreeWriter()
        .select_year(2022)
        .mark_holiday(NATIONAL_DAY)
        .rest(10, 1).extend_to(10, 7)
        .work(10, 8).work(10, 9)
        .decrees
    )
    arrangement = build_arrangement(decrees)

Public API
----------
Arrangement        The built, read-only tables.
Decree, DayType    A single notice line and its classification.
DecreeWriter       Fluent writer for notice lines.
build_arrangement  Expand decrees into an Arrangement.
all_decrees        Every bundled notice, 2004 onwards.
"""

from __future__ import annotations

from holidaytable.arrangement.builder import Arrangement, build_arrangement
from holidaytable.arrangement.data import DECREES_BY_YEAR, all_decrees
from holidaytable.arrangement.decree import DayType, Decree, DecreeWriter

__all__ = [
    "Arrangement",
    "DECREES_BY_YEAR",
    "DayType",
    "Decree",
    "DecreeWriter",
    "all_decrees",
    "build_arrangement",
]

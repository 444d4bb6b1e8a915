"""
tests/arrangement/test_decree.py

Covers:
  - Decree records (validation, day iteration, year)
  - DecreeWriter single-day lines and range extension
  - Out-of-order writer calls failing fast
"""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from holidaytable.arrangement import DayType, Decree, DecreeWriter
from holidaytable.calendar import ArrangementError
from holidaytable.holiday import LABOUR_DAY, NATIONAL_DAY, NEW_YEARS_DAY


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def writer():
    return DecreeWriter().select_year(2022).mark_holiday(NATIONAL_DAY)


# ── Decree records ────────────────────────────────────────────────────────────

class TestDecree:

    def test_single_day(self):
        d = Decree(NEW_YEARS_DAY, DayType.REST, date(2022, 1, 1), date(2022, 1, 1))
        assert list(d.days()) == [date(2022, 1, 1)]
        assert d.year == 2022

    def test_days_inclusive(self):
        d = Decree(NEW_YEARS_DAY, DayType.REST, date(2022, 1, 1), date(2022, 1, 3))
        assert list(d.days()) == [date(2022, 1, 1), date(2022, 1, 2), date(2022, 1, 3)]

    def test_days_cross_month(self):
        d = Decree(LABOUR_DAY, DayType.REST, date(2022, 4, 30), date(2022, 5, 4))
        assert len(list(d.days())) == 5

    def test_inverted_range_raises(self):
        with pytest.raises(ArrangementError):
            Decree(NEW_YEARS_DAY, DayType.REST, date(2022, 1, 3), date(2022, 1, 1))

    def test_frozen(self):
        d = Decree(NEW_YEARS_DAY, DayType.REST, date(2022, 1, 1), date(2022, 1, 1))
        with pytest.raises(FrozenInstanceError):
            d.end = date(2022, 1, 5)


# ── Writer: single days and ranges ────────────────────────────────────────────

class TestWriter:

    def test_rest_work_in_lieu(self, writer):
        decrees = writer.rest(10, 1).work(10, 8).in_lieu(10, 6).decrees
        assert [d.day_type for d in decrees] == [DayType.REST, DayType.WORK, DayType.IN_LIEU]
        assert all(d.holiday == NATIONAL_DAY for d in decrees)
        assert all(d.start == d.end for d in decrees)

    def test_extend_to_widens_previous_line(self, writer):
        decrees = writer.rest(10, 1).extend_to(10, 7).decrees
        assert decrees == (
            Decree(NATIONAL_DAY, DayType.REST, date(2022, 10, 1), date(2022, 10, 7)),
        )

    def test_extend_to_keeps_day_type(self, writer):
        decrees = writer.work(10, 8).extend_to(10, 9).decrees
        assert decrees[0].day_type is DayType.WORK
        assert decrees[0].end == date(2022, 10, 9)

    def test_extend_to_same_day(self, writer):
        decrees = writer.rest(10, 1).extend_to(10, 1).decrees
        assert list(decrees[0].days()) == [date(2022, 10, 1)]

    def test_holiday_switch(self, writer):
        decrees = writer.rest(10, 1).mark_holiday(NEW_YEARS_DAY).rest(12, 31).decrees
        assert decrees[0].holiday == NATIONAL_DAY
        assert decrees[1].holiday == NEW_YEARS_DAY

    def test_year_switch(self, writer):
        decrees = writer.rest(10, 1).select_year(2023).rest(10, 1).decrees
        assert [d.year for d in decrees] == [2022, 2023]

    def test_decrees_is_snapshot(self, writer):
        before = writer.rest(10, 1).decrees
        writer.rest(10, 2)
        assert len(before) == 1
        assert isinstance(before, tuple)


# ── Writer: out-of-order calls ────────────────────────────────────────────────

class TestWriterErrors:

    def test_day_without_year(self):
        with pytest.raises(ArrangementError, match="select_year"):
            DecreeWriter().mark_holiday(NATIONAL_DAY).rest(10, 1)

    def test_day_without_holiday(self):
        with pytest.raises(ArrangementError, match="mark_holiday"):
            DecreeWriter().select_year(2022).rest(10, 1)

    def test_extend_without_day(self, writer):
        with pytest.raises(ArrangementError, match="extend_to"):
            writer.extend_to(10, 7)

    def test_extend_twice(self, writer):
        writer.rest(10, 1).extend_to(10, 3)
        with pytest.raises(ArrangementError):
            writer.extend_to(10, 7)

    def test_extend_after_mark_holiday(self, writer):
        writer.rest(10, 1).mark_holiday(NEW_YEARS_DAY)
        with pytest.raises(ArrangementError):
            writer.extend_to(10, 7)

    def test_extend_after_select_year(self, writer):
        writer.rest(10, 1).select_year(2023)
        with pytest.raises(ArrangementError):
            writer.extend_to(10, 7)

    def test_inverted_extend(self, writer):
        with pytest.raises(ArrangementError):
            writer.rest(10, 7).extend_to(10, 1)

    def test_invalid_day(self, writer):
        with pytest.raises(ArrangementError):
            writer.rest(2, 30)

    def test_invalid_year(self):
        with pytest.raises(ArrangementError):
            DecreeWriter().select_year(0)

    def test_mark_non_holiday(self):
        with pytest.raises(ArrangementError):
            DecreeWriter().select_year(2022).mark_holiday("National Day")

    def test_failed_call_leaves_records_intact(self, writer):
        writer.rest(10, 1)
        with pytest.raises(ArrangementError):
            writer.rest(13, 1)
        assert len(writer.decrees) == 1

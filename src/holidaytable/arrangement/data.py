"""
State Council holiday notices, one function per year.

Each function writes the year's notice with a DecreeWriter.  Days that a
notice places in the neighbouring calendar year (New Year breaks starting on
30 or 31 December) are written under the year they fall in.
"""

from __future__ import annotations

from typing import Callable

from holidaytable.arrangement.decree import Decree, DecreeWriter
from holidaytable.holiday import (
    ANTI_FASCIST_70TH_DAY,
    DRAGON_BOAT_FESTIVAL,
    LABOUR_DAY,
    MID_AUTUMN_FESTIVAL,
    NATIONAL_DAY,
    NEW_YEARS_DAY,
    SPRING_FESTIVAL,
    TOMB_SWEEPING_DAY,
)

Notice = Callable[[], tuple[Decree, ...]]


def _year(year: int) -> DecreeWriter:
    return DecreeWriter().select_year(year)


def y2004() -> tuple[Decree, ...]:
    # https://zh.wikisource.org/zh-hans/国务院办公厅关于2004年部分节假日安排的通知
    return (
        _year(2004)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 22).extend_to(1, 28)
        .work(1, 17).extend_to(1, 18).in_lieu(1, 27).extend_to(1, 28)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 7)
        .work(5, 8).extend_to(5, 9).in_lieu(5, 6).extend_to(5, 7)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(10, 9).extend_to(10, 10).in_lieu(10, 6).extend_to(10, 7)
        .decrees
    )


def y2005() -> tuple[Decree, ...]:
    # https://zhidao.baidu.com/question/2299098.html
    return (
        _year(2005)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 9).extend_to(2, 15)
        .work(2, 5).extend_to(2, 6).in_lieu(2, 14).extend_to(2, 15)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 7)
        .work(4, 30).work(5, 8).in_lieu(5, 5).extend_to(5, 6)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(10, 8).extend_to(10, 9).in_lieu(10, 6).extend_to(10, 7)
        .decrees
    )


def y2006() -> tuple[Decree, ...]:
    # http://www.gov.cn/jrzg/2005-12/22/content_133837.htm
    return (
        _year(2006)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 29).extend_to(2, 4)
        .work(1, 28).work(2, 5).in_lieu(2, 2).extend_to(2, 3)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 7)
        .work(4, 29).extend_to(4, 30).in_lieu(5, 4).extend_to(5, 5)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 30).work(10, 8).in_lieu(10, 5).extend_to(10, 6)
        # 2007 New Year
        .mark_holiday(NEW_YEARS_DAY).work(12, 30).extend_to(12, 31)
        .decrees
    )


def y2007() -> tuple[Decree, ...]:
    # http://www.gov.cn/fwxx/sh/2006-12/18/content_471877.htm
    return (
        _year(2007)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .in_lieu(1, 2).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 18).extend_to(2, 24)
        .work(2, 17).work(2, 25).in_lieu(2, 22).extend_to(2, 23)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 7)
        .work(4, 28).extend_to(4, 29).in_lieu(5, 4).in_lieu(5, 7)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 29).extend_to(9, 30).in_lieu(10, 4).extend_to(10, 5)
        # 2008 New Year
        .mark_holiday(NEW_YEARS_DAY).rest(12, 30).extend_to(12, 31)
        .work(12, 29).in_lieu(12, 31)
        .decrees
    )


def y2008() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2007-12/18/content_837184.htm
    return (
        _year(2008)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 6).extend_to(2, 12)
        .work(2, 2).extend_to(2, 3).in_lieu(2, 11).extend_to(2, 12)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 4).extend_to(4, 6)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 3)
        .work(5, 4).in_lieu(5, 2)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 7).extend_to(6, 9)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 13).extend_to(9, 15)
        .mark_holiday(NATIONAL_DAY).rest(9, 29).extend_to(10, 5)
        .work(9, 27).extend_to(9, 28).in_lieu(9, 29).extend_to(9, 30)
        .decrees
    )


def y2009() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2008-12/10/content_1174014.htm
    return (
        _year(2009)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .work(1, 4).in_lieu(1, 2)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 25).extend_to(1, 31)
        .work(1, 24).work(2, 1).in_lieu(1, 29).extend_to(1, 30)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 4).extend_to(4, 6)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 3)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(5, 28).extend_to(5, 30)
        .work(5, 31).in_lieu(5, 29)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 8)
        .work(9, 27).work(10, 10).in_lieu(10, 7).extend_to(10, 8)
        # Mid-autumn falls inside the National Day break.
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(10, 3)
        .decrees
    )


def y2010() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2009-12/08/content_1482691.htm
    return (
        _year(2010)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 13).extend_to(2, 19)
        .work(2, 20).extend_to(2, 21).in_lieu(2, 18).extend_to(2, 19)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 3).extend_to(4, 5)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 3)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 14).extend_to(6, 16)
        .work(6, 12).extend_to(6, 13).in_lieu(6, 14).extend_to(6, 15)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 22).extend_to(9, 24)
        .work(9, 19).work(9, 25).in_lieu(9, 23).extend_to(9, 24)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 26).work(10, 9).in_lieu(10, 6).extend_to(10, 7)
        .decrees
    )


def y2011() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2010-12/10/content_1762643.htm
    return (
        _year(2011)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 2).extend_to(2, 8)
        .work(1, 30).work(2, 12).in_lieu(2, 7).extend_to(2, 8)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 3).extend_to(4, 5)
        .work(4, 2).in_lieu(4, 4)
        .mark_holiday(LABOUR_DAY).rest(4, 30).extend_to(5, 2)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 4).rest(6, 6)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 10).extend_to(9, 12)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(10, 8).extend_to(10, 9).in_lieu(10, 6).extend_to(10, 7)
        # 2012 New Year
        .mark_holiday(NEW_YEARS_DAY).work(12, 31)
        .decrees
    )


def y2012() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2011-12/06/content_2012097.htm
    return (
        _year(2012)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .in_lieu(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 22).extend_to(1, 28)
        .work(1, 21).work(1, 29).in_lieu(1, 26).extend_to(1, 27)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 2).extend_to(4, 4)
        .work(3, 31).work(4, 1).in_lieu(4, 2).extend_to(4, 3)
        .mark_holiday(LABOUR_DAY).rest(4, 29).extend_to(5, 1)
        .work(4, 28).in_lieu(4, 30)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 22).rest(6, 24)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 30)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 29).in_lieu(10, 5)
        .decrees
    )


def y2013() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2012-12/10/content_2286598.htm
    return (
        _year(2013)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .work(1, 5).extend_to(1, 6).in_lieu(1, 2).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 9).extend_to(2, 15)
        .work(2, 16).extend_to(2, 17).in_lieu(2, 14).extend_to(2, 15)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 4).extend_to(4, 6)
        .work(4, 7).in_lieu(4, 5)
        .mark_holiday(LABOUR_DAY).rest(4, 29).extend_to(5, 1)
        .work(4, 27).extend_to(4, 28).in_lieu(4, 29).extend_to(4, 30)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 10).extend_to(6, 12)
        .work(6, 8).extend_to(6, 9).in_lieu(6, 10).extend_to(6, 11)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 19).extend_to(9, 21)
        .work(9, 22).in_lieu(9, 20)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 29).work(10, 12).in_lieu(10, 4).in_lieu(10, 7)
        .decrees
    )


def y2014() -> tuple[Decree, ...]:
    # http://www.gov.cn/zwgk/2013-12/11/content_2546204.htm
    return (
        _year(2014)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 31).extend_to(2, 6)
        .work(1, 26).work(2, 8).in_lieu(2, 5).extend_to(2, 6)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 5).extend_to(4, 7)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 3)
        .work(5, 4).in_lieu(5, 2)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 2)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 8)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 28).work(10, 11).in_lieu(10, 6).extend_to(10, 7)
        .decrees
    )


def y2015() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2014-12/16/content_9302.htm
    return (
        _year(2015)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .work(1, 4).in_lieu(1, 2)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 18).extend_to(2, 24)
        .work(2, 15).work(2, 28).in_lieu(2, 23).extend_to(2, 24)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 5).extend_to(4, 6)
        .mark_holiday(LABOUR_DAY).rest(5, 1)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 20).rest(6, 22)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 27)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(10, 10).in_lieu(10, 7)
        # One-off commemoration, 3 September 2015.
        .mark_holiday(ANTI_FASCIST_70TH_DAY).rest(9, 3).extend_to(9, 4)
        .work(9, 6).in_lieu(9, 4)
        .decrees
    )


def y2016() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2015-12/10/content_10394.htm
    return (
        _year(2016)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 7).extend_to(2, 13)
        .work(2, 6).work(2, 14).in_lieu(2, 11).extend_to(2, 12)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 4)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 2)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 9).extend_to(6, 11)
        .work(6, 12).in_lieu(6, 10)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 15).extend_to(9, 17)
        .work(9, 18).in_lieu(9, 16)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(10, 8).extend_to(10, 9).in_lieu(10, 6).extend_to(10, 7)
        .decrees
    )


def y2017() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2016-12/01/content_5141603.htm
    return (
        _year(2017)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 2)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 27).extend_to(2, 2)
        .work(1, 22).work(2, 4).in_lieu(2, 1).extend_to(2, 2)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 2).extend_to(4, 4)
        .work(4, 1).in_lieu(4, 3)
        .mark_holiday(LABOUR_DAY).rest(5, 1)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(5, 28).extend_to(5, 30)
        .work(5, 27).in_lieu(5, 29)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 8)
        .work(9, 30).in_lieu(10, 6)
        # Mid-autumn falls inside the National Day break.
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(10, 4)
        .decrees
    )


def y2018() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2017-11/30/content_5243579.htm
    return (
        _year(2018)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 15).extend_to(2, 21)
        .work(2, 11).work(2, 24).in_lieu(2, 19).extend_to(2, 21)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 5).extend_to(4, 7)
        .work(4, 8).in_lieu(4, 6)
        .mark_holiday(LABOUR_DAY).rest(4, 29).extend_to(5, 1)
        .work(4, 28).in_lieu(4, 30)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 18)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 29).extend_to(9, 30).in_lieu(10, 4).extend_to(10, 5)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 24)
        # 2019 New Year
        .mark_holiday(NEW_YEARS_DAY).rest(12, 30).extend_to(12, 31)
        .work(12, 29).in_lieu(12, 31)
        .decrees
    )


def y2019() -> tuple[Decree, ...]:
    # http://www.gov.cn/xinwen/2018-12/06/content_5346287.htm
    # http://www.gov.cn/zhengce/content/2019-03/22/content_5375877.htm
    return (
        _year(2019)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 4).extend_to(2, 10)
        .work(2, 2).extend_to(2, 3).in_lieu(2, 4).in_lieu(2, 8)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 5).extend_to(4, 7)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 4)
        .work(4, 28).work(5, 5).in_lieu(5, 2).in_lieu(5, 3)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 7).extend_to(6, 9)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 13).extend_to(9, 15)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 29).work(10, 12).in_lieu(10, 4).in_lieu(10, 7)
        .decrees
    )


def y2020() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2019-11/21/content_5454164.htm
    # http://www.gov.cn/zhengce/content/2020-01/27/content_5472352.htm
    return (
        _year(2020)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 24).extend_to(2, 2)
        .work(1, 19).in_lieu(1, 29)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 4).extend_to(4, 6)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 5)
        .work(4, 26).work(5, 9).in_lieu(5, 4).extend_to(5, 5)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 25).extend_to(6, 27)
        .work(6, 28).in_lieu(6, 26)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 8)
        .work(9, 27).work(10, 10).in_lieu(10, 7).extend_to(10, 8)
        .decrees
    )


def y2021() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2020-11/25/content_5564127.htm
    return (
        _year(2021)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(2, 11).extend_to(2, 17)
        .work(2, 7).work(2, 20).in_lieu(2, 16).extend_to(2, 17)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 3).extend_to(4, 5)
        .mark_holiday(LABOUR_DAY).rest(5, 1).extend_to(5, 5)
        .work(4, 25).work(5, 8).in_lieu(5, 4).extend_to(5, 5)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 12).extend_to(6, 14)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 19).extend_to(9, 21)
        .work(9, 18).in_lieu(9, 20)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(9, 26).work(10, 9).in_lieu(10, 6).extend_to(10, 7)
        .decrees
    )


def y2022() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2021-10/25/content_5644835.htm
    return (
        _year(2022)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 3)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 31).extend_to(2, 6)
        .work(1, 29).work(1, 30).in_lieu(2, 3).extend_to(2, 4)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 3).extend_to(4, 5)
        .work(4, 2).in_lieu(4, 4)
        .mark_holiday(LABOUR_DAY).rest(4, 30).extend_to(5, 4)
        .work(4, 24).work(5, 7).in_lieu(5, 3).extend_to(5, 4)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 3).extend_to(6, 5)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 10).extend_to(9, 12)
        .mark_holiday(NATIONAL_DAY).rest(10, 1).extend_to(10, 7)
        .work(10, 8).work(10, 9).in_lieu(10, 6).extend_to(10, 7)
        # 2023 New Year
        .mark_holiday(NEW_YEARS_DAY).rest(12, 31)
        .decrees
    )


def y2023() -> tuple[Decree, ...]:
    # http://www.gov.cn/zhengce/content/2022-12/08/content_5730844.htm
    return (
        _year(2023)
        .mark_holiday(NEW_YEARS_DAY).rest(1, 1).extend_to(1, 2)
        .in_lieu(1, 2)
        .mark_holiday(SPRING_FESTIVAL).rest(1, 21).extend_to(1, 27)
        .work(1, 28).extend_to(1, 29).in_lieu(1, 26).extend_to(1, 27)
        .mark_holiday(TOMB_SWEEPING_DAY).rest(4, 5)
        .mark_holiday(LABOUR_DAY).rest(4, 29).extend_to(5, 3)
        .work(4, 23).work(5, 6).in_lieu(5, 2).extend_to(5, 3)
        .mark_holiday(DRAGON_BOAT_FESTIVAL).rest(6, 22).extend_to(6, 24)
        .work(6, 25).in_lieu(6, 23)
        .mark_holiday(MID_AUTUMN_FESTIVAL).rest(9, 29)
        .mark_holiday(NATIONAL_DAY).rest(9, 30).extend_to(10, 6)
        .work(10, 7).extend_to(10, 8).in_lieu(10, 5).extend_to(10, 6)
        .decrees
    )


DECREES_BY_YEAR: dict[int, Notice] = {
    2004: y2004,
    2005: y2005,
    2006: y2006,
    2007: y2007,
    2008: y2008,
    2009: y2009,
    2010: y2010,
    2011: y2011,
    2012: y2012,
    2013: y2013,
    2014: y2014,
    2015: y2015,
    2016: y2016,
    2017: y2017,
    2018: y2018,
    2019: y2019,
    2020: y2020,
    2021: y2021,
    2022: y2022,
    2023: y2023,
}


def all_decrees() -> tuple[Decree, ...]:
    """Every registered notice, in ascending year order."""
    decrees: list[Decree] = []
    for year in sorted(DECREES_BY_YEAR):
        decrees.extend(DECREES_BY_YEAR[year]())
    return tuple(decrees)

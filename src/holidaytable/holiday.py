from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Holiday:
    """
    A statutory public holiday.

    Two Holiday records with the same ``name`` are the same holiday; the
    English name and canonical length are descriptive only.
    """

    name: str
    english_name: str = field(compare=False)
    length_days: int = field(default=1, compare=False)

    @staticmethod
    def lookup(name: str) -> "Holiday":
        for holiday in HOLIDAYS:
            if name in (holiday.name, holiday.english_name):
                return holiday
        raise KeyError(name)

    def __str__(self) -> str:
        return self.name


NEW_YEARS_DAY = Holiday("元旦", "New Year's Day", 1)
SPRING_FESTIVAL = Holiday("春节", "Spring Festival", 3)
TOMB_SWEEPING_DAY = Holiday("清明", "Tomb-sweeping Day", 1)
LABOUR_DAY = Holiday("劳动节", "Labour Day", 1)
DRAGON_BOAT_FESTIVAL = Holiday("端午", "Dragon Boat Festival", 1)
NATIONAL_DAY = Holiday("国庆节", "National Day", 3)
MID_AUTUMN_FESTIVAL = Holiday("中秋", "Mid-autumn Festival", 1)
ANTI_FASCIST_70TH_DAY = Holiday(
    "中国人民抗日战争暨世界反法西斯战争胜利70周年纪念日",
    "Anti-Fascist 70th Day",
    1,
)

HOLIDAYS: tuple[Holiday, ...] = (
    NEW_YEARS_DAY,
    SPRING_FESTIVAL,
    TOMB_SWEEPING_DAY,
    LABOUR_DAY,
    DRAGON_BOAT_FESTIVAL,
    NATIONAL_DAY,
    MID_AUTUMN_FESTIVAL,
    ANTI_FASCIST_70TH_DAY,
)

"""
calcal.engines.old_hindu
------------------------
Old Hindu solar and lunar calendars after the Arya Siddhanta.

Both count from the Kali Yuga epoch using mean motions only: the sun and moon
advance uniformly, positions are exact Fractions of a day, and civil days start
at mean sunrise (6 a.m.). Because true motion is ignored, dates may differ by a
day from calendars computed with the true sun and moon.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.types import CanonicalDay, OldHinduLunarDate, OldHinduSolarDate
from .julian import fixed_from_julian

# 18 February 3102 BCE (Julian), the start of the Kali Yuga.
HINDU_EPOCH = fixed_from_julian(-3102, 2, 18)


@dataclass(frozen=True)
class OldHinduParams:
    """Civil days and sidereal revolutions in a Mahayuga of 4,320,000 years."""
    civil_days: int = 1577917500
    solar_revolutions: int = 4320000
    lunar_months: int = 53433336
    sunrise: Fraction = Fraction(1, 4)

    def __post_init__(self) -> None:
        if self.lunar_months <= 12 * self.solar_revolutions:
            raise ValueError("lunar_months must exceed 12 * solar_revolutions")

    @property
    def solar_year(self) -> Fraction:
        return Fraction(self.civil_days, self.solar_revolutions)

    @property
    def solar_month(self) -> Fraction:
        return self.solar_year / 12

    @property
    def lunar_month(self) -> Fraction:
        return Fraction(self.civil_days, self.lunar_months)

    @property
    def lunar_day(self) -> Fraction:
        return self.lunar_month / 30


ARYA = OldHinduParams()


def hindu_day_count(d: CanonicalDay) -> int:
    """Elapsed days since the Kali Yuga epoch."""
    return d - HINDU_EPOCH


class OldHinduSolarCalendar(CalendarBase):
    id = "oldHinduSolar"
    label = "Old Hindu Solar"
    caveat = "Mean-motion calendar; dates may be off by one day."

    def __init__(self, params: OldHinduParams = ARYA):
        self.p = params

    def from_canonical(self, day: CanonicalDay) -> OldHinduSolarDate:
        sun = hindu_day_count(day) + self.p.sunrise
        year = math.floor(sun / self.p.solar_year)
        month = math.floor(sun / self.p.solar_month) % 12 + 1
        d = math.floor(sun % self.p.solar_month) + 1
        return OldHinduSolarDate(year, month, d)

    def to_canonical(self, date: OldHinduSolarDate) -> CanonicalDay:
        if not 1 <= date.month <= 12:
            raise InvalidDate(f"Old Hindu solar month {date.month} out of range 1..12")
        if not 1 <= date.day <= 31:
            raise InvalidDate(f"Old Hindu solar day {date.day} out of range 1..31")
        start = date.year * self.p.solar_year + (date.month - 1) * self.p.solar_month
        fixed = math.ceil(HINDU_EPOCH + start + date.day - 1 - self.p.sunrise)
        # Months are 30 or 31 days long; a 31st day may not exist.
        if self.from_canonical(fixed) != date:
            raise InvalidDate(f"{date} does not exist in the Old Hindu solar calendar")
        return fixed


class OldHinduLunarCalendar(CalendarBase):
    id = "oldHinduLunar"
    label = "Old Hindu Lunar"
    caveat = "Mean-motion calendar; dates may be off by one day."

    def __init__(self, params: OldHinduParams = ARYA):
        self.p = params

    def is_leap_year(self, year: int) -> bool:
        """True when the lunar year holds an intercalated (adhika) month."""
        p = self.p
        # lunar_month - 12 * (solar_month - lunar_month)
        threshold = 13 * p.lunar_month - p.solar_year
        return (year * p.solar_year - p.solar_month) % p.lunar_month >= threshold

    def from_canonical(self, day: CanonicalDay) -> OldHinduLunarDate:
        p = self.p
        sun = hindu_day_count(day) + p.sunrise
        new_moon = sun - sun % p.lunar_month
        # Two new moons within one solar month: the first opens a leap month.
        leap = 0 < new_moon % p.solar_month <= p.solar_month - p.lunar_month
        month = math.ceil(new_moon / p.solar_month) % 12 + 1
        d = math.floor(sun / p.lunar_day) % 30 + 1
        year = math.ceil((new_moon + p.solar_month) / p.solar_year) - 1
        return OldHinduLunarDate(year, month, leap, d)

    def to_canonical(self, date: OldHinduLunarDate) -> CanonicalDay:
        p = self.p
        if not 1 <= date.month <= 12:
            raise InvalidDate(f"Old Hindu lunar month {date.month} out of range 1..12")
        if not 1 <= date.day <= 30:
            raise InvalidDate(f"Old Hindu lunar day {date.day} out of range 1..30")
        # Start of the solar month Mina preceding the year, and the first new moon after it.
        mina = (12 * date.year - 1) * p.solar_month
        lunar_new_year = p.lunar_month * (math.floor(mina / p.lunar_month) + 1)
        leap_month = math.ceil((lunar_new_year - mina) / (p.solar_month - p.lunar_month))
        months_before = date.month if (not date.leap and leap_month <= date.month) else date.month - 1
        fixed = math.ceil(
            HINDU_EPOCH
            + lunar_new_year
            + p.lunar_month * months_before
            + (date.day - 1) * p.lunar_day
            - p.sunrise
        )
        # Expunged lunar days and leap flags on ordinary months do not round-trip.
        if self.from_canonical(fixed) != date:
            raise InvalidDate(f"{date} does not exist in the Old Hindu lunar calendar")
        return fixed

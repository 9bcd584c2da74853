from __future__ import annotations

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.types import CanonicalDay, JulianDate
from .gregorian import astronomical_year, calendar_year

# 1 January 1 (Julian) is 30 December 1 BCE (Gregorian).
JULIAN_EPOCH = -1

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap_year(year: int) -> bool:
    return astronomical_year(year) % 4 == 0

def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDate(f"Julian month {month} out of range 1..12")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def _fixed(y: int, month: int, day: int) -> CanonicalDay:
    if month <= 2:
        correction = 0
    elif y % 4 == 0:
        correction = -1
    else:
        correction = -2
    return (
        JULIAN_EPOCH - 1
        + 365 * (y - 1)
        + (y - 1) // 4
        + (367 * month - 362) // 12
        + correction
        + day
    )

def fixed_from_julian(year: int, month: int, day: int) -> CanonicalDay:
    n = days_in_month(year, month)
    if not 1 <= day <= n:
        raise InvalidDate(f"Julian day {day} out of range 1..{n} for {year}-{month:02d}")
    return _fixed(astronomical_year(year), month, day)

def julian_from_fixed(d: CanonicalDay) -> JulianDate:
    y = (4 * (d - JULIAN_EPOCH) + 1464) // 1461
    prior_days = d - _fixed(y, 1, 1)
    if d < _fixed(y, 3, 1):
        correction = 0
    elif y % 4 == 0:
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = d - _fixed(y, month, 1) + 1
    return JulianDate(calendar_year(y), month, day)


class JulianCalendar(CalendarBase):
    id = "julian"
    label = "Julian"
    caveat = "Dates before 1 January 1 (Gregorian) may be unreliable."

    is_leap_year = staticmethod(is_leap_year)

    def to_canonical(self, d: JulianDate) -> CanonicalDay:
        return fixed_from_julian(d.year, d.month, d.day)

    def from_canonical(self, day: CanonicalDay) -> JulianDate:
        return julian_from_fixed(day)

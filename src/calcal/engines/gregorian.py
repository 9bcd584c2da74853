"""
calcal.engines.gregorian
------------------------
Proleptic Gregorian calendar. Years are numbered without a year 0
(1 BCE is year -1); internally the arithmetic runs on astronomical years.
"""

from __future__ import annotations

import re

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.types import CanonicalDay, GregorianDate

GREGORIAN_EPOCH = 1  # R.D. of 1 January 1

_DATE_RE = re.compile(r"^(-?)(\d{4})-(\d{2})-(\d{2})$")

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def astronomical_year(year: int) -> int:
    """Calendar year (no year 0) -> astronomical year (1 BCE = 0)."""
    if year == 0:
        raise InvalidDate("There is no year 0; 1 BCE is year -1.")
    return year + 1 if year < 0 else year

def calendar_year(y: int) -> int:
    return y - 1 if y <= 0 else y


def _leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)

def is_leap_year(year: int) -> bool:
    return _leap(astronomical_year(year))

def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDate(f"Gregorian month {month} out of range 1..12")
    if month == 2 and is_leap_year(year):
        return 29
    return _MONTH_DAYS[month - 1]


def _fixed(y: int, month: int, day: int) -> CanonicalDay:
    """Closed form on the astronomical year y."""
    if month <= 2:
        correction = 0
    elif _leap(y):
        correction = -1
    else:
        correction = -2
    return (
        GREGORIAN_EPOCH - 1
        + 365 * (y - 1)
        + (y - 1) // 4
        - (y - 1) // 100
        + (y - 1) // 400
        + (367 * month - 362) // 12
        + correction
        + day
    )

def fixed_from_gregorian(year: int, month: int, day: int) -> CanonicalDay:
    n = days_in_month(year, month)
    if not 1 <= day <= n:
        raise InvalidDate(f"Gregorian day {day} out of range 1..{n} for {year}-{month:02d}")
    return _fixed(astronomical_year(year), month, day)


def _astronomical_year_from_fixed(d: CanonicalDay) -> int:
    d0 = d - GREGORIAN_EPOCH
    n400, d1 = divmod(d0, 146097)
    n100, d2 = divmod(d1, 36524)
    n4, d3 = divmod(d2, 1461)
    n1 = d3 // 365
    y = 400 * n400 + 100 * n100 + 4 * n4 + n1
    # Last day of a leap cycle belongs to the year just counted.
    return y if (n100 == 4 or n1 == 4) else y + 1

def gregorian_from_fixed(d: CanonicalDay) -> GregorianDate:
    y = _astronomical_year_from_fixed(d)
    prior_days = d - _fixed(y, 1, 1)
    if d < _fixed(y, 3, 1):
        correction = 0
    elif _leap(y):
        correction = 1
    else:
        correction = 2
    month = (12 * (prior_days + correction) + 373) // 367
    day = d - _fixed(y, month, 1) + 1
    return GregorianDate(calendar_year(y), month, day)


def day_of_year(d: CanonicalDay) -> int:
    g = gregorian_from_fixed(d)
    return d - fixed_from_gregorian(g.year, 1, 1) + 1


def parse_date(text: str) -> GregorianDate:
    """
    Parse '[-]YYYY-MM-DD'. A leading '-' marks a year before the common era,
    so '-0001-12-31' is the last day of 1 BCE.
    """
    m = _DATE_RE.match(text.strip())
    if m is None:
        raise InvalidDate(f"Invalid date string {text!r}; expected [-]YYYY-MM-DD")
    sign, y, mo, dd = m.groups()
    year = int(y)
    if year == 0:
        raise InvalidDate(f"Invalid date string {text!r}; there is no year 0")
    if sign:
        year = -year
    month, day = int(mo), int(dd)
    # Validates month and day.
    fixed_from_gregorian(year, month, day)
    return GregorianDate(year, month, day)


class GregorianCalendar(CalendarBase):
    id = "gregorian"
    label = "Gregorian"

    is_leap_year = staticmethod(is_leap_year)

    def to_canonical(self, d: GregorianDate) -> CanonicalDay:
        return fixed_from_gregorian(d.year, d.month, d.day)

    def from_canonical(self, day: CanonicalDay) -> GregorianDate:
        return gregorian_from_fixed(day)

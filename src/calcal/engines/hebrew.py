"""
calcal.engines.hebrew
---------------------
Arithmetic Hebrew calendar.

A year begins on 1 Tishri (month 7). Its date is anchored to the molad
(mean conjunction) of Tishri, computed exactly in fractional days from the
epoch molad BaHaRaD, and then postponed by the four classical deferral rules.
Months are numbered from Nisan (1) so that Tishri is 7 and Adar II is 13.

Day frame: the integer part of a molad value counts days whose Sunday..Saturday
index is value mod 7 (0 = Sunday); the fraction measures time from 6 p.m. of
the preceding evening, so 3/4 corresponds to noon.
"""

from __future__ import annotations

import logging
import math
from fractions import Fraction

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.time import MONDAY, SUNDAY, TUESDAY, WEDNESDAY, FRIDAY
from calcal.core.types import CanonicalDay, HebrewDate

log = logging.getLogger(__name__)

NISAN, TISHRI, ADAR, ADAR_II = 1, 7, 12, 13
MARHESHVAN, KISLEV = 8, 9

PARTS_PER_DAY = 25920  # 24 hours x 1080 parts
SYNODIC_MONTH = 29 + Fraction(13753, PARTS_PER_DAY)
# Molad of Tishri AM 1: day 1, 5 hours 204 parts.
EPOCH_MOLAD = 1 + Fraction(5 * 1080 + 204, PARTS_PER_DAY)

# Offset from the elapsed-day frame to canonical days: 1 Tishri AM 1 = R.D. -1373427.
_DAY_FRAME_OFFSET = -1373428
HEBREW_EPOCH = -1373427

MEAN_YEAR = Fraction(35975351, 98496)  # 235 months / 19 years

_NOON = Fraction(18, 24)
_GATARAD = Fraction(9 * 1080 + 204, PARTS_PER_DAY)   # 9h 204p
_BETUTAKPAT = Fraction(15 * 1080 + 589, PARTS_PER_DAY)  # 15h 589p


def is_leap_year(year: int) -> bool:
    """Years 3, 6, 8, 11, 14, 17, 19 of the Metonic cycle have 13 months."""
    return (7 * year + 1) % 19 < 7

def last_month_of_year(year: int) -> int:
    return ADAR_II if is_leap_year(year) else ADAR

def months_elapsed(year: int) -> int:
    """Months from the epoch molad to the molad of Tishri of `year`."""
    return (235 * year - 234) // 19

def molad(year: int) -> Fraction:
    """Molad of Tishri in the elapsed-day frame (see module docstring)."""
    return EPOCH_MOLAD + months_elapsed(year) * SYNODIC_MONTH


def elapsed_days(year: int) -> int:
    """Day of 1 Tishri of `year` in the elapsed-day frame after all deferrals."""
    m = molad(year)
    day = math.floor(m)
    parts = m - day
    weekday = day % 7

    # Molad zaken: a molad at or after noon moves the new year to the next day.
    if parts >= _NOON:
        day += 1
    # GaTaRaD: in a common year a Tuesday molad at 9h 204p or later would
    # make the year too long.
    elif weekday == TUESDAY and parts >= _GATARAD and not is_leap_year(year):
        day += 1
    # BeTU'TaKPaT: after a leap year a Monday molad at 15h 589p or later
    # would make the previous year too short.
    elif weekday == MONDAY and parts >= _BETUTAKPAT and is_leap_year(year - 1):
        day += 1

    # Lo ADU Rosh: 1 Tishri never falls on Sunday, Wednesday or Friday.
    if day % 7 in (SUNDAY, WEDNESDAY, FRIDAY):
        day += 1
    return day

def new_year(year: int) -> CanonicalDay:
    """Canonical day of 1 Tishri."""
    return elapsed_days(year) + _DAY_FRAME_OFFSET

def days_in_year(year: int) -> int:
    return new_year(year + 1) - new_year(year)

def is_long_marheshvan(year: int) -> bool:
    return days_in_year(year) % 10 == 5

def is_short_kislev(year: int) -> bool:
    return days_in_year(year) % 10 == 3

def year_kind(year: int) -> str:
    """'deficient', 'regular' or 'complete'."""
    return {3: "deficient", 4: "regular", 5: "complete"}[days_in_year(year) % 10]


def last_day_of_month(year: int, month: int) -> int:
    if not 1 <= month <= last_month_of_year(year):
        raise InvalidDate(f"Hebrew month {month} out of range 1..{last_month_of_year(year)} for {year}")
    if month in (2, 4, 6, 10, ADAR_II):
        return 29
    if month == ADAR and not is_leap_year(year):
        return 29
    if month == MARHESHVAN and not is_long_marheshvan(year):
        return 29
    if month == KISLEV and is_short_kislev(year):
        return 29
    return 30


def _months_in_order(year: int):
    """Month numbers in the order they occur within the year."""
    return list(range(TISHRI, last_month_of_year(year) + 1)) + list(range(NISAN, TISHRI))

def fixed_from_hebrew(year: int, month: int, day: int) -> CanonicalDay:
    n = last_day_of_month(year, month)
    if not 1 <= day <= n:
        raise InvalidDate(f"Hebrew day {day} out of range 1..{n} for {year}-{month:02d}")
    d = new_year(year)
    for m in _months_in_order(year):
        if m == month:
            break
        d += last_day_of_month(year, m)
    return d + day - 1

def hebrew_from_fixed(d: CanonicalDay) -> HebrewDate:
    approx = math.floor((d - HEBREW_EPOCH) / MEAN_YEAR) + 1
    year = approx
    # The mean-year estimate is within one year of the truth.
    for _ in range(3):
        if d < new_year(year):
            year -= 1
        elif d >= new_year(year + 1):
            year += 1
        else:
            break
    else:
        raise RuntimeError(f"Hebrew year search did not converge for day {d}")
    if year != approx:
        log.debug("hebrew year estimate %d corrected to %d for day %d", approx, year, d)

    start = new_year(year)
    for m in _months_in_order(year):
        length = last_day_of_month(year, m)
        if d < start + length:
            return HebrewDate(year, m, d - start + 1)
        start += length
    raise RuntimeError(f"Day {d} lies beyond the end of Hebrew year {year}")


class HebrewCalendar(CalendarBase):
    id = "hebrew"
    label = "Hebrew"

    is_leap_year = staticmethod(is_leap_year)

    def to_canonical(self, d: HebrewDate) -> CanonicalDay:
        return fixed_from_hebrew(d.year, d.month, d.day)

    def from_canonical(self, day: CanonicalDay) -> HebrewDate:
        return hebrew_from_fixed(day)

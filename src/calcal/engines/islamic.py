"""
calcal.engines.islamic
----------------------
Arithmetic (tabular) Islamic calendar: twelve months alternating 30/29 days,
with a leap day closing month 12 in 11 years of every 30-year cycle.
"""

from __future__ import annotations

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.types import CanonicalDay, IslamicDate
from .julian import fixed_from_julian

# 1 Muharram AH 1 = 16 July 622 (Julian).
ISLAMIC_EPOCH = fixed_from_julian(622, 7, 16)

CYCLE_YEARS = 30
CYCLE_DAYS = 30 * 354 + 11  # 10631

LEAP_YEARS_IN_CYCLE = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})

# _LEAPS_BEFORE[k]: leap years among cycle years 1..k
_LEAPS_BEFORE = tuple(
    sum(1 for j in range(1, k + 1) if j in LEAP_YEARS_IN_CYCLE) for k in range(CYCLE_YEARS)
)


def is_leap_year(year: int) -> bool:
    return amod_cycle(year) in LEAP_YEARS_IN_CYCLE

def amod_cycle(year: int) -> int:
    """Position 1..30 of the year in its 30-year cycle."""
    return (year - 1) % CYCLE_YEARS + 1

def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise InvalidDate(f"Islamic month {month} out of range 1..12")
    if month == 12 and is_leap_year(year):
        return 30
    return 30 if month % 2 == 1 else 29

def days_in_year(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def _days_before_month(month: int) -> int:
    return 29 * (month - 1) + month // 2

def new_year(year: int) -> CanonicalDay:
    cycles, k = divmod(year - 1, CYCLE_YEARS)
    return ISLAMIC_EPOCH + cycles * CYCLE_DAYS + 354 * k + _LEAPS_BEFORE[k]


def fixed_from_islamic(year: int, month: int, day: int) -> CanonicalDay:
    n = days_in_month(year, month)
    if not 1 <= day <= n:
        raise InvalidDate(f"Islamic day {day} out of range 1..{n} for {year}-{month:02d}")
    return new_year(year) + _days_before_month(month) + day - 1

def islamic_from_fixed(d: CanonicalDay) -> IslamicDate:
    year = (CYCLE_YEARS * (d - ISLAMIC_EPOCH) + 10646) // CYCLE_DAYS
    # The estimate is off by at most one year at cycle boundaries.
    for _ in range(2):
        if d < new_year(year):
            year -= 1
        elif d >= new_year(year + 1):
            year += 1
        else:
            break
    prior_days = d - new_year(year)
    month = min(12, (11 * prior_days + 330) // 325)
    day = prior_days - _days_before_month(month) + 1
    return IslamicDate(year, month, day)


class IslamicCalendar(CalendarBase):
    id = "islamic"
    label = "Islamic"
    caveat = "Dates before 16 July 622 (Julian) precede the epoch and are proleptic."

    is_leap_year = staticmethod(is_leap_year)

    def to_canonical(self, d: IslamicDate) -> CanonicalDay:
        return fixed_from_islamic(d.year, d.month, d.day)

    def from_canonical(self, day: CanonicalDay) -> IslamicDate:
        return islamic_from_fixed(day)

from __future__ import annotations

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.time import MONDAY, THURSDAY, amod, day_of_week, kday_on_or_before
from calcal.core.types import CanonicalDay, ISODate
from .gregorian import _astronomical_year_from_fixed, _fixed


def _week_one_start(y: int) -> CanonicalDay:
    """Monday of ISO week 1: the week holding 4 January (and the first Thursday)."""
    return kday_on_or_before(_fixed(y, 1, 4), MONDAY)

def weeks_in_year(y: int) -> int:
    """52 or 53; a year has 53 weeks when it begins or ends on a Thursday."""
    jan1 = day_of_week(_fixed(y, 1, 1))
    dec31 = day_of_week(_fixed(y, 12, 31))
    return 53 if THURSDAY in (jan1, dec31) else 52


def fixed_from_iso(year: int, week: int, weekday: int) -> CanonicalDay:
    if not 1 <= weekday <= 7:
        raise InvalidDate(f"ISO weekday {weekday} out of range 1..7")
    n = weeks_in_year(year)
    if not 1 <= week <= n:
        raise InvalidDate(f"ISO week {week} out of range 1..{n} for {year}")
    return _week_one_start(year) + 7 * (week - 1) + (weekday - 1)

def iso_from_fixed(d: CanonicalDay) -> ISODate:
    approx = _astronomical_year_from_fixed(d - 3)
    year = approx + 1 if d >= _week_one_start(approx + 1) else approx
    week = (d - _week_one_start(year)) // 7 + 1
    return ISODate(year, week, amod(d, 7))


class ISOCalendar(CalendarBase):
    id = "iso"
    label = "ISO"
    caveat = "Dates before 1 January 1 (Gregorian) may be unreliable."

    def to_canonical(self, d: ISODate) -> CanonicalDay:
        return fixed_from_iso(d.year, d.week, d.weekday)

    def from_canonical(self, day: CanonicalDay) -> ISODate:
        return iso_from_fixed(day)

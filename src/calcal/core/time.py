from __future__ import annotations
from datetime import date

from .types import CanonicalDay

# JD at midnight starting R.D. 0; JDN of R.D. d is d + JDN_OFFSET.
JD_EPOCH = -1721424.5
JDN_OFFSET = 1721425

SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY = range(7)


def amod(x: int, y: int) -> int:
    """Adjusted remainder: x mod y in 1..y instead of 0..y-1."""
    return y + x % -y


def day_of_week(d: CanonicalDay) -> int:
    """0 = Sunday .. 6 = Saturday. R.D. 1 is a Monday."""
    return d % 7


def kday_on_or_before(d: CanonicalDay, k: int) -> CanonicalDay:
    """Latest day on or before d that falls on weekday k."""
    return d - day_of_week(d - k)


def from_jdn(jdn: int) -> CanonicalDay:
    """Canonical day of a Julian Day Number."""
    return jdn - JDN_OFFSET

def jd_from_moment(t: float) -> float:
    """Julian Date of a moment given as fractional canonical days (UT)."""
    return t - JD_EPOCH


def canonical_from_date(d: date) -> CanonicalDay:
    """datetime.date ordinals already count from R.D. 1."""
    return d.toordinal()

def today() -> CanonicalDay:
    return canonical_from_date(date.today())

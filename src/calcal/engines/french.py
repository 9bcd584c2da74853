"""
calcal.engines.french
---------------------
French Revolutionary calendar under the astronomical rule of 1793.

Each year begins on the day, reckoned in Paris local mean time, during which
the sun passes the autumnal equinox. Twelve 30-day months are followed by
five or six complementary days (the Sansculottides), so a year is leap when
the next equinox falls 366 days later.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.types import CanonicalDay, FrenchDate
from calcal.reference import astro_args as aa
from calcal.reference.solar import apparent_longitude_at, estimate_prior_solar_longitude
from .gregorian import fixed_from_gregorian

log = logging.getLogger(__name__)

AUTUMN = 180.0
SANSCULOTTIDES = 13

_MAX_SEARCH_DAYS = 5


@dataclass(frozen=True)
class FrenchParams:
    epoch_gregorian: Tuple[int, int, int] = (1792, 9, 22)
    longitude_deg_east: float = 2.0 + 20.0 / 60.0 + 15.0 / 3600.0  # Paris meridian

    @property
    def epoch(self) -> CanonicalDay:
        return fixed_from_gregorian(*self.epoch_gregorian)

    @property
    def zone(self) -> float:
        """Local mean time offset from UT, in days."""
        return self.longitude_deg_east / 360.0


class FrenchCalendar(CalendarBase):
    id = "french"
    label = "French Revolutionary"
    caveat = "Dates before 22 September 1792 precede the epoch and are proleptic."

    def __init__(self, params: FrenchParams = FrenchParams()):
        self.p = params
        self._epoch = params.epoch

    def midnight_in_paris(self, day: CanonicalDay) -> float:
        """UT moment of local midnight starting `day` on the Paris meridian."""
        return day - self.p.zone

    def new_year_on_or_before(self, day: CanonicalDay) -> CanonicalDay:
        """1 Vendemiaire of the year containing `day`."""
        approx = estimate_prior_solar_longitude(AUTUMN, self.midnight_in_paris(day + 1))
        start = math.floor(approx) - 1
        for candidate in range(start, start + _MAX_SEARCH_DAYS):
            # First day whose closing midnight sees the sun past the equinox.
            if _past_autumn(apparent_longitude_at(self.midnight_in_paris(candidate + 1))):
                if candidate > start + 2:
                    log.debug("equinox search for day %d stepped %d days", day, candidate - start)
                return candidate
        raise RuntimeError(f"Equinox search did not converge for day {day}")

    def new_year(self, year: int) -> CanonicalDay:
        approx = math.floor(self._epoch + 180 + aa.MEAN_TROPICAL_YEAR * (year - 1))
        return self.new_year_on_or_before(approx)

    def days_in_year(self, year: int) -> int:
        return self.new_year(year + 1) - self.new_year(year)

    def is_leap_year(self, year: int) -> bool:
        return self.days_in_year(year) == 366

    def days_in_month(self, year: int, month: int) -> int:
        if not 1 <= month <= 13:
            raise InvalidDate(f"French month {month} out of range 1..13")
        if month == SANSCULOTTIDES:
            return self.days_in_year(year) - 360
        return 30

    def to_canonical(self, d: FrenchDate) -> CanonicalDay:
        n = self.days_in_month(d.year, d.month)
        if not 1 <= d.day <= n:
            raise InvalidDate(f"French day {d.day} out of range 1..{n} for {d.year}-{d.month:02d}")
        return self.new_year(d.year) - 1 + 30 * (d.month - 1) + d.day

    def from_canonical(self, day: CanonicalDay) -> FrenchDate:
        start = self.new_year_on_or_before(day)
        year = round((start - self._epoch) / aa.MEAN_TROPICAL_YEAR) + 1
        month, rest = divmod(day - start, 30)
        return FrenchDate(year, month + 1, rest + 1)


def _past_autumn(longitude_deg: float) -> bool:
    # Longitudes in [180, 360) lie past the autumnal equinox; the window is
    # only ever sampled within a few days of it.
    return AUTUMN <= longitude_deg < AUTUMN + 90.0

"""
calcal.engines.mayan
--------------------
The three Maya day counts, all anchored to the Long Count epoch 0.0.0.0.0
(4 Ahau 8 Cumku).

Only the Long Count is invertible. The Haab (365 days) and Tzolkin
(260 days) positions recur, so they are resolved against a reference day with
the *_on_or_before searches instead of a to_canonical operation.
"""

from __future__ import annotations

from dataclasses import dataclass

from calcal.core.engine import CalendarBase
from calcal.core.errors import InvalidDate
from calcal.core.time import amod, from_jdn
from calcal.core.types import CanonicalDay, MayanHaab, MayanLongCount, MayanTzolkin

UINAL, TUN, KATUN, BAKTUN = 20, 360, 7200, 144000

HAAB_PERIOD = 365
TZOLKIN_PERIOD = 260
CALENDAR_ROUND = 18980  # lcm(260, 365)


@dataclass(frozen=True)
class MayanParams:
    """Correlation of the Long Count epoch with the Julian Day (GMT = 584283)."""
    correlation_jd: int = 584283

    def __post_init__(self) -> None:
        if self.correlation_jd <= 0:
            raise ValueError("correlation_jd must be positive")

    @property
    def epoch(self) -> CanonicalDay:
        return from_jdn(self.correlation_jd)


def haab_ordinal(h: MayanHaab) -> int:
    """Days of the Haab year elapsed before h (0..364)."""
    return (h.month - 1) * 20 + h.day

def tzolkin_ordinal(t: MayanTzolkin) -> int:
    """Position of t in the 260-day count, 0 for 1 Imix."""
    return (t.number - 1 + 39 * (t.number - t.name)) % TZOLKIN_PERIOD

def _check_haab(h: MayanHaab) -> None:
    if not 1 <= h.month <= 19:
        raise InvalidDate(f"Haab month {h.month} out of range 1..19")
    limit = 4 if h.month == 19 else 19
    if not 0 <= h.day <= limit:
        raise InvalidDate(f"Haab day {h.day} out of range 0..{limit} for month {h.month}")

def _check_tzolkin(t: MayanTzolkin) -> None:
    if not 1 <= t.number <= 13:
        raise InvalidDate(f"Tzolkin number {t.number} out of range 1..13")
    if not 1 <= t.name <= 20:
        raise InvalidDate(f"Tzolkin name {t.name} out of range 1..20")


_HAAB_AT_EPOCH = MayanHaab(8, 18)      # 8 Cumku
_TZOLKIN_AT_EPOCH = MayanTzolkin(4, 20)  # 4 Ahau


class MayanLongCountCalendar(CalendarBase):
    id = "mayanLongCount"
    label = "Mayan Long Count"

    def __init__(self, params: MayanParams = MayanParams()):
        self.p = params

    def to_canonical(self, lc: MayanLongCount) -> CanonicalDay:
        for name, value, radix in (("katun", lc.katun, 20), ("tun", lc.tun, 20),
                                   ("uinal", lc.uinal, 18), ("kin", lc.kin, 20)):
            if not 0 <= value < radix:
                raise InvalidDate(f"Long Count {name} {value} out of range 0..{radix - 1}")
        return (
            self.p.epoch
            + lc.baktun * BAKTUN
            + lc.katun * KATUN
            + lc.tun * TUN
            + lc.uinal * UINAL
            + lc.kin
        )

    def from_canonical(self, day: CanonicalDay) -> MayanLongCount:
        count = day - self.p.epoch
        baktun, rest = divmod(count, BAKTUN)
        katun, rest = divmod(rest, KATUN)
        tun, rest = divmod(rest, TUN)
        uinal, kin = divmod(rest, UINAL)
        return MayanLongCount(baktun, katun, tun, uinal, kin)


class MayanHaabCalendar(CalendarBase):
    id = "mayanHaab"
    label = "Mayan Haab"

    def __init__(self, params: MayanParams = MayanParams()):
        self.p = params

    @property
    def haab_epoch(self) -> CanonicalDay:
        """Most recent 0 Pop on or before the Long Count epoch."""
        return self.p.epoch - haab_ordinal(_HAAB_AT_EPOCH)

    def from_canonical(self, day: CanonicalDay) -> MayanHaab:
        count = (day - self.haab_epoch) % HAAB_PERIOD
        return MayanHaab(count % 20, count // 20 + 1)

    def on_or_before(self, h: MayanHaab, day: CanonicalDay) -> CanonicalDay:
        """Latest day on or before `day` with Haab position h."""
        _check_haab(h)
        return day - (day - self.haab_epoch - haab_ordinal(h)) % HAAB_PERIOD


class MayanTzolkinCalendar(CalendarBase):
    id = "mayanTzolkin"
    label = "Mayan Tzolkin"

    def __init__(self, params: MayanParams = MayanParams()):
        self.p = params

    @property
    def tzolkin_epoch(self) -> CanonicalDay:
        """Most recent 1 Imix on or before the Long Count epoch."""
        return self.p.epoch - tzolkin_ordinal(_TZOLKIN_AT_EPOCH)

    def from_canonical(self, day: CanonicalDay) -> MayanTzolkin:
        count = day - self.tzolkin_epoch + 1
        return MayanTzolkin(amod(count, 13), amod(count, 20))

    def on_or_before(self, t: MayanTzolkin, day: CanonicalDay) -> CanonicalDay:
        """Latest day on or before `day` with Tzolkin position t."""
        _check_tzolkin(t)
        return day - (day - self.tzolkin_epoch - tzolkin_ordinal(t)) % TZOLKIN_PERIOD


def calendar_round_on_or_before(
    haab_cal: MayanHaabCalendar,
    tzolkin_cal: MayanTzolkinCalendar,
    h: MayanHaab,
    t: MayanTzolkin,
    day: CanonicalDay,
) -> CanonicalDay:
    """
    Latest day on or before `day` carrying both h and t.

    Haab and Tzolkin positions only coincide when their offsets agree mod 5
    (gcd(365, 260) = 5); other combinations never occur.
    """
    _check_haab(h)
    _check_tzolkin(t)
    haab_count = haab_ordinal(h) + haab_cal.haab_epoch
    tzolkin_count = tzolkin_ordinal(t) + tzolkin_cal.tzolkin_epoch
    diff = tzolkin_count - haab_count
    if diff % 5 != 0:
        raise InvalidDate(f"{h} {t} never occurs in the Calendar Round")
    # diff is a multiple of 5, so 365 * diff = diff (mod 260).
    target = haab_count + HAAB_PERIOD * diff
    return day - (day - target) % CALENDAR_ROUND

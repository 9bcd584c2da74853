"""
calcal.reference.deltat

A simple ΔT (= TT − UT) model for day-level calendar work.

The long-term parabola of Morrison & Stephenson (2004),
    ΔT = -20 + 32 u^2 seconds,  u = (year - 1820) / 100,
is used for all epochs. It stays within a minute of observed values across
the telescopic era and degrades smoothly for remote epochs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class QuadraticDeltaT:
    """ΔT(year) = a + b*u + c*u^2, u=(year-y0)/100."""
    a: float
    b: float
    c: float
    y0: float = 2000.0

    def delta_t_seconds(self, year_decimal: float) -> float:
        u = (year_decimal - self.y0) / 100.0
        return self.a + self.b*u + self.c*u*u

    def info(self) -> Dict[str, object]:
        return {"type": "quadratic", "a": self.a, "b": self.b, "c": self.c, "y0": self.y0}


MORRISON_STEPHENSON_2004 = QuadraticDeltaT(a=-20.0, b=0.0, c=32.0, y0=1820.0)


def delta_t_seconds(year_decimal: float) -> float:
    return MORRISON_STEPHENSON_2004.delta_t_seconds(year_decimal)


def delta_t_days(jd_ut: float) -> float:
    """ΔT in days for a Julian Date in UT (decimal year from the Julian year length)."""
    year = 2000.0 + (jd_ut - 2451544.5) / 365.25
    return delta_t_seconds(year) / 86400.0

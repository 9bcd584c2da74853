from __future__ import annotations

from dataclasses import dataclass
from math import fmod


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0


# ------------------------------------------------------------
# Time variable (TT)
# ------------------------------------------------------------

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def T_centuries(jd_tt: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jd_tt - J2000_TT) / 36525.0


# Mean tropical year at J2000.0 (days); used for longitude-rate estimates.
MEAN_TROPICAL_YEAR = 365.242189


# ------------------------------------------------------------
# Sun mean elements (Meeus-style)
# ------------------------------------------------------------

@dataclass(frozen=True)
class SolarMean:
    L0_deg: float
    M_deg: float


def solar_mean_elements(T: float) -> SolarMean:
    """
    Meeus-style geometric mean longitude L0 and mean anomaly M (degrees, wrapped).
    """
    T2 = T * T
    L0 = 280.46646 + 36000.76983 * T + 0.0003032 * T2
    M = 357.52911 + 35999.05029 * T - 0.0001537 * T2
    return SolarMean(L0_deg=wrap_deg(L0), M_deg=wrap_deg(M))


def lunar_node_deg(T: float) -> float:
    """Longitude of the Moon's mean ascending node, Omega (degrees)."""
    T2 = T * T
    T3 = T2 * T
    return wrap_deg(125.04452 - 1934.136261 * T + 0.0020708 * T2 + (T3 / 450000.0))

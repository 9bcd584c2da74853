# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from calcal.core.time import jd_from_moment
from . import astro_args as aa
from .deltat import delta_t_days


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar coordinates (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    Computes true and apparent solar longitude for a given JD(TT)
    using truncated series expansions (accurate to ~0.01 deg near J2000).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)

    M_rad = math.radians(sm.M_deg)

    # Equation of centre
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )

    L_true = aa.wrap_deg(sm.L0_deg + C_sun)

    # Aberration and the leading nutation term
    Omega_rad = math.radians(aa.lunar_node_deg(T))
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def apparent_longitude_at(moment: float) -> float:
    """Apparent solar longitude (degrees) at a moment in fractional canonical days, UT."""
    jd_ut = jd_from_moment(moment)
    return solar_longitude(jd_ut + delta_t_days(jd_ut)).L_app_deg


def estimate_prior_solar_longitude(lam_deg: float, moment: float) -> float:
    """
    Approximate moment (UT, canonical days) at or before `moment` when the
    apparent solar longitude was lam_deg. One mean-rate step plus one
    correction; good to a fraction of a day.
    """
    rate = aa.MEAN_TROPICAL_YEAR / 360.0
    tau = moment - rate * aa.wrap_deg(apparent_longitude_at(moment) - lam_deg)
    delta = aa.wrap180(apparent_longitude_at(tau) - lam_deg)
    return min(moment, tau - rate * delta)

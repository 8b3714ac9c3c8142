"""Equation of time: apparent minus mean solar time."""

import math

from ._types import OrbitalElements
from .angles import deg_to_rad, rad_to_deg
from .orbit import orbital_elements

MINUTES_PER_DEGREE = 4.0


def _equation_of_time(
    obliquity: float, mean_longitude: float, eccentricity: float, mean_anomaly: float
) -> float:
    y = math.tan(deg_to_rad(obliquity) / 2.0) ** 2
    l0 = deg_to_rad(mean_longitude)
    m = deg_to_rad(mean_anomaly)
    e = eccentricity

    e_time = (
        y * math.sin(2.0 * l0)
        - 2.0 * e * math.sin(m)
        + 4.0 * e * y * math.sin(m) * math.cos(2.0 * l0)
        - 0.5 * y * y * math.sin(4.0 * l0)
        - 1.25 * e * e * math.sin(2.0 * m)
    )
    return rad_to_deg(e_time) * MINUTES_PER_DEGREE


def equation_of_time_from_elements(elements: OrbitalElements) -> float:
    """Equation of time in minutes from an already evaluated element bundle."""
    return _equation_of_time(
        elements.corrected_obliquity,
        elements.mean_longitude,
        elements.eccentricity,
        elements.mean_anomaly,
    )


def equation_of_time(t: float) -> float:
    """Calculate the equation of time.

    Input: t = Julian centuries since J2000.0
    Output: correction in minutes, roughly -14.5 (February) to +16.5 (November)
    """
    return equation_of_time_from_elements(orbital_elements(t))

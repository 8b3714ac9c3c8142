"""Orbital element approximations for the Sun as seen from Earth.

Every function takes ``t``, Julian centuries since J2000.0, and returns
degrees unless noted otherwise.
"""

import math
from fractions import Fraction

from ._types import OrbitalElements
from .angles import deg_to_rad, normalize_angle, rad_to_deg


def geom_mean_anomaly_sun(t: float) -> float:
    """Geometric mean anomaly of the Sun (not wrapped)."""
    return 357.52911 + t * (35999.05029 - 0.0001537 * t)


def eccentricity_earth_orbit(t: float) -> float:
    """Eccentricity of Earth's orbit (unitless)."""
    return 0.016708634 - t * (0.000042037 + 0.0000001267 * t)


def sun_eq_of_center(t: float) -> float:
    """Equation of center: correction from mean to true anomaly."""
    m_rad = deg_to_rad(geom_mean_anomaly_sun(t))
    return (
        math.sin(m_rad) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2.0 * m_rad) * (0.019993 - 0.000101 * t)
        + math.sin(3.0 * m_rad) * 0.000289
    )


def geom_mean_long_sun(t: float) -> float:
    """Geometric mean longitude of the Sun, in [0, 360) for any finite t."""
    raw = 280.46646 + t * (36000.76983 + 0.0003032 * t)
    if math.isfinite(raw):
        return normalize_angle(raw)
    # The quadratic term overflows near |t| ~ 1e156; reduce it exactly.
    exact = Fraction(280.46646) + Fraction(t) * (
        Fraction(36000.76983) + Fraction(0.0003032) * Fraction(t)
    )
    return normalize_angle(float(exact % 360))


def sun_true_long(t: float) -> float:
    return geom_mean_long_sun(t) + sun_eq_of_center(t)


def sun_true_anomaly(t: float) -> float:
    return geom_mean_anomaly_sun(t) + sun_eq_of_center(t)


def nutation_omega(t: float) -> float:
    """Longitude of the Moon's ascending node, drives the nutation terms."""
    return 125.04 - 1934.136 * t


def sun_apparent_long(t: float) -> float:
    """True longitude corrected for nutation and aberration."""
    omega = nutation_omega(t)
    return sun_true_long(t) - 0.00569 - 0.00478 * math.sin(deg_to_rad(omega))


def mean_obliquity_of_ecliptic(t: float) -> float:
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - t * 0.001813))
    return 23.0 + (26.0 + seconds / 60.0) / 60.0


def obliquity_correction(t: float) -> float:
    omega = nutation_omega(t)
    return mean_obliquity_of_ecliptic(t) + 0.00256 * math.cos(deg_to_rad(omega))


def sun_rad_vector(t: float) -> float:
    """Sun-Earth distance in AU."""
    e = eccentricity_earth_orbit(t)
    v = sun_true_anomaly(t)
    return (1.000001018 * (1.0 - e * e)) / (1.0 + e * math.cos(deg_to_rad(v)))


def sun_rt_ascension(t: float) -> float:
    """Right ascension, using atan2 so the quadrant survives."""
    epsilon = deg_to_rad(obliquity_correction(t))
    lam = deg_to_rad(sun_apparent_long(t))
    return rad_to_deg(math.atan2(math.cos(epsilon) * math.sin(lam), math.cos(lam)))


def sun_declination(t: float) -> float:
    epsilon = deg_to_rad(obliquity_correction(t))
    lam = deg_to_rad(sun_apparent_long(t))
    return rad_to_deg(math.asin(math.sin(epsilon) * math.sin(lam)))


def orbital_elements(t: float) -> OrbitalElements:
    """Evaluate the whole element chain once for ``t``.

    Produces the same values as the individual functions above, without
    re-deriving the shared intermediates for each one.
    """
    m = geom_mean_anomaly_sun(t)
    e = eccentricity_earth_orbit(t)
    m_rad = deg_to_rad(m)
    c = (
        math.sin(m_rad) * (1.914602 - t * (0.004817 + 0.000014 * t))
        + math.sin(2.0 * m_rad) * (0.019993 - 0.000101 * t)
        + math.sin(3.0 * m_rad) * 0.000289
    )
    l0 = geom_mean_long_sun(t)
    true_long = l0 + c
    true_anomaly = m + c
    omega_rad = deg_to_rad(nutation_omega(t))
    apparent_long = true_long - 0.00569 - 0.00478 * math.sin(omega_rad)
    e0 = mean_obliquity_of_ecliptic(t)
    epsilon = e0 + 0.00256 * math.cos(omega_rad)

    epsilon_rad = deg_to_rad(epsilon)
    lam_rad = deg_to_rad(apparent_long)
    right_ascension = rad_to_deg(
        math.atan2(math.cos(epsilon_rad) * math.sin(lam_rad), math.cos(lam_rad))
    )
    declination = rad_to_deg(math.asin(math.sin(epsilon_rad) * math.sin(lam_rad)))
    radius = (1.000001018 * (1.0 - e * e)) / (
        1.0 + e * math.cos(deg_to_rad(true_anomaly))
    )

    return OrbitalElements(
        julian_century=t,
        mean_anomaly=m,
        eccentricity=e,
        equation_of_center=c,
        mean_longitude=l0,
        true_longitude=true_long,
        true_anomaly=true_anomaly,
        apparent_longitude=apparent_long,
        mean_obliquity=e0,
        corrected_obliquity=epsilon,
        right_ascension=right_ascension,
        declination=declination,
        radius_vector=radius,
    )

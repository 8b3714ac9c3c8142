"""Atmospheric refraction correction and twilight gating."""

import math

from ._types import SkyPhase
from .angles import deg_to_rad, truncate_hundredths

ASTRONOMICAL_TWILIGHT_ZENITH = 108.0
NAUTICAL_TWILIGHT_ZENITH = 102.0
CIVIL_TWILIGHT_ZENITH = 96.0
HORIZON_ZENITH = 90.0


def refraction_correction(zenith: float) -> float:
    """Empirical refraction at a geometric zenith angle.

    Returns the correction in degrees; it is subtracted from the zenith.
    """
    elevation = 90.0 - zenith
    if elevation > 85.0:
        return 0.0

    te = math.tan(deg_to_rad(elevation))
    if elevation > 5.0:
        arcsec = 58.1 / te - 0.07 / te**3 + 0.000086 / te**5
    elif elevation > -0.575:
        arcsec = 1735.0 + elevation * (
            -518.2 + elevation * (103.4 + elevation * (-12.79 + elevation * 0.711))
        )
    else:
        arcsec = -20.774 / te
    return arcsec / 3600.0


def corrected_zenith(zenith: float) -> float:
    """Apparent zenith once refraction has lifted the Sun."""
    return zenith - refraction_correction(zenith)


def is_observable(corrected: float) -> bool:
    """True while the Sun is above the astronomical twilight limit."""
    return corrected < ASTRONOMICAL_TWILIGHT_ZENITH


def reported_elevation(corrected: float) -> float | None:
    """Elevation truncated to hundredths, or None past astronomical twilight."""
    if not is_observable(corrected):
        return None
    return truncate_hundredths(90.0 - corrected)


def sky_phase(corrected: float) -> SkyPhase:
    """Classify the sky by how far the Sun sits below the horizon."""
    if corrected < HORIZON_ZENITH:
        return SkyPhase.DAYLIGHT
    if corrected < CIVIL_TWILIGHT_ZENITH:
        return SkyPhase.CIVIL_TWILIGHT
    if corrected < NAUTICAL_TWILIGHT_ZENITH:
        return SkyPhase.NAUTICAL_TWILIGHT
    if corrected < ASTRONOMICAL_TWILIGHT_ZENITH:
        return SkyPhase.ASTRONOMICAL_TWILIGHT
    return SkyPhase.NIGHT

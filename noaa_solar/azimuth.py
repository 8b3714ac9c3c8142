"""Solar azimuth from zenith, declination and hour angle."""

import math

from .angles import (
    clamp_unit,
    deg_to_rad,
    normalize_angle,
    rad_to_deg,
    truncate_hundredths,
)
from .refraction import is_observable

DEGENERATE_DENOMINATOR = 0.001


def azimuth_angle(
    latitude: float, declination: float, hour_angle: float, zenith: float
) -> float:
    """Calculate solar azimuth in degrees clockwise from true north.

    Returns 0=North, 90=East, 180=South, 270=West. When the Sun sits at the
    zenith or the observer at a pole the bearing is undefined and the value
    falls back to due south (northern hemisphere) or due north.
    """
    lat_rad = deg_to_rad(latitude)
    zen_rad = deg_to_rad(zenith)
    denom = math.cos(lat_rad) * math.sin(zen_rad)

    if abs(denom) > DEGENERATE_DENOMINATOR:
        az_arg = (
            math.sin(lat_rad) * math.cos(zen_rad) - math.sin(deg_to_rad(declination))
        ) / denom
        azimuth = 180.0 - rad_to_deg(math.acos(clamp_unit(az_arg)))
        if hour_angle > 0.0:
            azimuth = -azimuth
    else:
        azimuth = 180.0 if latitude > 0.0 else 0.0

    return normalize_angle(azimuth)


def reported_azimuth(azimuth: float, corrected_zenith: float) -> float | None:
    """Azimuth truncated to hundredths, or None past astronomical twilight."""
    if not is_observable(corrected_zenith):
        return None
    return truncate_hundredths(azimuth)

"""Degrees <-> degrees/minutes/seconds conversion for display."""

import math


def to_degrees(degrees: float, minutes: float, seconds: float) -> float:
    """Combine degrees, minutes and seconds into decimal degrees.

    Components carry the sign of the coordinate, as produced by to_dms().
    """
    return degrees + minutes / 60.0 + seconds / 3600.0


def to_dms(value: float) -> tuple[float, float, float]:
    """Split decimal degrees into (whole degrees, whole minutes, seconds).

    Every component keeps the sign of ``value``: -12.5 -> (-12.0, -30.0, 0.0).
    """
    fraction, degrees = math.modf(value)
    seconds_fraction, minutes = math.modf(fraction * 60.0)
    return degrees, minutes, seconds_fraction * 60.0


def format_dms(value: float, positive: str = "N", negative: str = "S") -> str:
    """Format a coordinate as 51°30'26.64"N."""
    # Round to displayed precision first so 59.999" carries into the minutes.
    total_seconds = round(abs(value) * 3600.0, 2)
    degrees, remainder = divmod(total_seconds, 3600.0)
    minutes, seconds = divmod(remainder, 60.0)
    hemisphere = negative if value < 0 else positive
    return f"{degrees:.0f}°{minutes:02.0f}'{seconds:05.2f}\"{hemisphere}"


def format_latitude(latitude: float) -> str:
    return format_dms(latitude, "N", "S")


def format_longitude(longitude: float) -> str:
    return format_dms(longitude, "E", "W")

"""Angle helpers shared by every stage of the solar position pipeline.

All angles in degrees unless otherwise noted.
"""

import math


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    wrapped = angle % 360.0
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if wrapped == 360.0 else wrapped


def clamp_unit(value: float) -> float:
    """Clamp a cosine/sine argument to [-1, 1] ahead of acos/asin."""
    return max(-1.0, min(1.0, value))


def truncate_hundredths(value: float) -> float:
    """Drop everything past the second decimal: floor(100 * x) / 100."""
    return math.floor(100.0 * value) / 100.0

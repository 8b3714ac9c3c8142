"""Local solar geometry: true solar time, hour angle and zenith.

Longitude and UTC offset are both east positive (London is -0.13, BST is +1).
"""

import math

from ._types import SolarGeometry
from .angles import clamp_unit, deg_to_rad, rad_to_deg
from .equation_of_time import MINUTES_PER_DEGREE, equation_of_time_from_elements
from .julian import calendar_to_julian_day, julian_day_to_century
from .orbit import orbital_elements

MINUTES_PER_DAY = 1440.0


def time_of_day_hours(hour: float, minute: float, second: float) -> float:
    """Wall-clock time as fractional hours."""
    return hour + minute / 60.0 + second / 3600.0


def instant_julian_day(
    year: int,
    month: int,
    day: float,
    hour: float,
    minute: float,
    second: float,
    utc_offset: int,
) -> float:
    """Julian Day of a local wall-clock instant."""
    utc_hours = time_of_day_hours(hour, minute, second) - utc_offset
    return calendar_to_julian_day(year, month, day) + utc_hours / 24.0


def solar_time_correction(eot: float, longitude: float, utc_offset: int) -> float:
    """Minutes to add to local clock time to get true solar time."""
    return eot + MINUTES_PER_DEGREE * longitude - 60.0 * utc_offset


def true_solar_time(
    hour: float, minute: float, second: float, correction: float
) -> float:
    """True solar time in minutes since local solar midnight.

    Only values above one day are folded back; negative values pass
    through and are partly recovered by hour_angle().
    """
    tst = hour * 60.0 + minute + second / 60.0 + correction
    if tst > MINUTES_PER_DAY:
        tst -= MINUTES_PER_DAY * math.ceil(tst / MINUTES_PER_DAY - 1.0)
    return tst


def hour_angle(true_solar_time_minutes: float) -> float:
    """Hour angle in degrees: 0 at solar noon, negative in the morning."""
    ha = true_solar_time_minutes / MINUTES_PER_DEGREE - 180.0
    if ha < -180.0:
        ha += 360.0
    return ha


def zenith_angle(latitude: float, declination: float, hour_angle: float) -> float:
    """Calculate the solar zenith angle.

    Returns zenith angle in degrees, 0 (overhead) to 180 (nadir).
    """
    lat_rad = deg_to_rad(latitude)
    dec_rad = deg_to_rad(declination)
    cos_zenith = math.sin(lat_rad) * math.sin(dec_rad) + math.cos(
        lat_rad
    ) * math.cos(dec_rad) * math.cos(deg_to_rad(hour_angle))
    # Clamp to [-1, 1] to handle floating point errors
    return rad_to_deg(math.acos(clamp_unit(cos_zenith)))


def solve_geometry(
    latitude: float,
    longitude: float,
    year: int,
    month: int,
    day: float,
    hour: float,
    minute: float,
    second: float,
    utc_offset: int,
) -> SolarGeometry:
    """Run the Julian date, orbital and local geometry stages for one instant."""
    jd = instant_julian_day(year, month, day, hour, minute, second, utc_offset)
    t = julian_day_to_century(jd)
    elements = orbital_elements(t)
    eot = equation_of_time_from_elements(elements)

    correction = solar_time_correction(eot, longitude, utc_offset)
    tst = true_solar_time(hour, minute, second, correction)
    ha = hour_angle(tst)
    zenith = zenith_angle(latitude, elements.declination, ha)

    return SolarGeometry(
        julian_day=jd,
        julian_century=t,
        elements=elements,
        equation_of_time=eot,
        true_solar_time=tst,
        hour_angle=ha,
        zenith=zenith,
    )

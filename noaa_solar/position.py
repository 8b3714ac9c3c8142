"""Top-level solar position computation.

Validates inputs at the boundary, then runs the pure numeric pipeline:
Julian date -> orbital elements -> equation of time -> local geometry ->
refraction -> azimuth.
"""

import logging
import math
from datetime import datetime as DateTime, timezone

from ._types import GeoLocation, LocalMoment, SolarPosition
from .azimuth import azimuth_angle, reported_azimuth
from .exceptions import InputRangeError
from .geometry import solve_geometry
from .refraction import corrected_zenith, reported_elevation, sky_phase

log = logging.getLogger(__name__)

# Calendar and clock fields may roll over, but only this far. Keeps the
# Julian century within a few thousand so every series term stays finite.
MAX_CALENDAR_MAGNITUDE = 1_000_000


def _check_inputs(
    latitude: float,
    longitude: float,
    year: int,
    month: int,
    day: float,
    hour: float,
    minute: float,
    second: float,
    utc_offset_hours: int,
) -> None:
    values = {
        "latitude": latitude,
        "longitude": longitude,
        "day": day,
        "hour": hour,
        "minute": minute,
        "second": second,
        "utc_offset_hours": utc_offset_hours,
        "year": year,
        "month": month,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            raise InputRangeError(f"{name} must be finite, got {value}")
    for name in ("year", "month", "day", "hour", "minute", "second",
                 "utc_offset_hours"):
        if abs(values[name]) > MAX_CALENDAR_MAGNITUDE:
            raise InputRangeError(
                f"{name} must be within ±{MAX_CALENDAR_MAGNITUDE}, got {values[name]}"
            )
    if not -90.0 <= latitude <= 90.0:
        raise InputRangeError(f"latitude must be within [-90, 90], got {latitude}")
    if not -180.0 <= longitude <= 180.0:
        raise InputRangeError(
            f"longitude must be within [-180, 180], got {longitude}"
        )
    if int(utc_offset_hours) != utc_offset_hours:
        raise InputRangeError(
            f"utc_offset_hours must be a whole number, got {utc_offset_hours}"
        )
    if not (1 <= month <= 12 and 1 <= day <= 31):
        # Accepted as-is; the Julian day simply rolls over.
        log.warning("calendar fields month=%s day=%s are out of range", month, day)


def compute_solar_position(
    latitude: float,
    longitude: float,
    year: int,
    month: int,
    day: float,
    hour: float,
    minute: float,
    second: float,
    utc_offset_hours: int,
) -> SolarPosition:
    """Calculate the solar position for a location and local civil time.

    Args:
        latitude: Observer's latitude (degrees, negative for South)
        longitude: Observer's longitude (degrees, negative for West)
        year, month, day: Local calendar date
        hour, minute, second: Local wall-clock time, fractional values allowed
        utc_offset_hours: Whole-hour offset of local time from UTC (+1 for CET)

    Raises:
        InputRangeError: latitude/longitude out of range, non-finite values,
            or calendar/clock fields beyond MAX_CALENDAR_MAGNITUDE
    """
    _check_inputs(
        latitude, longitude, year, month, day, hour, minute, second, utc_offset_hours
    )
    log.debug(
        "solar position for lat=%s lon=%s at %s-%s-%s %s:%s:%s (UTC%+d)",
        latitude,
        longitude,
        year,
        month,
        day,
        hour,
        minute,
        second,
        utc_offset_hours,
    )

    geo = solve_geometry(
        latitude,
        longitude,
        year,
        month,
        day,
        hour,
        minute,
        second,
        int(utc_offset_hours),
    )
    elements = geo.elements
    corrected = corrected_zenith(geo.zenith)
    azimuth = azimuth_angle(latitude, elements.declination, geo.hour_angle, geo.zenith)

    return SolarPosition(
        julian_day=geo.julian_day,
        julian_century=geo.julian_century,
        declination=elements.declination,
        right_ascension=elements.right_ascension,
        radius_vector=elements.radius_vector,
        equation_of_time=geo.equation_of_time,
        true_solar_time=geo.true_solar_time,
        hour_angle=geo.hour_angle,
        zenith=geo.zenith,
        corrected_zenith=corrected,
        elevation=reported_elevation(corrected),
        azimuth=reported_azimuth(azimuth, corrected),
        sky_phase=sky_phase(corrected),
    )


def solar_position_at(location: GeoLocation, moment: LocalMoment) -> SolarPosition:
    """Calculate the solar position from value-typed location and moment."""
    return compute_solar_position(
        location.latitude,
        location.longitude,
        moment.year,
        moment.month,
        moment.day,
        moment.hour,
        moment.minute,
        moment.second,
        moment.utc_offset_hours,
    )


def solar_position_for_datetime(
    latitude: float, longitude: float, dt: DateTime
) -> SolarPosition:
    """Calculate solar position for a timezone-aware datetime.

    The instant is evaluated at its UTC wall time, so zones with
    non-whole-hour offsets are handled too.
    """
    if dt.tzinfo is None:
        raise ValueError("dt must be timezone-aware")
    utc = dt.astimezone(timezone.utc)
    return compute_solar_position(
        latitude,
        longitude,
        utc.year,
        utc.month,
        utc.day,
        utc.hour,
        utc.minute,
        utc.second + utc.microsecond / 1e6,
        0,
    )

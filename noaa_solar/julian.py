"""Calendar date to Julian Day and Julian century conversions."""

import math

J2000 = 2451545.0
DAYS_PER_CENTURY = 36525.0


def calendar_to_julian_day(year: int, month: int, day: float) -> float:
    """Julian Day at 0h of a proleptic Gregorian calendar date.

    January and February count as months 13 and 14 of the previous year.
    Calendar fields are not validated; day=40 simply lands 40 days into
    the month.
    """
    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
    )


def julian_day_to_century(jd: float) -> float:
    """Centuries elapsed since J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY

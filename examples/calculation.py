"""Demonstrate solar position calculations for London on 15 September 2016."""

from datetime import datetime
from zoneinfo import ZoneInfo

from noaa_solar.coordinates import format_latitude, format_longitude
from noaa_solar.position import compute_solar_position, solar_position_for_datetime
from noaa_solar.timezones import offset_for_zone


def main():
    latitude = 51.5074
    longitude = -0.1278

    offset = offset_for_zone("Europe/London", 2016, 9, 15, 12)
    pos = compute_solar_position(latitude, longitude, 2016, 9, 15, 12, 0, 0, offset)

    print("=== Solar Position Calculation Example ===")
    where = f"{format_latitude(latitude)} {format_longitude(longitude)}"
    print(f"Location: London ({where})")
    print(f"Date/Time: 2016-09-15 12:00:00 (UTC{offset:+d})")
    print()
    print("--- Solar Position ---")
    print(f"Julian Day: {pos.julian_day:.5f}")
    print(f"Declination: {pos.declination:.2f}°")
    print(f"Equation of Time: {pos.equation_of_time:.2f} minutes")
    print(f"True Solar Time: {pos.true_solar_time:.2f} minutes")
    print(f"Hour Angle: {pos.hour_angle:.2f}°")
    print(f"Zenith Angle: {pos.zenith:.2f}°")
    print(f"Elevation: {pos.elevation:.2f}°")
    print(f"Azimuth: {pos.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    print(f"Sun distance: {pos.radius_vector:.5f} AU")
    print()

    midnight = datetime(2016, 9, 15, 23, 30, tzinfo=ZoneInfo("Europe/London"))
    night = solar_position_for_datetime(latitude, longitude, midnight)
    print("--- Late evening ---")
    print(f"Zenith Angle: {night.zenith:.2f}°")
    print(f"Compatibility output: {night.as_dict()}")


if __name__ == "__main__":
    main()

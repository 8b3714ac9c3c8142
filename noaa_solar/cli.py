"""Command line front end: noaa-solar --lat 51.5 --lon -0.13 --date 2016-09-15."""

import argparse
import json
import logging
import sys
from datetime import datetime as DateTime

from ._types import TrackConfig
from .config import load_observer_config
from .coordinates import format_latitude, format_longitude
from .exceptions import SolarPositionError
from .position import compute_solar_position
from .timezones import local_offset, offset_for_zone
from .track import (
    generate_track,
    minutes_to_time,
    observable_window,
    track_to_compact,
)

log = logging.getLogger(__name__)


def _parse_date(value: str):
    try:
        return DateTime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected YYYY-MM-DD, got {value!r}"
        ) from None


def _parse_time(value: str):
    for fmt in ("%H:%M:%S", "%H:%M"):
        try:
            return DateTime.strptime(value, fmt).time()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="noaa-solar",
        description="Solar zenith, azimuth and elevation (NOAA algorithm)",
    )
    parser.add_argument("--lat", "--latitude", dest="latitude", type=float,
                        help="Observer latitude in degrees, north positive")
    parser.add_argument("--lon", "--longitude", dest="longitude", type=float,
                        help="Observer longitude in degrees, east positive")
    parser.add_argument("--date", type=_parse_date,
                        help="Local date YYYY-MM-DD (default: today)")
    parser.add_argument("--time", type=_parse_time,
                        help="Local time HH:MM[:SS] (default: now)")
    zone = parser.add_mutually_exclusive_group()
    zone.add_argument("--utc-offset", type=int,
                      help="Whole-hour UTC offset of the local time, e.g. 1")
    zone.add_argument("--timezone",
                      help="IANA time zone name, e.g. Europe/London")
    parser.add_argument("--config", action="append",
                        help="Observer INI file (repeatable)")
    parser.add_argument("--track", action="store_true",
                        help="Print the whole day at --interval minute steps")
    parser.add_argument("--interval", type=int,
                        help="Track interval in minutes")
    parser.add_argument("--json", action="store_true", help="Emit JSON")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity")
    return parser


def _resolve_offset(args, config, date, hour: int) -> int:
    if args.utc_offset is not None:
        return args.utc_offset
    if args.timezone:
        return offset_for_zone(args.timezone, date.year, date.month, date.day, hour)
    if config.utc_offset_hours is not None:
        return config.utc_offset_hours
    if config.timezone:
        return offset_for_zone(config.timezone, date.year, date.month, date.day, hour)
    return local_offset()


def _print_position(pos, latitude, longitude, date, time, offset) -> None:
    print("=== Solar Position ===")
    print(f"Location: {format_latitude(latitude)} {format_longitude(longitude)}")
    print(f"Date/Time: {date.isoformat()} {time.isoformat()} (UTC{offset:+d})")
    print()
    print(f"Declination: {pos.declination:.2f}°")
    print(f"Right Ascension: {pos.right_ascension:.2f}°")
    print(f"Equation of Time: {pos.equation_of_time:.2f} minutes")
    print(f"Hour Angle: {pos.hour_angle:.2f}°")
    print(f"Zenith Angle: {pos.zenith:.2f}°")
    print(f"Corrected Zenith: {pos.corrected_zenith:.2f}°")
    if pos.observable:
        print(f"Elevation: {pos.elevation:.2f}°")
        print(f"Azimuth: {pos.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    else:
        print("Elevation/Azimuth: not observable (past astronomical twilight)")
    print(f"Sky: {pos.sky_phase.value.replace('_', ' ')}")


def _clock(minutes: int) -> str:
    hour, minute = minutes_to_time(minutes)
    return f"{hour:02d}:{minute:02d}"


def _print_track(track) -> None:
    for entry in track.entries:
        clock = _clock(entry.minutes)
        if entry.elevation is None:
            print(f"{clock}  zenith {entry.zenith:7.2f}  -")
        else:
            print(
                f"{clock}  zenith {entry.zenith:7.2f}  "
                f"elevation {entry.elevation:6.2f}  azimuth {entry.azimuth:6.2f}"
            )
    window = observable_window(track)
    if window is not None:
        print(f"Observable from {_clock(window[0])} to {_clock(window[1])}")


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = load_observer_config(args.config)
        latitude = args.latitude if args.latitude is not None else config.latitude
        longitude = args.longitude if args.longitude is not None else config.longitude
        if latitude is None or longitude is None:
            parser.error("--lat and --lon are required (or set them in a config file)")

        now = DateTime.now()
        date = args.date or now.date()
        time = args.time or now.time().replace(microsecond=0)
        offset = _resolve_offset(args, config, date, time.hour)
        log.debug("resolved UTC offset %+d", offset)

        if args.track:
            track = generate_track(
                TrackConfig(
                    interval_minutes=args.interval or config.interval_minutes,
                    latitude=latitude,
                    longitude=longitude,
                    year=date.year,
                    month=date.month,
                    day=date.day,
                    utc_offset_hours=offset,
                )
            )
            if args.json:
                print(json.dumps(track_to_compact(track)))
            else:
                _print_track(track)
            return 0

        pos = compute_solar_position(
            latitude,
            longitude,
            date.year,
            date.month,
            date.day,
            time.hour,
            time.minute,
            time.second,
            offset,
        )
    except (SolarPositionError, ValueError) as e:
        print(f"noaa-solar: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(pos.as_dict(), indent=2))
    else:
        _print_position(pos, latitude, longitude, date, time, offset)
    return 0


if __name__ == "__main__":
    sys.exit(main())

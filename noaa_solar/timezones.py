"""Resolve whole-hour UTC offsets for the solar position core.

The core only consumes a signed integer; this module turns time zone
abbreviations, IANA names or the system zone into one.
"""

import logging
import re
from datetime import datetime as DateTime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import TimezoneError

log = logging.getLogger(__name__)

_ABBREVIATION = re.compile(r"^(?:GMT|UTC)(?:([+-])(\d{1,2})(?::?(\d{2}))?)?$")


def _whole_hours(offset: timedelta, label: str) -> int:
    seconds = int(offset.total_seconds())
    if seconds % 3600:
        raise TimezoneError(f"{label} has a non-whole-hour offset ({offset})")
    return seconds // 3600


def offset_from_abbreviation(abbreviation: str) -> int:
    """Offset in hours from an abbreviation such as "GMT+2" or "UTC-05"."""
    match = _ABBREVIATION.match(abbreviation.strip().upper())
    if match is None:
        raise TimezoneError(f"Unrecognised time zone abbreviation: {abbreviation!r}")
    sign, hours, minutes = match.groups()
    if sign is None:
        return 0
    if minutes and int(minutes):
        raise TimezoneError(
            f"{abbreviation!r} has a non-whole-hour offset, not supported"
        )
    offset = int(hours)
    return -offset if sign == "-" else offset


def offset_for_zone(
    name: str, year: int, month: int, day: int, hour: int = 12
) -> int:
    """Whole-hour offset of an IANA zone at a local wall-clock time."""
    try:
        tz = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        log.error("Unknown IANA time zone: %r", name)
        raise TimezoneError(f"Unknown IANA time zone: {name!r}") from e
    offset = DateTime(year, month, day, hour, tzinfo=tz).utcoffset()
    log.debug(
        "%s on %04d-%02d-%02d %02d:00 is UTC%s", name, year, month, day, hour, offset
    )
    return _whole_hours(offset, name)


def local_offset(when: DateTime | None = None) -> int:
    """Whole-hour offset of the system time zone at ``when`` (default: now)."""
    when = (when or DateTime.now()).astimezone()
    return _whole_hours(when.utcoffset(), when.tzname() or "local time zone")

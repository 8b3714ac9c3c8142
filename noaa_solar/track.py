"""Solar positions sampled across one civil day.

Entries are indexed by local clock minutes and computed with the full
pipeline; unobservable samples carry None for elevation and azimuth.
"""

import datetime
import logging

from ._types import DayTrack, TrackConfig, TrackEntry
from .position import compute_solar_position

log = logging.getLogger(__name__)

DEFAULT_CONFIG = TrackConfig()


def minutes_to_time(total_minutes: int) -> tuple[int, int]:
    """Convert minutes since midnight to (hour, minute)."""
    return (total_minutes // 60, total_minutes % 60)


def intervals_per_day(interval_minutes: int) -> int:
    """Calculate number of intervals in a day."""
    return 1440 // interval_minutes


def interpolate_angle(
    a1: float | None, a2: float | None, fraction: float
) -> float | None:
    """Interpolate between two bearings, taking the short way round 0/360."""
    if a1 is None or a2 is None:
        return None
    diff = a2 - a1
    if diff > 180:
        diff -= 360
    elif diff < -180:
        diff += 360
    return (a1 + diff * fraction) % 360.0


def _interpolate_linear(
    v1: float | None, v2: float | None, fraction: float
) -> float | None:
    if v1 is None or v2 is None:
        return None
    return v1 + fraction * (v2 - v1)


def generate_track(config: TrackConfig = DEFAULT_CONFIG) -> DayTrack:
    """Sample the solar position every ``interval_minutes`` from local midnight."""
    if config.interval_minutes <= 0:
        raise ValueError(
            f"interval_minutes must be positive, got {config.interval_minutes}"
        )
    entries = []
    for interval in range(intervals_per_day(config.interval_minutes)):
        minutes = interval * config.interval_minutes
        hour, minute = minutes_to_time(minutes)
        pos = compute_solar_position(
            config.latitude,
            config.longitude,
            config.year,
            config.month,
            config.day,
            hour,
            minute,
            0,
            config.utc_offset_hours,
        )
        entries.append(
            TrackEntry(
                minutes=minutes,
                zenith=pos.zenith,
                elevation=pos.elevation,
                azimuth=pos.azimuth,
            )
        )

    log.debug(
        "generated %d track entries for %04d-%02d-%02d",
        len(entries),
        config.year,
        config.month,
        config.day,
    )
    return DayTrack(
        config=config,
        entries=entries,
        generated_at=datetime.datetime.now(datetime.timezone.utc).isoformat(),
    )


def lookup(track: DayTrack, minutes: float) -> TrackEntry | None:
    """Look up the position at any minute of the day with linear interpolation.

    Returns None outside the sampled range.
    """
    entries = track.entries
    if not entries or minutes < entries[0].minutes or minutes > entries[-1].minutes:
        return None

    interval = track.config.interval_minutes
    idx = min(int((minutes - entries[0].minutes) // interval), len(entries) - 1)
    before = entries[idx]
    if minutes == before.minutes or idx + 1 >= len(entries):
        return before
    after = entries[idx + 1]
    fraction = (minutes - before.minutes) / (after.minutes - before.minutes)
    return TrackEntry(
        minutes=minutes,
        zenith=_interpolate_linear(before.zenith, after.zenith, fraction),
        elevation=_interpolate_linear(before.elevation, after.elevation, fraction),
        azimuth=interpolate_angle(before.azimuth, after.azimuth, fraction),
    )


def observable_window(track: DayTrack) -> tuple[int, int] | None:
    """First and last sampled minute at which the Sun is observable."""
    visible = [e.minutes for e in track.entries if e.elevation is not None]
    if not visible:
        return None
    return (visible[0], visible[-1])


def track_to_compact(track: DayTrack) -> list:
    """Strip metadata and return [[minutes, elevation, azimuth] ...]."""
    return [[e.minutes, e.elevation, e.azimuth] for e in track.entries]

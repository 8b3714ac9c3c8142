"""Observer defaults read from INI files.

    [observer]
    latitude = 51.5074
    longitude = -0.1278
    timezone = Europe/London
    interval_minutes = 10
"""

import configparser
import logging
import os

from ._types import ObserverConfig
from .exceptions import ConfigError

log = logging.getLogger(__name__)

SECTION = "observer"
DEFAULT_PATHS = ("/etc/noaa-solar.cfg", "~/.noaa-solar.cfg")


def _get(parser: configparser.ConfigParser, key: str, convert):
    if not parser.has_option(SECTION, key):
        return None
    raw = parser.get(SECTION, key).strip()
    try:
        return convert(raw)
    except ValueError as e:
        raise ConfigError(f"[{SECTION}] {key} = {raw!r} is not valid: {e}") from e


def load_observer_config(paths=None) -> ObserverConfig:
    """Read the [observer] section; files later in ``paths`` win."""
    paths = DEFAULT_PATHS if paths is None else paths
    parser = configparser.ConfigParser()
    try:
        found = parser.read([os.path.expanduser(p) for p in paths])
    except configparser.Error as e:
        raise ConfigError(f"Could not parse observer config: {e}") from e
    log.debug("observer config read from %s", found or "no files")

    if not parser.has_section(SECTION):
        return ObserverConfig()

    interval = _get(parser, "interval_minutes", int)
    if interval is None:
        interval = ObserverConfig.interval_minutes
    config = ObserverConfig(
        latitude=_get(parser, "latitude", float),
        longitude=_get(parser, "longitude", float),
        timezone=_get(parser, "timezone", str) or None,
        utc_offset_hours=_get(parser, "utc_offset_hours", int),
        interval_minutes=interval,
    )
    if config.latitude is not None and not -90.0 <= config.latitude <= 90.0:
        raise ConfigError(f"latitude {config.latitude} outside [-90, 90]")
    if config.longitude is not None and not -180.0 <= config.longitude <= 180.0:
        raise ConfigError(f"longitude {config.longitude} outside [-180, 180]")
    if config.interval_minutes <= 0:
        raise ConfigError(f"interval_minutes must be positive, got {interval}")
    return config

"""Exception hierarchy for noaa_solar."""


class SolarPositionError(Exception):
    """Base class for errors raised by noaa_solar."""


class InputRangeError(SolarPositionError, ValueError):
    """Coordinates or time components outside the domain of the algorithm."""


class TimezoneError(SolarPositionError):
    """A time zone could not be turned into a whole-hour UTC offset."""


class ConfigError(SolarPositionError):
    """Malformed observer configuration."""

"""Frozen dataclasses for all structured inputs and return types."""

from dataclasses import dataclass
from enum import StrEnum


class SkyPhase(StrEnum):
    DAYLIGHT = "daylight"
    CIVIL_TWILIGHT = "civil_twilight"
    NAUTICAL_TWILIGHT = "nautical_twilight"
    ASTRONOMICAL_TWILIGHT = "astronomical_twilight"
    NIGHT = "night"


@dataclass(frozen=True)
class GeoLocation:
    latitude: float  # degrees, north positive
    longitude: float  # degrees, east positive


@dataclass(frozen=True)
class LocalMoment:
    """Wall-clock civil time plus a whole-hour UTC offset (east positive)."""

    year: int
    month: int
    day: int
    hour: float = 0.0
    minute: float = 0.0
    second: float = 0.0
    utc_offset_hours: int = 0


@dataclass(frozen=True)
class OrbitalElements:
    """Solar orbital quantities at one Julian century value.

    Angles in degrees, eccentricity unitless, radius vector in AU.
    """

    julian_century: float
    mean_anomaly: float
    eccentricity: float
    equation_of_center: float
    mean_longitude: float
    true_longitude: float
    true_anomaly: float
    apparent_longitude: float
    mean_obliquity: float
    corrected_obliquity: float
    right_ascension: float
    declination: float
    radius_vector: float


@dataclass(frozen=True)
class SolarGeometry:
    julian_day: float
    julian_century: float
    elements: OrbitalElements
    equation_of_time: float
    true_solar_time: float
    hour_angle: float
    zenith: float


@dataclass(frozen=True)
class SolarPosition:
    """Observed solar position.

    ``elevation`` and ``azimuth`` are None once the refraction-corrected
    zenith reaches astronomical twilight (108 degrees).
    """

    julian_day: float
    julian_century: float
    declination: float
    right_ascension: float
    radius_vector: float
    equation_of_time: float
    true_solar_time: float
    hour_angle: float
    zenith: float
    corrected_zenith: float
    elevation: float | None
    azimuth: float | None
    sky_phase: SkyPhase

    @property
    def observable(self) -> bool:
        return self.elevation is not None

    def as_dict(self) -> dict[str, float]:
        """Flat result with -1.0 standing in for unobservable angles."""
        return {
            "zenith": self.zenith,
            "corrected_zenith": self.corrected_zenith,
            "elevation": -1.0 if self.elevation is None else self.elevation,
            "azimuth": -1.0 if self.azimuth is None else self.azimuth,
            "declination": self.declination,
            "equation_of_time_minutes": self.equation_of_time,
        }


@dataclass(frozen=True)
class TrackEntry:
    minutes: int
    zenith: float
    elevation: float | None
    azimuth: float | None


@dataclass(frozen=True)
class TrackConfig:
    interval_minutes: int = 5
    latitude: float = 51.5074
    longitude: float = -0.1278
    year: int = 2016
    month: int = 9
    day: int = 15
    utc_offset_hours: int = 0


@dataclass(frozen=True)
class DayTrack:
    config: TrackConfig
    entries: list[TrackEntry]
    generated_at: str


@dataclass(frozen=True)
class ObserverConfig:
    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    utc_offset_hours: int | None = None
    interval_minutes: int = 5

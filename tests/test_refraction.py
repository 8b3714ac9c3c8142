"""Refraction correction, twilight gating and sky phases."""

import math

import pytest

from noaa_solar._types import SkyPhase
from noaa_solar.refraction import (
    ASTRONOMICAL_TWILIGHT_ZENITH,
    corrected_zenith,
    is_observable,
    refraction_correction,
    reported_elevation,
    sky_phase,
)


class TestRefractionBands:
    @pytest.mark.parametrize("zenith", [0.0, 2.0, 4.999])
    def test_none_near_zenith(self, zenith):
        assert refraction_correction(zenith) == 0.0

    def test_mid_elevation_series(self):
        # elevation 45: tan = 1
        expected = (58.1 - 0.07 + 0.000086) / 3600.0
        assert refraction_correction(45.0) == pytest.approx(expected, rel=1e-9)

    def test_polynomial_at_horizon(self):
        assert refraction_correction(90.0) == pytest.approx(1735.0 / 3600.0)

    def test_polynomial_at_five_degrees(self):
        assert refraction_correction(85.0) == pytest.approx(574.625 / 3600.0)

    def test_below_horizon(self):
        expected = -20.774 / math.tan(math.radians(-1.0)) / 3600.0
        assert refraction_correction(91.0) == pytest.approx(expected)
        assert refraction_correction(91.0) > 0.0

    @pytest.mark.parametrize("boundary_zenith", [85.0, 90.575])
    def test_bands_meet_continuously(self, boundary_zenith):
        above = refraction_correction(boundary_zenith - 1e-6)
        below = refraction_correction(boundary_zenith + 1e-6)
        assert above == pytest.approx(below, abs=0.002)

    def test_deep_below_horizon_is_tiny(self):
        assert abs(refraction_correction(179.0)) < 0.001

    def test_corrected_zenith_lifts_the_sun(self):
        assert corrected_zenith(90.0) == pytest.approx(90.0 - 1735.0 / 3600.0)
        assert corrected_zenith(30.0) < 30.0


class TestTwilightGate:
    def test_threshold(self):
        assert ASTRONOMICAL_TWILIGHT_ZENITH == 108.0

    def test_boundary_is_exclusive(self):
        assert is_observable(107.99)
        assert not is_observable(108.0)
        assert not is_observable(108.01)

    def test_elevation_reported_just_inside(self):
        assert reported_elevation(107.99) == pytest.approx(-17.99, abs=0.011)

    @pytest.mark.parametrize("corrected", [108.0, 108.01, 150.0, 180.0])
    def test_elevation_withheld_past_twilight(self, corrected):
        assert reported_elevation(corrected) is None

    def test_elevation_truncated(self):
        assert reported_elevation(45.0) == 45.0
        assert reported_elevation(39.876) == pytest.approx(50.12, abs=1e-9)


class TestSkyPhase:
    @pytest.mark.parametrize(
        "corrected, phase",
        [
            (0.0, SkyPhase.DAYLIGHT),
            (89.9, SkyPhase.DAYLIGHT),
            (90.0, SkyPhase.CIVIL_TWILIGHT),
            (95.9, SkyPhase.CIVIL_TWILIGHT),
            (96.0, SkyPhase.NAUTICAL_TWILIGHT),
            (101.9, SkyPhase.NAUTICAL_TWILIGHT),
            (102.0, SkyPhase.ASTRONOMICAL_TWILIGHT),
            (107.99, SkyPhase.ASTRONOMICAL_TWILIGHT),
            (108.0, SkyPhase.NIGHT),
            (170.0, SkyPhase.NIGHT),
        ],
    )
    def test_phases(self, corrected, phase):
        assert sky_phase(corrected) is phase

    def test_values_are_strings(self):
        assert SkyPhase.CIVIL_TWILIGHT == "civil_twilight"

"""Azimuth geometry, degenerate cases and reporting."""

import pytest

from noaa_solar.azimuth import azimuth_angle, reported_azimuth
from noaa_solar.geometry import zenith_angle


class TestDegenerateGeometry:
    def test_north_pole_falls_back_to_south(self):
        assert azimuth_angle(90.0, 10.0, 0.0, 90.0) == 180.0

    def test_south_pole_falls_back_to_north(self):
        assert azimuth_angle(-90.0, -10.0, 0.0, 90.0) == 0.0

    def test_sun_overhead_at_equator(self):
        assert azimuth_angle(0.0, 0.0, 0.0, 0.0) == 0.0

    def test_sun_overhead_in_northern_hemisphere(self):
        assert azimuth_angle(23.0, 23.0, 0.0, 0.0) == 180.0


class TestClamping:
    def test_out_of_range_argument_does_not_raise(self):
        # (0 - sin 30) / sin 10 is about -2.9 before clamping
        assert azimuth_angle(0.0, 30.0, 0.0, 10.0) == pytest.approx(0.0, abs=1e-9)

    def test_positive_overshoot_clamped(self):
        # (sin 60 cos 10 - sin 0) / (cos 60 sin 10) is well above 1
        assert azimuth_angle(60.0, 0.0, 0.0, 10.0) == pytest.approx(180.0, abs=1e-9)


class TestSolarNoon:
    def test_northern_sun_due_south(self):
        assert azimuth_angle(40.0, 0.0, 0.0, 40.0) == pytest.approx(180.0, abs=1e-4)

    def test_southern_sun_due_north(self):
        assert azimuth_angle(-30.0, 10.0, 0.0, 40.0) == pytest.approx(0.0, abs=1e-4)


class TestMorningAfternoon:
    @pytest.mark.parametrize("ha", [15.0, 30.0, 60.0, 90.0, 120.0])
    def test_mirror_symmetry(self, ha):
        lat, dec = 40.0, 10.0
        morning = azimuth_angle(lat, dec, -ha, zenith_angle(lat, dec, -ha))
        afternoon = azimuth_angle(lat, dec, ha, zenith_angle(lat, dec, ha))
        assert 0.0 < morning < 180.0
        assert 180.0 < afternoon < 360.0
        assert morning + afternoon == pytest.approx(360.0, abs=1e-9)

    def test_equinox_sunrise_due_east(self):
        assert azimuth_angle(0.0, 0.0, -90.0, 90.0) == pytest.approx(90.0, abs=1e-9)

    def test_equinox_sunset_due_west(self):
        assert azimuth_angle(0.0, 0.0, 90.0, 90.0) == pytest.approx(270.0, abs=1e-9)


class TestAzimuthRange:
    @pytest.mark.parametrize(
        "lat, dec, ha",
        [
            (39.8, -20.0, -60.0),
            (39.8, -20.0, 60.0),
            (39.8, 22.0, -100.0),
            (39.8, 22.0, 100.0),
            (-45.0, 0.0, 0.0),
            (60.0, 23.0, -170.0),
            (60.0, 23.0, 179.9),
            (0.0, 0.0, 1e-9),
        ],
    )
    def test_in_range(self, lat, dec, ha):
        az = azimuth_angle(lat, dec, ha, zenith_angle(lat, dec, ha))
        assert 0.0 <= az < 360.0


class TestReportedAzimuth:
    def test_truncated_when_observable(self):
        assert reported_azimuth(123.456, 50.0) == pytest.approx(123.45, abs=1e-9)
        assert reported_azimuth(359.999, 107.99) == pytest.approx(359.99, abs=1e-9)

    def test_sentinel_at_and_past_threshold(self):
        assert reported_azimuth(123.456, 108.0) is None
        assert reported_azimuth(123.456, 108.01) is None

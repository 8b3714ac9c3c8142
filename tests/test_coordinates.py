"""Degrees/minutes/seconds conversions."""

import pytest

from noaa_solar.coordinates import (
    format_dms,
    format_latitude,
    format_longitude,
    to_degrees,
    to_dms,
)


class TestToDegrees:
    def test_known_value(self):
        assert to_degrees(51, 30, 26.64) == pytest.approx(51.5074, abs=1e-9)

    def test_whole_degrees(self):
        assert to_degrees(10, 0, 0) == 10.0


class TestToDms:
    def test_positive(self):
        d, m, s = to_dms(51.5074)
        assert (d, m) == (51.0, 30.0)
        assert s == pytest.approx(26.64, abs=1e-6)

    def test_negative_carries_sign(self):
        d, m, s = to_dms(-12.5)
        assert (d, m) == (-12.0, -30.0)
        assert s == pytest.approx(0.0, abs=1e-9)

    def test_small_negative(self):
        d, m, s = to_dms(-0.1278)
        assert d == 0.0
        assert m == -7.0
        assert s == pytest.approx(-40.08, abs=1e-6)

    @pytest.mark.parametrize(
        "value", [0.0, 51.5074, -0.1278, 89.999999, -179.123456, 12.25, -33.8688]
    )
    def test_roundtrip(self, value):
        assert to_degrees(*to_dms(value)) == pytest.approx(value, abs=1e-9)


class TestFormatting:
    def test_latitude(self):
        assert format_latitude(51.5074) == "51°30'26.64\"N"

    def test_longitude_west(self):
        assert format_longitude(-0.1278) == "0°07'40.08\"W"

    def test_southern(self):
        assert format_dms(-33.5, "N", "S") == "33°30'00.00\"S"

    def test_seconds_round_up_into_degrees(self):
        assert format_dms(10.999999999) == "11°00'00.00\"N"

    def test_seconds_round_up_into_minutes(self):
        # 12°29'59.999"
        assert format_dms(12.0 + 29 / 60 + 59.999 / 3600) == "12°30'00.00\"N"

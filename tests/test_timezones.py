"""UTC offset resolution."""

from datetime import datetime

import pytest

from noaa_solar.exceptions import TimezoneError
from noaa_solar.timezones import local_offset, offset_for_zone, offset_from_abbreviation


class TestAbbreviation:
    @pytest.mark.parametrize(
        "abbreviation, expected",
        [
            ("GMT+2", 2),
            ("GMT+1", 1),
            ("UTC-05", -5),
            ("utc+3", 3),
            ("GMT", 0),
            ("UTC", 0),
            ("GMT+10:00", 10),
            (" GMT-11 ", -11),
        ],
    )
    def test_parse(self, abbreviation, expected):
        assert offset_from_abbreviation(abbreviation) == expected

    @pytest.mark.parametrize("abbreviation", ["EST", "", "GMT+", "CET+1", "GMT+5:30"])
    def test_rejected(self, abbreviation):
        with pytest.raises(TimezoneError):
            offset_from_abbreviation(abbreviation)


class TestIanaZone:
    def test_london_summer_and_winter(self):
        assert offset_for_zone("Europe/London", 2016, 9, 15) == 1
        assert offset_for_zone("Europe/London", 2016, 1, 15) == 0

    def test_new_york(self):
        assert offset_for_zone("America/New_York", 2026, 7, 1) == -4
        assert offset_for_zone("America/New_York", 2026, 12, 1) == -5

    def test_east_of_dateline(self):
        assert offset_for_zone("Pacific/Auckland", 2026, 7, 1) == 12

    def test_half_hour_zone_rejected(self):
        with pytest.raises(TimezoneError, match="non-whole-hour"):
            offset_for_zone("Asia/Kolkata", 2026, 3, 20)

    def test_unknown_zone(self):
        with pytest.raises(TimezoneError, match="Unknown"):
            offset_for_zone("Mars/Olympus_Mons", 2026, 3, 20)


class TestLocalOffset:
    def test_returns_int(self):
        assert isinstance(local_offset(), int)
        assert isinstance(local_offset(datetime(2026, 6, 1, 12, 0)), int)

"""Unit tests for time and duration helpers."""

import pytest

from island_transit.utils.timeutils import (
    duration_text,
    format_duration,
    hour_of,
    minutes_between,
    parse_duration_to_minutes,
    parse_time,
    time_band,
)


class TestParseTime:
    """Test HH:MM parsing."""

    def test_valid_times(self):
        assert parse_time("00:00") == 0
        assert parse_time("08:30") == 510
        assert parse_time("23:59") == 1439

    @pytest.mark.parametrize("value", ["8:30", "24:00", "12:60", "noon", "", "08:30:00"])
    def test_invalid_times(self, value):
        with pytest.raises(ValueError, match="Invalid time"):
            parse_time(value)

    def test_hour_of(self):
        assert hour_of("18:45") == 18


class TestTimeBand:
    """Test time-of-day bands."""

    def test_band_boundaries(self):
        assert time_band(5) is None
        assert time_band(6) == "morning"
        assert time_band(11) == "morning"
        assert time_band(12) == "afternoon"
        assert time_band(17) == "afternoon"
        assert time_band(18) == "evening"
        assert time_band(21) == "evening"

    def test_late_night_is_in_no_band(self):
        assert time_band(22) is None
        assert time_band(23) is None


class TestDurations:
    """Test duration computation and formatting."""

    def test_format_duration(self):
        assert format_duration(95) == "1h 35min"
        assert format_duration(60) == "1h"
        assert format_duration(45) == "45min"
        assert format_duration(0) == "0min"

    def test_minutes_between(self):
        assert minutes_between("08:00", "11:15") == 195
        assert minutes_between("08:00", "08:00") == 0

    def test_minutes_between_missing_time(self):
        assert minutes_between(None, "11:15") is None
        assert minutes_between("08:00", "") is None

    def test_crossing_midnight_is_unavailable(self):
        assert minutes_between("23:00", "02:10") is None
        assert duration_text("23:00", "02:10") == "N/A"
        assert duration_text("23:00", "02:10", unavailable="-") == "-"

    def test_duration_text(self):
        assert duration_text("08:00", "10:15") == "2h 15min"

    def test_parse_duration_to_minutes(self):
        assert parse_duration_to_minutes("3h 15min") == 195
        assert parse_duration_to_minutes("2h") == 120
        assert parse_duration_to_minutes("45min") == 45

    def test_parse_duration_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_duration_to_minutes("N/A")
        with pytest.raises(ValueError):
            parse_duration_to_minutes("")

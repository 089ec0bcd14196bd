"""Tests for focus_vault.utils.duration_format."""

import pytest

from focus_vault.utils.duration_format import (
    format_duration,
    format_duration_compact,
    format_duration_hours,
)


class TestFormatDuration:
    @pytest.mark.parametrize("ms,expected", [
        (0, "00:00:00"),
        (None, "00:00:00"),
        (-5, "00:00:00"),
        (999, "00:00:00"),
        (90_000, "00:01:30"),
        (3_725_000, "01:02:05"),
        (100 * 3_600_000, "100:00:00"),
    ])
    def test_clock(self, ms, expected):
        assert format_duration(ms) == expected


class TestFormatCompact:
    @pytest.mark.parametrize("ms,expected", [
        (0, "0s"),
        (42_000, "42s"),
        (240_000, "4m"),
        (250_000, "4m 10s"),
        (7_200_000, "2h"),
        (8_100_000, "2h 15m"),
    ])
    def test_compact(self, ms, expected):
        assert format_duration_compact(ms) == expected


class TestFormatHours:
    def test_under_an_hour(self):
        assert format_duration_hours(45 * 60_000) == "45m"

    def test_hours(self):
        assert format_duration_hours(5_400_000) == "1.5h"

    def test_empty(self):
        assert format_duration_hours(0) == "0h"

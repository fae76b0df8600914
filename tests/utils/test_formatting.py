"""Tests for spreadsheet number and time formatting."""

import math

import pytest

from src.utils.formatting import format_lap_time, format_number, format_sector_time


def test_format_number_fixed_precision():
    assert format_number(160.0, 2) == "160.00"
    assert format_number(401.9, 0) == "402"
    assert format_number(14.74, 1) == "14.7"
    assert format_number(6.0, 3) == "6.000"


def test_lap_time():
    assert format_lap_time(95.4321) == "01:35.432"
    assert format_lap_time(0.0) == "00:00.000"
    assert format_lap_time(125.5) == "02:05.500"


def test_lap_time_rounding_carries_into_minutes():
    """Test that 59.9996 s rounds up to a full minute instead of 00:60.000."""
    assert format_lap_time(59.9996) == "01:00.000"


def test_sector_time():
    assert format_sector_time(27.5) == "00:00:27.500"
    assert format_sector_time(61.0) == "00:01:01.000"


@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_non_finite_times_rejected(value):
    with pytest.raises(ValueError):
        format_lap_time(value)
    with pytest.raises(ValueError):
        format_sector_time(value)

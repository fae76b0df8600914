"""Tests for header-based column resolution."""

import pytest

from src.preprocessing.columns import (
    RACE_COLUMNS,
    STATS_COLUMNS,
    find_column,
    resolve_columns,
)
from src.utils.errors import MissingColumnError


def test_resolve_any_column_order():
    header = ["Gear", "TimestampMS", "Speed"]

    assert resolve_columns(header, ["Speed", "Gear"]) == {"Speed": 2, "Gear": 0}


def test_duplicate_header_last_occurrence_wins():
    """Test that a repeated column name resolves to its last position."""
    header = ["Speed", "Gear", "Speed"]

    assert find_column(header, "Speed") == 2
    assert resolve_columns(header, ["Speed"]) == {"Speed": 2}


def test_lookup_is_case_sensitive():
    assert find_column(["speed"], "Speed") is None


def test_missing_columns_listed_together():
    header = ["Speed", "Gear"]

    with pytest.raises(MissingColumnError) as excinfo:
        resolve_columns(header, STATS_COLUMNS)

    assert excinfo.value.missing == [
        "Boost",
        "CarPerformanceIndex",
        "DrivetrainType",
        "Power",
        "Torque",
        "TimestampMS",
        "CarClass",
    ]
    assert "CarClass" in str(excinfo.value)


def test_repeated_names_resolved_once():
    resolved = resolve_columns(["Speed", "LapNumber"], ["Speed", "Speed", "LapNumber"])

    assert resolved == {"Speed": 0, "LapNumber": 1}


def test_race_and_stats_sets_share_speed():
    assert "Speed" in RACE_COLUMNS
    assert "Speed" in STATS_COLUMNS

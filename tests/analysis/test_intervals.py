"""Tests for speed-threshold interval timing."""

import numpy as np
import pytest

from src.analysis.intervals import duration_between
from src.utils.errors import (
    IntervalError,
    LengthMismatchError,
    NegativeDurationError,
    OutOfRangeError,
)


def test_acceleration_uses_sample_before_first_crossing():
    """0-60 is measured from the last sample before each threshold is reached."""
    times = [0, 1, 2, 3, 4, 5]
    speeds = [0, 20, 40, 61, 55, 0]

    assert duration_between(0, 60, times, speeds) == pytest.approx(2.0)


def test_deceleration_uses_last_sample_above_threshold():
    """60-0 runs from the last sample above 60 to the last sample above 0."""
    times = [0, 1, 2, 3, 4, 5]
    speeds = [0, 20, 40, 61, 55, 0]

    assert duration_between(60, 0, times, speeds) == pytest.approx(1.0)


def test_accelerate_then_brake_gives_two_non_negative_durations(profile):
    """Same run measured in both directions yields independent, non-negative times."""
    times = np.arange(len(profile), dtype=float)

    up = duration_between(0, 60, times, profile)
    down = duration_between(60, 0, times, profile)

    assert up == pytest.approx(6.0)
    assert down == pytest.approx(6.0)
    assert duration_between(0, 100, times, profile) == pytest.approx(10.0)
    assert duration_between(100, 0, times, profile) == pytest.approx(10.0)


def test_degenerate_interval_is_zero(profile):
    """Start and end at the same reachable speed."""
    times = np.arange(len(profile), dtype=float)

    assert duration_between(40, 40, times, profile) == 0.0


def test_threshold_at_peak_is_not_reached():
    """Peak exactly at the threshold never clears the +0.1 margin."""
    times = [0, 1, 2, 3, 4, 5]
    speeds = [0, 20, 40, 60, 55, 0]

    with pytest.raises(OutOfRangeError):
        duration_between(0, 60, times, speeds)

    with pytest.raises(OutOfRangeError):
        duration_between(60, 0, times, speeds)


def test_threshold_above_top_speed():
    times = [0, 1, 2, 3]
    speeds = [0, 50, 90, 0]

    with pytest.raises(OutOfRangeError, match="fora dos dados"):
        duration_between(0, 100, times, speeds)


def test_low_threshold_unreachable_without_idle_samples():
    """Log never stopped: thresholds below the minimum speed are rejected."""
    times = [0, 1, 2, 3]
    speeds = [5, 20, 40, 30]

    with pytest.raises(OutOfRangeError):
        duration_between(0, 30, times, speeds)


def test_log_starting_above_start_threshold():
    """Crossing of the start threshold happened before recording began."""
    times = [0, 1, 2, 3]
    speeds = [30, 40, 70, 0]

    with pytest.raises(OutOfRangeError, match="já começa"):
        duration_between(20, 60, times, speeds)


def test_length_mismatch():
    with pytest.raises(LengthMismatchError):
        duration_between(0, 60, [0, 1, 2], [0, 70])


def test_empty_series():
    with pytest.raises(OutOfRangeError):
        duration_between(0, 60, [], [])


def test_negative_duration_on_time_reset():
    """Non-monotonic timestamps produce an end time before the start time."""
    times = [10, 0, 1, 2]
    speeds = [0, 30, 70, 0]

    with pytest.raises(NegativeDurationError):
        duration_between(20, 60, times, speeds)


def test_interval_errors_are_recoverable_type():
    """OutOfRange and NegativeDuration share the recoverable base class."""
    assert issubclass(OutOfRangeError, IntervalError)
    assert issubclass(NegativeDurationError, IntervalError)
    assert not issubclass(LengthMismatchError, IntervalError)


def test_custom_margin():
    """A wider margin moves the crossing to a later sample."""
    times = [0, 1, 2, 3, 4]
    speeds = [0, 30, 60.5, 80, 0]

    assert duration_between(0, 60, times, speeds) == pytest.approx(1.0)
    assert duration_between(0, 60, times, speeds, margin=1.0) == pytest.approx(2.0)

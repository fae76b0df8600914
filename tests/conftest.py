"""Shared fixtures: synthetic telemetry logs built in memory."""

import pytest

from src.extraction.log_loader import TelemetryLog

MPH_PER_MPS = 2.237

STATS_HEADER = [
    "TimestampMS",
    "EngineMaxRpm",
    "CarOrdinal",
    "CarClass",
    "CarPerformanceIndex",
    "DrivetrainType",
    "Speed",
    "Power",
    "Torque",
    "Boost",
    "Gear",
]

RACE_HEADER = [
    "Speed",
    "DistanceTraveled",
    "BestLap",
    "CurrentLap",
    "LapNumber",
]


def speed_cell(mph: float) -> str:
    """Native speed cell (m/s) for a target speed in mph."""
    return repr(mph / MPH_PER_MPS)


def accel_brake_profile() -> list[float]:
    """0 → 160 mph in 10 mph steps, then back to 0, one sample per second."""
    up = [10.0 * i for i in range(17)]
    down = [160.0 - 10.0 * k for k in range(1, 17)]
    return up + down


@pytest.fixture
def profile():
    return accel_brake_profile()


@pytest.fixture
def make_stats_log():
    """Factory for a stats log from a speed profile (mph, one sample per second)."""

    def _make(
        speeds_mph,
        gears=None,
        powers_w=None,
        torques_nm=None,
        boosts=None,
        car_class="3",
        drivetrain="2",
        performance_index="800",
        ordinals=None,
    ):
        n = len(speeds_mph)
        gears = gears if gears is not None else [1] * 6 + [2] * (n - 6)
        powers_w = powers_w if powers_w is not None else [300000.0] * n
        torques_nm = torques_nm if torques_nm is not None else [500.0] * n
        boosts = boosts if boosts is not None else [14.7] * n
        ordinals = ordinals if ordinals is not None else ["2352"] * n

        rows = [STATS_HEADER]
        for i in range(n):
            rows.append([
                str(i * 1000),
                "8000",
                ordinals[i],
                car_class,
                performance_index,
                drivetrain,
                speed_cell(speeds_mph[i]),
                repr(float(powers_w[i])),
                repr(float(torques_nm[i])),
                repr(float(boosts[i])),
                str(gears[i]),
            ])
        return TelemetryLog.from_rows(rows)

    return _make


def lap_samples(lap_number, start_distance, points, best_lap):
    """Race rows for one lap from (distance_in_lap, lap_time) points."""
    return [
        [
            speed_cell(100.0 + lap_time / 10),
            repr(start_distance + distance),
            repr(best_lap),
            repr(lap_time),
            str(lap_number),
        ]
        for distance, lap_time in points
    ]


# In-lap points hitting every sector window (1878, 3184, 4311 m); the log
# ends just past the finish line of lap 1, so both laps are complete
LAP_0 = [(0.0, 0.0), (1000.0, 15.0), (1878.5, 30.0), (2500.0, 40.0),
         (3184.5, 52.0), (4000.0, 63.0), (4311.5, 71.0), (5950.0, 95.0)]
LAP_1 = [(0.0, 0.0), (1000.0, 14.5), (1878.5, 29.0), (2500.0, 38.5),
         (3184.5, 50.0), (4000.0, 61.0), (4311.5, 68.0), (5952.0, 92.2504)]


@pytest.fixture
def make_race_log():
    """Factory for a two-lap race log; the second lap is the best one."""

    def _make(laps=(LAP_0, LAP_1), best_lap=92.2504):
        rows = [RACE_HEADER]
        distance = 0.0
        for number, points in enumerate(laps):
            rows.extend(lap_samples(number, distance, points, best_lap))
            distance += points[-1][0] + 1.0
        return TelemetryLog.from_rows(rows)

    return _make

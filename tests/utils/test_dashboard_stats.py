from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from src.api.schemas import ScoreBand, Trajectory
from src.api.utils.dashboard_stats import (
    calculate_average_score,
    calculate_trajectory,
    count_missed_days,
    get_score_band,
    sort_records_desc,
)

START = date(2026, 10, 1)


def record(day: int, score: int = 0, recorded: bool = True) -> SimpleNamespace:
    return SimpleNamespace(date=START + timedelta(days=day), recorded=recorded, score=score)


@pytest.mark.parametrize(
    "score, expected",
    [
        (100, ScoreBand.GOOD),
        (70, ScoreBand.GOOD),
        (69, ScoreBand.WARNING),
        (40, ScoreBand.WARNING),
        (39.5, ScoreBand.BAD),
    ],
)
def test_get_score_band(score, expected):
    assert get_score_band(score) == expected


def test_sort_records_desc():
    records = [record(1), record(3), record(2)]

    assert [r.date.day for r in sort_records_desc(records)] == [4, 3, 2]
    assert [r.date.day for r in records] == [2, 4, 3]


def test_average_score_counts_only_recorded_days():
    records = [record(1, score=80), record(2, recorded=False), record(3, score=65)]

    # (80 + 65) / 2 = 72.5 -> 73
    assert calculate_average_score(records) == 73


def test_average_score_without_recorded_days_is_zero():
    assert calculate_average_score([]) == 0
    assert calculate_average_score([record(1, recorded=False)]) == 0


def test_count_missed_days():
    records = [record(1, recorded=False), record(2, score=90), record(3, recorded=False)]

    assert count_missed_days(records) == 2


def test_trajectory_is_flat_for_short_history():
    assert calculate_trajectory([]) == Trajectory.FLAT
    assert calculate_trajectory([record(1, score=100)]) == Trajectory.FLAT


def test_trajectory_compares_recent_and_previous_windows():
    rising = [record(day, score=40) for day in range(3)] + [record(day, score=90) for day in range(3, 6)]
    falling = [record(day, score=90) for day in range(3)] + [record(day, score=40) for day in range(3, 6)]

    assert calculate_trajectory(rising) == Trajectory.UP
    assert calculate_trajectory(falling) == Trajectory.DOWN


def test_trajectory_with_empty_previous_window():
    # Два дня: оба в окне последних трех, предыдущее окно пустое (среднее 0)
    assert calculate_trajectory([record(1, score=50), record(2, score=60)]) == Trajectory.UP
    assert calculate_trajectory([record(1, score=0), record(2, score=0)]) == Trajectory.FLAT


def test_trajectory_ignores_missed_days_inside_window():
    records = [
        record(0, score=60),
        record(1, score=60),
        record(2, score=60),
        record(3, score=60),
        record(4, recorded=False),
        record(5, score=60),
    ]

    assert calculate_trajectory(records) == Trajectory.FLAT

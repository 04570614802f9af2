import copy
from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from src.api.utils.scoring import (
    LifelinePoint,
    calculate_daily_score,
    calculate_lifeline_points,
    calculate_streak,
    round_half_up_ratio,
)

START = date(2026, 10, 1)


def habit(id: int, is_scoring: bool = True) -> SimpleNamespace:
    return SimpleNamespace(id=id, is_scoring=is_scoring)


def completion(habit_id: int, completed: object = True) -> SimpleNamespace:
    return SimpleNamespace(habit_id=habit_id, completed=completed)


def record(day: int, score: int = 0, recorded: bool = True) -> SimpleNamespace:
    return SimpleNamespace(date=START + timedelta(days=day), recorded=recorded, score=score)


# --- round_half_up_ratio ---


@pytest.mark.parametrize(
    "numerator, denominator, expected",
    [
        (100, 3, 33),
        (200, 3, 67),
        (100, 8, 13),  # 12.5 -> 13
        (100, 4, 25),
        (0, 5, 0),
        (500, 5, 100),
    ],
)
def test_round_half_up_ratio(numerator, denominator, expected):
    assert round_half_up_ratio(numerator, denominator) == expected


# --- calculate_daily_score ---


def test_daily_score_without_scoring_habits_is_zero():
    habits = [habit(1, is_scoring=False), habit(2, is_scoring=False)]
    completions = [completion(1), completion(2)]

    assert calculate_daily_score(habits, completions) == 0
    assert calculate_daily_score([], completions) == 0


@pytest.mark.parametrize(
    "total, done, expected",
    [(3, 0, 0), (3, 1, 33), (3, 2, 67), (3, 3, 100), (8, 1, 13), (7, 5, 71)],
)
def test_daily_score_is_rounded_share_of_completed(total, done, expected):
    habits = [habit(i) for i in range(1, total + 1)]
    completions = [completion(i, completed=i <= done) for i in range(1, total + 1)]

    assert calculate_daily_score(habits, completions) == expected


def test_daily_score_ignores_metric_habits():
    habits = [habit(1), habit(2), habit(3, is_scoring=False)]
    completions = [completion(1), completion(2, completed=False), completion(3)]

    assert calculate_daily_score(habits, completions) == 50


def test_daily_score_treats_missing_completion_as_incomplete():
    habits = [habit(1), habit(2)]

    assert calculate_daily_score(habits, [completion(1)]) == 50
    assert calculate_daily_score(habits, []) == 0


def test_daily_score_uses_first_matching_completion():
    habits = [habit(1)]

    assert calculate_daily_score(habits, [completion(1, False), completion(1, True)]) == 0
    assert calculate_daily_score(habits, [completion(1, True), completion(1, False)]) == 100


def test_daily_score_counts_only_strict_true():
    habits = [habit(1), habit(2)]
    completions = [completion(1, completed=1), completion(2, completed="yes")]

    assert calculate_daily_score(habits, completions) == 0


# --- calculate_streak ---


def test_streak_breaks_on_score_below_threshold():
    # Самая свежая запись первой
    records = [record(3, score=80), record(2, score=60), record(1, score=90)]

    assert calculate_streak(records, threshold_score=70) == 1


def test_streak_counts_all_perfect_days():
    records = [record(day, score=100) for day in range(5)]

    assert calculate_streak(records) == 5


def test_streak_is_zero_for_empty_history():
    assert calculate_streak([]) == 0


def test_streak_is_zero_when_latest_day_not_recorded():
    records = [record(1, score=100), record(2, recorded=False)]

    assert calculate_streak(records) == 0


def test_streak_does_not_depend_on_input_order():
    records = [record(1, score=40), record(3, score=90), record(2, score=75), record(4, score=70)]

    # 4, 3, 2 >= 70; день 1 прерывает серию
    assert calculate_streak(records) == 3
    assert calculate_streak(list(reversed(records))) == 3


def test_streak_threshold_is_inclusive():
    assert calculate_streak([record(1, score=70)], threshold_score=70) == 1
    assert calculate_streak([record(1, score=69)], threshold_score=70) == 0


def test_streak_does_not_see_days_without_records():
    # Между днями 1 и 5 записей нет вовсе, поэтому серия не прерывается
    records = [record(1, score=90), record(5, score=90)]

    assert calculate_streak(records) == 2


# --- calculate_lifeline_points ---


def test_lifeline_is_empty_for_empty_history():
    assert calculate_lifeline_points([]) == []


def test_lifeline_neutral_score_keeps_seed():
    single = record(0, score=50)

    assert calculate_lifeline_points([single]) == [LifelinePoint(date=single.date, value=50)]


def test_lifeline_perfect_day_then_miss():
    records = [record(0, score=100), record(1, recorded=False)]

    points = calculate_lifeline_points(records)

    assert [point.value for point in points] == [55, 50]
    assert [point.date for point in points] == [records[0].date, records[1].date]


def test_lifeline_is_sorted_by_date():
    records = [record(2, score=100), record(0, score=0), record(1, recorded=False)]

    points = calculate_lifeline_points(records)

    assert [point.date for point in points] == [START, START + timedelta(days=1), START + timedelta(days=2)]
    assert [point.value for point in points] == [45, 40, 45]


def test_lifeline_miss_penalty_floors_at_zero():
    records = [record(day, recorded=False) for day in range(12)]

    values = [point.value for point in calculate_lifeline_points(records)]

    assert values[:3] == [45, 40, 35]
    assert values[-2:] == [0, 0]


def test_lifeline_stays_within_bounds():
    high = [record(day, score=100) for day in range(20)]
    low = [record(day, score=0) for day in range(20)]

    high_values = [point.value for point in calculate_lifeline_points(high)]
    low_values = [point.value for point in calculate_lifeline_points(low)]

    assert all(0 <= value <= 100 for value in high_values + low_values)
    assert high_values[-1] == 100
    assert low_values[-1] == 0


def test_lifeline_replays_from_seed_on_every_call():
    records = [record(0, score=100)]

    assert calculate_lifeline_points(records) == calculate_lifeline_points(records)
    assert calculate_lifeline_points(records)[0].value == 55


# --- Детерминированность и отсутствие мутаций ---


def test_functions_do_not_mutate_inputs():
    habits = [habit(2), habit(1, is_scoring=False)]
    completions = [completion(2), completion(1, completed=False)]
    records = [record(3, score=90), record(1, recorded=False), record(2, score=10)]

    habits_before = copy.deepcopy(habits)
    completions_before = copy.deepcopy(completions)
    records_before = copy.deepcopy(records)

    first = (
        calculate_daily_score(habits, completions),
        calculate_streak(records),
        calculate_lifeline_points(records),
    )
    second = (
        calculate_daily_score(habits, completions),
        calculate_streak(records),
        calculate_lifeline_points(records),
    )

    assert first == second
    assert habits == habits_before
    assert completions == completions_before
    assert records == records_before

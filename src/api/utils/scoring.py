"""
Расчет оценки дня, серии (стрика) и линии жизни (lifeline).

Все функции чистые: не выполняют I/O, не изменяют переданные коллекции
и работают с любыми объектами нужной формы (модели SQLAlchemy, схемы Pydantic и т.п.).
Порядок входных записей не важен - функции сами сортируют копию по дате.
"""

from typing import Any, Iterable, NamedTuple, Protocol, Sequence

DEFAULT_STREAK_THRESHOLD = 70

# Параметры линии жизни
LIFELINE_SEED = 50
LIFELINE_MIN = 0
LIFELINE_MAX = 100
LIFELINE_MISS_PENALTY = 5
LIFELINE_SCORE_PIVOT = 50
LIFELINE_SCORE_DIVISOR = 10


class ScoringHabit(Protocol):
    """Привычка с точки зрения расчета оценки."""

    id: Any
    is_scoring: bool


class ScoringCompletion(Protocol):
    """Отметка выполнения привычки."""

    habit_id: Any
    completed: bool


class ScoredRecord(Protocol):
    """Итог дня: дата, признак записи и оценка."""

    date: Any
    recorded: bool
    score: int


class LifelinePoint(NamedTuple):
    """Точка линии жизни: дата и значение тренда в диапазоне [0, 100]."""

    date: Any
    value: float


def round_half_up_ratio(numerator: int, denominator: int) -> int:
    """
    Округляет numerator / denominator до ближайшего целого, половины - вверх.

    Считается в целых числах, без погрешностей float: 12.5 -> 13, 33.33 -> 33.
    Ожидает неотрицательный числитель и положительный знаменатель.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def calculate_daily_score(habits: Iterable[ScoringHabit], completions: Sequence[ScoringCompletion]) -> int:
    """
    Вычисляет оценку дня 0-100 как долю выполненных оценочных привычек.

    Привычки-метрики (is_scoring=False) не учитываются. Для каждой оценочной привычки
    берется первая отметка с совпадающим habit_id; привычка засчитывается, только если
    отметка есть и ее completed строго равно True. Если оценочных привычек нет - 0.

    Args:
        habits: Привычки дня.
        completions: Отметки выполнения за день.

    Returns:
        int: Оценка дня в диапазоне [0, 100].
    """
    scoring_habits = [habit for habit in habits if habit.is_scoring]

    if not scoring_habits:
        return 0

    achieved = 0
    for habit in scoring_habits:
        completion = next((c for c in completions if c.habit_id == habit.id), None)
        if completion is not None and completion.completed is True:
            achieved += 1

    return round_half_up_ratio(100 * achieved, len(scoring_habits))


def calculate_streak(records: Iterable[ScoredRecord], threshold_score: int = DEFAULT_STREAK_THRESHOLD) -> int:
    """
    Считает текущую серию: сколько последних дней подряд записаны с оценкой не ниже порога.

    Серия прерывается первым незаписанным днем или днем с оценкой ниже порога.
    Даты, для которых нет ни одной записи, не видны функции: пропуск прерывает серию,
    только если вызывающая сторона передала для него незаписанную запись.

    Args:
        records: Записи дней в любом порядке.
        threshold_score: Минимальная оценка дня, продолжающая серию.

    Returns:
        int: Длина серии (0 для пустого списка).
    """
    streak = 0
    for record in sorted(records, key=lambda r: r.date, reverse=True):
        if not record.recorded or record.score < threshold_score:
            break
        streak += 1

    return streak


def calculate_lifeline_points(records: Iterable[ScoredRecord]) -> list[LifelinePoint]:
    """
    Строит линию жизни - сглаженный тренд по истории дней.

    Стартует с 50. Пропущенный день снижает значение на 5 (не ниже 0),
    записанный день сдвигает его на (score - 50) / 10 с ограничением [0, 100].
    Каждая точка хранит значение после обработки своего дня.
    При каждом вызове история проигрывается заново с начального значения.

    Args:
        records: Записи дней в любом порядке.

    Returns:
        list[LifelinePoint]: Точки в порядке возрастания даты, по одной на запись.
    """
    points: list[LifelinePoint] = []
    current_value: float = LIFELINE_SEED

    for record in sorted(records, key=lambda r: r.date):
        if not record.recorded:
            current_value = max(LIFELINE_MIN, current_value - LIFELINE_MISS_PENALTY)
        else:
            delta = (record.score - LIFELINE_SCORE_PIVOT) / LIFELINE_SCORE_DIVISOR
            current_value = max(LIFELINE_MIN, min(LIFELINE_MAX, current_value + delta))

        points.append(LifelinePoint(date=record.date, value=current_value))

    return points

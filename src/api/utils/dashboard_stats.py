"""Агрегаты дашборда: средняя оценка, пропуски, направление тренда, градация оценок."""

from typing import Iterable, Sequence

from src.api.schemas.dashboard_schema import ScoreBand, Trajectory

from .scoring import ScoredRecord, round_half_up_ratio

GOOD_SCORE_THRESHOLD = 70
WARNING_SCORE_THRESHOLD = 40
TRAJECTORY_WINDOW = 3


def get_score_band(score: float) -> ScoreBand:
    """Градация оценки: >= 70 - good, >= 40 - warning, иначе bad."""
    if score >= GOOD_SCORE_THRESHOLD:
        return ScoreBand.GOOD
    if score >= WARNING_SCORE_THRESHOLD:
        return ScoreBand.WARNING
    return ScoreBand.BAD


def sort_records_desc(records: Iterable[ScoredRecord]) -> list[ScoredRecord]:
    """Копия записей от самой свежей к самой старой."""
    return sorted(records, key=lambda r: r.date, reverse=True)


def calculate_average_score(records: Iterable[ScoredRecord]) -> int:
    """
    Средняя оценка записанных дней с округлением половины вверх.

    Пропущенные дни не учитываются. Если записанных дней нет - 0.
    """
    scores = [record.score for record in records if record.recorded]

    if not scores:
        return 0

    return round_half_up_ratio(sum(scores), len(scores))


def count_missed_days(records: Iterable[ScoredRecord]) -> int:
    """Количество пропущенных (незаписанных) дней."""
    return sum(1 for record in records if not record.recorded)


def _mean_recorded_score(records: Sequence[ScoredRecord]) -> float:
    scores = [record.score for record in records if record.recorded]
    return sum(scores) / len(scores) if scores else 0


def calculate_trajectory(records: Iterable[ScoredRecord]) -> Trajectory:
    """
    Сравнивает средние оценки трех последних дней и трех дней перед ними.

    Учитываются только записанные дни окна; окно без записанных дней дает среднее 0.
    Меньше двух записей - flat.
    """
    sorted_records = sort_records_desc(records)

    if len(sorted_records) < 2:
        return Trajectory.FLAT

    recent_avg = _mean_recorded_score(sorted_records[:TRAJECTORY_WINDOW])
    older_avg = _mean_recorded_score(sorted_records[TRAJECTORY_WINDOW : 2 * TRAJECTORY_WINDOW])

    if recent_avg > older_avg:
        return Trajectory.UP
    if recent_avg < older_avg:
        return Trajectory.DOWN
    return Trajectory.FLAT

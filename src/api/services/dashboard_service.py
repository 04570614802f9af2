"""Сервис сводной статистики месяца."""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from src.api.core.config import settings
from src.api.core.logging import api_log as log
from src.api.models import DailyRecord
from src.api.repositories import DailyRecordRepository, MonthRepository
from src.api.schemas import DashboardSchema, LifelinePointSchema, RecentRecordSchema
from src.api.utils.dashboard_stats import (
    calculate_average_score,
    calculate_trajectory,
    count_missed_days,
    get_score_band,
    sort_records_desc,
)
from src.api.utils.scoring import LIFELINE_SEED, calculate_lifeline_points, calculate_streak

from .base_service import BaseService


def build_dashboard(
    month_id: int,
    records: Sequence[DailyRecord],
    *,
    streak_threshold: int,
    recent_limit: int,
) -> DashboardSchema:
    """
    Собирает статистику дашборда из записей месяца.

    Args:
        month_id (int): ID месяца.
        records (Sequence[DailyRecord]): Записи месяца в любом порядке.
        streak_threshold (int): Порог оценки для серии.
        recent_limit (int): Сколько последних записей вернуть.

    Returns:
        DashboardSchema: Статистика месяца.
    """
    sorted_records = sort_records_desc(records)
    latest_score = sorted_records[0].score if sorted_records else 0

    lifeline = calculate_lifeline_points(records)
    last_lifeline_value = lifeline[-1].value if lifeline else LIFELINE_SEED

    average_score = calculate_average_score(records)

    return DashboardSchema(
        month_id=month_id,
        latest_score=latest_score,
        latest_band=get_score_band(latest_score),
        streak=calculate_streak(records, threshold_score=streak_threshold),
        streak_threshold=streak_threshold,
        average_score=average_score,
        average_band=get_score_band(average_score),
        missed_days=count_missed_days(records),
        trajectory=calculate_trajectory(records),
        lifeline=[LifelinePointSchema(date=point.date, value=point.value) for point in lifeline],
        lifeline_band=get_score_band(last_lifeline_value),
        recent_records=[
            RecentRecordSchema(
                date=record.date,
                recorded=record.recorded,
                score=record.score,
                band=get_score_band(record.score),
            )
            for record in sorted_records[:recent_limit]
        ],
    )


class DashboardService(BaseService[DailyRecord, DailyRecordRepository]):
    """Сервис дашборда: считает статистику по записям месяца."""

    def __init__(self, record_repository: DailyRecordRepository, month_repository: MonthRepository):
        """
        Инициализирует сервис дашборда.

        Args:
            record_repository (DailyRecordRepository): Репозиторий дневных записей.
            month_repository (MonthRepository): Репозиторий месяцев.
        """
        super().__init__(repository=record_repository, month_repository=month_repository)

    async def get_dashboard(self, db_session: AsyncSession, *, month_id: int) -> DashboardSchema:
        """
        Получает статистику месяца.

        Raises:
            NotFoundException: Если месяц не найден.
        """
        await self.get_month_or_404(db_session, month_id=month_id)
        records = await self.repository.get_records_by_month_id(db_session, month_id=month_id)

        dashboard = build_dashboard(
            month_id,
            records,
            streak_threshold=settings.STREAK_THRESHOLD_SCORE,
            recent_limit=settings.RECENT_RECORDS_LIMIT,
        )

        log.debug(
            f"Дашборд месяца ID {month_id}: записей {len(records)}, серия {dashboard.streak}, "
            f"средняя оценка {dashboard.average_score}, тренд {dashboard.trajectory.value}."
        )
        return dashboard

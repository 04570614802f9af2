from datetime import date, timedelta

import pytest

from src.api.core.config import settings
from src.api.core.exceptions import NotFoundException
from src.api.schemas import ScoreBand, Trajectory
from src.api.services import DashboardService, build_dashboard

START = date(2026, 10, 1)


@pytest.fixture
def dashboard_service(record_repository, month_repository) -> DashboardService:
    return DashboardService(record_repository=record_repository, month_repository=month_repository)


def test_build_dashboard_for_empty_month():
    dashboard = build_dashboard(1, [], streak_threshold=70, recent_limit=10)

    assert dashboard.latest_score == 0
    assert dashboard.streak == 0
    assert dashboard.average_score == 0
    assert dashboard.missed_days == 0
    assert dashboard.trajectory == Trajectory.FLAT
    assert dashboard.lifeline == []
    assert dashboard.lifeline_band == ScoreBand.WARNING  # Начальное значение 50
    assert dashboard.recent_records == []


def test_build_dashboard_aggregates(record_factory):
    records = [
        record_factory(id=1, record_date=START, score=100),
        record_factory(id=2, record_date=START + timedelta(days=1), recorded=False),
        record_factory(id=3, record_date=START + timedelta(days=2), score=80),
        record_factory(id=4, record_date=START + timedelta(days=3), score=90),
    ]

    dashboard = build_dashboard(1, records, streak_threshold=70, recent_limit=3)

    assert dashboard.latest_score == 90
    assert dashboard.latest_band == ScoreBand.GOOD
    assert dashboard.streak == 2
    assert dashboard.streak_threshold == 70
    assert dashboard.average_score == 90
    assert dashboard.missed_days == 1
    assert [point.value for point in dashboard.lifeline] == [55, 50, 53, 57]
    assert [r.date for r in dashboard.recent_records] == [
        START + timedelta(days=3),
        START + timedelta(days=2),
        START + timedelta(days=1),
    ]
    assert dashboard.recent_records[-1].band == ScoreBand.BAD


async def test_get_dashboard_uses_settings(
    dashboard_service, month_repository, record_repository, month_factory, record_factory, db_session
):
    month_repository.get_by_id.return_value = month_factory()
    record_repository.get_records_by_month_id.return_value = [
        record_factory(id=1, record_date=START, score=settings.STREAK_THRESHOLD_SCORE),
    ]

    dashboard = await dashboard_service.get_dashboard(db_session, month_id=1)

    assert dashboard.month_id == 1
    assert dashboard.streak == 1
    assert dashboard.streak_threshold == settings.STREAK_THRESHOLD_SCORE


async def test_get_dashboard_for_missing_month(dashboard_service, month_repository, record_repository, db_session):
    month_repository.get_by_id.return_value = None

    with pytest.raises(NotFoundException):
        await dashboard_service.get_dashboard(db_session, month_id=1)

    record_repository.get_records_by_month_id.assert_not_awaited()

import pytest

from src.api.utils.view_state import (
    InvalidTransitionError,
    MonthSnapshot,
    ViewEvent,
    ViewMode,
    next_view_mode,
    resolve_view_mode,
)

NEW_MONTH = MonthSnapshot(month_exists=True, locked=False, habits_count=0, has_today_record=False)
READY_MONTH = MonthSnapshot(month_exists=True, locked=True, habits_count=3, has_today_record=False)
RECORDED_MONTH = MonthSnapshot(month_exists=True, locked=True, habits_count=3, has_today_record=True)


@pytest.mark.parametrize(
    "snapshot, expected",
    [
        (MonthSnapshot(month_exists=False), ViewMode.LOADING),
        (NEW_MONTH, ViewMode.SETUP),
        (READY_MONTH, ViewMode.RECORD),
        (RECORDED_MONTH, ViewMode.DASHBOARD),
        # Привычки есть, но месяц еще не зафиксирован - можно записывать день
        (MonthSnapshot(month_exists=True, locked=False, habits_count=2), ViewMode.RECORD),
    ],
)
def test_resolve_view_mode(snapshot, expected):
    assert resolve_view_mode(snapshot) == expected


def test_data_loaded_resolves_from_snapshot():
    assert next_view_mode(ViewMode.LOADING, ViewEvent.DATA_LOADED, NEW_MONTH) == ViewMode.SETUP
    assert next_view_mode(ViewMode.LOADING, ViewEvent.DATA_LOADED, RECORDED_MONTH) == ViewMode.DASHBOARD


def test_setup_completed_moves_to_record():
    assert next_view_mode(ViewMode.SETUP, ViewEvent.SETUP_COMPLETED, READY_MONTH) == ViewMode.RECORD


def test_record_saved_moves_to_dashboard_after_reload():
    assert next_view_mode(ViewMode.RECORD, ViewEvent.RECORD_SAVED, RECORDED_MONTH) == ViewMode.DASHBOARD


def test_new_record_requested_returns_to_record():
    assert next_view_mode(ViewMode.DASHBOARD, ViewEvent.NEW_RECORD_REQUESTED, RECORDED_MONTH) == ViewMode.RECORD


@pytest.mark.parametrize(
    "current, event",
    [
        (ViewMode.SETUP, ViewEvent.RECORD_SAVED),
        (ViewMode.DASHBOARD, ViewEvent.SETUP_COMPLETED),
        (ViewMode.RECORD, ViewEvent.NEW_RECORD_REQUESTED),
        (ViewMode.LOADING, ViewEvent.SETUP_COMPLETED),
    ],
)
def test_invalid_transition_raises(current, event):
    with pytest.raises(InvalidTransitionError) as exc_info:
        next_view_mode(current, event, READY_MONTH)

    assert exc_info.value.current == current
    assert exc_info.value.event == event


def test_setup_completed_requires_locked_month():
    unlocked = MonthSnapshot(month_exists=True, locked=False, habits_count=2)

    with pytest.raises(InvalidTransitionError):
        next_view_mode(ViewMode.SETUP, ViewEvent.SETUP_COMPLETED, unlocked)

# tests/test_geometry.py

from __future__ import annotations

import pytest

from gantt_planner.core.geometry import classify_period, period_bands, row_bands
from gantt_planner.core.models import BarType

from .fakes import make_task

PERIODS = range(-3, 30)


@pytest.mark.parametrize("plan_start,plan_duration", [(1, 0), (1, 5), (4, 3), (-2, 4), (10, 1)])
def test_plan_window_is_half_open(plan_start: int, plan_duration: int) -> None:
    task = make_task(plan_start=plan_start, plan_duration=plan_duration)
    for p in PERIODS:
        assert classify_period(task, p).is_plan == (plan_start <= p < plan_start + plan_duration)


def test_zero_percent_never_complete() -> None:
    task = make_task(actual_start=3, actual_duration=6, percent_complete=0)
    assert task.progress_point == task.actual_start
    assert not any(classify_period(task, p).is_complete for p in PERIODS)


@pytest.mark.parametrize("actual_start,actual_duration", [(1, 4), (5, 8), (2, 0)])
def test_full_percent_complete_matches_actual(actual_start: int, actual_duration: int) -> None:
    task = make_task(actual_start=actual_start, actual_duration=actual_duration, percent_complete=100)
    assert task.progress_point == task.actual_end
    for p in PERIODS:
        f = classify_period(task, p)
        assert f.is_complete == f.is_actual


@pytest.mark.parametrize("plan_duration", [0, 1, 2, 5, 9])
def test_normal_and_beyond_actual_partition_actual(plan_duration: int) -> None:
    task = make_task(plan_start=2, plan_duration=plan_duration, actual_start=3, actual_duration=6)
    for p in PERIODS:
        f = classify_period(task, p)
        assert not (f.is_normal_actual and f.is_beyond_actual)
        assert (f.is_normal_actual or f.is_beyond_actual) == f.is_actual
        assert not (f.is_normal_complete and f.is_beyond_complete)
        assert (f.is_normal_complete or f.is_beyond_complete) == f.is_complete


def test_fractional_progress_point() -> None:
    task = make_task(actual_start=5, actual_duration=4, percent_complete=50)
    assert task.progress_point == 7
    assert classify_period(task, 6).is_complete
    assert not classify_period(task, 7).is_complete

    # 4 * 0.3 = 1.2 -> period 6 has a part before the point
    task = make_task(actual_start=5, actual_duration=4, percent_complete=30)
    assert classify_period(task, 5).is_complete
    assert classify_period(task, 6).is_complete
    assert not classify_period(task, 7).is_complete


def test_bands_are_ordered_bottom_to_top() -> None:
    # plan 1..4, actual 1..8, 25% -> complete 1..2
    task = make_task(plan_start=1, plan_duration=4, actual_start=1, actual_duration=8, percent_complete=25)

    assert period_bands(task, 1) == (BarType.PLAN_DURATION, BarType.ACTUAL_START, BarType.PERCENT_COMPLETE)
    assert period_bands(task, 4) == (BarType.PLAN_DURATION, BarType.ACTUAL_START)
    assert period_bands(task, 5) == (BarType.ACTUAL_BEYOND,)
    assert period_bands(task, 9) == ()


def test_complete_beyond_plan() -> None:
    # Activity 05 of the seed list: plan 4..5, actual 4..11 at 85% -> progress 10.8
    task = make_task(plan_start=4, plan_duration=2, actual_start=4, actual_duration=8, percent_complete=85)
    assert period_bands(task, 6) == (BarType.ACTUAL_BEYOND, BarType.PERCENT_BEYOND)
    assert period_bands(task, 10) == (BarType.ACTUAL_BEYOND, BarType.PERCENT_BEYOND)
    assert period_bands(task, 11) == (BarType.ACTUAL_BEYOND,)


def test_row_bands_covers_requested_periods() -> None:
    task = make_task()
    row = row_bands(task, 12)
    assert len(row) == 12
    assert row[0] == period_bands(task, 1)
    assert row_bands(task, 0) == []

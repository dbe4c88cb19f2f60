# src/gantt_planner/core/geometry.py

"""
Bar geometry: which bands a period cell of a task row shows.

Pure functions of integers, total over all inputs. Periods are 1-based.
"""

from __future__ import annotations

from dataclasses import dataclass

from .models import BarType, Task


@dataclass(frozen=True, slots=True)
class PeriodFlags:
    is_plan: bool
    is_actual: bool
    is_complete: bool
    is_normal_actual: bool
    is_beyond_actual: bool
    is_normal_complete: bool
    is_beyond_complete: bool


def classify_period(task: Task, period: int) -> PeriodFlags:
    plan_end = task.plan_end

    is_plan = task.plan_start <= period < plan_end
    is_actual = task.actual_start <= period < task.actual_end
    # progress_point may be fractional: a period counts once any of it lies before the point
    is_complete = task.actual_start <= period < task.progress_point

    return PeriodFlags(
        is_plan=is_plan,
        is_actual=is_actual,
        is_complete=is_complete,
        is_normal_actual=is_actual and period < plan_end,
        is_beyond_actual=is_actual and period >= plan_end,
        is_normal_complete=is_complete and period < plan_end,
        is_beyond_complete=is_complete and period >= plan_end,
    )


def period_bands(task: Task, period: int) -> tuple[BarType, ...]:
    """Bands for one cell, bottom -> top (plan hatch, then actual, then complete)."""
    f = classify_period(task, period)
    bands: list[BarType] = []
    if f.is_plan:
        bands.append(BarType.PLAN_DURATION)
    if f.is_normal_actual:
        bands.append(BarType.ACTUAL_START)
    if f.is_beyond_actual:
        bands.append(BarType.ACTUAL_BEYOND)
    if f.is_normal_complete:
        bands.append(BarType.PERCENT_COMPLETE)
    if f.is_beyond_complete:
        bands.append(BarType.PERCENT_BEYOND)
    return tuple(bands)


def row_bands(task: Task, period_count: int) -> list[tuple[BarType, ...]]:
    return [period_bands(task, p) for p in range(1, max(0, period_count) + 1)]

# src/gantt_planner/core/models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ..errors import TaskValidationError

# attribute name -> JSON key (camelCase wire form kept from the browser storage format)
FIELD_KEYS: dict[str, str] = {
    "id": "id",
    "activity": "activity",
    "plan_start": "planStart",
    "plan_duration": "planDuration",
    "actual_start": "actualStart",
    "actual_duration": "actualDuration",
    "percent_complete": "percentComplete",
}

INT_FIELDS: tuple[str, ...] = (
    "plan_start",
    "plan_duration",
    "actual_start",
    "actual_duration",
    "percent_complete",
)


class BarType(StrEnum):
    """
    Visual bands a period cell can show.

    Order of declaration is the drawing order (bottom -> top).
    """

    PLAN_DURATION = "PLAN_DURATION"
    ACTUAL_START = "ACTUAL_START"
    ACTUAL_BEYOND = "ACTUAL_BEYOND"
    PERCENT_COMPLETE = "PERCENT_COMPLETE"
    PERCENT_BEYOND = "PERCENT_BEYOND"


def coerce_int(field: str, raw: Any) -> int:
    """Convert a raw value to int for a numeric task field, or raise TaskValidationError."""
    if isinstance(raw, bool):
        raise TaskValidationError(f"{field} must be an integer, got a boolean")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        raise TaskValidationError(f"{field} must be an integer, got {raw!r}")
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            raise TaskValidationError(f"{field} must be an integer, got {raw!r}") from None
    raise TaskValidationError(f"{field} must be an integer, got {type(raw).__name__}")


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    activity: str
    plan_start: int
    plan_duration: int
    actual_start: int
    actual_duration: int
    percent_complete: int

    @property
    def plan_end(self) -> int:
        return self.plan_start + self.plan_duration

    @property
    def actual_end(self) -> int:
        return self.actual_start + self.actual_duration

    @property
    def progress_point(self) -> float:
        """Period boundary up to which the actual bar is shaded as complete (may be fractional)."""
        return self.actual_start + self.actual_duration * (self.percent_complete / 100)

    def to_dict(self) -> dict[str, Any]:
        return {key: getattr(self, attr) for attr, key in FIELD_KEYS.items()}

    @classmethod
    def from_dict(cls, data: Any) -> Task:
        """
        Build a Task from its JSON form.

        Numeric fields are coerced with int(); anything that is not integral is rejected.
        A missing/None id becomes "" so that callers can assign their own.
        """
        if not isinstance(data, dict):
            raise TaskValidationError(f"task record must be an object, got {type(data).__name__}")

        missing = [key for attr, key in FIELD_KEYS.items() if attr != "id" and key not in data]
        if missing:
            raise TaskValidationError(f"task record is missing fields: {', '.join(missing)}")

        raw_id = data.get("id")
        activity = data["activity"]
        if not isinstance(activity, str):
            raise TaskValidationError(f"activity must be a string, got {type(activity).__name__}")

        values = {attr: coerce_int(FIELD_KEYS[attr], data[FIELD_KEYS[attr]]) for attr in INT_FIELDS}
        return cls(
            id="" if raw_id is None else str(raw_id).strip(),
            activity=activity,
            **values,
        )


def new_task_id() -> str:
    return uuid.uuid4().hex[:12]


def new_task(activity: str = "New Activity") -> Task:
    return Task(
        id=new_task_id(),
        activity=activity,
        plan_start=1,
        plan_duration=1,
        actual_start=1,
        actual_duration=1,
        percent_complete=0,
    )


def _seed(n: int, ps: int, pd: int, as_: int, ad: int, pc: int) -> Task:
    return Task(
        id=str(n),
        activity=f"Activity {n:02d}",
        plan_start=ps,
        plan_duration=pd,
        actual_start=as_,
        actual_duration=ad,
        percent_complete=pc,
    )


# Shown on first start, before anything has been saved.
SEED_TASKS: tuple[Task, ...] = (
    _seed(1, 1, 5, 1, 4, 25),
    _seed(2, 1, 6, 1, 6, 100),
    _seed(3, 2, 4, 2, 5, 35),
    _seed(4, 4, 8, 4, 6, 10),
    _seed(5, 4, 2, 4, 8, 85),
    _seed(6, 4, 3, 4, 6, 85),
    _seed(7, 5, 4, 5, 3, 50),
    _seed(8, 5, 2, 5, 5, 60),
    _seed(9, 5, 2, 5, 6, 75),
    _seed(10, 6, 5, 6, 7, 100),
    _seed(11, 6, 1, 5, 8, 60),
)

# src/gantt_planner/core/store.py

"""
In-memory task store.

All changes go through `apply(state, event) -> new state`. The store never
persists anything by itself: the host decides when to save (see AppState.apply).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Literal

from ..errors import TaskValidationError
from .models import FIELD_KEYS, INT_FIELDS, Task, coerce_int

logger = logging.getLogger(__name__)

ViewMode = Literal["Editing", "Viewing"]
VIEW_MODES: tuple[str, ...] = ("Editing", "Viewing")

# Fields a user may edit in place (the id is stable for the task's lifetime).
EDITABLE_FIELDS: tuple[str, ...] = ("activity", *INT_FIELDS)


@dataclass(frozen=True, slots=True)
class PlannerState:
    tasks: tuple[Task, ...] = ()
    selected_id: str | None = None
    period_highlight: int = 1
    view_mode: ViewMode = "Editing"
    search_query: str = ""
    generating: bool = False


# ---- events ----


@dataclass(frozen=True, slots=True)
class AddTask:
    task: Task


@dataclass(frozen=True, slots=True)
class UpdateTask:
    task_id: str
    changes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RemoveTask:
    task_id: str


@dataclass(frozen=True, slots=True)
class ReplaceAll:
    tasks: tuple[Task, ...]


@dataclass(frozen=True, slots=True)
class SelectTask:
    task_id: str | None


@dataclass(frozen=True, slots=True)
class SetPeriodHighlight:
    period: int


@dataclass(frozen=True, slots=True)
class SetViewMode:
    mode: ViewMode


@dataclass(frozen=True, slots=True)
class SetSearchQuery:
    query: str


@dataclass(frozen=True, slots=True)
class GenerationStarted:
    pass


@dataclass(frozen=True, slots=True)
class GenerationFinished:
    pass


Event = (
    AddTask
    | UpdateTask
    | RemoveTask
    | ReplaceAll
    | SelectTask
    | SetPeriodHighlight
    | SetViewMode
    | SetSearchQuery
    | GenerationStarted
    | GenerationFinished
)


def normalize_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    """
    Map user-supplied field names (snake_case or the camelCase JSON keys) to
    Task attributes and coerce values. Raises TaskValidationError on bad input.
    """
    by_key = {key: attr for attr, key in FIELD_KEYS.items()}
    out: dict[str, Any] = {}
    for name, value in changes.items():
        attr = name if name in FIELD_KEYS else by_key.get(name)
        if attr is None or attr not in EDITABLE_FIELDS:
            raise TaskValidationError(f"unknown or read-only task field: {name}")
        if attr == "activity":
            out[attr] = str(value)
        else:
            out[attr] = coerce_int(attr, value)
    return out


def apply(state: PlannerState, event: Event) -> PlannerState:
    """Pure transition function."""
    match event:
        case AddTask(task=task):
            return replace(state, tasks=(*state.tasks, task))

        case UpdateTask(task_id=task_id, changes=changes):
            if state.view_mode == "Viewing":
                return state
            fields = normalize_changes(changes)
            if not fields:
                return state
            tasks = tuple(replace(t, **fields) if t.id == task_id else t for t in state.tasks)
            return replace(state, tasks=tasks)

        case RemoveTask(task_id=task_id):
            tasks = tuple(t for t in state.tasks if t.id != task_id)
            selected = None if state.selected_id == task_id else state.selected_id
            return replace(state, tasks=tasks, selected_id=selected)

        case ReplaceAll(tasks=tasks):
            new_tasks = tuple(tasks)
            selected = state.selected_id
            if selected is not None and not any(t.id == selected for t in new_tasks):
                selected = None
            return replace(state, tasks=new_tasks, selected_id=selected)

        case SelectTask(task_id=task_id):
            return replace(state, selected_id=task_id)

        case SetPeriodHighlight(period=period):
            return replace(state, period_highlight=int(period))

        case SetViewMode(mode=mode):
            if mode not in VIEW_MODES:
                raise ValueError(f"unknown view mode: {mode}")
            return replace(state, view_mode=mode)

        case SetSearchQuery(query=query):
            return replace(state, search_query=query)

        case GenerationStarted():
            return replace(state, generating=True)

        case GenerationFinished():
            return replace(state, generating=False)

    raise TypeError(f"unsupported event: {event!r}")


def filter_tasks(tasks: Iterable[Task], query: str) -> list[Task]:
    q = query.strip().lower()
    if not q:
        return list(tasks)
    return [t for t in tasks if q in t.activity.lower()]


class TaskStore:
    """Holds the current PlannerState and applies events to it."""

    def __init__(self, tasks: Iterable[Task] = (), **initial: Any) -> None:
        self._state = PlannerState(tasks=tuple(tasks), **initial)
        logger.debug("TaskStore ready tasks=%d", len(self._state.tasks))

    @property
    def state(self) -> PlannerState:
        return self._state

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._state.tasks

    def dispatch(self, event: Event) -> PlannerState:
        self._state = apply(self._state, event)
        return self._state

    # ---- convenience ----

    def add(self, task: Task) -> PlannerState:
        return self.dispatch(AddTask(task))

    def update(self, task_id: str, **changes: Any) -> PlannerState:
        return self.dispatch(UpdateTask(task_id, changes))

    def remove(self, task_id: str) -> PlannerState:
        return self.dispatch(RemoveTask(task_id))

    def replace_all(self, tasks: Iterable[Task]) -> PlannerState:
        return self.dispatch(ReplaceAll(tuple(tasks)))

    # ---- queries ----

    def get(self, task_id: str) -> Task | None:
        for t in self._state.tasks:
            if t.id == task_id:
                return t
        return None

    def filtered_tasks(self) -> list[Task]:
        return filter_tasks(self._state.tasks, self._state.search_query)

    def active_task(self) -> Task | None:
        if self._state.selected_id is None:
            return None
        return self.get(self._state.selected_id)

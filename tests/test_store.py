# tests/test_store.py

from __future__ import annotations

import pytest

from gantt_planner.core.store import (
    AddTask,
    PlannerState,
    RemoveTask,
    ReplaceAll,
    SelectTask,
    SetSearchQuery,
    SetViewMode,
    TaskStore,
    UpdateTask,
    apply,
)
from gantt_planner.errors import TaskValidationError

from .fakes import make_task


def test_add_update_remove() -> None:
    store = TaskStore()
    store.add(make_task("a"))
    store.add(make_task("b"))
    assert [t.id for t in store.tasks] == ["a", "b"]

    store.update("a", percent_complete=50, activity="Design")
    a = store.get("a")
    assert a is not None
    assert a.percent_complete == 50
    assert a.activity == "Design"

    store.remove("a")
    assert [t.id for t in store.tasks] == ["b"]


def test_update_progress_point() -> None:
    store = TaskStore([make_task("x", actual_start=5, actual_duration=4, percent_complete=0)])
    store.update("x", percent_complete=50)
    task = store.get("x")
    assert task is not None
    assert task.progress_point == 7


def test_update_accepts_json_keys_and_numeric_strings() -> None:
    store = TaskStore([make_task("x")])
    store.update("x", planStart="7")
    task = store.get("x")
    assert task is not None
    assert task.plan_start == 7


def test_update_unknown_id_is_noop() -> None:
    store = TaskStore([make_task("a")])
    before = store.state
    store.update("missing", percent_complete=90)
    assert store.tasks == before.tasks


def test_update_rejects_non_numeric_and_unknown_fields() -> None:
    store = TaskStore([make_task("a")])
    with pytest.raises(TaskValidationError):
        store.update("a", plan_start="soon")
    with pytest.raises(TaskValidationError):
        store.update("a", id="b")
    with pytest.raises(TaskValidationError):
        store.update("a", colour="red")
    assert store.get("a") == make_task("a")


def test_update_ignored_in_viewing_mode() -> None:
    state = PlannerState(tasks=(make_task("a"),), view_mode="Viewing")
    assert apply(state, UpdateTask("a", {"percent_complete": 90})) is state


def test_removing_selected_task_clears_selection() -> None:
    state = PlannerState(tasks=(make_task("a"), make_task("b")))
    state = apply(state, SelectTask("a"))
    assert state.selected_id == "a"

    state = apply(state, RemoveTask("b"))
    assert state.selected_id == "a"

    state = apply(state, RemoveTask("a"))
    assert state.selected_id is None


def test_replace_all_swaps_list_and_drops_stale_selection() -> None:
    state = apply(PlannerState(tasks=(make_task("a"),)), SelectTask("a"))
    state = apply(state, ReplaceAll((make_task("g1"), make_task("g2"))))
    assert [t.id for t in state.tasks] == ["g1", "g2"]
    assert state.selected_id is None


def test_apply_is_pure() -> None:
    state = PlannerState()
    new = apply(state, AddTask(make_task("a")))
    assert state.tasks == ()
    assert len(new.tasks) == 1


def test_filtered_tasks_case_insensitive() -> None:
    store = TaskStore([make_task("a", activity="Design API"), make_task("b", activity="Testing")])
    store.dispatch(SetSearchQuery("api"))
    assert [t.id for t in store.filtered_tasks()] == ["a"]
    store.dispatch(SetSearchQuery("   "))
    assert len(store.filtered_tasks()) == 2


def test_active_task_and_view_mode() -> None:
    store = TaskStore([make_task("a")])
    assert store.active_task() is None
    store.dispatch(SelectTask("a"))
    assert store.active_task() == make_task("a")
    with pytest.raises(ValueError):
        store.dispatch(SetViewMode("Presenting"))  # type: ignore[arg-type]


def test_store_replace_all_keeps_matching_selection() -> None:
    store = TaskStore([make_task("a"), make_task("b")])
    store.dispatch(SelectTask("b"))
    store.replace_all([make_task("b", activity="Rebuilt"), make_task("c")])
    assert [t.id for t in store.tasks] == ["b", "c"]
    active = store.active_task()
    assert active is not None
    assert active.activity == "Rebuilt"

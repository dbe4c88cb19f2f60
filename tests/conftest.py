# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from gantt_planner.core.models import SEED_TASKS
from gantt_planner.core.state import AppState
from gantt_planner.core.store import TaskStore
from gantt_planner.storage.local_storage import LocalStorage
from gantt_planner.storage.task_storage import TaskStorage

from .fakes import FakeGenerator


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI layer.

    A SimpleNamespace rather than the real config keeps tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Project Planner",
        period_count=20,
        llm_models=["fake/model"],
        data_dir=tmp_path,
        storage_path=tmp_path / "local_storage.sqlite3",
        storage_key="project_planner_tasks",
    )


@pytest.fixture()
def storage(settings: SimpleNamespace) -> TaskStorage:
    return TaskStorage(LocalStorage(settings.storage_path), key=settings.storage_key)


@pytest.fixture()
def generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture()
def state(settings: SimpleNamespace, storage: TaskStorage, generator: FakeGenerator) -> AppState:
    """
    AppState wired with a real SQLite storage in tmp and a fake generator.
    """
    return AppState(
        settings=settings,
        store=TaskStore(SEED_TASKS),
        storage=storage,
        generator=generator,
    )

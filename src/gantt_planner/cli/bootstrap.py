# src/gantt_planner/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires storage, the LLM client and the task generator into AppState,
- loads the saved task list (seed list on first start).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.models import SEED_TASKS, Task
from ..core.ports import LLMClient
from ..core.state import AppState
from ..core.store import TaskStore
from ..errors import StorageError
from ..llm.client import OpenRouterLLMClient, friendly_llm_error_message
from ..llm.offline import OfflineLLMClient
from ..planning.generator import LLMTaskGenerator
from ..storage.local_storage import LocalStorage
from ..storage.task_storage import TaskStorage

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def load_initial_tasks(storage: TaskStorage) -> list[Task]:
    """
    Saved task list, or the seed list.

    A corrupt payload is logged and the seed list is shown instead; the
    stored value stays as-is until the next change overwrites it.
    """
    try:
        return storage.load()
    except StorageError:
        logger.exception("Saved task list under key=%s is unreadable; starting from seed tasks", storage.key)
        return list(SEED_TASKS)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    storage = TaskStorage(LocalStorage(settings.storage_path), key=settings.storage_key)

    llm_client: LLMClient
    offline = False
    try:
        llm_client = OpenRouterLLMClient(settings)
    except RuntimeError as e:
        # Demo mode for local runs without an API key.
        logger.info("%s Using offline demo schedules.", friendly_llm_error_message(e))
        llm_client = OfflineLLMClient()
        offline = True

    return AppState(
        settings=settings,
        store=TaskStore(load_initial_tasks(storage)),
        storage=storage,
        generator=LLMTaskGenerator(llm_client),
        offline_llm=offline,
    )

# src/gantt_planner/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .ports import TaskGenerator, TaskPersistence
from .store import Event, PlannerState, TaskStore

logger = logging.getLogger(__name__)


@dataclass
class AppState:
    """
    Composition of the running app: the store plus the ports it is driven with.

    `apply` is the single place where task-list changes are persisted.
    """

    settings: Any
    store: TaskStore
    storage: TaskPersistence
    generator: TaskGenerator
    offline_llm: bool = False

    def apply(self, event: Event) -> PlannerState:
        """
        Dispatch `event`; save the task list if it changed.

        StorageError from save() propagates: the in-memory state is already
        updated, the caller decides how to report the failed write.
        """
        before = self.store.tasks
        state = self.store.dispatch(event)
        if state.tasks != before:
            self.storage.save(state.tasks)
            logger.debug("Task list saved after %s (tasks=%d)", type(event).__name__, len(state.tasks))
        return state

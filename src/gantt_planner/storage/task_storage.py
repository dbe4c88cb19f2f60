# src/gantt_planner/storage/task_storage.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.models import SEED_TASKS, Task
from ..errors import StorageError, TaskValidationError
from .local_storage import LocalStorage

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "project_planner_tasks"


class TaskStorage:
    """
    The whole task list as one JSON array under a single namespaced key.

    load() falls back to the seed list only when nothing was saved yet; a
    corrupt payload is reported as StorageError instead of being replaced.
    """

    def __init__(self, local_storage: LocalStorage, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._ls = local_storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        raw = self._ls.get_item(self._key)
        if raw is None:
            logger.info("No saved tasks under key=%s, using %d seed tasks", self._key, len(SEED_TASKS))
            return list(SEED_TASKS)

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"stored task list under key={self._key} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise StorageError(f"stored task list under key={self._key} is not a JSON array")

        try:
            tasks = [Task.from_dict(item) for item in data]
        except TaskValidationError as e:
            raise StorageError(f"stored task list under key={self._key} has an invalid record: {e}") from e

        seen: set[str] = set()
        for task in tasks:
            if not task.id:
                raise StorageError(f"stored task list under key={self._key} has a record without an id")
            if task.id in seen:
                raise StorageError(f"stored task list under key={self._key} repeats id={task.id!r}")
            seen.add(task.id)

        logger.debug("Loaded %d tasks from key=%s", len(tasks), self._key)
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        self._ls.set_item(self._key, payload)
        logger.debug("Saved %d tasks to key=%s", len(tasks), self._key)

# tests/fakes.py

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from gantt_planner.core.models import Task
from gantt_planner.core.ports import ChatMessage
from gantt_planner.errors import GenerationError, StorageError


class FakeLLMClient:
    """
    Deterministic LLM client for unit tests.

    - Captures calls for assertions
    - Yields a predefined text split into a few chunks (like a real stream)
    """

    def __init__(self, next_text: str = "ok", error: Exception | None = None) -> None:
        self.next_text = next_text
        self.error = error
        self.calls: list[tuple[list[ChatMessage], str, dict[str, Any] | None]] = []

    def stream_chat(
        self,
        messages: list[ChatMessage],
        system_prompt: str,
        *,
        response_format: dict[str, Any] | None = None,
    ) -> Iterable[str]:
        self.calls.append((messages, system_prompt, response_format))
        if self.error is not None:
            raise self.error
        step = max(1, len(self.next_text) // 3)
        for i in range(0, len(self.next_text), step):
            yield self.next_text[i : i + step]


class FakeGenerator:
    """TaskGenerator returning fixed tasks (or raising) and recording prompts."""

    def __init__(self, tasks: list[Task] | None = None, error: Exception | None = None) -> None:
        self.tasks = list(tasks or [])
        self.error = error
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> list[Task]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return list(self.tasks)


class BlockingGenerator(FakeGenerator):
    """Blocks inside the call until `release` is set, so the generating flag can be observed."""

    def __init__(self, tasks: list[Task]) -> None:
        super().__init__(tasks)
        self.entered = threading.Event()
        self.release = threading.Event()

    def __call__(self, prompt: str) -> list[Task]:
        self.entered.set()
        if not self.release.wait(timeout=5.0):
            raise GenerationError("test generator was never released")
        return super().__call__(prompt)


class FailingStorage:
    """TaskPersistence whose save() always fails."""

    def load(self) -> list[Task]:
        return []

    def save(self, tasks) -> None:
        raise StorageError("disk full")


def make_task(task_id: str = "t1", **overrides: Any) -> Task:
    values: dict[str, Any] = {
        "activity": f"Activity {task_id}",
        "plan_start": 1,
        "plan_duration": 5,
        "actual_start": 1,
        "actual_duration": 4,
        "percent_complete": 25,
    }
    values.update(overrides)
    return Task(id=task_id, **values)

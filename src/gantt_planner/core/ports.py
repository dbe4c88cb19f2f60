# src/gantt_planner/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and LLM providers swappable and makes testing easier.
"""

from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from .models import Task

ChatMessage = dict[str, str]
# OpenAI-style chat messages: {"role": "...", "content": "..."}.


class LLMClient(Protocol):
    """Streaming chat completion client (OpenAI/OpenRouter-compatible)."""

    def stream_chat(
        self,
        messages: list[ChatMessage],
        system_prompt: str,
        *,
        response_format: dict[str, Any] | None = None,
    ) -> Iterable[str]: ...


class TaskGenerator(Protocol):
    """
    prompt -> candidate task list.

    Raises GenerationError when no usable list can be produced; never returns
    an empty list.
    """

    def __call__(self, prompt: str) -> list[Task]: ...


class TaskPersistence(Protocol):
    """Explicit persistence port; the host decides when to call save()."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Sequence[Task]) -> None: ...

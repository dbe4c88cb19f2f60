# src/gantt_planner/planning/generator.py

"""
Generative population: prompt -> task list via an LLM with a strict JSON schema.

The caller receives either a non-empty list of Tasks or a GenerationError;
partial results are never returned.
"""

from __future__ import annotations

import json
import logging
import time
from dataclasses import replace
from typing import Any

from ..core.models import FIELD_KEYS, Task
from ..core.ports import LLMClient
from ..errors import GenerationError, TaskValidationError

logger = logging.getLogger(__name__)

MIN_ACTIVITIES = 10
MAX_ACTIVITIES = 15

PLANNER_SYSTEM_PROMPT = """
You are a professional Project Manager and project schedule planner.

You turn a short project description into a schedule of activities for a
period-based Gantt chart (periods are numbered from 1).

Requirements:
1. Provide between 10 to 15 activities.
2. Activities must follow a logical sequence (waterfall or agile).
3. For each activity, define:
   - id: a short unique identifier.
   - activity: a clear, professional name.
   - planStart: the starting period (range 1-50).
   - planDuration: expected length in periods (range 1-12).
   - actualStart: when it really started (often same as planStart, or slightly delayed).
   - actualDuration: how long it actually took (range 1-15).
   - percentComplete: progress (range 0-100).
4. Ensure dependencies between activities are reflected in the start times.

Output format:
Return STRICT JSON only, an object {"tasks": [...]}. No extra text. No Markdown.
""".strip()

_TASK_ITEM_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "id": {"type": "string"},
        "activity": {"type": "string"},
        "planStart": {"type": "integer"},
        "planDuration": {"type": "integer"},
        "actualStart": {"type": "integer"},
        "actualDuration": {"type": "integer"},
        "percentComplete": {"type": "integer"},
    },
    "required": list(FIELD_KEYS.values()),
    "additionalProperties": False,
}

TASK_LIST_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {"tasks": {"type": "array", "items": _TASK_ITEM_SCHEMA}},
    "required": ["tasks"],
    "additionalProperties": False,
}

RESPONSE_FORMAT: dict[str, Any] = {
    "type": "json_schema",
    "json_schema": {"name": "project_tasks", "strict": True, "schema": TASK_LIST_SCHEMA},
}


def build_user_message(prompt: str) -> str:
    return f'Create a comprehensive project schedule for: "{prompt.strip()}".'


def _extract_json(raw: str) -> str:
    """Cut the outermost JSON object/array out of a reply that may carry extra text."""
    raw = raw.strip()
    if raw.startswith("```"):
        raw = raw.strip("`")
        if raw.lower().startswith("json"):
            raw = raw[4:]
        raw = raw.strip()
    starts = [i for i in (raw.find("{"), raw.find("[")) if i != -1]
    if not starts:
        return raw
    first = min(starts)
    closer = "}" if raw[first] == "{" else "]"
    last = raw.rfind(closer)
    if last > first:
        return raw[first : last + 1]
    return raw


def parse_task_records(raw: str) -> list[dict[str, Any]]:
    """Parse the LLM reply into raw task records; accepts a bare array or {"tasks": [...]}."""
    try:
        data = json.loads(_extract_json(raw))
    except json.JSONDecodeError as e:
        raise GenerationError(f"LLM reply is not valid JSON: {e}") from e

    if isinstance(data, dict):
        data = data.get("tasks")
    if not isinstance(data, list):
        raise GenerationError("LLM reply does not contain a task array")
    if not all(isinstance(item, dict) for item in data):
        raise GenerationError("LLM reply contains non-object task records")
    return data


def build_tasks(records: list[dict[str, Any]], *, now_ms: int | None = None) -> list[Task]:
    """
    Convert raw records to Tasks.

    Records without a usable id (missing, blank, or repeated within this batch)
    get "gen-<epoch ms>-<index>", which is unique within the batch.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)

    tasks: list[Task] = []
    seen: set[str] = set()
    for index, record in enumerate(records):
        try:
            task = Task.from_dict(record)
        except TaskValidationError as e:
            raise GenerationError(f"task record #{index} does not match the schema: {e}") from e

        if not task.id or task.id in seen:
            fallback = f"gen-{now_ms}-{index}"
            suffix = 1
            while fallback in seen:
                fallback = f"gen-{now_ms}-{index}-{suffix}"
                suffix += 1
            task = replace(task, id=fallback)
        seen.add(task.id)
        tasks.append(task)
    return tasks


class LLMTaskGenerator:
    """TaskGenerator backed by an LLMClient."""

    def __init__(self, llm: LLMClient) -> None:
        self._llm = llm

    def __call__(self, prompt: str) -> list[Task]:
        if not prompt or not prompt.strip():
            raise GenerationError("prompt is empty")

        raw = ""
        try:
            for piece in self._llm.stream_chat(
                [{"role": "user", "content": build_user_message(prompt)}],
                PLANNER_SYSTEM_PROMPT,
                response_format=RESPONSE_FORMAT,
            ):
                raw += piece
        except Exception as e:
            raise GenerationError(f"LLM call failed: {e}") from e

        if not raw.strip():
            raise GenerationError("LLM returned an empty reply")

        tasks = build_tasks(parse_task_records(raw))
        if not tasks:
            raise GenerationError("LLM returned no tasks")

        if not MIN_ACTIVITIES <= len(tasks) <= MAX_ACTIVITIES:
            logger.info("Generator: got %d activities (asked for %d-%d)", len(tasks), MIN_ACTIVITIES, MAX_ACTIVITIES)
        logger.debug("Generator: parsed %d tasks for prompt=%r", len(tasks), prompt[:200])
        return tasks

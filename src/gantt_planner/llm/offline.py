# src/gantt_planner/llm/offline.py

from __future__ import annotations

import json
import re
from collections.abc import Iterable
from typing import Any

from ..core.ports import ChatMessage

_PHASES: tuple[tuple[str, int, int, int, int], ...] = (
    # name, plan_start, plan_duration, start_delay, duration_delta
    ("Kickoff & Scope", 1, 2, 0, 0),
    ("Requirements", 3, 4, 0, 1),
    ("Architecture & Design", 6, 5, 1, 1),
    ("Prototype", 10, 4, 1, 0),
    ("Core Build", 13, 10, 2, 3),
    ("Integrations", 20, 6, 2, 2),
    ("Testing & QA", 25, 6, 3, 1),
    ("Documentation", 27, 4, 3, 0),
    ("Launch Preparation", 31, 3, 4, 1),
    ("Go-Live & Handover", 34, 2, 4, 0),
)


def _topic(messages: list[ChatMessage]) -> str:
    for m in reversed(messages):
        if m["role"] == "user":
            found = re.search(r'"([^"]+)"', m["content"])
            return (found.group(1) if found else m["content"]).strip()
    return "Project"


def offline_schedule(topic: str) -> list[dict[str, Any]]:
    """Deterministic 10-activity waterfall schedule; progress falls off along the timeline."""
    label = topic[:40] or "Project"
    out: list[dict[str, Any]] = []
    for i, (name, ps, pd, delay, extra) in enumerate(_PHASES, start=1):
        out.append(
            {
                "id": f"offline-{i}",
                "activity": f"{label}: {name}",
                "planStart": ps,
                "planDuration": pd,
                "actualStart": ps + delay,
                "actualDuration": pd + extra,
                "percentComplete": max(0, 100 - (i - 1) * 15),
            }
        )
    return out


class OfflineLLMClient:
    """
    Offline deterministic LLM client used for demos when no external API is configured.

    - Schedule planner prompts -> a valid {"tasks": [...]} JSON document
    - Anything else -> a short notice
    """

    def stream_chat(
        self,
        messages: list[ChatMessage],
        system_prompt: str,
        *,
        response_format: dict[str, Any] | None = None,
    ) -> Iterable[str]:
        sp = (system_prompt or "").lower()

        if "schedule planner" in sp or response_format is not None:
            yield json.dumps({"tasks": offline_schedule(_topic(messages))})
            return

        yield (
            "Offline demo mode: no external LLM is configured.\n"
            "Set PLANNER_OPENROUTER_API_KEY (and PLANNER_LLM_MODELS) to enable real responses."
        )

# src/gantt_planner/cli/commands.py

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.models import new_task
from ..core.state import AppState
from ..core.store import (
    AddTask,
    RemoveTask,
    SelectTask,
    SetPeriodHighlight,
    SetSearchQuery,
    SetViewMode,
    UpdateTask,
)
from ..errors import TaskValidationError
from ..planning.populate import populate_from_prompt
from ..render.grid import render_sheet

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)

# Short names accepted by /set in addition to the field names.
FIELD_ALIASES: dict[str, str] = {
    "name": "activity",
    "ps": "plan_start",
    "pd": "plan_duration",
    "as": "actual_start",
    "ad": "actual_duration",
    "pct": "percent_complete",
    "percent": "percent_complete",
}


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        if len(inspect.signature(handler).parameters) >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, emit)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _sheet(state: AppState) -> str:
    s = state.store.state
    return render_sheet(
        state.store.filtered_tasks(),
        period_count=int(getattr(state.settings, "period_count", 60)),
        period_highlight=s.period_highlight,
        selected_id=s.selected_id,
        title=str(getattr(state.settings, "app_name", "Project Planner")),
    )


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_status(state: AppState, args: list[str]) -> str:
    s = state.store.state
    llm = "OFFLINE (demo schedules)" if state.offline_llm else "ONLINE"
    models = ", ".join(list(getattr(state.settings, "llm_models", []) or []))
    active = state.store.active_task()
    return (
        "Status:\n"
        f"  Activities: {len(s.tasks)} (shown: {len(state.store.filtered_tasks())})\n"
        f"  Mode: {s.view_mode}\n"
        f"  Period highlight: {s.period_highlight}\n"
        f"  Search: {s.search_query or '-'}\n"
        f"  Selected: {active.activity if active else '-'}\n"
        f"  LLM: {llm}\n"
        f"  Models (priority -> fallback): {models}"
    )


def cmd_show(state: AppState, args: list[str]) -> str:
    return _sheet(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    tasks = state.store.filtered_tasks()
    if not tasks:
        return "No activities."
    lines = ["Activities:"]
    for t in tasks:
        lines.append(
            f"  [{t.id}] {t.activity}: plan {t.plan_start}-{t.plan_end}, "
            f"actual {t.actual_start}-{t.actual_end}, {t.percent_complete}% (progress @ {t.progress_point:g})"
        )
    return "\n".join(lines)


def cmd_add(state: AppState, args: list[str]) -> str:
    if state.store.state.view_mode == "Viewing":
        return "Viewing mode: switch with /mode edit to change activities."
    task = new_task(" ".join(args).strip() or "New Activity")
    state.apply(AddTask(task))
    return f"Added [{task.id}] {task.activity}."


def cmd_set(state: AppState, args: list[str]) -> str:
    """
    /set <id> <field> <value>
    Fields: activity|name, plan_start|ps, plan_duration|pd, actual_start|as,
            actual_duration|ad, percent_complete|pct (camelCase names work too).
    """
    if len(args) < 3:
        return "Usage: /set <id> <field> <value>"
    if state.store.state.view_mode == "Viewing":
        return "Viewing mode: switch with /mode edit to change activities."

    task_id, field = args[0], args[1]
    value = " ".join(args[2:])
    field = FIELD_ALIASES.get(field.lower(), field)

    task = state.store.get(task_id)
    if task is None:
        return f"No activity with id {task_id}."

    try:
        state.apply(UpdateTask(task_id, {field: value}))
    except TaskValidationError as e:
        return f"Rejected: {e}"

    updated = state.store.get(task_id)
    return f"Updated [{task_id}] {updated.activity if updated else task.activity}."


def cmd_rm(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /rm <id>"
    task_id = args[0]
    task = state.store.get(task_id)
    if task is None:
        return f"No activity with id {task_id}."
    state.apply(RemoveTask(task_id))
    return f"Removed [{task_id}] {task.activity}."


def cmd_select(state: AppState, args: list[str]) -> str:
    if not args or args[0].lower() in ("none", "-"):
        state.apply(SelectTask(None))
        return "Selection cleared."
    task = state.store.get(args[0])
    if task is None:
        return f"No activity with id {args[0]}."
    state.apply(SelectTask(task.id))
    return f"Selected [{task.id}] {task.activity}."


def cmd_find(state: AppState, args: list[str]) -> str:
    query = " ".join(args).strip()
    state.apply(SetSearchQuery(query))
    if not query:
        return "Search cleared."
    return f"Showing {len(state.store.filtered_tasks())} of {len(state.store.tasks)} activities matching {query!r}."


def cmd_period(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Period highlight: {state.store.state.period_highlight}. Usage: /period <n>"
    try:
        period = int(args[0])
    except ValueError:
        return "Usage: /period <n> (an integer)"
    state.apply(SetPeriodHighlight(period))
    return f"Period highlight set to {period}."


def cmd_mode(state: AppState, args: list[str]) -> str:
    if not args:
        return f"Mode is {state.store.state.view_mode}. Use /mode edit or /mode view."
    arg = args[0].lower()
    if arg in ("edit", "editing"):
        state.apply(SetViewMode("Editing"))
        return "Editing mode."
    if arg in ("view", "viewing"):
        state.apply(SetViewMode("Viewing"))
        return "Viewing mode: edits are disabled."
    return "Usage: /mode edit or /mode view."


def cmd_generate(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    prompt = " ".join(args).strip()
    if not prompt:
        return "Usage: /generate <project description>"
    if emit:
        emit(f"[AI] Generating a schedule for {prompt!r}...")
    ok = asyncio.run(populate_from_prompt(state, prompt))
    if not ok:
        return "Generation produced no schedule; activities are unchanged. See the log for details."
    return f"Generated {len(state.store.tasks)} activities.\n\n{_sheet(state)}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("status", cmd_status, help_text="Show planner status (mode/highlight/search/LLM).")
registry.register("show", cmd_show, help_text="Draw the Gantt sheet.", aliases=["s"])
registry.register("list", cmd_list, help_text="List activities with ids.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add an activity: /add [name].")
registry.register("set", cmd_set, help_text="Edit a field: /set <id> <field> <value>.")
registry.register("rm", cmd_rm, help_text="Delete an activity: /rm <id>.", aliases=["del"])
registry.register("select", cmd_select, help_text="Select an activity: /select <id> | none.")
registry.register("find", cmd_find, help_text="Filter by activity name: /find <text> (empty clears).")
registry.register("period", cmd_period, help_text="Highlight a period: /period <n>.")
registry.register("mode", cmd_mode, help_text="Switch mode: /mode edit | /mode view.")
registry.register("generate", cmd_generate, help_text="Replace activities from a prompt: /generate <text>.", aliases=["ai"])

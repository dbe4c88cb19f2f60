# src/gantt_planner/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..errors import PlannerError, StorageError

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str | None:
    """
    One console input -> reply text.

    Slash commands go to the registry; any other text is a generation prompt.
    """
    def emit(text: str) -> None:
        # Immediate feedback for long operations (generation)
        print(f"[{_ts_local()}] {text}", flush=True)

    if not line.startswith("/"):
        line = "/generate " + line

    try:
        return command_registry.handle(state, line, emit=emit)
    except StorageError as e:
        logger.exception("Saving the task list failed.")
        return f"[STORAGE] Change applied in memory but not saved: {e}"
    except PlannerError as e:
        logger.info("Command rejected: %s", e)
        return f"Rejected: {e}"


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started (tasks=%d).", len(state.store.tasks))
    _print_ts("[CONSOLE] Use /help for commands, plain text to generate a schedule, /exit to quit.\n")
    print(command_registry.handle(state, "/show"))

    while True:
        try:
            user_input = input(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is not None:
            _print_ts(reply)

    logger.info("Console connector finished.")

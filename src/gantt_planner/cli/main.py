# src/gantt_planner/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the console REPL.
"""

from __future__ import annotations

import argparse
import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import handle_line, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="gantt-planner", description="Spreadsheet-style Gantt project planner.")
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="Run one command (e.g. '/show' or a project description) instead of the REPL.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    if args.command:
        reply = handle_line(state, " ".join(args.command))
        if reply is not None:
            print(reply)
        return

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()

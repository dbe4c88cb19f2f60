# src/gantt_planner/planning/populate.py

from __future__ import annotations

import asyncio
import logging

from ..core.state import AppState
from ..core.store import GenerationFinished, GenerationStarted, ReplaceAll

logger = logging.getLogger(__name__)


async def populate_from_prompt(state: AppState, prompt: str) -> bool:
    """
    Replace the whole task list with tasks generated from `prompt`.

    Single attempt, no retry. While the call is outstanding the store's
    `generating` flag is set and further submissions are refused. Any failure
    (or an empty result) leaves the task list untouched and returns False.
    StorageError from saving the new list propagates to the caller.
    """
    if not prompt or not prompt.strip():
        return False

    if state.store.state.generating:
        logger.info("Generation already in progress; ignoring prompt=%r", prompt[:200])
        return False

    state.apply(GenerationStarted())
    try:
        tasks = await asyncio.to_thread(state.generator, prompt)
    except Exception:
        logger.exception("Task generation failed for prompt=%r", prompt[:200])
        return False
    finally:
        state.apply(GenerationFinished())

    if not tasks:
        logger.warning("Task generation returned no tasks; keeping the current list")
        return False

    state.apply(ReplaceAll(tuple(tasks)))
    logger.info("Task list replaced with %d generated tasks", len(tasks))
    return True

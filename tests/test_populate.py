# tests/test_populate.py

from __future__ import annotations

import asyncio

import pytest

from gantt_planner.core.models import SEED_TASKS
from gantt_planner.errors import GenerationError, StorageError
from gantt_planner.planning.populate import populate_from_prompt

from .fakes import BlockingGenerator, FailingStorage, FakeGenerator, make_task


@pytest.mark.asyncio
async def test_success_replaces_and_persists(state) -> None:
    generated = [make_task("g1"), make_task("g2")]
    state.generator = FakeGenerator(generated)

    assert await populate_from_prompt(state, "Build a website")
    assert list(state.store.tasks) == generated
    assert state.storage.load() == generated
    assert state.store.state.generating is False


@pytest.mark.asyncio
async def test_empty_result_keeps_existing_tasks(state) -> None:
    state.generator = FakeGenerator([])

    assert not await populate_from_prompt(state, "Build a website")
    assert state.store.tasks == SEED_TASKS
    assert state.store.state.generating is False


@pytest.mark.asyncio
async def test_failure_keeps_existing_tasks(state) -> None:
    state.generator = FakeGenerator(error=GenerationError("schema mismatch"))

    assert not await populate_from_prompt(state, "Build a website")
    assert state.store.tasks == SEED_TASKS
    assert state.store.state.generating is False


@pytest.mark.asyncio
async def test_blank_prompt_is_ignored(state, generator) -> None:
    assert not await populate_from_prompt(state, "   ")
    assert generator.prompts == []


@pytest.mark.asyncio
async def test_generating_flag_blocks_resubmission(state) -> None:
    gen = BlockingGenerator([make_task("g1")])
    state.generator = gen

    first = asyncio.create_task(populate_from_prompt(state, "first"))
    try:
        await asyncio.to_thread(gen.entered.wait, 5.0)
        assert state.store.state.generating is True

        assert not await populate_from_prompt(state, "second")
    finally:
        gen.release.set()

    assert await first
    assert gen.prompts == ["first"]
    assert state.store.state.generating is False


@pytest.mark.asyncio
async def test_save_failure_is_observable(state) -> None:
    state.generator = FakeGenerator([make_task("g1")])
    state.storage = FailingStorage()

    with pytest.raises(StorageError):
        await populate_from_prompt(state, "Build a website")
    assert state.store.state.generating is False

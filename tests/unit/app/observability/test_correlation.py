"""Testes do correlation_id em ContextVar."""

from __future__ import annotations

import asyncio

import pytest

from app.observability import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)


def test_default_is_empty() -> None:
    assert get_correlation_id() == ""


def test_set_and_reset() -> None:
    token = set_correlation_id("corr-1")
    assert get_correlation_id() == "corr-1"
    reset_correlation_id(token)
    assert get_correlation_id() == ""


def test_set_without_value_generates_id() -> None:
    token = set_correlation_id()
    try:
        assert len(get_correlation_id()) == 32
    finally:
        reset_correlation_id(token)


def test_generated_ids_are_unique() -> None:
    assert generate_correlation_id() != generate_correlation_id()


@pytest.mark.asyncio
async def test_tasks_do_not_share_correlation_id() -> None:
    async def _worker(value: str) -> str:
        set_correlation_id(value)
        await asyncio.sleep(0)
        return get_correlation_id()

    results = await asyncio.gather(_worker("a"), _worker("b"))

    assert results == ["a", "b"]

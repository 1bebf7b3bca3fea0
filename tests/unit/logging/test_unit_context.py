# tests/unit/logging/test_unit_context.py — v2
"""Tests for logging/context.py — contextual logging variables."""

from __future__ import annotations

import asyncio

import pytest

from docinsight.logging.context import (
    clear_context,
    get_context,
    set_batch_context,
    set_document_context,
    set_stage,
)


class TestLogContext:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_initial_state(self):
        ctx = get_context()
        assert ctx.document_path is None
        assert ctx.batch_id is None
        assert ctx.stage is None

    def test_set_document_context(self):
        set_document_context("a.pdf", stage="routing")
        ctx = get_context()
        assert ctx.document_path == "a.pdf"
        assert ctx.stage == "routing"

    def test_set_stage(self):
        set_document_context("a.pdf")
        set_stage("insights")
        assert get_context().stage == "insights"

    def test_as_dict_filters_none(self):
        set_batch_context("b1")
        assert get_context().as_dict() == {"batch_id": "b1"}

    @pytest.mark.asyncio
    async def test_tasks_do_not_leak_document(self):
        async def work(name: str) -> str | None:
            set_document_context(name)
            await asyncio.sleep(0)
            return get_context().document_path

        results = await asyncio.gather(work("a.txt"), work("b.txt"))
        assert results == ["a.txt", "b.txt"]
        assert get_context().document_path is None

# tests/unit/logging/test_unit_log_context.py - v1
"""Tests for logging/context.py: contextual logging variables."""

from __future__ import annotations

import asyncio

from reportcache.logging.context import (
    clear_context,
    get_context,
    set_request_context,
    set_student_context,
)


class TestLogContext:
    def setup_method(self):
        clear_context()

    def teardown_method(self):
        clear_context()

    def test_initial_state(self):
        ctx = get_context()
        assert ctx.request_id is None
        assert ctx.student_id is None

    def test_set_request_context(self):
        set_request_context("req-1", "42")
        ctx = get_context()
        assert ctx.request_id == "req-1"
        assert ctx.student_id == "42"

    def test_set_student_context(self):
        set_student_context("7")
        assert get_context().student_id == "7"

    def test_as_dict_filters_none(self):
        set_student_context("7")
        d = get_context().as_dict()
        assert d == {"student_id": "7"}

    def test_clear(self):
        set_request_context("req-1", "42")
        clear_context()
        assert get_context().as_dict() == {}

    def test_isolated_per_task(self):
        async def worker(sid: str) -> str | None:
            set_student_context(sid)
            await asyncio.sleep(0)
            return get_context().student_id

        async def run() -> list[str | None]:
            return await asyncio.gather(worker("a"), worker("b"))

        assert asyncio.run(run()) == ["a", "b"]

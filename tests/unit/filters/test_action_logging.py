"""Tests for the ActionLogging hook."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import AsyncMock

import pytest
from starlette.responses import PlainTextResponse

from fastapi_filter_pipeline.chain import FilterChain
from fastapi_filter_pipeline.engine import execute_pipeline
from fastapi_filter_pipeline.filters.action_logging import ActionLogging
from fastapi_filter_pipeline.filters.authorization import PolicyAuthorizationFilter
from fastapi_filter_pipeline.policy import StaticAccessPolicy
from fastapi_filter_pipeline.registry import ServiceRegistry

LOGGER = "test.actions"


async def _run(allowed: bool, ctx: Any, handler: Any = None) -> None:
    chain = FilterChain(
        PolicyAuthorizationFilter(policy=StaticAccessPolicy(allowed))
    ).add_hook(ActionLogging(logging.getLogger(LOGGER)))
    await execute_pipeline(
        chain.resolve(),
        ctx,
        ServiceRegistry().create_scope(),
        handler or AsyncMock(return_value=PlainTextResponse("Access Granted")),
    )


def _messages(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == LOGGER]


class TestActionLogging:
    @pytest.mark.parametrize("allowed", [True, False])
    async def test_two_entries_regardless_of_outcome(
        self, allowed: bool, make_context: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger=LOGGER):
            await _run(allowed, make_context(handler_name="check_access"))
        assert _messages(caplog) == [
            "Action 'check_access' is starting.",
            "Action 'check_access' has completed.",
        ]

    async def test_entries_are_info(
        self, make_context: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger=LOGGER):
            await _run(True, make_context())
        assert {r.levelno for r in caplog.records if r.name == LOGGER} == {logging.INFO}

    async def test_end_logged_when_handler_raises(
        self, make_context: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        handler = AsyncMock(side_effect=RuntimeError("handler failed"))
        with caplog.at_level(logging.INFO, logger=LOGGER), pytest.raises(RuntimeError):
            await _run(True, make_context(handler_name="broken"), handler)
        assert _messages(caplog) == [
            "Action 'broken' is starting.",
            "Action 'broken' has completed.",
        ]

    async def test_default_logger_is_module_logger(
        self, make_context: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        hook = ActionLogging()
        name = "fastapi_filter_pipeline.filters.action_logging"
        with caplog.at_level(logging.INFO, logger=name):
            await hook.on_pipeline_start(make_context(handler_name="h"))
        assert [r.name for r in caplog.records] == [name]

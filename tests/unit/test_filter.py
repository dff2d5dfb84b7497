"""Tests for the AuthorizationFilter and AsyncAuthorizationFilter base classes."""

from __future__ import annotations

from typing import Any

import pytest

from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.filter import (
    AsyncAuthorizationFilter,
    AuthorizationFilter,
    Filter,
)


class TestAuthorizationFilter:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            AuthorizationFilter()  # type: ignore[abstract]

    def test_subclass_runs_synchronously(self, make_context: Any) -> None:
        class Touch(AuthorizationFilter):
            def on_authorization(self, ctx: FilterContext) -> None:
                ctx.state["touched"] = True

        ctx = make_context()
        assert Touch().on_authorization(ctx) is None
        assert ctx.state["touched"] is True

    def test_openapi_spec_default_returns_none(self) -> None:
        class Minimal(AuthorizationFilter):
            def on_authorization(self, ctx: FilterContext) -> None:
                pass

        assert Minimal.openapi_spec() is None
        assert Minimal().openapi_spec() is None


class TestAsyncAuthorizationFilter:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            AsyncAuthorizationFilter()  # type: ignore[abstract]

    async def test_on_authorization_is_awaitable(self, make_context: Any) -> None:
        class Touch(AsyncAuthorizationFilter):
            async def on_authorization(self, ctx: FilterContext) -> None:
                ctx.state["async"] = True

        ctx = make_context()
        await Touch().on_authorization(ctx)
        assert ctx.state["async"] is True

    def test_both_share_filter_base(self) -> None:
        assert issubclass(AuthorizationFilter, Filter)
        assert issubclass(AsyncAuthorizationFilter, Filter)

"""Shared pytest fixtures for fastapi-filter-pipeline tests."""

from __future__ import annotations

from typing import Any

import pytest
from starlette.requests import Request

from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.policy import StaticAccessPolicy


@pytest.fixture
def make_request() -> Any:
    """Factory for creating Starlette Request objects without a server."""

    def _make(
        method: str = "GET",
        path: str = "/",
        headers: dict[str, str] | None = None,
        query_string: str = "",
    ) -> Request:
        scope: dict[str, Any] = {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": query_string.encode(),
            "headers": [
                (k.lower().encode(), v.encode()) for k, v in (headers or {}).items()
            ],
            "root_path": "",
        }
        return Request(scope)

    return _make


@pytest.fixture
def make_context(make_request: Any) -> Any:
    """Factory for FilterContext objects bound to a fresh request."""

    def _make(handler_name: str = "handler", **request_kwargs: Any) -> FilterContext:
        return FilterContext(
            request=make_request(**request_kwargs), handler_name=handler_name
        )

    return _make


@pytest.fixture
def allow_policy() -> StaticAccessPolicy:
    return StaticAccessPolicy(True)


@pytest.fixture
def deny_policy() -> StaticAccessPolicy:
    return StaticAccessPolicy(False)

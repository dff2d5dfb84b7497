"""Authorization filter base classes, sync and async."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fastapi_filter_pipeline.context import FilterContext


class Filter(ABC):
    """Common base for everything the pipeline can execute."""

    @classmethod
    def openapi_spec(cls) -> dict[str, Any] | None:
        return None


class AuthorizationFilter(Filter):
    """Filter evaluated synchronously before the endpoint handler."""

    @abstractmethod
    def on_authorization(self, ctx: FilterContext) -> None: ...


class AsyncAuthorizationFilter(Filter):
    """Filter evaluated as a suspendable step before the endpoint handler."""

    @abstractmethod
    async def on_authorization(self, ctx: FilterContext) -> None: ...


AnyFilter = AuthorizationFilter | AsyncAuthorizationFilter

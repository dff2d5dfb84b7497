"""PipelineHook base and convenience hook classes."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from fastapi_filter_pipeline.context import FilterContext


class PipelineHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default.

    ``on_pipeline_start`` and ``on_pipeline_end`` fire for every request,
    including short-circuited ones and ones whose handler raised.
    """

    async def on_pipeline_start(self, ctx: FilterContext) -> None:
        pass

    async def on_pipeline_end(self, ctx: FilterContext) -> None:
        pass

    async def on_filter(
        self,
        ctx: FilterContext,
        filter_name: str,
        short_circuited: bool,
    ) -> None:
        pass


class BeforePipeline(PipelineHook):
    """Convenience hook that only fires on pipeline start."""

    def __init__(self, callback: Callable[[FilterContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_pipeline_start(self, ctx: FilterContext) -> None:
        await self._callback(ctx)


class AfterPipeline(PipelineHook):
    """Convenience hook that only fires on pipeline end."""

    def __init__(self, callback: Callable[[FilterContext], Awaitable[None]]) -> None:
        self._callback = callback

    async def on_pipeline_end(self, ctx: FilterContext) -> None:
        await self._callback(ctx)


class AfterFilter(PipelineHook):
    """Convenience hook that fires after each executed filter."""

    def __init__(
        self,
        callback: Callable[[FilterContext, str, bool], Awaitable[None]],
    ) -> None:
        self._callback = callback

    async def on_filter(
        self,
        ctx: FilterContext,
        filter_name: str,
        short_circuited: bool,
    ) -> None:
        await self._callback(ctx, filter_name, short_circuited)

"""execute_pipeline() — runs a resolved chain and the handler for one request."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable

from starlette.responses import Response

from fastapi_filter_pipeline.chain import ResolvedChain
from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.exceptions import (
    FilterAbort,
    FilterException,
    FilterInternalError,
)
from fastapi_filter_pipeline.filter import AsyncAuthorizationFilter
from fastapi_filter_pipeline.policy import error_result
from fastapi_filter_pipeline.registry import ServiceScope
from fastapi_filter_pipeline.trace import FilterTrace, TraceEntry

logger = logging.getLogger(__name__)


async def execute_pipeline(
    resolved: ResolvedChain,
    ctx: FilterContext,
    scope: ServiceScope,
    call_handler: Callable[[], Awaitable[Response]],
) -> Response:
    """Run every filter in order, then the handler unless a filter set a result.

    End hooks fire in all cases, including when the handler raises.
    """
    trace = FilterTrace() if resolved.debug else None
    flow_start = time.perf_counter()

    for hook in resolved.hooks:
        await hook.on_pipeline_start(ctx)

    try:
        await _run_filters(resolved, ctx, scope, trace)
        if ctx.result is not None:
            return ctx.result

        response = await call_handler()
        if trace is not None:
            trace.handler_executed = True
        return response
    finally:
        if trace is not None:
            trace.total_duration_ms = (time.perf_counter() - flow_start) * 1000
            ctx.trace = trace
        for hook in resolved.hooks:
            await hook.on_pipeline_end(ctx)


async def _run_filters(
    resolved: ResolvedChain,
    ctx: FilterContext,
    scope: ServiceScope,
    trace: FilterTrace | None,
) -> None:
    for factory in resolved.filters:
        comp_start = time.perf_counter()
        reason: str | None = None
        try:
            flt = factory.create(scope)
            if isinstance(flt, AsyncAuthorizationFilter):
                await flt.on_authorization(ctx)
            else:
                flt.on_authorization(ctx)
        except FilterAbort as exc:
            ctx.result = error_result(exc.status_code, exc.detail)
            reason = exc.detail
        except FilterException:
            raise
        except Exception as exc:
            logger.exception("Filter %s failed on %s", factory.name, ctx.handler_name)
            wrapped = FilterInternalError("Internal filter error", cause=exc)
            ctx.result = error_result(500, wrapped.detail)
            if trace is not None:
                _record(trace, factory.name, comp_start, "FAILED", str(exc))
                trace.outcome = "ERROR"
            for hook in resolved.hooks:
                await hook.on_filter(ctx, factory.name, True)
            return

        short_circuited = ctx.result is not None
        if trace is not None:
            _record(
                trace,
                factory.name,
                comp_start,
                "SHORT_CIRCUITED" if short_circuited else "PASSED",
                reason,
            )
            if short_circuited:
                trace.outcome = "SHORT_CIRCUITED"
        for hook in resolved.hooks:
            await hook.on_filter(ctx, factory.name, short_circuited)

        if short_circuited:
            logger.debug(
                "Request to %s short-circuited by %s", ctx.handler_name, factory.name
            )
            return


def _record(
    trace: FilterTrace,
    filter_name: str,
    started: float,
    outcome: str,
    reason: str | None,
) -> None:
    trace.entries.append(
        TraceEntry(
            filter_name=filter_name,
            duration_ms=(time.perf_counter() - started) * 1000,
            outcome=outcome,  # type: ignore[arg-type]
            reason=reason,
        )
    )

"""FilterPipeline and FilteredRoute — filter chains around FastAPI endpoints."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ClassVar

from fastapi import APIRouter
from fastapi.routing import APIRoute
from starlette.requests import Request
from starlette.responses import Response

from fastapi_filter_pipeline.attributes import endpoint_filters
from fastapi_filter_pipeline.chain import ChainItem, FilterChain
from fastapi_filter_pipeline.composition import merge_chains
from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.engine import execute_pipeline
from fastapi_filter_pipeline.exceptions import FilterConfigurationError
from fastapi_filter_pipeline.hooks import PipelineHook
from fastapi_filter_pipeline.openapi import (
    apply_openapi_metadata,
    collect_openapi_metadata,
)
from fastapi_filter_pipeline.registry import ServiceRegistry


class FilterPipeline:
    """Owns the service registry and the globally registered filters and hooks."""

    def __init__(
        self,
        *items: ChainItem,
        services: ServiceRegistry | None = None,
        debug: bool = False,
    ) -> None:
        self.services = services or ServiceRegistry()
        self.chain = FilterChain(*items, debug=debug)

    def add(self, *items: ChainItem) -> FilterPipeline:
        self.chain.add(*items)
        return self

    def add_hook(self, hook: PipelineHook) -> FilterPipeline:
        self.chain.add_hook(hook)
        return self

    def route_class(self, *items: ChainItem) -> type[FilteredRoute]:
        """Return an ``APIRoute`` subclass bound to this pipeline.

        ``items`` become the controller-level scope shared by every route
        built with the class.
        """
        pipeline = self
        controller_chain = FilterChain(*items)

        class _BoundFilteredRoute(FilteredRoute):
            filter_pipeline = pipeline
            controller_filters = controller_chain

        return _BoundFilteredRoute

    def router(self, *items: ChainItem, **router_kwargs: Any) -> APIRouter:
        return APIRouter(route_class=self.route_class(*items), **router_kwargs)


class FilteredRoute(APIRoute):
    """APIRoute that runs the merged global, controller and action chains
    before calling the endpoint.

    Chains are merged and resolved once, when the route is built.
    """

    filter_pipeline: ClassVar[FilterPipeline | None] = None
    controller_filters: ClassVar[FilterChain | None] = None

    def __init__(self, path: str, endpoint: Callable[..., Any], **kwargs: Any) -> None:
        pipeline = self.filter_pipeline
        if pipeline is None:
            raise FilterConfigurationError(
                "FilteredRoute is not bound to a FilterPipeline;"
                " build routers with FilterPipeline.router()"
            )
        self.filter_chain = merge_chains(
            pipeline.chain,
            self.controller_filters or FilterChain(),
            FilterChain(*endpoint_filters(endpoint)),
        )
        super().__init__(path, endpoint, **kwargs)
        metadata = collect_openapi_metadata(self.filter_chain.resolve())
        apply_openapi_metadata(self, metadata)

    def get_route_handler(self) -> Callable[[Request], Awaitable[Response]]:
        original_route_handler = super().get_route_handler()
        resolved = self.filter_chain.resolve()
        services = self.filter_pipeline.services  # type: ignore[union-attr]
        handler_name = self.name

        async def filtered_route_handler(request: Request) -> Response:
            ctx = FilterContext(request=request, handler_name=handler_name)
            request.state.filter_context = ctx
            return await execute_pipeline(
                resolved,
                ctx,
                services.create_scope(),
                lambda: original_route_handler(request),
            )

        return filtered_route_handler


def get_filter_context(request: Request) -> FilterContext:
    """FastAPI dependency returning the current request's FilterContext."""
    ctx: FilterContext | None = getattr(request.state, "filter_context", None)
    if ctx is None:
        raise FilterConfigurationError(
            f"No filter context for {request.url.path};"
            " serve the endpoint from a FilterPipeline.router()"
        )
    return ctx

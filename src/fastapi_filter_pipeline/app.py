"""Demo application: the authorization filter controller."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI
from starlette.responses import PlainTextResponse

from fastapi_filter_pipeline.attributes import CustomAuthorization, use_filters
from fastapi_filter_pipeline.factories import ServiceFilter, TypeFilter
from fastapi_filter_pipeline.filters.action_logging import ActionLogging
from fastapi_filter_pipeline.filters.authorization import (
    AsyncLoggingAuthorizationFilter,
    AsyncParameterizedAuthorizationFilter,
    AsyncParameterizedLoggingAuthorizationFilter,
    AsyncPolicyAuthorizationFilter,
    PolicyAuthorizationFilter,
)
from fastapi_filter_pipeline.logging_setup import configure_logging
from fastapi_filter_pipeline.policy import AccessPolicy
from fastapi_filter_pipeline.registry import ServiceRegistry
from fastapi_filter_pipeline.routing import FilterPipeline
from fastapi_filter_pipeline.settings import PipelineSettings

ACCESS_GRANTED = "Access Granted"
FILTER_LOGGER = "fastapi_filter_pipeline.filters"
ACTION_LOGGER = "fastapi_filter_pipeline.actions"


def build_services(settings: PipelineSettings) -> ServiceRegistry:
    """Register the collaborators the demo filters depend on."""
    services = ServiceRegistry()
    services.add_singleton(AccessPolicy, settings.build_policy())
    services.add_singleton(logging.Logger, logging.getLogger(FILTER_LOGGER))
    services.add_scoped(
        AsyncLoggingAuthorizationFilter,
        lambda scope: AsyncLoggingAuthorizationFilter(
            scope.get(logging.Logger), policy=scope.get(AccessPolicy)
        ),
    )
    return services


def authorization_filter_router(pipeline: FilterPipeline) -> APIRouter:
    router = pipeline.router(
        prefix="/api/authorizationfilter",
        tags=["AuthorizationFilter"],
        default_response_class=PlainTextResponse,
    )
    policy = {"policy": AccessPolicy}

    # Filters without arguments could equally be registered as service filters.
    @router.get("/check-authorizationfilter-without-parameter")
    @use_filters(TypeFilter(PolicyAuthorizationFilter, dependencies=policy))
    async def check_access() -> PlainTextResponse:
        return PlainTextResponse(ACCESS_GRANTED)

    @router.get("/check-async-authorizationfilter-without-parameter")
    @use_filters(TypeFilter(AsyncPolicyAuthorizationFilter, dependencies=policy))
    async def check_access_async() -> PlainTextResponse:
        return PlainTextResponse(ACCESS_GRANTED)

    @router.get("/check-async-authorizationfilter-with-parameter")
    @use_filters(
        TypeFilter(
            AsyncParameterizedAuthorizationFilter, "paramValue", dependencies=policy
        )
    )
    async def check_access_with_parameter() -> PlainTextResponse:
        return PlainTextResponse(ACCESS_GRANTED)

    @router.get("/check-async-authorizationfilter-with-parameter-and-dependency")
    @use_filters(
        TypeFilter(
            AsyncParameterizedLoggingAuthorizationFilter,
            "paramValue",
            dependencies={"logger": logging.Logger, **policy},
        )
    )
    async def check_access_with_parameter_and_dependency() -> PlainTextResponse:
        return PlainTextResponse(ACCESS_GRANTED)

    @router.get("/check-access-with-servicefilter")
    @use_filters(ServiceFilter(AsyncLoggingAuthorizationFilter))
    async def check_access_with_service_filter() -> PlainTextResponse:
        return PlainTextResponse(ACCESS_GRANTED)

    @router.get("/check-access-with-attribute")
    @use_filters(CustomAuthorization("param"))
    async def check_access_with_attribute() -> PlainTextResponse:
        return PlainTextResponse(ACCESS_GRANTED)

    return router


def create_app(
    settings: PipelineSettings | None = None,
    *,
    services: ServiceRegistry | None = None,
) -> FastAPI:
    """Build the demo app.

    ``services`` replaces the default registrations, which is how tests
    inject doubles for the policy, the logger or the service filter.
    """
    settings = settings or PipelineSettings.from_env()
    configure_logging(settings.log_level)

    pipeline = FilterPipeline(
        services=services or build_services(settings),
        debug=settings.debug,
    )
    pipeline.add_hook(ActionLogging(logging.getLogger(ACTION_LOGGER)))

    app = FastAPI(title="Authorization Filter Pipeline")
    app.include_router(authorization_filter_router(pipeline))
    app.state.filter_pipeline = pipeline
    app.state.settings = settings
    return app

"""Authorization filters — with and without parameters, sync and async."""

from __future__ import annotations

import logging
from typing import Any

from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.filter import AsyncAuthorizationFilter, AuthorizationFilter
from fastapi_filter_pipeline.policy import (
    AccessPolicy,
    RandomAccessPolicy,
    apply_policy,
)

_FORBIDDEN_RESPONSE: dict[str, Any] = {
    "responses": {
        "403": {
            "description": "Access denied",
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {
                            "statusCode": {"type": "integer", "example": 403},
                            "message": {"type": "string"},
                        },
                    }
                }
            },
        }
    },
}


class PolicyAuthorizationFilter(AuthorizationFilter):
    """Denies the request with a 403 result when the policy says so."""

    def __init__(self, *, policy: AccessPolicy | None = None) -> None:
        self.policy: AccessPolicy = policy or RandomAccessPolicy()

    def on_authorization(self, ctx: FilterContext) -> None:
        apply_policy(ctx, self.policy)

    @classmethod
    def openapi_spec(cls) -> dict[str, Any] | None:
        return _FORBIDDEN_RESPONSE


class ParameterizedAuthorizationFilter(PolicyAuthorizationFilter):
    """Sync filter configured with a string argument at registration time."""

    def __init__(self, parameter: str, *, policy: AccessPolicy | None = None) -> None:
        super().__init__(policy=policy)
        self.parameter = parameter


class AsyncPolicyAuthorizationFilter(AsyncAuthorizationFilter):
    """Async counterpart of :class:`PolicyAuthorizationFilter`."""

    def __init__(self, *, policy: AccessPolicy | None = None) -> None:
        self.policy: AccessPolicy = policy or RandomAccessPolicy()

    async def on_authorization(self, ctx: FilterContext) -> None:
        apply_policy(ctx, self.policy)

    @classmethod
    def openapi_spec(cls) -> dict[str, Any] | None:
        return _FORBIDDEN_RESPONSE


class AsyncParameterizedAuthorizationFilter(AsyncPolicyAuthorizationFilter):
    """Async filter configured with a string argument at registration time."""

    def __init__(self, parameter: str, *, policy: AccessPolicy | None = None) -> None:
        super().__init__(policy=policy)
        self.parameter = parameter


class AsyncParameterizedLoggingAuthorizationFilter(
    AsyncParameterizedAuthorizationFilter
):
    """Takes both an injected logger and a registration-time argument.

    Cannot be resolved from the service registry alone because of the
    argument; register it with ``TypeFilter`` instead.
    """

    def __init__(
        self,
        parameter: str,
        *,
        logger: logging.Logger,
        policy: AccessPolicy | None = None,
    ) -> None:
        super().__init__(parameter, policy=policy)
        self.logger = logger

    async def on_authorization(self, ctx: FilterContext) -> None:
        self.logger.info("Inside Authorization Filter with dependency and parameter")
        await super().on_authorization(ctx)


class AsyncLoggingAuthorizationFilter(AsyncPolicyAuthorizationFilter):
    """Dependency-only filter, meant to be registered as a service filter."""

    def __init__(
        self, logger: logging.Logger, *, policy: AccessPolicy | None = None
    ) -> None:
        super().__init__(policy=policy)
        self.logger = logger

    async def on_authorization(self, ctx: FilterContext) -> None:
        self.logger.info("Inside Authorization Filter with dependency")
        await super().on_authorization(ctx)

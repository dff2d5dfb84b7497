"""Built-in filters."""

from fastapi_filter_pipeline.filters.action_logging import ActionLogging
from fastapi_filter_pipeline.filters.authorization import (
    AsyncLoggingAuthorizationFilter,
    AsyncParameterizedAuthorizationFilter,
    AsyncParameterizedLoggingAuthorizationFilter,
    AsyncPolicyAuthorizationFilter,
    ParameterizedAuthorizationFilter,
    PolicyAuthorizationFilter,
)

__all__ = [
    "ActionLogging",
    "AsyncLoggingAuthorizationFilter",
    "AsyncParameterizedAuthorizationFilter",
    "AsyncParameterizedLoggingAuthorizationFilter",
    "AsyncPolicyAuthorizationFilter",
    "ParameterizedAuthorizationFilter",
    "PolicyAuthorizationFilter",
]

"""FastAPI Filter Pipeline - short-circuiting authorization filters for FastAPI."""

from fastapi_filter_pipeline.attributes import CustomAuthorization, use_filters
from fastapi_filter_pipeline.chain import FilterChain, ResolvedChain
from fastapi_filter_pipeline.composition import ExcludeFilters, merge_chains
from fastapi_filter_pipeline.context import FilterContext
from fastapi_filter_pipeline.engine import execute_pipeline
from fastapi_filter_pipeline.exceptions import (
    DENIAL_MESSAGE,
    AccessDenied,
    FilterAbort,
    FilterConfigurationError,
    FilterException,
    FilterInternalError,
    ServiceNotRegistered,
)
from fastapi_filter_pipeline.factories import (
    FilterFactory,
    FilterInstance,
    ServiceFilter,
    TypeFilter,
)
from fastapi_filter_pipeline.filter import (
    AsyncAuthorizationFilter,
    AuthorizationFilter,
    Filter,
)
from fastapi_filter_pipeline.filters.action_logging import ActionLogging
from fastapi_filter_pipeline.filters.authorization import (
    AsyncLoggingAuthorizationFilter,
    AsyncParameterizedAuthorizationFilter,
    AsyncParameterizedLoggingAuthorizationFilter,
    AsyncPolicyAuthorizationFilter,
    ParameterizedAuthorizationFilter,
    PolicyAuthorizationFilter,
)
from fastapi_filter_pipeline.hooks import (
    AfterFilter,
    AfterPipeline,
    BeforePipeline,
    PipelineHook,
)
from fastapi_filter_pipeline.policy import (
    AccessPolicy,
    RandomAccessPolicy,
    StaticAccessPolicy,
    forbidden_result,
)
from fastapi_filter_pipeline.registry import Lifetime, ServiceRegistry, ServiceScope
from fastapi_filter_pipeline.routing import (
    FilteredRoute,
    FilterPipeline,
    get_filter_context,
)
from fastapi_filter_pipeline.settings import PipelineSettings
from fastapi_filter_pipeline.trace import FilterTrace, TraceEntry

__all__ = [
    "DENIAL_MESSAGE",
    "AccessDenied",
    "AccessPolicy",
    "ActionLogging",
    "AfterFilter",
    "AfterPipeline",
    "AsyncAuthorizationFilter",
    "AsyncLoggingAuthorizationFilter",
    "AsyncParameterizedAuthorizationFilter",
    "AsyncParameterizedLoggingAuthorizationFilter",
    "AsyncPolicyAuthorizationFilter",
    "AuthorizationFilter",
    "BeforePipeline",
    "CustomAuthorization",
    "ExcludeFilters",
    "Filter",
    "FilterAbort",
    "FilterChain",
    "FilterConfigurationError",
    "FilterContext",
    "FilterException",
    "FilterFactory",
    "FilterInstance",
    "FilterInternalError",
    "FilterPipeline",
    "FilterTrace",
    "FilteredRoute",
    "Lifetime",
    "ParameterizedAuthorizationFilter",
    "PipelineHook",
    "PipelineSettings",
    "PolicyAuthorizationFilter",
    "RandomAccessPolicy",
    "ResolvedChain",
    "ServiceFilter",
    "ServiceNotRegistered",
    "ServiceRegistry",
    "ServiceScope",
    "StaticAccessPolicy",
    "TraceEntry",
    "TypeFilter",
    "execute_pipeline",
    "forbidden_result",
    "get_filter_context",
    "merge_chains",
    "use_filters",
]

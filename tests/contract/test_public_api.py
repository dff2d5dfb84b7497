"""Contract tests — verify all public symbols are importable from top-level."""

from __future__ import annotations

import fastapi_filter_pipeline

PUBLIC_SYMBOLS = [
    # Core
    "FilterContext",
    "FilterChain",
    "ResolvedChain",
    "FilterPipeline",
    "FilteredRoute",
    "execute_pipeline",
    "get_filter_context",
    "merge_chains",
    "ExcludeFilters",
    # Filters
    "Filter",
    "AuthorizationFilter",
    "AsyncAuthorizationFilter",
    "PolicyAuthorizationFilter",
    "ParameterizedAuthorizationFilter",
    "AsyncPolicyAuthorizationFilter",
    "AsyncParameterizedAuthorizationFilter",
    "AsyncParameterizedLoggingAuthorizationFilter",
    "AsyncLoggingAuthorizationFilter",
    "ActionLogging",
    # Registration
    "FilterFactory",
    "FilterInstance",
    "TypeFilter",
    "ServiceFilter",
    "CustomAuthorization",
    "use_filters",
    "ServiceRegistry",
    "ServiceScope",
    "Lifetime",
    # Policies
    "AccessPolicy",
    "RandomAccessPolicy",
    "StaticAccessPolicy",
    "forbidden_result",
    # Exceptions
    "DENIAL_MESSAGE",
    "FilterException",
    "FilterAbort",
    "AccessDenied",
    "FilterInternalError",
    "FilterConfigurationError",
    "ServiceNotRegistered",
    # Hooks and trace
    "PipelineHook",
    "BeforePipeline",
    "AfterPipeline",
    "AfterFilter",
    "FilterTrace",
    "TraceEntry",
    # Configuration
    "PipelineSettings",
]


class TestPublicAPIContract:
    def test_all_symbols_importable(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert hasattr(fastapi_filter_pipeline, symbol), (
                f"Symbol '{symbol}' not found in fastapi_filter_pipeline"
            )

    def test_all_symbols_in_all(self) -> None:
        for symbol in PUBLIC_SYMBOLS:
            assert symbol in fastapi_filter_pipeline.__all__, (
                f"Symbol '{symbol}' not in __all__"
            )

    def test_no_unexpected_exports(self) -> None:
        assert set(fastapi_filter_pipeline.__all__) == set(PUBLIC_SYMBOLS)

"""Declarative filter registration on endpoint functions."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from fastapi_filter_pipeline.factories import TypeFilter
from fastapi_filter_pipeline.filters.authorization import (
    AsyncParameterizedLoggingAuthorizationFilter,
)
from fastapi_filter_pipeline.policy import AccessPolicy

if TYPE_CHECKING:
    from fastapi_filter_pipeline.chain import ChainItem

F = TypeVar("F", bound=Callable[..., Any])

_FILTERS_ATTR = "__endpoint_filters__"


def use_filters(*items: ChainItem) -> Callable[[F], F]:
    """Attach action-scope filters to an endpoint.

    Must sit below the route decorator. Decorators can be stacked; filters
    run top to bottom as written.
    """

    def decorator(endpoint: F) -> F:
        existing: list[ChainItem] = getattr(endpoint, _FILTERS_ATTR, [])
        setattr(endpoint, _FILTERS_ATTR, [*items, *existing])
        return endpoint

    return decorator


def endpoint_filters(endpoint: Callable[..., Any]) -> list[ChainItem]:
    return list(getattr(endpoint, _FILTERS_ATTR, []))


class CustomAuthorization(TypeFilter):
    """Type filter for the logging, parameterized authorization filter.

    Shorthand for ``TypeFilter(AsyncParameterizedLoggingAuthorizationFilter,
    parameter, dependencies=...)`` with the logger and access policy
    injected from the registry.
    """

    def __init__(self, parameter: str) -> None:
        super().__init__(
            AsyncParameterizedLoggingAuthorizationFilter,
            parameter,
            dependencies={"logger": logging.Logger, "policy": AccessPolicy},
        )

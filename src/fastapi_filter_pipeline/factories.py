"""Filter factories — how a registered filter becomes an instance per request."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from typing import Any

from fastapi_filter_pipeline.exceptions import FilterConfigurationError
from fastapi_filter_pipeline.filter import AnyFilter, Filter
from fastapi_filter_pipeline.registry import ServiceScope


class FilterFactory(ABC):
    """Produces the filter instance that runs for one request."""

    @abstractmethod
    def create(self, scope: ServiceScope) -> AnyFilter: ...

    @property
    @abstractmethod
    def filter_type(self) -> type: ...

    @property
    def name(self) -> str:
        return self.filter_type.__name__

    def openapi_spec(self) -> dict[str, Any] | None:
        if isinstance(self.filter_type, type) and issubclass(self.filter_type, Filter):
            return self.filter_type.openapi_spec()
        return None


class FilterInstance(FilterFactory):
    """Shares one pre-built filter across all requests."""

    def __init__(self, filter: AnyFilter) -> None:
        self.filter = filter

    def create(self, scope: ServiceScope) -> AnyFilter:
        return self.filter

    @property
    def filter_type(self) -> type:
        return type(self.filter)


class TypeFilter(FilterFactory):
    """Constructs ``filter_type`` per request from fixed arguments and services.

    ``arguments`` are passed positionally as given. ``dependencies`` maps
    keyword names to registry keys resolved from the request scope.

    Raises :class:`FilterConfigurationError` at registration when the
    arguments and dependency names do not fit the constructor.
    """

    def __init__(
        self,
        filter_type: type[AnyFilter],
        *arguments: Any,
        dependencies: Mapping[str, Hashable] | None = None,
    ) -> None:
        self._filter_type = filter_type
        self.arguments = arguments
        self.dependencies = dict(dependencies or {})
        try:
            inspect.signature(filter_type).bind(
                *arguments, **dict.fromkeys(self.dependencies)
            )
        except TypeError as exc:
            raise FilterConfigurationError(
                f"TypeFilter({filter_type.__name__}) does not match"
                f" its constructor: {exc}"
            ) from exc

    def create(self, scope: ServiceScope) -> AnyFilter:
        injected = {name: scope.get(key) for name, key in self.dependencies.items()}
        return self._filter_type(*self.arguments, **injected)

    @property
    def filter_type(self) -> type:
        return self._filter_type

    def __repr__(self) -> str:
        return f"TypeFilter({self._filter_type.__name__}, arguments={self.arguments!r})"


class ServiceFilter(FilterFactory):
    """Resolves the filter itself from the service registry.

    Suitable for filters that only need injected collaborators; anything
    that takes registration-time arguments belongs in a :class:`TypeFilter`.
    """

    def __init__(self, service_type: type[AnyFilter]) -> None:
        self.service_type = service_type

    def create(self, scope: ServiceScope) -> AnyFilter:
        service = scope.get(self.service_type)
        if not isinstance(service, Filter):
            raise FilterConfigurationError(
                f"Service {self.name} resolved to {type(service).__name__},"
                " which is not a filter"
            )
        return service  # type: ignore[return-value]

    @property
    def filter_type(self) -> type:
        return self.service_type

    def __repr__(self) -> str:
        return f"ServiceFilter({self.service_type.__name__})"

"""ServiceRegistry — explicit service registrations with per-request scopes."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fastapi_filter_pipeline.exceptions import ServiceNotRegistered

ServiceFactory = Callable[["ServiceScope"], Any]


class Lifetime(Enum):
    """How long a resolved service instance is reused."""

    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"


@dataclass(frozen=True)
class Registration:
    key: Hashable
    factory: ServiceFactory
    lifetime: Lifetime


class ServiceRegistry:
    """Holds service registrations and the shared singleton instances.

    Factories receive the requesting :class:`ServiceScope` so they can
    resolve their own collaborators.
    """

    def __init__(self) -> None:
        self._registrations: dict[Hashable, Registration] = {}
        self._singletons: dict[Hashable, Any] = {}

    def add_singleton(
        self,
        key: Hashable,
        instance: Any = None,
        *,
        factory: ServiceFactory | None = None,
    ) -> ServiceRegistry:
        """Register a shared service, either pre-built or built on first use."""
        if (instance is None) == (factory is None):
            raise ValueError("Pass exactly one of instance or factory")
        self._register(key, factory or (lambda scope: instance), Lifetime.SINGLETON)
        if instance is not None:
            self._singletons[key] = instance
        return self

    def add_scoped(self, key: Hashable, factory: ServiceFactory) -> ServiceRegistry:
        return self._register(key, factory, Lifetime.SCOPED)

    def add_transient(self, key: Hashable, factory: ServiceFactory) -> ServiceRegistry:
        return self._register(key, factory, Lifetime.TRANSIENT)

    def create_scope(self) -> ServiceScope:
        return ServiceScope(self)

    def registration(self, key: Hashable) -> Registration:
        try:
            return self._registrations[key]
        except KeyError:
            raise ServiceNotRegistered(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._registrations

    def _register(
        self, key: Hashable, factory: ServiceFactory, lifetime: Lifetime
    ) -> ServiceRegistry:
        self._registrations[key] = Registration(key, factory, lifetime)
        self._singletons.pop(key, None)
        return self

    def _singleton(self, registration: Registration, scope: ServiceScope) -> Any:
        if registration.key not in self._singletons:
            self._singletons[registration.key] = registration.factory(scope)
        return self._singletons[registration.key]


class ServiceScope:
    """Resolution scope covering a single request."""

    def __init__(self, registry: ServiceRegistry) -> None:
        self._registry = registry
        self._scoped: dict[Hashable, Any] = {}

    def get(self, key: Hashable) -> Any:
        registration = self._registry.registration(key)

        if registration.lifetime is Lifetime.SINGLETON:
            return self._registry._singleton(registration, self)
        if registration.lifetime is Lifetime.SCOPED:
            if key not in self._scoped:
                self._scoped[key] = registration.factory(self)
            return self._scoped[key]
        return registration.factory(self)

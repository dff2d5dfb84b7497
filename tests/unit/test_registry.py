"""Tests for ServiceRegistry lifetimes and ServiceScope resolution."""

from __future__ import annotations

import pytest

from fastapi_filter_pipeline.exceptions import ServiceNotRegistered
from fastapi_filter_pipeline.registry import Lifetime, ServiceRegistry, ServiceScope


class _Service:
    pass


class _Consumer:
    def __init__(self, service: _Service) -> None:
        self.service = service


class TestSingleton:
    def test_instance_shared_across_scopes(self) -> None:
        service = _Service()
        registry = ServiceRegistry().add_singleton(_Service, service)
        assert registry.create_scope().get(_Service) is service
        assert registry.create_scope().get(_Service) is service

    def test_factory_called_once(self) -> None:
        calls: list[ServiceScope] = []

        def factory(scope: ServiceScope) -> _Service:
            calls.append(scope)
            return _Service()

        registry = ServiceRegistry().add_singleton(_Service, factory=factory)
        first = registry.create_scope().get(_Service)
        second = registry.create_scope().get(_Service)
        assert first is second
        assert len(calls) == 1

    def test_requires_exactly_one_source(self) -> None:
        with pytest.raises(ValueError):
            ServiceRegistry().add_singleton(_Service)
        with pytest.raises(ValueError):
            ServiceRegistry().add_singleton(
                _Service, _Service(), factory=lambda scope: _Service()
            )

    def test_reregistration_replaces_instance(self) -> None:
        old, new = _Service(), _Service()
        registry = ServiceRegistry().add_singleton(_Service, old)
        registry.add_singleton(_Service, new)
        assert registry.create_scope().get(_Service) is new


class TestScoped:
    def test_same_instance_within_scope(self) -> None:
        registry = ServiceRegistry().add_scoped(_Service, lambda scope: _Service())
        scope = registry.create_scope()
        assert scope.get(_Service) is scope.get(_Service)

    def test_new_instance_per_scope(self) -> None:
        registry = ServiceRegistry().add_scoped(_Service, lambda scope: _Service())
        assert registry.create_scope().get(_Service) is not (
            registry.create_scope().get(_Service)
        )


class TestTransient:
    def test_new_instance_every_call(self) -> None:
        registry = ServiceRegistry().add_transient(_Service, lambda scope: _Service())
        scope = registry.create_scope()
        assert scope.get(_Service) is not scope.get(_Service)


class TestResolution:
    def test_factory_resolves_collaborators_from_scope(self) -> None:
        registry = (
            ServiceRegistry()
            .add_scoped(_Service, lambda scope: _Service())
            .add_transient(_Consumer, lambda scope: _Consumer(scope.get(_Service)))
        )
        scope = registry.create_scope()
        consumer = scope.get(_Consumer)
        assert consumer.service is scope.get(_Service)

    def test_unknown_key_raises(self) -> None:
        with pytest.raises(ServiceNotRegistered) as exc_info:
            ServiceRegistry().create_scope().get(_Service)
        assert exc_info.value.key is _Service

    def test_contains(self) -> None:
        registry = ServiceRegistry().add_transient("clock", lambda scope: 0)
        assert "clock" in registry
        assert _Service not in registry

    def test_registration_records_lifetime(self) -> None:
        registry = ServiceRegistry().add_scoped(_Service, lambda scope: _Service())
        assert registry.registration(_Service).lifetime is Lifetime.SCOPED

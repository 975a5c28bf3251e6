"""Tests for argument definition resolution."""

from __future__ import annotations

from typing import Any

import pytest

from servicebox.core.interfaces import ServiceNotFoundError
from servicebox.core.models import ParameterReference, ServiceReference
from servicebox.resolution import ArgumentResolver, ParameterResolver


class StubServices:
    """Record service lookups and hand back canned instances."""

    def __init__(self, instances: dict[str, Any]) -> None:
        self._instances = instances
        self.requested: list[str] = []

    def get(self, service_id: str) -> Any:
        self.requested.append(service_id)
        if service_id not in self._instances:
            raise ServiceNotFoundError(service_id)
        return self._instances[service_id]

    def has(self, service_id: str) -> bool:
        return service_id in self._instances


def test_mixed_arguments_keep_their_order() -> None:
    instance = object()
    services = StubServices({"a": instance})
    resolver = ArgumentResolver(services, ParameterResolver({"db": {"port": 5432}}))

    values = resolver.resolve_arguments(
        "owner", ["lit1", ServiceReference("a"), ParameterReference("db.port"), "lit2"]
    )

    assert values == ["lit1", instance, 5432, "lit2"]
    assert values[1] is instance


def test_services_are_requested_left_to_right() -> None:
    services = StubServices({"a": 1, "b": 2})
    resolver = ArgumentResolver(services, ParameterResolver())

    resolver.resolve_arguments(
        "owner", [ServiceReference("b"), ServiceReference("a"), ServiceReference("b")]
    )

    assert services.requested == ["b", "a", "b"]


def test_empty_definitions_resolve_to_empty_list() -> None:
    resolver = ArgumentResolver(StubServices({}), ParameterResolver())

    assert resolver.resolve_arguments("owner", []) == []


def test_lookup_errors_propagate() -> None:
    resolver = ArgumentResolver(StubServices({}), ParameterResolver())

    with pytest.raises(ServiceNotFoundError):
        resolver.resolve_arguments("owner", [ServiceReference("missing")])


def test_markers_are_immutable() -> None:
    reference = ServiceReference("a")

    with pytest.raises(AttributeError):
        reference.name = "b"  # type: ignore[misc]
    assert ServiceReference("a") != ParameterReference("a")

"""Registry mapping service type identifiers to factory callables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.interfaces import ContainerConfigError, ServiceFactory


class FactoryRegistry:
    """Name-keyed store of callables used to construct services."""

    def __init__(self, factories: Mapping[str, ServiceFactory] | None = None) -> None:
        self._factories: dict[str, ServiceFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(
        self, name: str, factory: ServiceFactory, *, replace: bool = False
    ) -> None:
        """Register ``factory`` under ``name``.

        Raises:
            TypeError: If ``factory`` is not callable.
            ValueError: If ``name`` is taken and ``replace`` is ``False``.
        """
        if not callable(factory):
            raise TypeError(f"factory for '{name}' must be callable")
        if not replace and name in self._factories:
            raise ValueError(f"factory '{name}' already registered")
        self._factories[name] = factory

    def lookup(self, type_id: Any, *, service_id: str | None = None) -> ServiceFactory:
        """Return the factory for ``type_id``.

        Strings are looked up by name; any other callable (typically a class)
        is its own factory.
        """
        if isinstance(type_id, str):
            factory = self._factories.get(type_id)
            if factory is not None:
                return factory
        elif callable(type_id):
            return type_id
        raise ContainerConfigError(
            f"{service_id} service class does not exist: {type_id}",
            service_id=service_id,
        )

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


__all__ = ["FactoryRegistry"]

"""Protocol interfaces and the error taxonomy shared by container components."""

from __future__ import annotations

from typing import Any, Protocol


class ContainerError(RuntimeError):
    """Base class for every error raised by the container."""


class NotFoundError(ContainerError, LookupError):
    """Raised when a requested entry does not exist."""


class ServiceNotFoundError(NotFoundError):
    """Raised when no definition is registered for a service id."""

    def __init__(self, service_id: str) -> None:
        super().__init__(f"Service not found: {service_id}")
        self.service_id = service_id


class ParameterNotFoundError(NotFoundError):
    """Raised when a dotted parameter path cannot be walked to the end."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Parameter not found: {path}")
        self.path = path


class ContainerConfigError(ContainerError):
    """Raised when a service definition cannot be turned into an instance."""

    def __init__(self, message: str, *, service_id: str | None = None) -> None:
        super().__init__(message)
        self.service_id = service_id


class ServiceFactory(Protocol):
    """Callable building a service from positionally resolved arguments."""

    def __call__(self, *args: Any) -> Any:
        """Return a new service instance."""
        raise NotImplementedError


class ContainerInterface(Protocol):
    """Minimal consumer-facing view of a service container."""

    def get(self, service_id: str) -> Any:
        """Return the service registered under ``service_id``."""
        raise NotImplementedError

    def has(self, service_id: str) -> bool:
        """Return whether a definition exists for ``service_id``."""
        raise NotImplementedError


class ParameterSource(Protocol):
    """Anything able to resolve dotted parameter paths."""

    def resolve(self, path: str) -> Any:
        """Return the value stored under ``path``."""
        raise NotImplementedError


__all__ = [
    "ContainerConfigError",
    "ContainerError",
    "ContainerInterface",
    "NotFoundError",
    "ParameterNotFoundError",
    "ParameterSource",
    "ServiceFactory",
    "ServiceNotFoundError",
]

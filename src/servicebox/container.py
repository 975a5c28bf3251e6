"""Service container resolving declarative definitions into singletons."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from .core.config import AppSettings, ResolutionSettings
from .core.interfaces import (
    ContainerConfigError,
    ContainerInterface,
    ServiceFactory,
    ServiceNotFoundError,
)
from .core.models import CallDefinition, DefinitionState, ServiceDefinition
from .resolution import ArgumentResolver, FactoryRegistry, ParameterResolver

LOGGER = logging.getLogger(__name__)


class ServiceContainer(ContainerInterface):
    """Lazily build, wire and cache services described by definitions.

    Each service id is constructed at most once. Constructor arguments and
    setter call arguments may hold :class:`ServiceReference` or
    :class:`ParameterReference` markers, which are resolved recursively through
    this container. Definitions are only validated when first resolved.
    """

    def __init__(
        self,
        services: Mapping[str, Any] | None = None,
        parameters: Mapping[str, Any] | None = None,
        *,
        factories: FactoryRegistry | Mapping[str, ServiceFactory] | None = None,
        settings: ResolutionSettings | None = None,
    ) -> None:
        """Initialise container storage from definitions and parameters."""
        self._definitions: dict[str, Any] = dict(services or {})
        self._states: dict[str, DefinitionState] = {
            service_id: DefinitionState.UNRESOLVED for service_id in self._definitions
        }
        self._instances: dict[str, Any] = {}
        self._resolving: list[str] = []
        self._settings = settings or ResolutionSettings()
        self._factories = (
            factories
            if isinstance(factories, FactoryRegistry)
            else FactoryRegistry(factories)
        )
        self._parameters = ParameterResolver(parameters)
        self._arguments = ArgumentResolver(self, self._parameters)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        services: Mapping[str, Any] | None = None,
        parameters: Mapping[str, Any] | None = None,
        factories: FactoryRegistry | Mapping[str, ServiceFactory] | None = None,
    ) -> ServiceContainer:
        """Build a container using the resolution section of ``settings``."""
        return cls(
            services, parameters, factories=factories, settings=settings.resolution
        )

    # Public API ---------------------------------------------------------------
    def has(self, service_id: str) -> bool:
        """Return whether a definition exists for ``service_id``.

        ``True`` does not mean :meth:`get` will succeed, only that it will not
        raise :class:`ServiceNotFoundError`.
        """
        return service_id in self._definitions

    def get(self, service_id: str) -> Any:
        """Return the singleton for ``service_id``, constructing it on first use.

        Raises:
            ServiceNotFoundError: If no definition exists for ``service_id``.
            ContainerConfigError: If the definition cannot be constructed.
        """
        if not self.has(service_id):
            raise ServiceNotFoundError(service_id)
        if service_id not in self._instances:
            self._instances[service_id] = self._create_service(service_id)
        return self._instances[service_id]

    def try_get(self, service_id: str) -> Any | None:
        """Return the service if defined; return None otherwise."""
        try:
            return self.get(service_id)
        except ServiceNotFoundError as exc:
            if exc.service_id != service_id:
                raise
            return None

    def get_parameter(self, path: str) -> Any:
        """Return the parameter stored under the dotted ``path``."""
        return self._parameters.resolve(path)

    def initialized(self, service_id: str) -> bool:
        """Return whether ``service_id`` has already been constructed."""
        return service_id in self._instances

    def state(self, service_id: str) -> DefinitionState:
        """Return the construction state tracked for ``service_id``."""
        if not self.has(service_id):
            raise ServiceNotFoundError(service_id)
        return self._states[service_id]

    def service_ids(self) -> list[str]:
        """Return defined service ids in sorted order."""
        return sorted(self._definitions)

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        keys = ", ".join(self.service_ids())
        return f"ServiceContainer(services=[{keys}])"

    # Construction -------------------------------------------------------------
    def _create_service(self, service_id: str) -> Any:
        definition = self._load_definition(service_id)
        factory = self._factories.lookup(definition.class_, service_id=service_id)
        self._enter(service_id)

        try:
            arguments = (
                self._arguments.resolve_arguments(service_id, definition.arguments)
                if definition.arguments
                else []
            )
            LOGGER.debug(
                "Constructing service %s with %d argument(s)",
                service_id,
                len(arguments),
            )
            service = factory(*arguments)
            if definition.calls:
                self._initialize_service(service, service_id, definition.calls)
        except Exception:
            if self._settings.reset_on_failure:
                self._states[service_id] = DefinitionState.UNRESOLVED
            raise
        finally:
            self._resolving.pop()

        self._states[service_id] = DefinitionState.RESOLVED
        return service

    def _load_definition(self, service_id: str) -> ServiceDefinition:
        entry = self._definitions[service_id]
        if isinstance(entry, ServiceDefinition):
            return entry
        if not isinstance(entry, Mapping) or "class" not in entry:
            msg = f"{service_id} service entry must be a mapping containing a 'class' key"
            raise ContainerConfigError(msg, service_id=service_id)
        try:
            return ServiceDefinition.model_validate(entry)
        except ValidationError as exc:
            msg = f"{service_id} service entry has invalid fields: {_invalid_fields(exc)}"
            raise ContainerConfigError(msg, service_id=service_id) from exc

    def _enter(self, service_id: str) -> None:
        """Mark ``service_id`` as under construction, rejecting re-entry."""
        if self._states[service_id] is DefinitionState.IN_PROGRESS:
            msg = f"{service_id} service contains a circular reference"
            if service_id in self._resolving:
                start = self._resolving.index(service_id)
                chain = " -> ".join([*self._resolving[start:], service_id])
                msg = f"{msg}: {chain}"
            LOGGER.warning(msg)
            raise ContainerConfigError(msg, service_id=service_id)
        if len(self._resolving) >= self._settings.max_depth:
            msg = (
                f"{service_id} service exceeds the maximum resolution depth"
                f" of {self._settings.max_depth}"
            )
            raise ContainerConfigError(msg, service_id=service_id)

        self._states[service_id] = DefinitionState.IN_PROGRESS
        self._resolving.append(service_id)

    def _initialize_service(
        self, service: Any, service_id: str, entries: Sequence[Any]
    ) -> None:
        """Run setter injection calls on a freshly constructed service.

        Every entry is validated and its method looked up before the first
        call runs.
        """
        calls = [self._load_call(service_id, entry) for entry in entries]
        methods = []
        for call in calls:
            method = getattr(service, call.method, None)
            if not callable(method):
                msg = (
                    f"{service_id} service asks for call to uncallable method:"
                    f" {call.method}"
                )
                raise ContainerConfigError(msg, service_id=service_id)
            methods.append(method)

        for call, method in zip(calls, methods):
            arguments = (
                self._arguments.resolve_arguments(service_id, call.arguments)
                if call.arguments
                else []
            )
            LOGGER.debug("Calling %s.%s on service", service_id, call.method)
            method(*arguments)

    @staticmethod
    def _load_call(service_id: str, entry: Any) -> CallDefinition:
        if isinstance(entry, CallDefinition):
            return entry
        if not isinstance(entry, Mapping) or "method" not in entry:
            msg = f"{service_id} service calls must be mappings containing a 'method' key"
            raise ContainerConfigError(msg, service_id=service_id)
        try:
            return CallDefinition.model_validate(entry)
        except ValidationError as exc:
            msg = (
                f"{service_id} service call to {entry['method']} has invalid fields:"
                f" {_invalid_fields(exc)}"
            )
            raise ContainerConfigError(msg, service_id=service_id) from exc


def _invalid_fields(exc: ValidationError) -> str:
    """Return the sorted top-level field names reported by ``exc``."""
    fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
    return ", ".join(fields)


__all__ = ["ServiceContainer"]

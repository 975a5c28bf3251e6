"""Materialise argument definitions into concrete values."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..core.interfaces import ContainerInterface, ParameterSource
from ..core.models import ArgumentDefinition, ParameterReference, ServiceReference

LOGGER = logging.getLogger(__name__)


class ArgumentResolver:
    """Replace reference markers with services and parameter values."""

    def __init__(
        self, services: ContainerInterface, parameters: ParameterSource
    ) -> None:
        self._services = services
        self._parameters = parameters

    def resolve_arguments(
        self, owner_id: str, definitions: Iterable[ArgumentDefinition]
    ) -> list[Any]:
        """Return resolved values in the same order as ``definitions``.

        Literals pass through untouched. Errors raised while resolving a
        referenced service or parameter propagate unchanged.
        """
        return [self._resolve(owner_id, definition) for definition in definitions]

    def _resolve(self, owner_id: str, definition: ArgumentDefinition) -> Any:
        if isinstance(definition, ServiceReference):
            LOGGER.debug("%s requires service %s", owner_id, definition.name)
            return self._services.get(definition.name)
        if isinstance(definition, ParameterReference):
            LOGGER.debug("%s requires parameter %s", owner_id, definition.name)
            return self._parameters.resolve(definition.name)
        return definition


__all__ = ["ArgumentResolver"]

"""Dotted-path lookups against a nested parameter tree."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..core.interfaces import ParameterNotFoundError, ParameterSource

SEPARATOR = "."


class ParameterResolver(ParameterSource):
    """Walk a nested mapping one ``.``-separated segment at a time."""

    def __init__(self, parameters: Mapping[str, Any] | None = None) -> None:
        self._parameters: Mapping[str, Any] = parameters or {}

    def resolve(self, path: str) -> Any:
        """Return the leaf or sub-tree stored under ``path``.

        A key holding ``None`` is present and resolves to ``None``; only keys
        missing from their mapping raise.

        Raises:
            ParameterNotFoundError: If any segment is missing at its level. The
                error names the full ``path``, not the failing segment.
        """
        context: Any = self._parameters
        for token in path.split(SEPARATOR):
            if not isinstance(context, Mapping) or token not in context:
                raise ParameterNotFoundError(path)
            context = context[token]
        return context

    def has(self, path: str) -> bool:
        """Return whether ``path`` can be resolved."""
        try:
            self.resolve(path)
        except ParameterNotFoundError:
            return False
        return True


__all__ = ["ParameterResolver"]

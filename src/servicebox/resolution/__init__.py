"""Argument, parameter and factory resolution used by the container."""

from .arguments import ArgumentResolver
from .factories import FactoryRegistry
from .parameters import ParameterResolver

__all__ = ["ArgumentResolver", "FactoryRegistry", "ParameterResolver"]

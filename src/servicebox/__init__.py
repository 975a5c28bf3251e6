"""Lazy service locator and dependency-injection container."""

from .container import ServiceContainer
from .core import (
    AppSettings,
    CallDefinition,
    ContainerConfigError,
    ContainerError,
    ContainerInterface,
    DefinitionState,
    NotFoundError,
    ParameterNotFoundError,
    ParameterReference,
    ResolutionSettings,
    ServiceDefinition,
    ServiceNotFoundError,
    ServiceReference,
    configure_logging,
    load_app_settings,
)
from .resolution import ArgumentResolver, FactoryRegistry, ParameterResolver

__all__ = [
    "AppSettings",
    "ArgumentResolver",
    "CallDefinition",
    "ContainerConfigError",
    "ContainerError",
    "ContainerInterface",
    "DefinitionState",
    "FactoryRegistry",
    "NotFoundError",
    "ParameterNotFoundError",
    "ParameterReference",
    "ParameterResolver",
    "ResolutionSettings",
    "ServiceContainer",
    "ServiceDefinition",
    "ServiceNotFoundError",
    "ServiceReference",
    "configure_logging",
    "load_app_settings",
]

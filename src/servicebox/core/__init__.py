"""Core utilities for configuration, logging, errors and service models."""

from .config import AppSettings, LoggingSettings, ResolutionSettings, load_app_settings
from .interfaces import (
    ContainerConfigError,
    ContainerError,
    ContainerInterface,
    NotFoundError,
    ParameterNotFoundError,
    ServiceNotFoundError,
)
from .logging import configure_logging
from .models import (
    CallDefinition,
    DefinitionState,
    ParameterReference,
    ServiceDefinition,
    ServiceReference,
)

__all__ = [
    "AppSettings",
    "CallDefinition",
    "ContainerConfigError",
    "ContainerError",
    "ContainerInterface",
    "DefinitionState",
    "LoggingSettings",
    "NotFoundError",
    "ParameterNotFoundError",
    "ParameterReference",
    "ResolutionSettings",
    "ServiceDefinition",
    "ServiceNotFoundError",
    "ServiceReference",
    "configure_logging",
    "load_app_settings",
]

"""Core domain models describing services and their arguments."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True, slots=True)
class ServiceReference:
    """Marks an argument to be replaced by another named service."""

    name: str


@dataclass(frozen=True, slots=True)
class ParameterReference:
    """Marks an argument to be replaced by a dotted parameter lookup."""

    name: str


class DefinitionState(Enum):
    """Construction progress of a single service definition."""

    UNRESOLVED = "unresolved"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class CallDefinition(BaseModel):
    """Setter call executed on a service right after construction."""

    model_config = ConfigDict(frozen=True)

    method: str = Field(description="Name of the method invoked on the instance")
    arguments: tuple[Any, ...] = Field(
        default=(), description="Literals or reference markers passed to the method"
    )


class ServiceDefinition(BaseModel):
    """Declarative recipe for building one named service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    class_: Any = Field(
        alias="class", description="Factory name in the registry or a callable"
    )
    arguments: tuple[Any, ...] = Field(
        default=(), description="Constructor arguments, applied positionally"
    )
    calls: tuple[Any, ...] = Field(
        default=(),
        description="Setter call entries, checked when the service is initialised",
    )


ArgumentDefinition = Any
"""A literal value, :class:`ServiceReference` or :class:`ParameterReference`."""


__all__ = [
    "ArgumentDefinition",
    "CallDefinition",
    "DefinitionState",
    "ParameterReference",
    "ServiceDefinition",
    "ServiceReference",
]

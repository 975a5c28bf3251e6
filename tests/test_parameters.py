"""Tests for dotted parameter resolution."""

from __future__ import annotations

import pytest

from servicebox.core.interfaces import ParameterNotFoundError
from servicebox.resolution import ParameterResolver


@pytest.fixture()
def resolver() -> ParameterResolver:
    return ParameterResolver(
        {
            "db": {"host": "localhost", "port": 5432, "options": {"timeout": None}},
            "debug": False,
        }
    )


def test_resolves_leaf_values(resolver: ParameterResolver) -> None:
    assert resolver.resolve("db.host") == "localhost"
    assert resolver.resolve("db.port") == 5432
    assert resolver.resolve("debug") is False


def test_returns_subtrees_for_partial_paths(resolver: ParameterResolver) -> None:
    assert resolver.resolve("db.options") == {"timeout": None}


def test_none_is_a_present_value(resolver: ParameterResolver) -> None:
    assert resolver.resolve("db.options.timeout") is None
    assert resolver.has("db.options.timeout")


@pytest.mark.parametrize("path", ["db.missing", "x.y", "db.host.extra", "debug.flag"])
def test_missing_segments_raise_with_full_path(
    resolver: ParameterResolver, path: str
) -> None:
    """The error names the requested path rather than the failing segment."""

    with pytest.raises(ParameterNotFoundError) as excinfo:
        resolver.resolve(path)
    assert excinfo.value.path == path
    assert str(excinfo.value) == f"Parameter not found: {path}"


def test_has_reports_missing_paths(resolver: ParameterResolver) -> None:
    assert resolver.has("db.host")
    assert not resolver.has("db.user")


def test_empty_tree_has_no_parameters() -> None:
    with pytest.raises(ParameterNotFoundError):
        ParameterResolver().resolve("anything")

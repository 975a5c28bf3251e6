"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from servicebox.core.config import load_app_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Ensure each test sees a fresh settings instance."""

    load_app_settings.cache_clear()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.logging.level == "INFO"
    assert settings.resolution.reset_on_failure is False
    assert settings.resolution.max_depth == 100


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "SERVICEBOX_RESOLUTION__RESET_ON_FAILURE=true\n"
        "SERVICEBOX_RESOLUTION__MAX_DEPTH=12\n"
        "OTHER_SETTING=ignored\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.resolution.reset_on_failure is True
    assert settings.resolution.max_depth == 12


def test_environment_wins_over_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    env_file = tmp_path / "test.env"
    env_file.write_text("SERVICEBOX_LOGGING__LEVEL=WARNING\n", encoding="utf-8")
    monkeypatch.setenv("SERVICEBOX_LOGGING__LEVEL", "DEBUG")

    settings = load_app_settings(env_file=env_file)
    assert settings.logging.level == "DEBUG"

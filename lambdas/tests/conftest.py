"""Shared pytest fixtures for Lambda tests."""
import os

import pytest

os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "dice-roller")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")


def _clear_config_cache() -> None:
    from shared.config import get_config

    if hasattr(get_config, "_config"):
        delattr(get_config, "_config")


@pytest.fixture
def env_setup(monkeypatch):
    """Set environment variables for a test configuration."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("POWERTOOLS_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("MAX_DICE_QUANTITY", raising=False)
    _clear_config_cache()
    yield
    _clear_config_cache()


class ScriptedRandomSource:
    """Returns die values from a fixed script, recording requested sides."""

    def __init__(self, values: list[int]) -> None:
        self._values = iter(values)
        self.sides_requested: list[int] = []

    def roll_die(self, sides: int) -> int:
        self.sides_requested.append(sides)
        return next(self._values)


@pytest.fixture
def scripted_source():
    """Factory for scripted random sources."""
    return ScriptedRandomSource

"""Shared pytest fixtures for tagcraft tests."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from tagcraft.config import Settings, get_settings

_ENV_PREFIXES = ("MARKUP__", "COMPLETION__", "LOGGING__")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep developer environment variables and cached settings out of tests."""
    for key in list(os.environ):
        if key.startswith(_ENV_PREFIXES):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, without reading any .env file."""
    return Settings(_env_file=None)  # type: ignore[call-arg]

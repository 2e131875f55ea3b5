# tests/conftest.py
from __future__ import annotations

from collections.abc import Generator

import pytest

from resident_info_api.config.settings import get_settings
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
    load_source_settings,
)

SOURCE_ENV: dict[str, str] = {
    "HOUSING_API_URL": "https://housing.test/",
    "HOUSING_API_TOKEN": "housing-token",
    "MOSAIC_API_URL": "https://mosaic.test",
    "MOSAIC_API_TOKEN": "mosaic-key",
    "ACADEMY_API_URL": "https://academy.test",
    "ACADEMY_API_TOKEN": "academy-token",
    "ELECTORAL_REGISTER_API_URL": "https://electoral.test",
    "ELECTORAL_REGISTER_API_TOKEN": "electoral-token",
}

_APP_ENV = ("ENVIRONMENT", "LOG_LEVEL", "SERVICE_VERSION", "RESIDENT_SOURCES", "HTTP_TIMEOUT_S")


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Start every test from a clean environment and an empty settings cache."""
    for key in (*SOURCE_ENV, *_APP_ENV):
        monkeypatch.delenv(key, raising=False)
    for prefix in ("HOUSING_API_", "MOSAIC_API_", "ACADEMY_API_", "ELECTORAL_REGISTER_API_"):
        monkeypatch.delenv(f"{prefix}TIMEOUT_S", raising=False)
        monkeypatch.delenv(f"{prefix}AUTH_HEADER", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def source_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Configure all four source systems through the environment."""
    for key, value in SOURCE_ENV.items():
        monkeypatch.setenv(key, value)
    return dict(SOURCE_ENV)


@pytest.fixture
def source_settings(source_env: dict[str, str]) -> dict[SourceSystem, ResidentSourceSettings]:
    """Validated settings for every source, loaded from ``source_env``."""
    return {system: load_source_settings(system) for system in SourceSystem.ordered()}

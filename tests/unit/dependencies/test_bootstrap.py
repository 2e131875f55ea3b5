from __future__ import annotations

import pytest
from fastapi import FastAPI

from resident_info_api.dependencies.core.bootstrap import bootstrap
from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.domain.exceptions.residents import ConfigurationError
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
)


@pytest.mark.asyncio
async def test_bootstrap_builds_gateways_and_closes_client(
    source_settings: dict[SourceSystem, ResidentSourceSettings],
) -> None:
    async with bootstrap(FastAPI(), source_settings) as state:
        assert list(state.gateways) == SourceSystem.ordered()
        assert not state.http_client.is_closed
        client = state.http_client
    assert client.is_closed


@pytest.mark.asyncio
async def test_bootstrap_loads_enabled_sources_from_env(
    source_env: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("RESIDENT_SOURCES", "mosaic")
    async with bootstrap(FastAPI()) as state:
        assert list(state.gateways) == [SourceSystem.MOSAIC]


@pytest.mark.asyncio
async def test_bootstrap_fails_fast_on_missing_source_config() -> None:
    with pytest.raises(ConfigurationError):
        async with bootstrap(FastAPI()):
            pass

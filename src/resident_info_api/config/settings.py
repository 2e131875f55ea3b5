# src/resident_info_api/config/settings.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Resident Information API Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated application configuration. Per-source connection settings
    (URL, credential, timeout) live with the source transport in
    :mod:`resident_info_api.infrastructure.external_apis.resident_sources.settings`;
    this module selects which sources are enabled and loads their settings.

Design:
    - Pydantic v2 BaseSettings; unknown env is ignored.
    - Singleton accessor ``get_settings()`` with LRU cache.
    - Configuration problems surface as :class:`ConfigurationError` at startup,
      never at first request.
    - Safe, structured logging (no secrets).
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.domain.exceptions.residents import ConfigurationError
from resident_info_api.infrastructure.external_apis.resident_sources.settings import (
    ResidentSourceSettings,
    load_source_settings,
)
from resident_info_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration."""

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level.",
        validation_alias="LOG_LEVEL",
    )
    service_version: str = Field(
        default="0.1.0",
        description="Version reported by the OpenAPI document and /healthz.",
        validation_alias="SERVICE_VERSION",
    )
    resident_sources_raw: str = Field(
        default="",
        description="Comma-separated source names to query; blank means all.",
        validation_alias="RESIDENT_SOURCES",
    )
    http_timeout_s: float = Field(
        default=10.0,
        gt=0,
        description="Default timeout of the shared outbound HTTP client (seconds).",
        validation_alias="HTTP_TIMEOUT_S",
    )

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    @field_validator("resident_sources_raw")
    @classmethod
    def _known_sources(cls, value: str) -> str:
        try:
            SourceSystem.parse_csv(value)
        except ValueError as exc:
            raise ValueError(f"RESIDENT_SOURCES contains an unknown source: {value!r}") from exc
        return value

    @property
    def sources(self) -> list[SourceSystem]:
        """Return the enabled sources in aggregation order."""
        return SourceSystem.parse_csv(self.resident_sources_raw)

    def source_settings(self) -> dict[SourceSystem, ResidentSourceSettings]:
        """Load connection settings for every enabled source.

        Returns:
            Mapping of enabled source -> validated settings, in aggregation order.

        Raises:
            ConfigurationError: If any enabled source lacks a valid URL or credential.
        """
        return {system: load_source_settings(system) for system in self.sources}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton ``Settings`` instance.

    Returns:
        Settings: Validated application settings.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise ConfigurationError(
            "Invalid application configuration", details={"fields": fields}
        ) from exc

    logger.info(
        "settings.initialized",
        extra={
            "environment": settings.environment.value,
            "sources": [s.value for s in settings.sources],
            "http_timeout_s": settings.http_timeout_s,
        },
    )
    return settings

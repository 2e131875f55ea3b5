# Copyright (c)
# SPDX-License-Identifier: MIT
"""Pydantic settings for the resident source transport clients.

Each source system reads its own prefixed environment variables:

* ``HOUSING_API_URL`` / ``HOUSING_API_TOKEN``
* ``MOSAIC_API_URL`` / ``MOSAIC_API_TOKEN``
* ``ACADEMY_API_URL`` / ``ACADEMY_API_TOKEN``
* ``ELECTORAL_REGISTER_API_URL`` / ``ELECTORAL_REGISTER_API_TOKEN``

Optional per source: ``<PREFIX>TIMEOUT_S`` and ``<PREFIX>AUTH_HEADER``.
"""

from __future__ import annotations

from pydantic import AnyHttpUrl, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from resident_info_api.domain.enums.source_system import SourceSystem
from resident_info_api.domain.exceptions.residents import ConfigurationError


class ResidentSourceSettings(BaseSettings):
    """Connection settings for one resident source system.

    The credential is opaque: it is sent verbatim in ``auth_header`` and never
    logged.
    """

    url: AnyHttpUrl = Field(..., description="Base URL of the source API.")
    token: SecretStr = Field(..., description="Static credential sent on every request.")
    auth_header: str = Field(
        "Authorization",
        description="Header carrying the credential.",
    )
    timeout_s: float = Field(
        10.0,
        gt=0,
        description="Per-request timeout in seconds.",
    )

    model_config = SettingsConfigDict(extra="ignore")

    @field_validator("token")
    @classmethod
    def _token_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("token must not be blank")
        return value

    @property
    def base_url(self) -> str:
        """Return the base URL without a trailing slash."""
        return str(self.url).rstrip("/")


class HousingSettings(ResidentSourceSettings):
    """Housing records system (``HOUSING_API_*``)."""

    model_config = SettingsConfigDict(env_prefix="HOUSING_API_", extra="ignore")


class MosaicSettings(ResidentSourceSettings):
    """Mosaic case-management system (``MOSAIC_API_*``); keyed by ``X-API-Key``."""

    auth_header: str = Field("X-API-Key", description="Header carrying the credential.")

    model_config = SettingsConfigDict(env_prefix="MOSAIC_API_", extra="ignore")


class AcademySettings(ResidentSourceSettings):
    """Academy council tax and benefits system (``ACADEMY_API_*``)."""

    model_config = SettingsConfigDict(env_prefix="ACADEMY_API_", extra="ignore")


class ElectoralRegisterSettings(ResidentSourceSettings):
    """Electoral register system (``ELECTORAL_REGISTER_API_*``)."""

    model_config = SettingsConfigDict(env_prefix="ELECTORAL_REGISTER_API_", extra="ignore")


SOURCE_SETTINGS: dict[SourceSystem, type[ResidentSourceSettings]] = {
    SourceSystem.HOUSING: HousingSettings,
    SourceSystem.MOSAIC: MosaicSettings,
    SourceSystem.ACADEMY: AcademySettings,
    SourceSystem.ELECTORAL_REGISTER: ElectoralRegisterSettings,
}


def load_source_settings(system: SourceSystem) -> ResidentSourceSettings:
    """Load one source's settings from the environment.

    Args:
        system: Source whose prefixed variables should be read.

    Returns:
        Validated settings for ``system``.

    Raises:
        ConfigurationError: If the URL or credential is missing or invalid.
    """
    try:
        return SOURCE_SETTINGS[system]()
    except ValidationError as exc:
        fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
        raise ConfigurationError(
            f"Invalid configuration for source '{system.value}'",
            details={"system": system.value, "fields": fields},
        ) from exc

"""Configuration for the samples CLI.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class SolidSettings(BaseSettings):
    """Settings for the samples CLI.

    Environment variables:
    - LOG_LEVEL                 (optional)
    - SOLID_LOG_FORMAT          (optional, `json` or `text`)
    - SOLID_STRICT_SIGNATURES   (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `SolidSettings(_env_file=path_to_env)`.
    """

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    log_format: Literal["json", "text"] = Field(
        default="json",
        validation_alias="SOLID_LOG_FORMAT",
        description="Log output format",
    )

    strict_signatures: bool = Field(
        default=True,
        validation_alias="SOLID_STRICT_SIGNATURES",
        description="Check operation arity when verifying registered variants",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

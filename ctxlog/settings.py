"""
ctxlog.settings

Purpose:
    Centralized configuration for ctxlog.
    Defaults are code-level; CTXLOG_* env vars override them.

Created:
    2026-10-17
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "CTXLOG_"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    service_name: str = Field(default="ctxlog")
    log_level: str = Field(default="INFO")

    request_tag_key: str = Field(default="request_id", min_length=1)
    id_triads: int = Field(default=3, ge=1)

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level


def get_settings() -> Settings:
    return Settings()

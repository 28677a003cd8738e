"""Lightweight configuration for the Frontline client."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from frontline.domain.enums import Direction
from frontline.domain.interaction import DEFAULT_KEY_BINDINGS


class Settings(BaseSettings):
    """Minimal client settings."""

    model_config = SettingsConfigDict(
        env_prefix="FRONTLINE_", env_file=".env", env_file_encoding="utf-8"
    )

    host: str = Field(default="127.0.0.1", description="Interface the bridge listens on")
    port: int = Field(default=8080, gt=0, lt=65536, description="TCP port of the bridge")
    log_level: str = Field(default="INFO", description="Root log level (DEBUG traces messages)")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )
    key_bindings: dict[str, Direction] = Field(
        default_factory=lambda: dict(DEFAULT_KEY_BINDINGS),
        description="Key code to move direction mapping",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()


def configure_logging(level: str | int = "INFO") -> None:
    """Install a root handler at ``level``; later calls only adjust the level."""

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)

"""Library configuration using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings

from bigx.core.types import Uint64Mode


class BigxSettings(BaseSettings):
    """Settings read from ``BIGX_*`` environment variables."""

    model_config = {"env_prefix": "BIGX_"}

    log_level: str = "WARNING"
    uint64_mode: Uint64Mode = "wrap"  # how to_uint64 treats negative/oversized values


@lru_cache(maxsize=1)
def get_settings() -> BigxSettings:
    """Return the process-wide settings, read once from the environment."""
    return BigxSettings()

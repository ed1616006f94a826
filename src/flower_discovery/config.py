"""Application settings.

Values come from environment variables prefixed with ``FLOWERS_`` (or a
``.env`` file in the working directory)::

    FLOWERS_DATA_DIR=/var/lib/flowers
    FLOWERS_OWNER_NAME="Ada"
    FLOWERS_LATITUDE=38.72
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the discovery engine and CLI."""

    model_config = SettingsConfigDict(env_prefix="FLOWERS_", env_file=".env", extra="ignore")

    app_name: str = "flower-discovery"
    app_env: str = "development"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Storage
    data_dir: Path = Path("data")
    backup_dir: Path = Path("data/backups")
    cloud_dir: Path | None = None

    # Identity written into transfer and backup documents
    device_id: str = "unknown"
    device_name: str = "unknown"
    owner_name: str = "Anonymous"

    # Selection policy: contextual selection is attempted 1 time in N
    contextual_chance: int = Field(default=4, ge=1)

    # Last known position, used when no location provider is wired in
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    # Backups
    auto_backup_hours: float = 24.0
    backups_to_keep: int = Field(default=5, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings (read once)."""
    return Settings()

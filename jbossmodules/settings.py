"""Runtime configuration for the modules attach service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from ``MODULES_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MODULES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("JBoss Modules Attach API")
    version: str = Field("1.0.0")

    # Layout conventions
    source_dir: str = Field("src/main/modules", description="Descriptor directory relative to the project base dir")
    staging_dir_name: str = Field("modules", description="Staging directory under the build directory")
    default_slot: str = Field("main")
    category: str = Field("", description="Category used when a request doesn't carry one")

    # Implicit module used when no modules are declared
    module_name: Optional[str] = Field(None)
    module_slot: Optional[str] = Field(None)

    cleanup_staging: bool = Field(False, description="Remove the staging directory at process exit")
    attached_history_size: int = Field(100, gt=0, description="Attached outputs kept by the running service")

    log_level: str = Field("INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()

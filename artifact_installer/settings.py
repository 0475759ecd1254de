"""Runtime configuration for the artifact installer."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from . import __version__

MAVEN_CENTRAL_URL = "https://repo.maven.apache.org/maven2"


class Settings(BaseSettings):
    """Configuration values mapped from ``INSTALLER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INSTALLER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("Artifact Installer API")
    version: str = Field(__version__)

    # Local repository
    local_repository: str = Field("~/.m2/repository")

    # Remote repositories, consulted in order
    remote_repositories: List[str] = Field(default_factory=lambda: [MAVEN_CENTRAL_URL])
    remote_username: Optional[str] = Field(None)
    remote_password: Optional[str] = Field(None)
    remote_timeout: float = Field(30.0)
    offline: bool = Field(False)

    log_level: str = Field("INFO")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import (
    API_BASE,
    EXCLUDED_REPOS,
    GITHUB_ORG,
    IDENTIFIER_PREFIX,
    LONG_NAME_THRESHOLD,
    METADATA_PATH,
)

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """Application config (env or .env)."""

    model_config = SettingsConfigDict(env_prefix="SESYNC_", env_file=None, extra="ignore")

    github_token: str | None = Field(default_factory=lambda: os.getenv("GITHUB_TOKEN"))
    github_org: str = Field(default=GITHUB_ORG)
    api_base: str = Field(default=API_BASE)
    metadata_path: str = Field(default=METADATA_PATH)
    identifier_prefix: str = Field(default=IDENTIFIER_PREFIX)
    excluded_repos: list[str] = Field(default_factory=lambda: list(EXCLUDED_REPOS))
    long_name_threshold: int = Field(default=LONG_NAME_THRESHOLD, ge=1)


def get_settings() -> Settings:
    return Settings()

"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking into the CLI.
- Lets adapters (HTTP, files) read configuration consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.version import PROGRAM_NAME, __version__


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / PROGRAM_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / PROGRAM_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / PROGRAM_NAME
    return Path.home() / ".config" / PROGRAM_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without cluttering the core.
    - A single configuration contract for CLI and adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NIX_HEADBUMP_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout for the GitHub API request (seconds).",
    )
    user_agent: str = Field(
        default=f"{PROGRAM_NAME}/{__version__}",
        min_length=1,
        description="User-Agent sent to the GitHub API (required by GitHub).",
    )
    github_token: str | None = Field(
        default=None,
        description="Optional bearer token, useful when hitting the anonymous rate limit.",
    )
    api_base_url: str = Field(
        default="https://api.github.com",
        min_length=8,
        description="Root of the GitHub REST API.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR).",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value!r}")
        return level

    @field_validator("github_token")
    @classmethod
    def _blank_token_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

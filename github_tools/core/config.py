"""Configuration management for the GitHub tools service."""

import locale
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repository root .env first, then the package directory, then the working directory.
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class ToolsSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Log file path; None or an empty string disables file output",
    )

    server_host: str = Field("0.0.0.0", description="HTTP bind host")
    server_port: int = Field(8787, description="HTTP bind port")
    transport: Literal["http", "stdio"] = Field(
        "http", description="Serve over HTTP (streamable + SSE) or MCP stdio"
    )

    github_api_base: AnyHttpUrl = Field(
        "https://api.github.com", description="GitHub REST API base URL"
    )
    github_user_agent: str = Field(
        "mcp-lambda-agent", description="User-Agent header sent to GitHub"
    )
    github_timeout: float = Field(10.0, gt=0, description="GitHub request timeout in seconds")

    short_url_base: str = Field(
        "https://short.url", description="Domain used by the mock URL shortener"
    )
    date_format: str = Field(
        "%x", description="strftime format for calendar dates (locale aware by default)"
    )

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> ToolsSettings:
    """Return a cached ToolsSettings instance."""

    return ToolsSettings()


def apply_date_locale() -> str:
    """Adopt the environment's LC_TIME so `%x` renders locale-appropriate dates."""

    try:
        return locale.setlocale(locale.LC_TIME, "")
    except locale.Error:
        return locale.setlocale(locale.LC_TIME)


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES

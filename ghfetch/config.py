"""Configuration loading from YAML and environment.

Credentials (username, token) are taken from environment variables or from
files (Docker secrets) on every request. Values in config.yaml only fill in
what the environment lacks; never put real tokens in config files committed
to the repo.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Injected by load_config for ${VAR} substitution
_current_env: dict[str, str] = {}


class GitHubCredentials(BaseModel):
    """Basic auth fallbacks exactly as written in config.yaml.

    Not read from the environment and kept unexpanded: a ${VAR} value is
    looked up when a request is sent.
    """

    username: str | None = Field(default=None, description="Login used for Basic auth")
    token: str | None = Field(default=None, description="PAT used as Basic auth password; prefer env or secret file")


class GitHubConfig(BaseSettings):
    """GitHub API endpoint, timeout and credential fallbacks."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    api_url: str = Field(default="https://api.github.com", description="API base URL")
    timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")
    credentials: GitHubCredentials = Field(default_factory=GitHubCredentials)


class PaginationConfig(BaseSettings):
    """Pagination engine settings."""

    model_config = SettingsConfigDict(env_prefix="PAGINATION_", extra="ignore")

    # Unbounded by default: the server decides when a collection ends
    max_pages: int | None = Field(default=None, ge=1, description="Stop after this many pages")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    Secrets: GITHUB_TOKEN or GITHUB_TOKEN_FILE, read per request by the
    adapter. github.username and github.token from the file become
    credential fallbacks without substitution. A missing file yields the
    defaults (env-only configuration).
    """
    global _current_env

    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    file_raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(file_raw)

    github_raw = dict(raw.get("github") or {})
    file_github = file_raw.get("github") or {}
    github_raw["credentials"] = GitHubCredentials(
        username=file_github.get("username"),
        token=file_github.get("token"),
    )

    github = GitHubConfig(**github_raw)
    pagination = PaginationConfig(**(raw.get("pagination") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))

    return AppConfig(github=github, pagination=pagination, logging=logging)

"""Credential providers for HTTP Basic auth.

A provider is any callable returning Credentials or None. The transport
calls it once per request, so rotated credentials apply to the next call.
"""

import os
from pathlib import Path
from typing import Callable, NamedTuple


class Credentials(NamedTuple):
    """Basic auth pair: GitHub login and token (used as password)."""

    username: str
    token: str


CredentialProvider = Callable[[], Credentials | None]


class EnvCredentials:
    """Read GITHUB_USERNAME and GITHUB_TOKEN (or GITHUB_TOKEN_FILE) on every call.

    Optional fallbacks (the github.username/token values of config.yaml) are
    used for values missing in the environment; a ${VAR} or $VAR fallback is
    looked up in the environment at call time too. Returns None unless both
    username and token are non-empty.
    """

    def __init__(self, username: str | None = None, token: str | None = None) -> None:
        self._username = username
        self._token = token

    def __call__(self) -> Credentials | None:
        username = (os.environ.get("GITHUB_USERNAME") or _expand(self._username) or "").strip()
        token = (os.environ.get("GITHUB_TOKEN") or read_token_file() or _expand(self._token) or "").strip()
        if username and token:
            return Credentials(username, token)
        return None


def _expand(value: str | None) -> str | None:
    if value and value.startswith("$"):
        return os.environ.get(value[1:].strip("{}").strip())
    return value


def read_token_file() -> str | None:
    """Token from the file named by GITHUB_TOKEN_FILE (Docker secrets).

    A missing file counts as no token.
    """
    path = os.environ.get("GITHUB_TOKEN_FILE")
    if path and Path(path).is_file():
        return Path(path).read_text().strip() or None
    return None


def static_credentials(username: str | None, token: str | None) -> CredentialProvider:
    """Provider that always returns the given pair (None if either is empty)."""
    creds = Credentials(username, token) if username and token else None

    def provider() -> Credentials | None:
        return creds

    return provider


env_credentials = EnvCredentials()

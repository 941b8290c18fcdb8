"""Git platform adapters (base, transport, pagination and GitHub)."""

from ghfetch.adapters.base import GitHubError, GitPlatformAdapter
from ghfetch.adapters.credentials import Credentials, EnvCredentials, env_credentials, static_credentials
from ghfetch.adapters.github import GitHubAdapter
from ghfetch.adapters.pagination import iter_pages, load_all, parse_rel
from ghfetch.adapters.transport import Transport

__all__ = [
    "Credentials",
    "EnvCredentials",
    "GitHubAdapter",
    "GitHubError",
    "GitPlatformAdapter",
    "Transport",
    "env_credentials",
    "iter_pages",
    "load_all",
    "parse_rel",
    "static_credentials",
]

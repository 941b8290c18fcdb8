"""ghfetch: read-only GitHub REST client with Link-header pagination."""

from ghfetch.adapters import GitHubAdapter, GitHubError

__all__ = ["GitHubAdapter", "GitHubError"]

"""GitHub user and label models."""

from ghfetch.models.base import GitHubModel


class User(GitHubModel):
    """GitHub account. Email is only filled by the single-user lookup."""

    login: str = ""
    id: int = 0
    email: str = ""


class Label(GitHubModel):
    """Issue label (no identity of its own)."""

    name: str = ""
    color: str = ""

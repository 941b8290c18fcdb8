"""Organization team model."""

from ghfetch.models.base import GitHubModel


class Team(GitHubModel):
    """Organization team. Members are fetched separately by team id."""

    id: int = 0
    name: str = ""
    slug: str = ""
    url: str = ""

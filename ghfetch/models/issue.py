"""Issue (or pull request, as listed by the issues endpoint) model."""

from datetime import datetime
from typing import List

from pydantic import Field

from ghfetch.models.base import GitHubModel
from ghfetch.models.milestone import Milestone
from ghfetch.models.user import Label, User


class PullRequestRef(GitHubModel):
    """Link from an issue to its pull request."""

    url: str = ""
    html_url: str = ""


class Issue(GitHubModel):
    """Repository issue. Pull requests come back from the same endpoint."""

    id: int = 0
    url: str = ""
    html_url: str = ""
    number: int = 0
    state: str = ""
    title: str = ""
    body: str = ""
    user: User = Field(default_factory=User)
    labels: List[Label] = Field(default_factory=list)
    assignee: User | None = None
    milestone: Milestone | None = None
    pull_request: PullRequestRef | None = None
    # None while the issue is open
    closed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    @property
    def is_pull_request(self) -> bool:
        """True when the issue carries a non-empty pull request URL."""
        return self.pull_request is not None and self.pull_request.url != ""

    @property
    def type(self) -> str:
        """Display kind: "PR" or "Issue"."""
        return "PR" if self.is_pull_request else "Issue"

"""Repository milestone model."""

from datetime import datetime

from pydantic import Field

from ghfetch.models.base import GitHubModel
from ghfetch.models.user import User


class Milestone(GitHubModel):
    """Repository milestone."""

    url: str = ""
    html_url: str = ""
    id: int = 0
    number: int = 0
    state: str = ""
    title: str = ""
    description: str = ""
    creator: User = Field(default_factory=User)
    due_on: datetime | None = None
    # None while the milestone is open
    closed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

"""Abstract base for read-only Git platform sources."""

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Sequence

from ghfetch.models import Issue, Milestone, Notification, Release, Team, User

Query = Mapping[str, str | Sequence[str]]


class GitHubError(Exception):
    """Raised when a fetch fails (network, HTTP status >= 300, or decoding).

    status_code is set for HTTP status failures. For paginated fetches,
    partial holds the items decoded from the pages that succeeded before the
    failure; it is never the complete collection.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.partial: List[Any] = []


class GitPlatformAdapter(ABC):
    """Read-only interface for Git hosting platforms."""

    @abstractmethod
    def list_issues(self, repo: str, query: Query | None = None) -> List[Issue]:
        """List issues (and pull requests) of a repository."""
        ...

    @abstractmethod
    def list_milestones(self, repo: str, query: Query | None = None) -> List[Milestone]:
        """List milestones of a repository."""
        ...

    @abstractmethod
    def list_releases(self, repo: str) -> List[Release]:
        """List releases of a repository."""
        ...

    @abstractmethod
    def list_teams(self, org: str) -> List[Team]:
        """List teams of an organization."""
        ...

    @abstractmethod
    def list_team_members(self, team_id: int) -> List[User]:
        """List members of a team."""
        ...

    @abstractmethod
    def list_notifications(self) -> List[Notification]:
        """List notifications of the authenticated user."""
        ...

    @abstractmethod
    def get_user(self, login: str) -> User:
        """Fetch a single user by login."""
        ...

    def get_user_email(self, login: str) -> str:
        """Return the public email of a user ("" if hidden)."""
        return self.get_user(login).email

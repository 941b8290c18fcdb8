"""GitHub API adapter (read-only)."""

import logging
import posixpath
from typing import List, Type, TypeVar
from urllib.parse import urlencode

import requests
from pydantic import TypeAdapter

from ghfetch.adapters.base import GitPlatformAdapter, Query
from ghfetch.adapters.credentials import CredentialProvider, EnvCredentials, env_credentials
from ghfetch.adapters.pagination import load_all
from ghfetch.adapters.transport import Transport
from ghfetch.config import AppConfig
from ghfetch.models import Issue, Milestone, Notification, Release, Team, User

logger = logging.getLogger(__name__)

T = TypeVar("T")

_user_shape = TypeAdapter(User)


class GitHubAdapter(GitPlatformAdapter):
    """GitHub REST API implementation.

    Collections are fetched across all pages; errors propagate unchanged from
    the pagination engine (GitHubError with partial results attached).
    """

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        credentials: CredentialProvider = env_credentials,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
        max_pages: int | None = None,
    ) -> None:
        self._api_url = api_url.rstrip("/")
        self._transport = Transport(session=session, credentials=credentials, timeout=timeout)
        self._max_pages = max_pages

    @classmethod
    def from_config(cls, config: AppConfig, session: requests.Session | None = None) -> "GitHubAdapter":
        """Build an adapter from AppConfig.

        The environment is still read on every request; the username and
        token written in config.yaml only fill in what it lacks.
        """
        credentials = EnvCredentials(
            username=config.github.credentials.username,
            token=config.github.credentials.token,
        )
        return cls(
            api_url=config.github.api_url,
            credentials=credentials,
            session=session,
            timeout=config.github.timeout,
            max_pages=config.pagination.max_pages,
        )

    def _url(self, *segments: str | int, query: Query | None = None) -> str:
        path = posixpath.normpath(posixpath.join("/", *(str(s).strip("/") for s in segments)))
        url = f"{self._api_url}{path}"
        if query:
            url += "?" + urlencode(sorted(query.items()), doseq=True)
        return url

    def _load(self, url: str, model: Type[T]) -> List[T]:
        items = load_all(self._transport, url, model, max_pages=self._max_pages)
        logger.info("Fetched %d %s records from %s", len(items), model.__name__, url)
        return items

    def list_issues(self, repo: str, query: Query | None = None) -> List[Issue]:
        return self._load(self._url("repos", repo, "issues", query=query), Issue)

    def list_milestones(self, repo: str, query: Query | None = None) -> List[Milestone]:
        return self._load(self._url("repos", repo, "milestones", query=query), Milestone)

    def list_releases(self, repo: str) -> List[Release]:
        return self._load(self._url("repos", repo, "releases"), Release)

    def list_teams(self, org: str) -> List[Team]:
        return self._load(self._url("orgs", org, "teams"), Team)

    def list_team_members(self, team_id: int) -> List[User]:
        return self._load(self._url("teams", team_id, "members"), User)

    def list_notifications(self) -> List[Notification]:
        return self._load(self._url("notifications"), Notification)

    def get_user(self, login: str) -> User:
        return self._transport.get_json(self._url("users", login), _user_shape)

    def close(self) -> None:
        """Release pooled connections."""
        self._transport.close()

"""Integration tests for GitHub adapter using real API.

Requires GITHUB_TOKEN (and GITHUB_USERNAME for authenticated calls) in
environment. Run: pytest tests/test_github_integration.py -v
"""

import os
from pathlib import Path

import pytest

from ghfetch.adapters.credentials import static_credentials
from ghfetch.adapters.github import GitHubAdapter
from ghfetch.models import Issue, User


def _get_token() -> str | None:
    token = os.environ.get("GITHUB_TOKEN")
    if token:
        return token.strip()
    path = os.environ.get("GITHUB_TOKEN_FILE")
    if path and Path(path).is_file():
        return Path(path).read_text().strip()
    return None


# Read at import time: the unit-test fixtures clear the env per test
TOKEN = _get_token()
USERNAME = os.environ.get("GITHUB_USERNAME")

requires_github = pytest.mark.skipif(
    not (TOKEN and USERNAME),
    reason="GITHUB_TOKEN (or GITHUB_TOKEN_FILE) and GITHUB_USERNAME not set",
)


@pytest.fixture
def adapter() -> GitHubAdapter:
    return GitHubAdapter(credentials=static_credentials(USERNAME, TOKEN))


@requires_github
def test_issues_span_several_pages(adapter: GitHubAdapter) -> None:
    """Small pages force pagination; numbers must not repeat across pages."""
    issues = adapter.list_issues("octocat/Hello-World", {"state": "all", "per_page": "5"})

    assert len(issues) > 5
    assert all(isinstance(i, Issue) for i in issues)
    numbers = [i.number for i in issues]
    assert len(numbers) == len(set(numbers))


@requires_github
def test_get_user(adapter: GitHubAdapter) -> None:
    user = adapter.get_user("octocat")

    assert isinstance(user, User)
    assert user.login == "octocat"
    assert user.id > 0

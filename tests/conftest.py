"""Shared fixtures: hermetic credentials env and fake HTTP responses."""

from typing import Any
from unittest.mock import Mock

import pytest


@pytest.fixture(autouse=True)
def clean_github_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unit tests never see the developer's real GitHub credentials."""
    for key in ("GITHUB_USERNAME", "GITHUB_TOKEN", "GITHUB_TOKEN_FILE"):
        monkeypatch.delenv(key, raising=False)


def make_response(
    status: int = 200,
    json_data: Any = None,
    link: str | None = None,
    body: bytes = b"",
    reason: str = "OK",
    json_error: Exception | None = None,
) -> Mock:
    """Mock requests.Response as returned by Session.request(..., stream=True)."""
    resp = Mock()
    resp.status_code = status
    resp.reason = reason
    resp.encoding = "utf-8"
    resp.headers = {"Link": link} if link is not None else {}
    resp.iter_content.return_value = iter([body] if body else [])
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = json_data
    return resp

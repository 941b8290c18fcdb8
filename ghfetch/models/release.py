"""Release and release asset models."""

from datetime import datetime
from typing import List

from pydantic import Field

from ghfetch.models.base import GitHubModel
from ghfetch.models.user import User


class Asset(GitHubModel):
    """File attached to a release."""

    id: int = 0
    browser_download_url: str = ""
    name: str = ""
    label: str = ""
    state: str = ""
    content_type: str = ""
    size: int = 0
    download_count: int = 0
    created_at: datetime
    updated_at: datetime
    uploader: User = Field(default_factory=User)


class Release(GitHubModel):
    """Repository release."""

    id: int = 0
    tag_name: str = ""
    name: str = ""
    body: str = ""
    draft: bool = False
    prerelease: bool = False
    created_at: datetime
    # Drafts are not published yet
    published_at: datetime | None = None
    author: User = Field(default_factory=User)
    assets: List[Asset] = Field(default_factory=list)

"""Notification thread model."""

from typing import Any

from pydantic import Field, field_validator

from ghfetch.models.base import GitHubModel


class NotificationRepository(GitHubModel):
    """Repository a notification belongs to."""

    full_name: str = ""


class NotificationSubject(GitHubModel):
    """What the notification is about (issue, PR, release, ...)."""

    title: str = ""
    type: str = ""
    url: str = ""


class Notification(GitHubModel):
    """Notification thread for the authenticated user."""

    id: str = ""
    repository: NotificationRepository = Field(default_factory=NotificationRepository)
    subject: NotificationSubject = Field(default_factory=NotificationSubject)
    reason: str = ""
    unread: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, v: Any) -> Any:
        """Keep numeric thread ids exact by storing their decimal text."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

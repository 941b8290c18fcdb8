"""Data models for GitHub resources (Pydantic)."""

from ghfetch.models.issue import Issue, PullRequestRef
from ghfetch.models.milestone import Milestone
from ghfetch.models.notification import Notification, NotificationRepository, NotificationSubject
from ghfetch.models.release import Asset, Release
from ghfetch.models.team import Team
from ghfetch.models.user import Label, User

__all__ = [
    "Asset",
    "Issue",
    "Label",
    "Milestone",
    "Notification",
    "NotificationRepository",
    "NotificationSubject",
    "PullRequestRef",
    "Release",
    "Team",
    "User",
]

"""Data models for the application."""

from github_activity.models.activity import (
    Actor,
    Commit,
    CreatePayload,
    DeletePayload,
    Event,
    EventPayload,
    EventType,
    ForkPayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    ReleasePayload,
    Repo,
    UnknownPayload,
    UserActivity,
)
from github_activity.models.display import DisplayConfig
from github_activity.models.filter import FilterCriteria

__all__ = [
    # Event models
    "Event",
    "EventType",
    "Actor",
    "Repo",
    "Commit",
    "UserActivity",
    # Payload variants
    "EventPayload",
    "PushPayload",
    "CreatePayload",
    "DeletePayload",
    "IssuesPayload",
    "PullRequestPayload",
    "ReleasePayload",
    "ForkPayload",
    "UnknownPayload",
    # Session models
    "DisplayConfig",
    "FilterCriteria",
]

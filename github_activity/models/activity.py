"""
GitHub activity event models.

Events arrive from the ``/users/{username}/events`` endpoint as loosely typed
JSON. Each event is parsed into an immutable ``Event`` whose payload is one of
a closed set of variants selected by the event type; types without a
dedicated variant keep their payload as ``UnknownPayload``.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, ValidationInfo, field_validator, model_validator


class EventType(str, Enum):
    """GitHub event types with dedicated presentation rules."""

    PUSH = "PushEvent"
    CREATE = "CreateEvent"
    ISSUES = "IssuesEvent"
    PULL_REQUEST = "PullRequestEvent"
    WATCH = "WatchEvent"
    FORK = "ForkEvent"
    DELETE = "DeleteEvent"
    RELEASE = "ReleaseEvent"
    ISSUE_COMMENT = "IssueCommentEvent"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        """Treat JSON nulls as absent so fields fall back to their defaults."""
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Actor(_Frozen):
    """User that triggered an event."""

    login: str = ""


class Repo(_Frozen):
    """Repository an event happened on."""

    name: str = ""


class Commit(_Frozen):
    """Commit listed in a push payload."""

    sha: str = ""
    message: Optional[str] = None


class Label(_Frozen):
    """Issue label."""

    name: str = ""


class Issue(_Frozen):
    number: Optional[int] = None
    title: Optional[str] = None
    labels: List[Label] = Field(default_factory=list)
    html_url: Optional[str] = None


class PullRequest(_Frozen):
    number: Optional[int] = None
    title: Optional[str] = None
    additions: Optional[int] = None
    deletions: Optional[int] = None
    html_url: Optional[str] = None


class Release(_Frozen):
    tag_name: Optional[str] = None
    name: Optional[str] = None
    html_url: Optional[str] = None


class Forkee(_Frozen):
    full_name: Optional[str] = None


class EventPayload(_Frozen):
    """Base class for type-dependent event payloads."""


class PushPayload(EventPayload):
    size: Optional[int] = None
    commits: List[Commit] = Field(default_factory=list)


class CreatePayload(EventPayload):
    ref_type: Optional[str] = None
    ref: Optional[str] = None


class DeletePayload(EventPayload):
    ref_type: Optional[str] = None
    ref: Optional[str] = None


class IssuesPayload(EventPayload):
    action: Optional[str] = None
    issue: Issue = Field(default_factory=Issue)


class PullRequestPayload(EventPayload):
    action: Optional[str] = None
    pull_request: PullRequest = Field(default_factory=PullRequest)


class ReleasePayload(EventPayload):
    action: Optional[str] = None
    release: Release = Field(default_factory=Release)


class ForkPayload(EventPayload):
    forkee: Forkee = Field(default_factory=Forkee)


class UnknownPayload(EventPayload):
    """Payload of an event type without a dedicated variant."""

    model_config = ConfigDict(frozen=True, extra="allow")


PAYLOAD_MODELS: Dict[str, Type[EventPayload]] = {
    EventType.PUSH.value: PushPayload,
    EventType.CREATE.value: CreatePayload,
    EventType.DELETE.value: DeletePayload,
    EventType.ISSUES.value: IssuesPayload,
    EventType.PULL_REQUEST.value: PullRequestPayload,
    EventType.RELEASE.value: ReleasePayload,
    EventType.FORK.value: ForkPayload,
}


class Event(_Frozen):
    """A single public activity event."""

    id: Optional[str] = None
    type: str = Field("", description="GitHub event type, e.g. PushEvent")
    actor: Actor = Field(default_factory=Actor)
    repo: Repo = Field(default_factory=Repo)
    payload: SerializeAsAny[EventPayload] = Field(default_factory=dict, validate_default=True)
    public: bool = True
    created_at: Optional[datetime] = None
    raw: Dict[str, Any] = Field(default_factory=dict, exclude=True, repr=False)

    @field_validator("payload", mode="before")
    @classmethod
    def select_payload_variant(cls, v: Any, info: ValidationInfo) -> Any:
        """Parse the payload with the variant registered for the event type."""
        if isinstance(v, EventPayload):
            return v
        model = PAYLOAD_MODELS.get(info.data.get("type"), UnknownPayload)
        return model.model_validate(v or {})

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Event":
        """Build an event from an API object, keeping the original JSON."""
        return cls.model_validate({**data, "raw": data})


class UserActivity(BaseModel):
    """Events of one page grouped by repository name."""

    username: str
    repos: Dict[str, List[Event]] = Field(default_factory=dict)

    @classmethod
    def from_events(cls, username: str, events: List[Event]) -> "UserActivity":
        repos: Dict[str, List[Event]] = {}
        for event in events:
            repos.setdefault(event.repo.name, []).append(event)
        return cls(username=username, repos=repos)

    @property
    def event_count(self) -> int:
        return sum(len(events) for events in self.repos.values())

"""Human-readable rendering of activity events.

All functions here are pure: they map an ``Event`` and a ``DisplayConfig``
to text and never touch the terminal themselves.
"""

from datetime import datetime, timezone
from typing import Dict, List, NamedTuple, Optional

from github_activity.models.activity import (
    CreatePayload,
    DeletePayload,
    Event,
    EventType,
    ForkPayload,
    IssuesPayload,
    PullRequestPayload,
    PushPayload,
    ReleasePayload,
)
from github_activity.models.display import DisplayConfig


class Colors:
    """ANSI escape sequences used by the formatter."""

    RESET = "\x1b[0m"
    BRIGHT = "\x1b[1m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    MAGENTA = "\x1b[35m"
    CYAN = "\x1b[36m"


class EventStyle(NamedTuple):
    color: str
    icon: str


EVENT_STYLES: Dict[str, EventStyle] = {
    EventType.PUSH.value: EventStyle(Colors.GREEN, "📝"),
    EventType.CREATE.value: EventStyle(Colors.CYAN, "✨"),
    EventType.ISSUES.value: EventStyle(Colors.YELLOW, "🐛"),
    EventType.PULL_REQUEST.value: EventStyle(Colors.MAGENTA, "🔄"),
    EventType.WATCH.value: EventStyle(Colors.BLUE, "⭐"),
    EventType.FORK.value: EventStyle(Colors.CYAN, "🔱"),
    EventType.DELETE.value: EventStyle(Colors.RED, "🗑️"),
    EventType.RELEASE.value: EventStyle(Colors.GREEN, "📦"),
    EventType.ISSUE_COMMENT.value: EventStyle(Colors.YELLOW, "💬"),
}
DEFAULT_STYLE = EventStyle(Colors.RESET, "🔧")

DETAIL_INDENT = "\n    "


def get_event_style(event_type: str) -> EventStyle:
    """Return the icon and color for an event type."""
    return EVENT_STYLES.get(event_type, DEFAULT_STYLE)


def colorize(text: str, color: str, enabled: bool) -> str:
    return f"{color}{text}{Colors.RESET}" if enabled else text


def capitalize(text: Optional[str]) -> str:
    return text[:1].upper() + text[1:] if text else ""


def _text(value: Optional[object]) -> str:
    return "" if value is None else str(value)


def format_timestamp(created_at: Optional[datetime], date_format: str) -> str:
    """Render an event timestamp.

    ``"iso"`` produces a UTC ISO-8601 string with millisecond precision and a
    ``Z`` suffix; any other format renders local time with the locale's
    date and time representation.
    """
    if created_at is None:
        return "unknown"
    if date_format == "iso":
        utc = created_at.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return created_at.astimezone().strftime("%c")


def format_event_title(event: Event) -> str:
    """One-line summary of an event."""
    repo = event.repo.name
    payload = event.payload

    if isinstance(payload, PushPayload):
        return f"Pushed {len(payload.commits)} commit(s) to {repo}"
    if isinstance(payload, CreatePayload):
        ref = f" '{payload.ref}'" if payload.ref else ""
        return f"Created {_text(payload.ref_type)}{ref} in {repo}"
    if isinstance(payload, IssuesPayload):
        return f"{capitalize(payload.action)} issue #{_text(payload.issue.number)} in {repo}"
    if isinstance(payload, PullRequestPayload):
        return f"{capitalize(payload.action)} pull request #{_text(payload.pull_request.number)} in {repo}"
    if event.type == EventType.WATCH.value:
        return f"Starred {repo}"
    if isinstance(payload, ForkPayload):
        return f"Forked {repo} to {_text(payload.forkee.full_name)}"
    if isinstance(payload, DeletePayload):
        return f"Deleted {_text(payload.ref_type)} '{_text(payload.ref)}' from {repo}"
    if isinstance(payload, ReleasePayload):
        return f"{capitalize(payload.action)} release {_text(payload.release.tag_name)} in {repo}"
    return f"{event.type or 'UnknownEvent'} on {repo}"


def format_event_details(event: Event, config: DisplayConfig) -> str:
    """Indented detail block for an event, empty unless detailed view is on."""
    if not config.detailed_view:
        return ""

    payload = event.payload
    lines: List[str] = []

    if isinstance(payload, PushPayload):
        for commit in payload.commits:
            first_line = commit.message.split("\n")[0] if commit.message else ""
            lines.append(f"- {commit.sha[:7]} {first_line}")
    elif isinstance(payload, IssuesPayload):
        issue = payload.issue
        labels = ", ".join(label.name for label in issue.labels) or "none"
        lines.append(f"Title: {_text(issue.title)}")
        lines.append(f"Labels: {labels}")
        lines.append(f"URL: {_text(issue.html_url)}")
    elif isinstance(payload, PullRequestPayload):
        pr = payload.pull_request
        lines.append(f"Title: {_text(pr.title)}")
        lines.append(f"Changes: +{pr.additions or 0} -{pr.deletions or 0}")
        lines.append(f"URL: {_text(pr.html_url)}")
    elif isinstance(payload, ReleasePayload):
        release = payload.release
        lines.append(f"Tag: {_text(release.tag_name)}")
        lines.append(f"Name: {_text(release.name)}")
        lines.append(f"URL: {_text(release.html_url)}")

    return "".join(DETAIL_INDENT + line for line in lines)


def format_event(event: Event, config: DisplayConfig) -> str:
    """Full display line for an event: timestamp, icon, title and details."""
    style = get_event_style(event.type)
    timestamp = format_timestamp(event.created_at, config.date_format)
    time_str = colorize(f"[{timestamp}]", Colors.BRIGHT, config.colors)
    line = f"{time_str} {style.icon} {format_event_title(event)}{format_event_details(event, config)}"
    return colorize(line, style.color, config.colors)

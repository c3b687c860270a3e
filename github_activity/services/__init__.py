"""Services module for the GitHub Activity CLI.

This module contains the GitHub API client, the event presentation and
filtering helpers, the exporter and the interactive session loop.
"""

from github_activity.services.exporter import save_events
from github_activity.services.filters import filter_events
from github_activity.services.formatter import (
    format_event,
    format_event_details,
    format_event_title,
)
from github_activity.services.github import GitHubService
from github_activity.services.prompt import ConsoleLineReader, LineReader
from github_activity.services.session import SessionController

__all__ = [
    "GitHubService",
    "SessionController",
    "LineReader",
    "ConsoleLineReader",
    "filter_events",
    "format_event",
    "format_event_title",
    "format_event_details",
    "save_events",
]

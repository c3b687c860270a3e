"""Core configuration and error types."""

from github_activity.core.config import Settings, get_settings, setup_logging
from github_activity.core.exceptions import (
    ActivityError,
    ExportError,
    GitHubAPIError,
    GitHubConnectionError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubResponseParseError,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "ActivityError",
    "ExportError",
    "GitHubAPIError",
    "GitHubConnectionError",
    "GitHubNotFoundError",
    "GitHubRateLimitError",
    "GitHubResponseParseError",
]

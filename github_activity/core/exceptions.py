"""Exception hierarchy for the GitHub activity CLI.

Every failure that can end a session derives from ``ActivityError`` so the
command-line entry point can report it with a single handler.
"""

from typing import Any, Dict, Optional


class ActivityError(Exception):
    """Base exception for activity fetching and export failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class GitHubAPIError(ActivityError):
    """Exception raised for non-success GitHub API responses."""

    def __init__(self, message: str, status_code: int, response_data: Optional[Dict[str, Any]] = None):
        self.status_code = status_code
        self.response_data = response_data
        super().__init__(message)


class GitHubNotFoundError(GitHubAPIError):
    """Exception raised when the requested user does not exist."""

    pass


class GitHubRateLimitError(GitHubAPIError):
    """Exception raised when GitHub API rate limit is exceeded."""

    pass


class GitHubResponseParseError(ActivityError):
    """Exception raised when a response body is not a valid event list."""

    pass


class GitHubConnectionError(ActivityError):
    """Exception raised when no response could be received from GitHub."""

    pass


class ExportError(ActivityError):
    """Exception raised when events cannot be written to disk."""

    pass

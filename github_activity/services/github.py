"""GitHub API service for fetching public user activity.

This module provides the service layer for reading a user's public event
feed from GitHub's REST API, one page per request, and for the one-shot
activity summary used by the non-interactive mode.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, List, Optional

import httpx
from pydantic import ValidationError

from github_activity.core.config import Settings, get_settings
from github_activity.core.exceptions import (
    GitHubAPIError,
    GitHubConnectionError,
    GitHubNotFoundError,
    GitHubRateLimitError,
    GitHubResponseParseError,
)
from github_activity.models.activity import Event, UserActivity

# Initialize logger
logger = logging.getLogger(__name__)


class GitHubService:
    """Service for reading public activity from the GitHub API.

    Every call performs exactly one request. Failures are raised immediately;
    nothing is cached or retried.

    Attributes:
        RATE_LIMIT_HEADER: Response header carrying the remaining request quota
    """

    RATE_LIMIT_HEADER: str = "X-RateLimit-Remaining"

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize the GitHub service.

        Args:
            settings: Application settings; defaults to the cached settings
        """
        self._settings = settings or get_settings()
        logger.debug("GitHubService initialized")

    @property
    def base_url(self) -> str:
        return self._settings.github_api_url

    @asynccontextmanager
    async def _get_client(self) -> AsyncGenerator[httpx.AsyncClient, None]:
        """Context manager for getting a temporary HTTP client.

        Yields:
            httpx.AsyncClient: Configured async HTTP client
        """
        client = httpx.AsyncClient(
            timeout=httpx.Timeout(self._settings.request_timeout),
            follow_redirects=True,
            headers={
                "Accept": self._settings.accept_header,
                "User-Agent": self._settings.user_agent,
            }
        )
        try:
            yield client
        finally:
            await client.aclose()

    def _handle_github_error(self, response: httpx.Response, username: str) -> None:
        """Translate a non-success response into a typed error.

        Args:
            response: HTTP response from GitHub API
            username: User whose events were requested

        Raises:
            GitHubNotFoundError: For unknown users
            GitHubRateLimitError: When the request quota is exhausted
            GitHubAPIError: For other API errors
        """
        try:
            error_data = response.json()
        except ValueError:
            error_data = {"message": response.text}
        if not isinstance(error_data, dict):
            error_data = {"message": str(error_data)}

        logger.error(
            f"GitHub API error: status={response.status_code}, "
            f"message={error_data.get('message')}"
        )

        if response.status_code == 404:
            raise GitHubNotFoundError(
                message=f"User '{username}' not found",
                status_code=response.status_code,
                response_data=error_data
            )

        if response.status_code in (403, 429):
            raise GitHubRateLimitError(
                message="API rate limit exceeded. Please try again later.",
                status_code=response.status_code,
                response_data=error_data
            )

        raise GitHubAPIError(
            message=f"HTTP Error: {response.status_code}",
            status_code=response.status_code,
            response_data=error_data
        )

    def _check_rate_limit(self, response: httpx.Response) -> None:
        """Warn when the remaining request quota runs low."""
        remaining = response.headers.get(self.RATE_LIMIT_HEADER)
        if remaining is None:
            return
        try:
            count = int(remaining)
        except ValueError:
            logger.debug(f"Ignoring malformed {self.RATE_LIMIT_HEADER} header: {remaining!r}")
            return
        if count < self._settings.rate_limit_warning_threshold:
            logger.warning(f"Warning: {count} API requests remaining")

    def _parse_events(self, response: httpx.Response) -> List[Event]:
        try:
            data: Any = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON in events response: {e}")
            raise GitHubResponseParseError("Failed to parse GitHub API response") from e

        if not isinstance(data, list):
            logger.error(f"Expected a JSON array of events, got {type(data).__name__}")
            raise GitHubResponseParseError("Failed to parse GitHub API response")

        try:
            return [Event.from_api(item) for item in data]
        except ValidationError as e:
            logger.error(f"Malformed event in response: {e}")
            raise GitHubResponseParseError("Failed to parse GitHub API response") from e

    async def fetch_events(self, username: str, page: int = 1, per_page: int = 30) -> List[Event]:
        """Get one page of public activity events for a user.

        Args:
            username: GitHub username
            page: 1-based page number
            per_page: Number of events per page (max 100)

        Returns:
            List[Event]: Events of the page, newest first

        Raises:
            GitHubNotFoundError: If the user does not exist
            GitHubRateLimitError: If the rate limit is exhausted
            GitHubAPIError: For any other non-success status
            GitHubResponseParseError: If the body is not a JSON event array
            GitHubConnectionError: If no response could be received

        Example:
            >>> service = GitHubService()
            >>> events = await service.fetch_events("octocat", page=2)
            >>> print(len(events))
        """
        logger.info(f"Fetching activity for user: {username} (page={page}, per_page={per_page})")

        try:
            async with self._get_client() as client:
                response = await client.get(
                    f"{self.base_url}/users/{username}/events",
                    params={"page": page, "per_page": per_page}
                )
        except httpx.RequestError as e:
            logger.error(f"Connection error while fetching user activity: {e}")
            raise GitHubConnectionError(f"Failed to connect: {e}") from e

        if response.status_code != 200:
            self._handle_github_error(response, username)

        events = self._parse_events(response)
        self._check_rate_limit(response)

        logger.info(f"Successfully fetched {len(events)} activity events for {username}")
        return events

    async def get_user_activity(self, username: str) -> Optional[UserActivity]:
        """Get the first page of a user's activity grouped by repository.

        Args:
            username: GitHub username

        Returns:
            Optional[UserActivity]: Grouped events, or None if the user does not exist

        Raises:
            GitHubAPIError: For non-success statuses other than not-found
            GitHubResponseParseError: If the body is not a JSON event array
            GitHubConnectionError: If no response could be received
        """
        try:
            events = await self.fetch_events(username)
        except GitHubNotFoundError:
            logger.info(f"No activity for unknown user: {username}")
            return None

        return UserActivity.from_events(username, events)

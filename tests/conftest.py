"""
Pytest configuration and shared fixtures.

This module provides test fixtures for the entire test suite, including
sample GitHub events, test settings, a scripted line reader and a mocked
GitHub service.
"""

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import httpx
import pytest

from github_activity.core.config import Settings
from github_activity.models.activity import Event
from github_activity.models.display import DisplayConfig
from github_activity.services.github import GitHubService
from github_activity.services.prompt import LineReader


# =============================================================================
# Test Settings
# =============================================================================

@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """
    Provide test settings configuration.

    Returns:
        Settings object with test configuration
    """
    return Settings(
        app_name="GitHub Activity CLI Test",
        log_level="DEBUG",
        github_api_url="https://api.github.test",
        rate_limit_warning_threshold=10,
        default_colors=False,
        default_date_format="iso",
        default_detailed_view=True,
        default_events_per_page=30,
        default_output_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def display_config(test_settings: Settings) -> DisplayConfig:
    """Display configuration without colors, ISO dates and a temp output dir."""
    return DisplayConfig.from_settings(test_settings)


# =============================================================================
# Test Data Fixtures
# =============================================================================

@pytest.fixture
def sample_github_events() -> List[Dict[str, Any]]:
    """
    Provide sample GitHub events data, newest first.

    Returns:
        List of event dicts
    """
    return [
        {
            "id": "12350",
            "type": "ReleaseEvent",
            "actor": {"id": 123456, "login": "testuser"},
            "repo": {"id": 789013, "name": "testuser/widgets"},
            "payload": {
                "action": "published",
                "release": {
                    "tag_name": "v1.2.0",
                    "name": "Widgets 1.2",
                    "html_url": "https://github.com/testuser/widgets/releases/tag/v1.2.0"
                }
            },
            "public": True,
            "created_at": "2024-01-20T09:30:00Z"
        },
        {
            "id": "12349",
            "type": "WatchEvent",
            "actor": {"id": 123456, "login": "testuser"},
            "repo": {"id": 555, "name": "acme/widgets"},
            "payload": {"action": "started"},
            "public": True,
            "created_at": "2024-01-18T08:00:00Z"
        },
        {
            "id": "12348",
            "type": "IssuesEvent",
            "actor": {"id": 123456, "login": "testuser"},
            "repo": {"id": 789012, "name": "testuser/test-repo"},
            "payload": {
                "action": "opened",
                "issue": {
                    "number": 7,
                    "title": "Crash on startup",
                    "labels": [{"name": "bug"}, {"name": "urgent"}],
                    "html_url": "https://github.com/testuser/test-repo/issues/7"
                }
            },
            "public": True,
            "created_at": "2024-01-17T12:00:00Z"
        },
        {
            "id": "12346",
            "type": "PullRequestEvent",
            "actor": {"id": 123456, "login": "testuser"},
            "repo": {"id": 789012, "name": "testuser/test-repo"},
            "payload": {
                "action": "opened",
                "number": 1,
                "pull_request": {
                    "number": 1,
                    "title": "Test PR",
                    "additions": 12,
                    "deletions": 3,
                    "html_url": "https://github.com/testuser/test-repo/pull/1"
                }
            },
            "public": True,
            "created_at": "2024-01-16T12:00:00Z"
        },
        {
            "id": "12345",
            "type": "PushEvent",
            "actor": {"id": 123456, "login": "testuser"},
            "repo": {"id": 789012, "name": "testuser/test-repo"},
            "payload": {
                "push_id": 9876543,
                "size": 2,
                "ref": "refs/heads/main",
                "commits": [
                    {"sha": "abc1234def5678", "message": "Test commit\n\nWith a body"},
                    {"sha": "0123456789abcd", "message": "Second commit"}
                ]
            },
            "public": True,
            "created_at": "2024-01-15T12:00:00Z"
        },
    ]


@pytest.fixture
def sample_events(sample_github_events: List[Dict[str, Any]]) -> List[Event]:
    """Sample events parsed into models."""
    return [Event.from_api(item) for item in sample_github_events]


def json_response(
    status_code: int,
    data: Any = None,
    headers: Optional[Dict[str, str]] = None,
    content: Optional[bytes] = None,
) -> httpx.Response:
    """Build an httpx response with a JSON (or raw) body."""
    if content is not None:
        return httpx.Response(status_code, content=content, headers=headers)
    return httpx.Response(status_code, json=data, headers=headers)


@pytest.fixture
def make_response():
    """Factory for httpx responses."""
    return json_response


# =============================================================================
# Session Fixtures
# =============================================================================

class ScriptedLineReader(LineReader):
    """Line reader answering prompts from a fixed script."""

    def __init__(self, answers: List[str]) -> None:
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.opened = 0

    async def readline(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError("script exhausted")
        return self.answers.pop(0)

    def open(self):
        self.opened += 1
        return super().open()


@pytest.fixture
def scripted_reader():
    """Factory for scripted line readers."""
    return ScriptedLineReader


@pytest.fixture
def mock_github_service(sample_events: List[Event]) -> AsyncMock:
    """
    Provide a mock GitHubService returning the sample events.

    Returns:
        Mocked GitHubService
    """
    service = AsyncMock(spec=GitHubService)
    service.fetch_events = AsyncMock(return_value=sample_events)
    return service

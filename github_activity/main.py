"""
GitHub Activity CLI

Browse a GitHub user's public activity from the terminal.

Usage:
    github-activity <username>            interactive session
    github-activity <username> --summary  one-page summary grouped by repository
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from github_activity.core.config import Settings, get_settings, setup_logging
from github_activity.core.exceptions import ActivityError
from github_activity.models.display import DisplayConfig
from github_activity.services.formatter import Colors, colorize
from github_activity.services.github import GitHubService
from github_activity.services.prompt import ConsoleLineReader
from github_activity.services.session import SessionController

logger = logging.getLogger(__name__)

USAGE = """Usage: github-activity <username>
Example: github-activity kamranahmedse"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="github-activity",
        description="Show the public activity of a GitHub user.",
    )
    parser.add_argument("username", nargs="?", help="GitHub username")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print the first page of activity grouped by repository and exit",
    )
    return parser.parse_args(argv)


async def run_session(username: str, settings: Settings) -> int:
    """Run the interactive menu loop for ``username``."""
    config = DisplayConfig.from_settings(settings)
    print(colorize(f"Fetching activity for GitHub user: {username}", Colors.BRIGHT, config.colors))
    controller = SessionController(
        username=username,
        github_service=GitHubService(settings),
        reader=ConsoleLineReader(),
        config=config,
    )
    return await controller.run()


async def run_summary(username: str, settings: Settings) -> int:
    """Print one page of activity grouped by repository."""
    activity = await GitHubService(settings).get_user_activity(username)
    if activity is None or not activity.repos:
        print(f"No public activity found for {username}.")
        return 0

    print(f"Recent activity for {username} ({activity.event_count} events):")
    for repo, events in activity.repos.items():
        print(f"- {repo}: {len(events)} event(s)")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Command-line entry point."""
    args = parse_args(argv)
    if not args.username:
        print(USAGE)
        sys.exit(1)

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.app_name} {settings.app_version}")

    runner = run_summary if args.summary else run_session
    try:
        exit_code = asyncio.run(runner(args.username, settings))
    except (KeyboardInterrupt, EOFError):
        logger.info("Session interrupted by user")
        print("\nOperation cancelled by user")
        sys.exit(1)
    except ActivityError as e:
        logger.debug(f"Session ended with error: {e.message}")
        print(colorize(f"Error: {e.message}", Colors.RED, settings.default_colors), file=sys.stderr)
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()

"""Interactive session loop.

The controller owns the session state (current page, fetched events, filter
criteria and display configuration) and drives the menu loop: fetch when
nothing is loaded, render the filtered events, read a menu choice, dispatch.
"""

import logging
import re
from typing import Any, Dict, List

from pydantic import ValidationError

from github_activity.models.activity import Event
from github_activity.models.display import DisplayConfig
from github_activity.models.filter import FilterCriteria
from github_activity.services.exporter import save_events
from github_activity.services.filters import filter_events
from github_activity.services.formatter import Colors, colorize, format_event
from github_activity.services.github import GitHubService
from github_activity.services.prompt import Ask, LineReader

logger = logging.getLogger(__name__)

LEADING_INT = re.compile(r"\s*([+-]?\d+)")

MENU_OPTIONS = """1. Show next page
2. Filter events
3. Show all events
4. Save to file
5. Configure display
6. Exit"""

FILTER_OPTIONS = """1. By event type
2. By repository
3. By date range
4. Clear filters"""

CONFIG_QUESTIONS: Dict[str, str] = {
    "colors": "Enable colors? (true/false): ",
    "date_format": "Date format (local/iso): ",
    "detailed_view": "Show detailed view? (true/false): ",
    "events_per_page": "Events per page (10-100): ",
}


class SessionController:
    """Menu-driven browser over one user's public activity.

    Args:
        username: GitHub user whose events are shown
        github_service: Service used to fetch event pages
        reader: Source of user answers
        config: Initial display configuration
    """

    def __init__(
        self,
        username: str,
        github_service: GitHubService,
        reader: LineReader,
        config: DisplayConfig,
    ) -> None:
        self.username = username
        self.config = config
        self.current_page = 1
        self.current_events: List[Event] = []
        self.filter_criteria = FilterCriteria()
        self._github = github_service
        self._reader = reader

    async def run(self) -> int:
        """Run the menu loop until the user exits.

        Returns:
            int: Process exit status (0 when the user chose to exit)

        Raises:
            ActivityError: If fetching or saving fails; the session cannot continue
        """
        logger.info(f"Starting session for {self.username}")
        while True:
            if not self.current_events:
                await self.fetch_page()

            self.render()

            async with self._reader.open() as ask:
                print(f"\n{colorize('Options:', Colors.BRIGHT, self.config.colors)}\n{MENU_OPTIONS}\n")
                choice = await ask("Select an option (1-6): ")

            if not await self.dispatch(choice):
                return 0

    async def fetch_page(self) -> None:
        """Replace the current events with the current page."""
        self.current_events = await self._github.fetch_events(
            self.username, self.current_page, self.config.events_per_page
        )

    def visible_events(self) -> List[Event]:
        return filter_events(self.current_events, self.filter_criteria)

    def render(self) -> None:
        for event in self.visible_events():
            print(format_event(event, self.config))

    async def dispatch(self, choice: str) -> bool:
        """Act on a menu choice.

        Returns:
            bool: False when the session should end
        """
        logger.debug(f"Menu choice: {choice!r}")

        if choice == "1":
            self.current_page += 1
            await self.fetch_page()
        elif choice == "2":
            await self.filter_menu()
        elif choice == "3":
            self.filter_criteria = FilterCriteria()
        elif choice == "4":
            path = save_events(self.current_events, self.username, self.config)
            print(f"\nActivity saved to: {path}")
        elif choice == "5":
            await self.configure_display()
        elif choice == "6":
            print("Goodbye!")
            return False
        else:
            print("Invalid option. Please try again.")
        return True

    def _update_filter(self, **changes: Any) -> None:
        self.filter_criteria = FilterCriteria.model_validate(
            {**self.filter_criteria.model_dump(), **changes}
        )
        logger.debug(f"Filter criteria: {self.filter_criteria}")

    async def filter_menu(self) -> None:
        """Ask for a filter option and its value, then update the criteria."""
        async with self._reader.open() as ask:
            print(f"\nFilter options:\n{FILTER_OPTIONS}")
            choice = await ask("Select filter option (1-4): ")

            if choice == "1":
                await self._filter_by_type(ask)
            elif choice == "2":
                repo = await ask("Enter repository name (partial match): ")
                self._update_filter(repo=repo)
            elif choice == "3":
                await self._filter_by_date(ask)
            elif choice == "4":
                self.filter_criteria = FilterCriteria()
            else:
                print("Invalid filter option.")

    async def _filter_by_type(self, ask: Ask) -> None:
        types = list(dict.fromkeys(event.type for event in self.current_events))
        for i, event_type in enumerate(types, start=1):
            print(f"{i}. {event_type}")

        answer = await ask("Select event type: ")
        try:
            index = int(answer)
        except ValueError:
            index = 0
        if not 1 <= index <= len(types):
            print("Invalid selection.")
            return
        self._update_filter(type=types[index - 1])

    async def _filter_by_date(self, ask: Ask) -> None:
        dates = (await ask("Enter date range (YYYY-MM-DD YYYY-MM-DD): ")).split()
        if len(dates) != 2:
            print("Please enter exactly two dates.")
            return
        try:
            self._update_filter(date_from=dates[0], date_to=dates[1])
        except ValidationError:
            print("Invalid date range.")

    async def configure_display(self) -> None:
        """Show the configuration and ask for new values; blank keeps a value."""
        print("\nCurrent configuration:")
        for key, value in self.config.items():
            print(f"{key}: {value}")

        changes: Dict[str, Any] = {}
        async with self._reader.open() as ask:
            for key, question in CONFIG_QUESTIONS.items():
                answer = await ask(question)
                if not answer:
                    continue
                if key == "events_per_page":
                    match = LEADING_INT.match(answer)
                    if match:
                        changes[key] = int(match.group(1))
                    else:
                        print("Events per page must be a number.")
                elif isinstance(getattr(self.config, key), bool):
                    changes[key] = answer.lower() == "true"
                else:
                    changes[key] = answer

        self.config = self.config.updated(**changes)
        logger.debug(f"Display configuration: {self.config}")

"""In-memory filtering of fetched events."""

from typing import List

from github_activity.models.activity import Event
from github_activity.models.filter import FilterCriteria


def matches(event: Event, criteria: FilterCriteria) -> bool:
    """Check whether an event satisfies every set criterion.

    Date bounds are inclusive. An event without a timestamp never satisfies
    a date bound.
    """
    if criteria.type is not None and event.type != criteria.type:
        return False
    if criteria.repo is not None and criteria.repo not in event.repo.name:
        return False
    if criteria.date_from is not None or criteria.date_to is not None:
        if event.created_at is None:
            return False
        if criteria.date_from is not None and event.created_at < criteria.date_from:
            return False
        if criteria.date_to is not None and event.created_at > criteria.date_to:
            return False
    return True


def filter_events(events: List[Event], criteria: FilterCriteria) -> List[Event]:
    """Return the events matching ``criteria`` in their original order."""
    if criteria.is_empty:
        return list(events)
    return [event for event in events if matches(event, criteria)]

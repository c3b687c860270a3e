"""Export of fetched events to timestamped JSON files."""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from github_activity.core.exceptions import ExportError
from github_activity.models.activity import Event
from github_activity.models.display import DisplayConfig

logger = logging.getLogger(__name__)


def export_filename(username: str, now: Optional[datetime] = None) -> str:
    """Build ``{username}-activity-{timestamp}.json`` with a filesystem-safe timestamp."""
    now = now or datetime.now(timezone.utc)
    stamp = now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f"{username}-activity-{re.sub(r'[:.]', '-', stamp)}.json"


def save_events(events: List[Event], username: str, config: DisplayConfig) -> Path:
    """Write the raw JSON of ``events`` under ``config.output_dir``.

    Args:
        events: Events to save, unfiltered
        username: User the events belong to
        config: Display configuration holding the output directory

    Returns:
        Path: Location of the written file

    Raises:
        ExportError: If the directory or file cannot be written
    """
    output_dir = Path(config.output_dir)
    filepath = output_dir / export_filename(username)

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        with open(filepath, "w", encoding="utf-8") as f:
            json.dump([event.raw for event in events], f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.error(f"Failed to save {len(events)} events to {filepath}: {e}")
        raise ExportError(f"Failed to save file: {e}") from e

    logger.info(f"Saved {len(events)} events to {filepath}")
    return filepath

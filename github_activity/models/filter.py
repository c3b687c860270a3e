"""Event filter criteria model."""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class FilterCriteria(BaseModel):
    """Predicates narrowing the displayed events.

    Unset fields do not filter. Date bounds accept ISO-8601 dates or
    timestamps; values without an offset are taken as UTC.
    """

    type: Optional[str] = None
    repo: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("type", "repo", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def parse_date_bound(cls, v: Any) -> Any:
        """Parse ISO-8601 strings, including bare dates."""
        if v is None or isinstance(v, datetime):
            return v
        if isinstance(v, str):
            if not v.strip():
                return None
            try:
                return datetime.fromisoformat(v.strip())
            except ValueError:
                raise ValueError(f"Invalid date: {v}")
        return v

    @field_validator("date_from", "date_to")
    @classmethod
    def ensure_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def is_empty(self) -> bool:
        return all(value is None for value in (self.type, self.repo, self.date_from, self.date_to))

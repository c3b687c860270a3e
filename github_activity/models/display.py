"""Display configuration model."""

from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from github_activity.core.config import Settings

MIN_EVENTS_PER_PAGE = 10
MAX_EVENTS_PER_PAGE = 100


class DisplayConfig(BaseModel):
    """How events are rendered and where they are saved.

    Instances are immutable; use ``updated`` to derive a new configuration.
    """

    colors: bool = True
    date_format: str = Field("local", description="'iso' or locale rendering")
    detailed_view: bool = True
    events_per_page: int = 30
    output_dir: str = "./github-activity-logs"

    model_config = ConfigDict(frozen=True)

    @field_validator("events_per_page")
    @classmethod
    def clamp_events_per_page(cls, v: int) -> int:
        """Clamp page size to the range accepted by the events endpoint."""
        return min(MAX_EVENTS_PER_PAGE, max(MIN_EVENTS_PER_PAGE, v))

    @classmethod
    def from_settings(cls, settings: Settings) -> "DisplayConfig":
        """Build the session defaults from application settings."""
        return cls(
            colors=settings.default_colors,
            date_format=settings.default_date_format,
            detailed_view=settings.default_detailed_view,
            events_per_page=settings.default_events_per_page,
            output_dir=settings.default_output_dir,
        )

    def updated(self, **changes: Any) -> "DisplayConfig":
        """Return a validated copy with ``changes`` applied."""
        return type(self).model_validate({**self.model_dump(), **changes})

    def items(self) -> List[Tuple[str, Any]]:
        return list(self.model_dump().items())

"""Application configuration."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Configure application logging."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "GitHub Activity CLI"
    app_version: str = "2.0.0"
    log_level: str = "WARNING"

    # GitHub API
    github_api_url: str = "https://api.github.com"
    user_agent: str = "GitHub-Activity-CLI/2.0"
    accept_header: str = "application/vnd.github.v3+json"
    request_timeout: Optional[float] = None
    rate_limit_warning_threshold: int = 10

    # Display defaults
    default_colors: bool = True
    default_date_format: str = "local"
    default_detailed_view: bool = True
    default_events_per_page: int = 30
    default_output_dir: str = "./github-activity-logs"

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_ACTIVITY_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("default_date_format")
    @classmethod
    def validate_date_format(cls, v: str) -> str:
        """Validate default date format."""
        if v not in ("local", "iso"):
            raise ValueError("Date format must be 'local' or 'iso'")
        return v

    @field_validator("github_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate API URL and strip trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("Invalid GitHub API URL format")
        return v.rstrip("/")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

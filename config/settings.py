"""Application settings using Pydantic."""
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = Field(
        default="sqlite:///skillswipe.db",
        description="SQLAlchemy database URL",
    )

    # Slack
    slack_webhook_url: Optional[str] = Field(
        default=None,
        description="Slack webhook URL for like notifications",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a rotating log file",
    )
    matching_log_level: Optional[str] = Field(
        default=None,
        description="Log level for the matching engine (defaults to LOG_LEVEL)",
    )

    # Matching
    min_match_percentage: int = Field(
        default=0,
        ge=0,
        le=100,
        description="Candidates below this match percentage are hidden when ranking",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def default_categories_path(self) -> Path:
        """Path to the default skill category catalog."""
        return self.config_dir / "default_categories.yaml"


# Global settings instance
settings = Settings()

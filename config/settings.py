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

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for a rotating log file",
    )
    engine_log_level: Optional[str] = Field(
        default=None,
        description="Level for gigmatch loggers, independent of the root level",
    )

    # Data
    marketplace_file: Optional[Path] = Field(
        default=None,
        description="YAML file with influencers, gigs and sponsors",
    )

    # Matching defaults
    gig_match_limit: int = Field(
        default=10,
        ge=0,
        description="Default number of gig/influencer matches returned",
    )
    sponsor_match_limit: int = Field(
        default=20,
        ge=0,
        description="Default number of influencer matches returned to sponsors",
    )
    sponsor_budget: float = Field(
        default=10000.0,
        ge=0,
        description="Per-post budget assumed when a sponsor does not give one",
    )
    match_history_size: int = Field(
        default=500,
        ge=1,
        description="Maximum number of recorded matches kept in memory",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def marketplace_path(self) -> Path:
        """Path to the marketplace data file."""
        if self.marketplace_file is not None:
            return self.marketplace_file
        return self.config_dir / "marketplace.yaml"

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent


# Global settings instance
settings = Settings()

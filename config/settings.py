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
    scorer_log_level: Optional[str] = Field(
        default=None,
        description="Level for the ats_scorer loggers only (e.g. DEBUG to log every score)",
    )

    # Scoring
    scoring_config_file: Optional[Path] = Field(
        default=None,
        description="YAML scoring profile overriding the default weights",
    )
    min_score: float = Field(
        default=0,
        ge=0,
        le=100,
        description="Minimum overall score kept when ranking resumes",
    )
    batch_max_workers: int = Field(
        default=1,
        ge=1,
        description="Threads used when ranking many resumes (1 = sequential)",
    )

    # Paths
    config_dir: Path = Field(
        default=Path(__file__).parent,
        description="Configuration directory",
    )

    @property
    def default_scoring_profile(self) -> Path:
        """Path to the bundled scoring.yaml file."""
        return self.config_dir / "scoring.yaml"

    @property
    def project_root(self) -> Path:
        """Project root directory."""
        return self.config_dir.parent


# Global settings instance
settings = Settings()

"""Settings for process-wide logging configuration."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """Log level and format applied by ``configure_logging``."""

    class Config:
        """Config class for reading fields from env."""

        env_prefix = "LOGGING_"
        case_sensitive = False

    level: str = Field(default="INFO", description="Root log level name.")
    format: str = Field(
        default="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        description="Format string for the console handler.",
    )
    library_level: str = Field(
        default="WARNING",
        description="Level applied to noisy third-party loggers (sqlalchemy, mlflow, httpx).",
    )

    @field_validator("level", "library_level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level '{value}'.")
        return normalized

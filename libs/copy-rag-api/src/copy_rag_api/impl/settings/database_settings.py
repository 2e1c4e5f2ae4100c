"""Settings for the relational backing store."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class DatabaseSettings(BaseSettings):
    """SQLAlchemy connection settings.

    Environment variables use the prefix `DATABASE_`.
    """

    class Config:
        """Config class for reading fields from env."""

        env_prefix = "DATABASE_"
        case_sensitive = False

    url: str = Field(default="sqlite:///./data/copy_assist.db", description="SQLAlchemy database URL.")
    echo: bool = Field(default=False, description="Log every SQL statement.")
    create_schema: bool = Field(default=True, description="Create missing tables on startup.")

    @field_validator("url")
    @classmethod
    def _validate_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("DATABASE_URL must not be empty.")
        return value

"""Settings for splitting knowledge documents into chunks."""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings


class ChunkerSettings(BaseSettings):
    """Chunk sizing.

    Environment variables use the prefix `CHUNKER_`.
    """

    class Config:
        """Config class for reading fields from env."""

        env_prefix = "CHUNKER_"
        case_sensitive = False

    chunk_size: int = Field(
        default=500,
        gt=0,
        description="Soft upper bound, in characters, for a chunk before a new one is started.",
    )
    overlap: int = Field(
        default=100,
        ge=0,
        description="Approximate character overlap; carried over as overlap // 5 trailing words.",
    )

    @model_validator(mode="after")
    def _validate_overlap(self) -> "ChunkerSettings":
        if self.overlap >= self.chunk_size:
            raise ValueError("CHUNKER_OVERLAP must be smaller than CHUNKER_CHUNK_SIZE.")
        return self

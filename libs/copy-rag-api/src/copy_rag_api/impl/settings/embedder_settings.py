"""Settings for the hashed token embedder."""

from pydantic import Field
from pydantic_settings import BaseSettings


class EmbedderSettings(BaseSettings):
    """Embedding shape.

    Environment variables use the prefix `EMBEDDER_`.
    """

    class Config:
        """Config class for reading fields from env."""

        env_prefix = "EMBEDDER_"
        case_sensitive = False

    dimension: int = Field(default=768, gt=0, description="Length of every embedding vector.")
    min_token_length: int = Field(
        default=3,
        ge=1,
        description="Tokens shorter than this are ignored.",
    )

"""Settings for pattern library lookups."""

from pydantic import Field
from pydantic_settings import BaseSettings


class PatternMatcherSettings(BaseSettings):
    """Pattern lookup defaults.

    Environment variables use the prefix `PATTERN_MATCHER_`.
    """

    class Config:
        """Config class for reading fields from env."""

        env_prefix = "PATTERN_MATCHER_"
        case_sensitive = False

    default_limit: int = Field(default=10, gt=0)
    case_sensitive_search: bool = Field(
        default=False,
        description="Match the search query against pattern text case-sensitively.",
    )

"""Quality signals attached to verified copy patterns."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class PatternMetadata(BaseModel):
    """Optional evidence that a piece of copy performs well."""

    ab_test_winner: Optional[bool] = Field(default=None, description="Copy won an A/B test.")
    conversion_lift: Optional[Decimal] = Field(
        default=None,
        max_digits=5,
        decimal_places=2,
        description="Measured conversion lift in percent, e.g. 12.50.",
    )
    user_research_validated: Optional[bool] = Field(
        default=None,
        description="Copy was validated in user research.",
    )

    @property
    def tags(self) -> list[str]:
        """Return display tags for the signals that are set."""
        tags = []
        if self.ab_test_winner:
            tags.append("A/B winner")
        if self.user_research_validated:
            tags.append("UXR validated")
        return tags

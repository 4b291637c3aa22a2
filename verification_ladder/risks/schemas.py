"""Risk pattern schemas.

A risk category is a keyword-defined topic whose presence in source text
raises the recommended verification level.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..levels.schemas import VerificationLevel


class RiskCategory(str, Enum):
    """Domain risk topics scanned for in source text."""

    FINANCIAL = "financial"
    SECURITY = "security"
    DATA_INTEGRITY = "data_integrity"
    USER_FACING = "user_facing"
    DISTRIBUTED = "distributed"


class RiskPattern(BaseModel):
    """One row of the risk pattern table."""

    model_config = ConfigDict(frozen=True)

    category: RiskCategory
    keywords: tuple[str, ...] = Field(
        ...,
        min_length=1,
        description="Case-insensitive substrings that signal this risk",
    )
    level: VerificationLevel = Field(
        ...,
        description="Verification level this category contributes when matched",
    )
    risk: str = Field(
        ...,
        description="Human-readable risk statement for reports",
    )

    @field_validator("keywords")
    @classmethod
    def normalize_keywords(cls, keywords: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(k.strip().lower() for k in keywords)
        if any(not k for k in normalized):
            raise ValueError("keywords must be non-empty strings")
        return normalized

    def matches(self, lowered_text: str) -> bool:
        """Whether any keyword occurs in already-lowercased text."""
        return any(keyword in lowered_text for keyword in self.keywords)


class RiskMatch(BaseModel):
    """A category that matched, with the keywords that triggered it."""
    category: RiskCategory
    level: VerificationLevel
    matched_keywords: list[str] = Field(default_factory=list)

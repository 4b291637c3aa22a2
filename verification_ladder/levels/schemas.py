"""Verification ladder level schemas.

Six ordered tiers of correctness rigor, from static typing to formal proof.
"""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class VerificationLevel(IntEnum):
    """Verification levels in ascending order of rigor."""

    STATIC_TYPES = 1
    RUNTIME_VALIDATION = 2
    UNIT_TESTS = 3
    INTEGRATION_TESTS = 4
    PROPERTY_BASED_TESTS = 5
    FORMAL_VERIFICATION = 6

    @property
    def label(self) -> str:
        """Human-readable name (e.g. 'Property Based Tests')."""
        return self.name.replace("_", " ").title()


class LevelDefinition(BaseModel):
    """What a level guarantees and which tools reach it."""

    model_config = ConfigDict(frozen=True)

    level: VerificationLevel
    name: str = Field(..., description="Human-readable name")
    description: str = Field(
        ...,
        description="One sentence on what this level guarantees",
    )
    tools: list[str] = Field(
        default_factory=list,
        description="Tooling commonly used to reach this level",
    )


class LevelSummary(BaseModel):
    """Lightweight summary for list endpoints."""
    level: int
    name: str
    description: str
    tool_count: int

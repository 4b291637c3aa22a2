"""Verification analysis schemas.

A VerificationAnalysis aggregates per-module recommendations for one
analysis session. Both are immutable once built.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..levels.schemas import VerificationLevel


class EffortEstimate(str, Enum):
    """Rough effort to move a module to its recommended level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class OverallRisk(str, Enum):
    """Overall risk label derived from the highest recommended level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ModuleAnalysis(BaseModel):
    """Verification recommendation for one code module."""

    model_config = ConfigDict(frozen=True)

    module_name: str
    current_level: VerificationLevel
    recommended_level: VerificationLevel
    risks: list[str] = Field(default_factory=list)
    rationale: str = ""
    estimated_effort: EffortEstimate


class VerificationAnalysis(BaseModel):
    """Aggregate analysis across modules."""

    model_config = ConfigDict(frozen=True)

    session_id: str
    modules: list[ModuleAnalysis] = Field(default_factory=list)
    overall_risk: str = Field(
        ...,
        description="Risk label, rendered upper-cased in reports",
    )
    summary: str = ""


class ModuleSource(BaseModel):
    """A named chunk of source text to analyze."""
    name: str
    code: str

"""
Boundary patterns - reusable schema expressions for common API boundaries.
"""

from pydantic import BaseModel, Field


class BoundaryPattern(BaseModel):
    """A named schema expression guarding a typical system boundary."""

    key: str = Field(..., description="Unique identifier (e.g., 'pagination')")
    name: str = Field(..., description="Human-readable name")
    description: str = Field(
        ...,
        description="Where this boundary shows up (1 sentence)"
    )
    schema_expression: str = Field(
        ...,
        description="Schema expression in the emitter grammar"
    )
    sample: dict = Field(
        default_factory=dict,
        description="Representative payload the expression was derived from"
    )

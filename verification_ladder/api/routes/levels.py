"""
Verification level API routes - the six-tier ladder catalog.
"""

from fastapi import APIRouter, HTTPException

from ...levels.registry import get_level_registry
from ...levels.schemas import LevelDefinition, LevelSummary, VerificationLevel

router = APIRouter(prefix="/levels", tags=["levels"])


@router.get("", response_model=list[LevelSummary])
async def list_levels():
    """List all verification levels in ascending rigor."""
    registry = get_level_registry()
    return registry.list_summaries()


@router.get("/{level}", response_model=LevelDefinition)
async def get_level(level: int):
    """Get a level's description and tooling guidance."""
    try:
        verification_level = VerificationLevel(level)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Level {level} not found")

    definition = get_level_registry().get(verification_level)
    if not definition:
        raise HTTPException(status_code=404, detail=f"Level {level} not defined")
    return definition

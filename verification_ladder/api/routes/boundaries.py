"""
Boundary pattern API routes.
"""

from fastapi import APIRouter, HTTPException

from ...boundaries.registry import get_boundary_registry
from ...boundaries.schemas import BoundaryPattern

router = APIRouter(prefix="/boundaries", tags=["boundaries"])


@router.get("", response_model=list[BoundaryPattern])
async def list_boundaries():
    """List all boundary schema patterns."""
    return get_boundary_registry().list_all()


@router.get("/{key}", response_model=BoundaryPattern)
async def get_boundary(key: str):
    """Get a specific boundary pattern by key."""
    pattern = get_boundary_registry().get(key)
    if not pattern:
        raise HTTPException(status_code=404, detail=f"Boundary pattern '{key}' not found")
    return pattern

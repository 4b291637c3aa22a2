"""
Validation API routes - readable diagnostics for validation failures.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...validation.formatter import format_validation_errors
from ...validation.schemas import ValidationError

router = APIRouter(prefix="/validation", tags=["validation"])


class FormatErrorsRequest(BaseModel):
    errors: list[ValidationError] = Field(default_factory=list)


@router.post("/format")
async def format_errors(request: FormatErrorsRequest):
    """Render validation errors one per line."""
    return {
        "count": len(request.errors),
        "formatted": format_validation_errors(request.errors),
    }

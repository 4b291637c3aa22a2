"""
Schema inference API routes - schema suggestions from sample payloads.
"""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from ...inference.emitter import emit_schema, render_type
from ...inference.inferer import infer

router = APIRouter(prefix="/schemas", tags=["schemas"])


class InferRequest(BaseModel):
    """Sample value to infer a type for."""
    value: Any = Field(..., description="Any JSON value")


class EmitRequest(BaseModel):
    """Sample value to emit a schema expression for."""
    value: Any = Field(..., description="Any JSON value")
    strict: bool = Field(
        default=False,
        description="Reject fields not present in the sample",
    )


@router.post("/infer")
async def infer_type(request: InferRequest):
    """Infer the type of a sample value (objects stay opaque)."""
    inferred = infer(request.value)
    return {
        "inferred": inferred.model_dump(mode="json"),
        "expression": render_type(inferred),
    }


@router.post("/emit")
async def emit(request: EmitRequest):
    """Emit a full schema expression, expanding object fields."""
    return {"schema": emit_schema(request.value, strict=request.strict)}

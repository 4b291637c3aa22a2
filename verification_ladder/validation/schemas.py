"""Validation error schema."""

from typing import Union

from pydantic import BaseModel, ConfigDict, Field

PathSegment = Union[int, str]


class ValidationError(BaseModel):
    """One validation failure at a nested location."""

    model_config = ConfigDict(frozen=True)

    path: list[PathSegment] = Field(
        default_factory=list,
        description="Field names and array indices from the root",
    )
    message: str

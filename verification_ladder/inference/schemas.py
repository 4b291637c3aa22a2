"""Inferred type schemas for sample-driven schema inference.

An inferred type describes the structure (and, for strings, the semantic
format) of one sample value. Types are frozen so they compare and hash
structurally, which is what union aggregation keys on.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Undefined:
    """Marker for an absent value (JavaScript's ``undefined``)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

# None, str, int, float, bool, list, dict, or UNDEFINED
SampleValue = Any


class StringFormat(str, Enum):
    """Semantic format detected on a string sample."""

    EMAIL = "email"
    UUID = "uuid"
    URL = "url"
    DATETIME = "datetime"
    PLAIN = "plain"


class _InferredBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class NullType(_InferredBase):
    kind: Literal["null"] = "null"


class UndefinedType(_InferredBase):
    kind: Literal["undefined"] = "undefined"


class UnknownType(_InferredBase):
    """Placeholder for an element type that cannot be observed."""

    kind: Literal["unknown"] = "unknown"


class StringType(_InferredBase):
    kind: Literal["string"] = "string"
    format: StringFormat = Field(
        default=StringFormat.PLAIN,
        description="First matching format in precedence order",
    )


class NumberType(_InferredBase):
    kind: Literal["number"] = "number"
    is_integer: bool = Field(..., description="Sample has no fractional part")


class BooleanType(_InferredBase):
    kind: Literal["boolean"] = "boolean"


class ObjectType(_InferredBase):
    """Opaque object. The inferer never records fields."""

    kind: Literal["object"] = "object"


class ArrayType(_InferredBase):
    kind: Literal["array"] = "array"
    element: "InferredType"


class UnionType(_InferredBase):
    kind: Literal["union"] = "union"
    variants: tuple["InferredType", ...] = Field(
        ...,
        min_length=2,
        description="Distinct variant types in first-seen order",
    )


InferredType = Annotated[
    Union[
        NullType,
        UndefinedType,
        UnknownType,
        StringType,
        NumberType,
        BooleanType,
        ObjectType,
        ArrayType,
        UnionType,
    ],
    Field(discriminator="kind"),
]

ArrayType.model_rebuild()
UnionType.model_rebuild()

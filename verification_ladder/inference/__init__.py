"""
Inference module - schema suggestions from example data.

The inferer maps one sample value to an inferred type (objects stay opaque);
the emitter walks object samples field by field and renders schema
expressions.
"""

from .schemas import (
    UNDEFINED,
    ArrayType,
    BooleanType,
    InferredType,
    NullType,
    NumberType,
    ObjectType,
    StringFormat,
    StringType,
    UndefinedType,
    UnionType,
    UnknownType,
)
from .inferer import detect_string_format, infer
from .emitter import emit_schema, render_type

__all__ = [
    "UNDEFINED",
    "ArrayType",
    "BooleanType",
    "InferredType",
    "NullType",
    "NumberType",
    "ObjectType",
    "StringFormat",
    "StringType",
    "UndefinedType",
    "UnionType",
    "UnknownType",
    "detect_string_format",
    "infer",
    "emit_schema",
    "render_type",
]

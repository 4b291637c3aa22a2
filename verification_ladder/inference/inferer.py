"""Sample-driven type inference.

Maps a single JSON-shaped sample value to an inferred type. Objects are
treated opaquely here; field-level structure is the emitter's job
(see emitter.py).
"""

import logging
import math
import re

from .schemas import (
    UNDEFINED,
    ArrayType,
    BooleanType,
    InferredType,
    NullType,
    NumberType,
    ObjectType,
    SampleValue,
    StringFormat,
    StringType,
    UndefinedType,
    UnionType,
    UnknownType,
)

logger = logging.getLogger(__name__)

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://\S+$")
DATETIME_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:?\d{2})$"
)

# Precedence order: first match wins
STRING_FORMAT_PATTERNS: tuple[tuple[StringFormat, re.Pattern[str]], ...] = (
    (StringFormat.UUID, UUID_PATTERN),
    (StringFormat.EMAIL, EMAIL_PATTERN),
    (StringFormat.URL, URL_PATTERN),
    (StringFormat.DATETIME, DATETIME_PATTERN),
)


def detect_string_format(text: str) -> StringFormat:
    """Return the first format whose pattern matches, else PLAIN."""
    for string_format, pattern in STRING_FORMAT_PATTERNS:
        if pattern.match(text):
            return string_format
    return StringFormat.PLAIN


def is_integral(number: float) -> bool:
    if isinstance(number, int):
        return True
    return math.isfinite(number) and number.is_integer()


def distinct_in_order(items):
    """Collapse equal items, keeping first-seen order."""
    return list(dict.fromkeys(items))


def infer(value: SampleValue) -> InferredType:
    """Infer the type of a sample value.

    Total and deterministic. Objects always yield the opaque ObjectType,
    whatever their contents. Values outside the JSON grammar yield
    UnknownType.
    """
    if value is None:
        return NullType()
    if value is UNDEFINED:
        return UndefinedType()
    # bool before numbers: bool subclasses int
    if isinstance(value, bool):
        return BooleanType()
    if isinstance(value, (int, float)):
        return NumberType(is_integer=is_integral(value))
    if isinstance(value, str):
        return StringType(format=detect_string_format(value))
    if isinstance(value, (list, tuple)):
        return _infer_array(value)
    if isinstance(value, dict):
        return ObjectType()

    logger.debug(f"Unsupported sample type {type(value).__name__}, inferring unknown")
    return UnknownType()


def _infer_array(items) -> ArrayType:
    if not items:
        return ArrayType(element=UnknownType())

    element_types = distinct_in_order(infer(item) for item in items)
    if len(element_types) == 1:
        return ArrayType(element=element_types[0])
    return ArrayType(element=UnionType(variants=tuple(element_types)))

"""Schema expression emitter.

Serializes sample values into schema expressions such as::

    object({
      id: string(format=uuid),
      age: number(int=true),
      tags: array(string())
    }).strict()

Object samples are walked field by field here. Every non-object value is
handed to the inferer, so an array inside an object field keeps the
inferer's opaque view of any objects it contains.
"""

import logging

from .inferer import distinct_in_order, infer
from .schemas import (
    ArrayType,
    InferredType,
    NumberType,
    SampleValue,
    StringFormat,
    StringType,
    UnionType,
    UnknownType,
)

logger = logging.getLogger(__name__)

INDENT = "  "

# Renderings for types without parameters
_SIMPLE_EXPRESSIONS = {
    "null": "null()",
    "undefined": "undefined()",
    "unknown": "unknown()",
    "boolean": "boolean()",
    "object": "object({})",
}


def render_type(inferred: InferredType) -> str:
    """Render an inferred type in the schema expression grammar."""
    if isinstance(inferred, StringType):
        if inferred.format == StringFormat.PLAIN:
            return "string()"
        return f"string(format={inferred.format.value})"
    if isinstance(inferred, NumberType):
        return f"number(int={'true' if inferred.is_integer else 'false'})"
    if isinstance(inferred, ArrayType):
        return f"array({render_type(inferred.element)})"
    if isinstance(inferred, UnionType):
        return _render_union([render_type(v) for v in inferred.variants])
    return _SIMPLE_EXPRESSIONS[inferred.kind]


def emit_schema(value: SampleValue, strict: bool = False) -> str:
    """Emit a schema expression for a sample value.

    Args:
        value: JSON-shaped sample (UNDEFINED allowed)
        strict: Append .strict() to every object expression built here,
            rejecting fields that are not listed

    Returns:
        Schema expression text. Never raises for JSON-shaped input.
    """
    if isinstance(value, dict):
        return _emit_object(value, strict)
    if isinstance(value, (list, tuple)):
        return _emit_array(value, strict)
    return render_type(infer(value))


def _emit_object(sample: dict, strict: bool) -> str:
    if not sample:
        expression = "object({})"
    else:
        fields = []
        for key, field_value in sample.items():
            if isinstance(field_value, dict):
                field_expression = _emit_object(field_value, strict)
            else:
                field_expression = render_type(infer(field_value))
            fields.append(f"{INDENT}{key}: {_indent_continuation(field_expression)}")
        expression = "object({\n" + ",\n".join(fields) + "\n})"

    return f"{expression}.strict()" if strict else expression


def _emit_array(items, strict: bool) -> str:
    if not items:
        return render_type(ArrayType(element=UnknownType()))

    # Object elements expand one level down; everything else goes through infer()
    element_expressions = distinct_in_order(
        _emit_object(item, strict) if isinstance(item, dict) else render_type(infer(item))
        for item in items
    )
    logger.debug(f"Array sample of {len(items)} items has {len(element_expressions)} distinct element schemas")

    if len(element_expressions) == 1:
        return f"array({element_expressions[0]})"
    return f"array({_render_union(element_expressions)})"


def _render_union(expressions: list[str]) -> str:
    return f"union({', '.join(expressions)})"


def _indent_continuation(expression: str) -> str:
    return expression.replace("\n", "\n" + INDENT)

"""
Validation module - diagnostics for nested validation failures.
"""

from .schemas import PathSegment, ValidationError
from .formatter import format_path, format_validation_errors

__all__ = [
    "PathSegment",
    "ValidationError",
    "format_path",
    "format_validation_errors",
]

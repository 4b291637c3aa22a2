"""Readable diagnostics for validation errors."""

from typing import Sequence

from .schemas import PathSegment, ValidationError

ROOT_MARKER = "root"


def format_path(path: Sequence[PathSegment]) -> str:
    """Join path segments with dots (``items.0.name``); empty is ``root``."""
    if not path:
        return ROOT_MARKER
    return ".".join(str(segment) for segment in path)


def format_validation_errors(errors: Sequence[ValidationError]) -> str:
    """Render one line per error, preserving input order."""
    return "\n".join(
        f"  - {format_path(err.path)}: {err.message}" for err in errors
    )

"""
Boundaries module - ready-made schemas for common API boundaries.

User input, pagination, webhook and file upload payloads are the places
where runtime validation pays off first.
"""

from .schemas import BoundaryPattern
from .registry import BoundaryPatternRegistry, get_boundary_registry

__all__ = [
    "BoundaryPattern",
    "BoundaryPatternRegistry",
    "get_boundary_registry",
]

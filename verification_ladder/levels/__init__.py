"""
Levels module - the six-tier verification ladder catalog.
"""

from .schemas import LevelDefinition, LevelSummary, VerificationLevel
from .registry import LevelRegistry, describe_level, get_level_registry, tooling_for

__all__ = [
    "LevelDefinition",
    "LevelSummary",
    "VerificationLevel",
    "LevelRegistry",
    "describe_level",
    "get_level_registry",
    "tooling_for",
]

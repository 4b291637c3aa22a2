"""
Boundary Pattern Registry - loads and serves common boundary schemas.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .schemas import BoundaryPattern

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"


class BoundaryPatternRegistry:
    """Registry for boundary schema patterns."""

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self._patterns: dict[str, BoundaryPattern] = {}
        self._loaded = False

    def load(self) -> None:
        """Load boundary patterns from YAML."""
        if self._loaded:
            return

        patterns_file = self.definitions_dir / "boundary_patterns.yaml"
        if not patterns_file.exists():
            logger.warning(f"Boundary patterns file not found: {patterns_file}")
            self._loaded = True
            return

        try:
            with open(patterns_file, "r") as f:
                data = yaml.safe_load(f) or {}

            for p_data in data.get("patterns", []):
                pattern = BoundaryPattern.model_validate(p_data)
                self._patterns[pattern.key] = pattern

            logger.info(f"Loaded {len(self._patterns)} boundary patterns")
        except Exception as e:
            logger.error(f"Failed to load boundary patterns: {e}")

        self._loaded = True

    def get(self, key: str) -> Optional[BoundaryPattern]:
        """Get a boundary pattern by key."""
        self.load()
        return self._patterns.get(key)

    def list_all(self) -> list[BoundaryPattern]:
        """List all boundary patterns."""
        self.load()
        return list(self._patterns.values())

    def count(self) -> int:
        self.load()
        return len(self._patterns)


# Global instance
_registry: Optional[BoundaryPatternRegistry] = None


def get_boundary_registry() -> BoundaryPatternRegistry:
    """Get the global boundary pattern registry."""
    global _registry
    if _registry is None:
        _registry = BoundaryPatternRegistry()
    return _registry

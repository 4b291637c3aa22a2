"""
Level Registry - loads and serves the verification ladder catalog.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .schemas import LevelDefinition, LevelSummary, VerificationLevel

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"


class LevelRegistry:
    """Registry for verification level definitions.

    Loaded once from levels.yaml and read-only afterwards.
    """

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self._levels: dict[VerificationLevel, LevelDefinition] = {}
        self._loaded = False

    def load(self) -> None:
        """Load level definitions from YAML."""
        if self._loaded:
            return

        levels_file = self.definitions_dir / "levels.yaml"
        if not levels_file.exists():
            logger.warning(f"Level catalog not found: {levels_file}")
            self._loaded = True
            return

        try:
            with open(levels_file, "r") as f:
                data = yaml.safe_load(f) or {}

            for level_data in data.get("levels", []):
                definition = LevelDefinition.model_validate(level_data)
                self._levels[definition.level] = definition
                logger.debug(f"Loaded level {definition.level.value}: {definition.name}")

            logger.info(f"Loaded {len(self._levels)} verification levels")
        except Exception as e:
            logger.error(f"Failed to load level catalog {levels_file}: {e}")

        missing = [level.name for level in VerificationLevel if level not in self._levels]
        if missing:
            logger.error(f"Level catalog is missing definitions for: {', '.join(missing)}")

        self._loaded = True

    def reload(self) -> None:
        """Reload from disk."""
        self._levels.clear()
        self._loaded = False
        self.load()

    def get(self, level: VerificationLevel) -> Optional[LevelDefinition]:
        """Get a level definition."""
        self.load()
        return self._levels.get(level)

    def list_all(self) -> list[LevelDefinition]:
        """List all level definitions in ascending order."""
        self.load()
        return [self._levels[level] for level in sorted(self._levels)]

    def list_summaries(self) -> list[LevelSummary]:
        """List all levels as summaries."""
        return [
            LevelSummary(
                level=d.level.value,
                name=d.name,
                description=d.description,
                tool_count=len(d.tools),
            )
            for d in self.list_all()
        ]

    def count(self) -> int:
        """Get total number of levels."""
        self.load()
        return len(self._levels)

    def describe(self, level: VerificationLevel) -> str:
        """One-sentence guarantee for a level.

        Falls back to the level's display name when the catalog lacks it.
        """
        definition = self.get(level)
        if definition is None:
            return level.label
        return definition.description

    def tools(self, level: VerificationLevel) -> list[str]:
        """Tooling guidance for a level (empty when the catalog lacks it)."""
        definition = self.get(level)
        if definition is None:
            return []
        return list(definition.tools)


# Global instance
_registry: Optional[LevelRegistry] = None


def get_level_registry() -> LevelRegistry:
    """Get the global level registry."""
    global _registry
    if _registry is None:
        _registry = LevelRegistry()
    return _registry


def describe_level(level: VerificationLevel) -> str:
    """Describe what a verification level guarantees."""
    return get_level_registry().describe(VerificationLevel(level))


def tooling_for(level: VerificationLevel) -> list[str]:
    """Tools commonly used at a verification level."""
    return get_level_registry().tools(VerificationLevel(level))

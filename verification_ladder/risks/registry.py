"""
Risk Pattern Registry - loads the category -> keywords -> level table.
"""

import logging
from pathlib import Path
from typing import Optional

import yaml

from .schemas import RiskCategory, RiskPattern

logger = logging.getLogger(__name__)

DEFINITIONS_DIR = Path(__file__).parent / "definitions"


class RiskPatternRegistry:
    """Registry for risk patterns.

    Categories can be added or tuned in risk_patterns.yaml without touching
    the classifier.
    """

    def __init__(self, definitions_dir: Optional[Path] = None):
        self.definitions_dir = definitions_dir or DEFINITIONS_DIR
        self._patterns: dict[RiskCategory, RiskPattern] = {}
        self._loaded = False

    def load(self) -> None:
        """Load risk patterns from YAML."""
        if self._loaded:
            return

        patterns_file = self.definitions_dir / "risk_patterns.yaml"
        if not patterns_file.exists():
            logger.warning(f"Risk pattern table not found: {patterns_file}")
            self._loaded = True
            return

        try:
            with open(patterns_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse risk pattern table {patterns_file}: {e}")
            self._loaded = True
            return

        for pattern_data in data.get("patterns", []):
            try:
                pattern = RiskPattern.model_validate(pattern_data)
            except Exception as e:
                logger.error(f"Invalid risk pattern in {patterns_file}: {e}")
                continue
            if pattern.category in self._patterns:
                logger.warning(f"Duplicate risk category '{pattern.category.value}', keeping first")
                continue
            self._patterns[pattern.category] = pattern

        logger.info(f"Loaded {len(self._patterns)} risk categories")
        self._loaded = True

    def reload(self) -> None:
        """Reload from disk."""
        self._patterns.clear()
        self._loaded = False
        self.load()

    def get(self, category: RiskCategory) -> Optional[RiskPattern]:
        """Get the pattern row for a category."""
        self.load()
        return self._patterns.get(category)

    def list_all(self) -> list[RiskPattern]:
        """List all patterns in table order."""
        self.load()
        return list(self._patterns.values())

    def count(self) -> int:
        """Get total number of categories."""
        self.load()
        return len(self._patterns)

    def get_stats(self) -> dict:
        """Get registry statistics."""
        self.load()
        return {
            "categories_loaded": len(self._patterns),
            "total_keywords": sum(len(p.keywords) for p in self._patterns.values()),
        }


# Global instance
_registry: Optional[RiskPatternRegistry] = None


def get_risk_registry() -> RiskPatternRegistry:
    """Get the global risk pattern registry."""
    global _registry
    if _registry is None:
        _registry = RiskPatternRegistry()
    return _registry

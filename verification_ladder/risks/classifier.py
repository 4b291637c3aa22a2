"""Keyword-based risk classifier.

Scans source text against the risk pattern table and reduces the matched
categories to a single recommended verification level. Categories only
raise the ceiling: the result is the highest contributed level, never a sum.
"""

import logging
from typing import Optional

from ..levels.schemas import VerificationLevel
from .registry import RiskPatternRegistry, get_risk_registry
from .schemas import RiskMatch

logger = logging.getLogger(__name__)

NO_RISK_STATEMENT = "Standard verification with types and unit tests"


def match_categories(
    code: str,
    registry: Optional[RiskPatternRegistry] = None,
) -> list[RiskMatch]:
    """Find every risk category with at least one keyword in the text.

    Matches are returned in table order.
    """
    registry = registry or get_risk_registry()
    lowered = code.lower()

    matches = []
    for pattern in registry.list_all():
        hits = [keyword for keyword in pattern.keywords if keyword in lowered]
        if hits:
            matches.append(RiskMatch(
                category=pattern.category,
                level=pattern.level,
                matched_keywords=hits,
            ))
    return matches


def analyze_risk_level(
    code: str,
    registry: Optional[RiskPatternRegistry] = None,
) -> VerificationLevel:
    """Recommend the minimum verification level for a piece of source text.

    Returns STATIC_TYPES when no category matches.
    """
    matches = match_categories(code, registry)
    level = max(
        (m.level for m in matches),
        default=VerificationLevel.STATIC_TYPES,
    )
    logger.debug(
        f"Risk analysis matched {[m.category.value for m in matches]} -> level {level.value}"
    )
    return VerificationLevel(level)


def extract_risks(
    code: str,
    registry: Optional[RiskPatternRegistry] = None,
) -> list[str]:
    """Human-readable risk statements for every matched category."""
    registry = registry or get_risk_registry()
    risks = [
        registry.get(m.category).risk
        for m in match_categories(code, registry)
    ]
    return risks or [NO_RISK_STATEMENT]

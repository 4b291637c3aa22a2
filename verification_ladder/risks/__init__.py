"""
Risks module - keyword-driven verification level recommendations.
"""

from .schemas import RiskCategory, RiskMatch, RiskPattern
from .registry import RiskPatternRegistry, get_risk_registry
from .classifier import analyze_risk_level, extract_risks, match_categories

__all__ = [
    "RiskCategory",
    "RiskMatch",
    "RiskPattern",
    "RiskPatternRegistry",
    "get_risk_registry",
    "analyze_risk_level",
    "extract_risks",
    "match_categories",
]

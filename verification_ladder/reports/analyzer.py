"""Local module analysis.

Builds ModuleAnalysis records from raw source using the risk classifier,
and aggregates them into a VerificationAnalysis. No remote model is
consulted; the recommendation is purely keyword-driven.
"""

import logging
from typing import Iterable, Optional

from ..levels.schemas import VerificationLevel
from ..risks.classifier import analyze_risk_level, extract_risks
from ..risks.registry import RiskPatternRegistry
from .schemas import (
    EffortEstimate,
    ModuleAnalysis,
    ModuleSource,
    OverallRisk,
    VerificationAnalysis,
)

logger = logging.getLogger(__name__)

LOCAL_SESSION_ID = "local-analysis"


def estimate_effort(level: VerificationLevel) -> EffortEstimate:
    """Map a recommended level to an effort estimate."""
    if level >= VerificationLevel.PROPERTY_BASED_TESTS:
        return EffortEstimate.HIGH
    elif level >= VerificationLevel.UNIT_TESTS:
        return EffortEstimate.MEDIUM
    return EffortEstimate.LOW


def overall_risk_for(levels: Iterable[VerificationLevel]) -> OverallRisk:
    """Derive the overall risk label from the highest recommended level."""
    highest = max(levels, default=VerificationLevel.STATIC_TYPES)
    if highest >= VerificationLevel.FORMAL_VERIFICATION:
        return OverallRisk.CRITICAL
    elif highest >= VerificationLevel.INTEGRATION_TESTS:
        return OverallRisk.HIGH
    elif highest >= VerificationLevel.RUNTIME_VALIDATION:
        return OverallRisk.MEDIUM
    return OverallRisk.LOW


def analyze_module(
    name: str,
    code: str,
    current_level: VerificationLevel = VerificationLevel.STATIC_TYPES,
    registry: Optional[RiskPatternRegistry] = None,
) -> ModuleAnalysis:
    """Recommend a verification level for one module.

    Args:
        name: Module name shown in reports
        code: Source text to scan
        current_level: Level the module already reaches (default: static types)
        registry: Risk pattern registry (default: global singleton)
    """
    recommended = analyze_risk_level(code, registry)
    return ModuleAnalysis(
        module_name=name,
        current_level=current_level,
        recommended_level=recommended,
        risks=extract_risks(code, registry),
        rationale=f"Local analysis for {name}",
        estimated_effort=estimate_effort(recommended),
    )


def analyze_modules(
    modules: list[ModuleSource],
    session_id: str = LOCAL_SESSION_ID,
    registry: Optional[RiskPatternRegistry] = None,
) -> VerificationAnalysis:
    """Analyze several modules and aggregate the results."""
    recommendations = [
        analyze_module(m.name, m.code, registry=registry) for m in modules
    ]

    overall = overall_risk_for(r.recommended_level for r in recommendations)
    upgrades = sum(
        1 for r in recommendations if r.recommended_level > r.current_level
    )
    logger.info(
        f"Analyzed {len(recommendations)} modules: overall risk {overall.value}, "
        f"{upgrades} need upgrades"
    )

    return VerificationAnalysis(
        session_id=session_id,
        modules=recommendations,
        overall_risk=overall.value,
        summary=(
            f"Analyzed {len(recommendations)} modules. Overall risk: {overall.value}. "
            f"{upgrades} modules need verification upgrades."
        ),
    )

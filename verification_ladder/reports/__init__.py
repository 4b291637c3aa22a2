"""
Reports module - per-module verification recommendations and coverage reports.
"""

from .schemas import (
    EffortEstimate,
    ModuleAnalysis,
    ModuleSource,
    OverallRisk,
    VerificationAnalysis,
)
from .analyzer import analyze_module, analyze_modules, estimate_effort, overall_risk_for
from .coverage import CoverageReportGenerator, generate_coverage_report, get_report_generator

__all__ = [
    "EffortEstimate",
    "ModuleAnalysis",
    "ModuleSource",
    "OverallRisk",
    "VerificationAnalysis",
    "analyze_module",
    "analyze_modules",
    "estimate_effort",
    "overall_risk_for",
    "CoverageReportGenerator",
    "generate_coverage_report",
    "get_report_generator",
]

"""Verification Ladder - static verification-rigor analysis.

This package infers validation schemas from sample data and recommends
verification levels for source modules, without executing any code:
- Sample-driven type inference and schema expression emission
- Keyword-based risk classification against the 6-level verification ladder
- Coverage reports and validation-error diagnostics
"""

__version__ = "0.1.0"

from .inference import UNDEFINED, emit_schema, infer
from .levels import VerificationLevel, describe_level, tooling_for
from .reports import ModuleAnalysis, VerificationAnalysis, generate_coverage_report
from .risks import analyze_risk_level
from .validation import ValidationError, format_validation_errors

__all__ = [
    "UNDEFINED",
    "emit_schema",
    "infer",
    "VerificationLevel",
    "describe_level",
    "tooling_for",
    "ModuleAnalysis",
    "VerificationAnalysis",
    "generate_coverage_report",
    "analyze_risk_level",
    "ValidationError",
    "format_validation_errors",
]

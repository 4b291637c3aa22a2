"""Verification coverage report rendering using Jinja2 templates."""

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import BaseLoader, Environment, TemplateError

from ..levels.registry import LevelRegistry, get_level_registry
from .schemas import ModuleAnalysis, VerificationAnalysis

logger = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).parent / "templates" / "coverage_report.md.j2"


class CoverageReportGenerator:
    """Renders a VerificationAnalysis as a markdown coverage report.

    Usage:
        generator = CoverageReportGenerator()
        report = generator.render(analysis)
    """

    def __init__(
        self,
        level_registry: Optional[LevelRegistry] = None,
        template_path: Optional[Path] = None,
    ):
        """Initialize the generator.

        Args:
            level_registry: LevelRegistry for descriptions and tooling
                (default: global singleton)
            template_path: Report template (default: bundled template)
        """
        self.level_registry = level_registry or get_level_registry()
        self.template_path = template_path or TEMPLATE_PATH

        self.env = Environment(
            loader=BaseLoader(),
            autoescape=False,  # markdown, not HTML
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["bullets"] = lambda items: "\n".join(f"- {item}" for item in items)
        self._template = None

    def _get_template(self):
        if self._template is None:
            self._template = self.env.from_string(self.template_path.read_text())
        return self._template

    def render(self, analysis: VerificationAnalysis) -> str:
        """Render the report. Every module is included, in list order.

        Raises:
            ValueError: If the template itself is broken
        """
        context = self._build_context(analysis)
        try:
            rendered = self._get_template().render(**context)
        except TemplateError as e:
            raise ValueError(f"Coverage report template error: {e}")

        logger.debug(f"Rendered coverage report for {len(analysis.modules)} modules")
        return rendered

    def _build_context(self, analysis: VerificationAnalysis) -> dict[str, Any]:
        return {
            "session_id": analysis.session_id,
            "overall_risk": analysis.overall_risk,
            "summary": analysis.summary,
            "modules": [self._module_context(m) for m in analysis.modules],
        }

    def _module_context(self, module: ModuleAnalysis) -> dict[str, Any]:
        registry = self.level_registry
        return {
            "name": module.module_name,
            "current_level": int(module.current_level),
            "current_description": registry.describe(module.current_level),
            "recommended_level": int(module.recommended_level),
            "recommended_description": registry.describe(module.recommended_level),
            "effort": module.estimated_effort.value,
            "risks": module.risks,
            "rationale": module.rationale,
            "tools": registry.tools(module.recommended_level),
        }


# Global instance
_generator: Optional[CoverageReportGenerator] = None


def get_report_generator() -> CoverageReportGenerator:
    """Get the global coverage report generator."""
    global _generator
    if _generator is None:
        _generator = CoverageReportGenerator()
    return _generator


def generate_coverage_report(analysis: VerificationAnalysis) -> str:
    """Render a coverage report with the default generator."""
    return get_report_generator().render(analysis)

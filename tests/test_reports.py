# ============================================================================
# tests/test_reports.py
# Module analysis and coverage report rendering
# ============================================================================

import pytest

from verification_ladder.levels import VerificationLevel
from verification_ladder.reports import (
    CoverageReportGenerator,
    EffortEstimate,
    ModuleAnalysis,
    ModuleSource,
    OverallRisk,
    VerificationAnalysis,
    analyze_module,
    analyze_modules,
    estimate_effort,
    generate_coverage_report,
    overall_risk_for,
)


@pytest.mark.parametrize(
    "level,expected",
    [
        (VerificationLevel.STATIC_TYPES, EffortEstimate.LOW),
        (VerificationLevel.RUNTIME_VALIDATION, EffortEstimate.LOW),
        (VerificationLevel.UNIT_TESTS, EffortEstimate.MEDIUM),
        (VerificationLevel.INTEGRATION_TESTS, EffortEstimate.MEDIUM),
        (VerificationLevel.PROPERTY_BASED_TESTS, EffortEstimate.HIGH),
        (VerificationLevel.FORMAL_VERIFICATION, EffortEstimate.HIGH),
    ],
)
def test_estimate_effort(level, expected):
    assert estimate_effort(level) == expected


@pytest.mark.parametrize(
    "levels,expected",
    [
        ([], OverallRisk.LOW),
        ([1], OverallRisk.LOW),
        ([1, 2], OverallRisk.MEDIUM),
        ([3, 4], OverallRisk.HIGH),
        ([5], OverallRisk.HIGH),
        ([2, 6], OverallRisk.CRITICAL),
    ],
)
def test_overall_risk_for(levels, expected):
    assert overall_risk_for(VerificationLevel(lvl) for lvl in levels) == expected


def test_analyze_module(payment_code):
    analysis = analyze_module("payments", payment_code)
    assert analysis.module_name == "payments"
    assert analysis.current_level == VerificationLevel.STATIC_TYPES
    assert analysis.recommended_level == VerificationLevel.PROPERTY_BASED_TESTS
    assert analysis.estimated_effort == EffortEstimate.HIGH
    assert analysis.rationale == "Local analysis for payments"
    assert "Financial calculations require exhaustive testing" in analysis.risks


def test_analyze_modules(payment_code, plain_code):
    analysis = analyze_modules([
        ModuleSource(name="payments", code=payment_code),
        ModuleSource(name="math", code=plain_code),
    ])
    assert analysis.session_id == "local-analysis"
    assert [m.module_name for m in analysis.modules] == ["payments", "math"]
    assert analysis.overall_risk == "high"
    assert analysis.summary == (
        "Analyzed 2 modules. Overall risk: high. 1 modules need verification upgrades."
    )


def test_analyze_no_modules():
    analysis = analyze_modules([], session_id="empty")
    assert analysis.modules == []
    assert analysis.overall_risk == "low"


@pytest.fixture
def payments_analysis():
    return VerificationAnalysis(
        session_id="session-1",
        overall_risk="high",
        summary="One module.",
        modules=[
            ModuleAnalysis(
                module_name="payments",
                current_level=VerificationLevel.STATIC_TYPES,
                recommended_level=VerificationLevel.PROPERTY_BASED_TESTS,
                risks=["Financial calculations require exhaustive testing"],
                rationale="Handles money",
                estimated_effort=EffortEstimate.HIGH,
            )
        ],
    )


def test_coverage_report_layout(payments_analysis):
    assert generate_coverage_report(payments_analysis) == (
        "# Verification Coverage Report\n"
        "\n"
        "**Session ID:** session-1\n"
        "**Overall Risk:** HIGH\n"
        "\n"
        "## Module Analysis\n"
        "\n"
        "### payments\n"
        "\n"
        "- Current Level: 1 (Static types catch compile-time errors but miss runtime behavior)\n"
        "- Recommended Level: 5 (Property tests generate thousands of inputs to find edge cases)\n"
        "- Effort: high\n"
        "\n"
        "**Risks:**\n"
        "- Financial calculations require exhaustive testing\n"
        "\n"
        "**Rationale:** Handles money\n"
        "\n"
        "**Recommended Tools:**\n"
        "- fast-check\n"
        "- Hypothesis\n"
        "- QuickCheck\n"
        "\n"
        "## Summary\n"
        "\n"
        "One module."
    )


def test_coverage_report_renders_every_module_in_order():
    modules = [
        ModuleAnalysis(
            module_name=name,
            current_level=VerificationLevel.STATIC_TYPES,
            recommended_level=level,
            risks=[],
            rationale="",
            estimated_effort=estimate_effort(level),
        )
        for name, level in [
            ("zeta", VerificationLevel.FORMAL_VERIFICATION),
            ("alpha", VerificationLevel.STATIC_TYPES),
            ("alpha", VerificationLevel.UNIT_TESTS),
        ]
    ]
    report = generate_coverage_report(
        VerificationAnalysis(session_id="s", overall_risk="critical", modules=modules)
    )
    assert report.count("### ") == 3
    assert report.index("### zeta") < report.index("### alpha")
    assert "**Overall Risk:** CRITICAL" in report
    assert "- Z3" in report
    assert "**Risks:**\n\n**Rationale:**" in report


def test_overall_risk_label_is_free_text():
    report = generate_coverage_report(
        VerificationAnalysis(session_id="s", overall_risk="needs review")
    )
    assert "**Overall Risk:** NEEDS REVIEW" in report
    assert "## Module Analysis\n\n## Summary" in report


def test_custom_template(tmp_path, payments_analysis):
    template = tmp_path / "report.md.j2"
    template.write_text("{{ session_id }}:{% for m in modules %} {{ m.name }}={{ m.recommended_level }}{% endfor %}")
    generator = CoverageReportGenerator(template_path=template)
    assert generator.render(payments_analysis) == "session-1: payments=5"


def test_broken_template_raises_value_error(tmp_path, payments_analysis):
    template = tmp_path / "broken.md.j2"
    template.write_text("{% for m in modules %}")
    generator = CoverageReportGenerator(template_path=template)
    with pytest.raises(ValueError):
        generator.render(payments_analysis)


def test_analysis_feeds_report(payment_code):
    analysis = analyze_modules([ModuleSource(name="checkout", code=payment_code)])
    report = generate_coverage_report(analysis)
    assert "### checkout" in report
    assert "- Data persistence needs consistency verification" in report
    assert "1 modules need verification upgrades." in report

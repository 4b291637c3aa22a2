# ============================================================================
# tests/test_levels.py
# Verification ladder catalog
# ============================================================================

import logging

from verification_ladder.levels import (
    LevelRegistry,
    VerificationLevel,
    describe_level,
    get_level_registry,
    tooling_for,
)


def test_levels_are_totally_ordered():
    ordered = sorted(VerificationLevel)
    assert [level.value for level in ordered] == [1, 2, 3, 4, 5, 6]
    assert VerificationLevel.STATIC_TYPES < VerificationLevel.FORMAL_VERIFICATION


def test_every_level_is_described_and_tooled():
    for level in VerificationLevel:
        assert describe_level(level)
        assert tooling_for(level)


def test_descriptions():
    assert "compile-time" in describe_level(VerificationLevel.STATIC_TYPES)
    assert "boundaries" in describe_level(VerificationLevel.RUNTIME_VALIDATION)
    assert "mathematically proves" in describe_level(VerificationLevel.FORMAL_VERIFICATION)


def test_tooling():
    assert "mypy" in tooling_for(VerificationLevel.STATIC_TYPES)
    assert "pydantic" in tooling_for(VerificationLevel.RUNTIME_VALIDATION)
    assert "pytest" in tooling_for(VerificationLevel.UNIT_TESTS)
    assert "Playwright" in tooling_for(VerificationLevel.INTEGRATION_TESTS)
    assert "Hypothesis" in tooling_for(VerificationLevel.PROPERTY_BASED_TESTS)
    assert "TLA+" in tooling_for(VerificationLevel.FORMAL_VERIFICATION)


def test_plain_ints_are_accepted():
    assert describe_level(3) == describe_level(VerificationLevel.UNIT_TESTS)


def test_tooling_is_a_copy():
    tools = tooling_for(VerificationLevel.UNIT_TESTS)
    tools.append("nose")
    assert "nose" not in tooling_for(VerificationLevel.UNIT_TESTS)


def test_registry_lists_levels_in_order():
    registry = get_level_registry()
    assert registry.count() == 6
    assert [d.level for d in registry.list_all()] == list(VerificationLevel)
    summaries = registry.list_summaries()
    assert summaries[0].level == 1
    assert summaries[0].name == "Static Types"


def test_missing_catalog_falls_back_to_labels(tmp_path, caplog):
    registry = LevelRegistry(tmp_path)
    with caplog.at_level(logging.WARNING):
        assert registry.describe(VerificationLevel.PROPERTY_BASED_TESTS) == "Property Based Tests"
    assert registry.tools(VerificationLevel.PROPERTY_BASED_TESTS) == []
    assert "Level catalog not found" in caplog.text


def test_partial_catalog_is_reported(tmp_path, caplog):
    (tmp_path / "levels.yaml").write_text(
        "levels:\n"
        "  - level: 1\n"
        "    name: Static Types\n"
        "    description: Types only\n"
        "    tools: [mypy]\n"
    )
    registry = LevelRegistry(tmp_path)
    with caplog.at_level(logging.ERROR):
        assert registry.count() == 1
    assert "missing definitions" in caplog.text
    assert registry.describe(VerificationLevel.STATIC_TYPES) == "Types only"
    assert registry.describe(VerificationLevel.UNIT_TESTS) == "Unit Tests"

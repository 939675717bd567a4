"""Unit tests for RuleListGenerator."""

import pytest

from rule_doc_generator.domain.constants import BEGIN_RULE_LIST_MARKER, END_RULE_LIST_MARKER
from rule_doc_generator.domain.entities import ColumnType, RuleDetails
from rule_doc_generator.domain.errors import MissingRulesListMarkersError, UnknownColumnTypeError
from rule_doc_generator.infrastructure.services.rule_list import RuleListGenerator

DETAILS = [
    RuleDetails("no-foo", description="Disallow foo", fixable=True, deprecated=True),
    RuleDetails("no-bar", description="Disallow a|b", has_suggestions=True),
]
CONFIGS = {"recommended": frozenset({"no-bar"}), "all": frozenset({"no-foo", "no-bar"})}
ALL_COLUMNS = [c.value for c in ColumnType]


class TestRender:
    """Test table rendering."""

    def test_full_table(self) -> None:
        rendered = RuleListGenerator().render(DETAILS, CONFIGS, ALL_COLUMNS)
        assert rendered == "\n".join([
            "💼 Configurations enabled in.\\",
            "✅ Set in the `recommended` configuration.\\",
            "🔧 Automatically fixable by the `--fix` CLI option.\\",
            "💡 Manually fixable by editor suggestions.\\",
            "❌ Deprecated.",
            "",
            "| Name | Description | 💼 | 🔧 | 💡 | ❌ |",
            "| :-- | :-- | :-- | :-- | :-- | :-- |",
            "| [no-bar](docs/rules/no-bar.md) | Disallow a\\|b | `all` ✅ |  | 💡 |  |",
            "| [no-foo](docs/rules/no-foo.md) | Disallow foo | `all` | 🔧 |  | ❌ |",
        ])

    def test_ignored_config_and_column_selection(self) -> None:
        rendered = RuleListGenerator().render(
            DETAILS, CONFIGS, ["name", "configs"], ignore_config=["all"], url_configs="/configs")
        assert rendered == "\n".join([
            "💼 [Configurations](/configs) enabled in.\\",
            "✅ Set in the `recommended` configuration.",
            "",
            "| Name | 💼 |",
            "| :-- | :-- |",
            "| [no-bar](docs/rules/no-bar.md) | ✅ |",
            "| [no-foo](docs/rules/no-foo.md) |  |",
        ])

    def test_name_only_has_no_legend(self) -> None:
        rendered = RuleListGenerator().render(DETAILS, {}, ["name"])
        assert rendered.splitlines()[0] == "| Name |"


class TestUpdateRulesList:
    """Test splicing the table into a README."""

    def test_replaces_content_between_markers(self) -> None:
        readme = f"# Plugin\n\n{BEGIN_RULE_LIST_MARKER}\nstale table\n{END_RULE_LIST_MARKER}\n\nFooter.\n"
        generator = RuleListGenerator()
        updated = generator.update_rules_list(DETAILS, readme, CONFIGS, ["name"])
        assert "stale table" not in updated
        assert updated.startswith(f"# Plugin\n\n{BEGIN_RULE_LIST_MARKER}\n\n| Name |")
        assert updated.endswith(f"|\n\n{END_RULE_LIST_MARKER}\n\nFooter.\n")

    def test_update_is_idempotent(self) -> None:
        readme = f"{BEGIN_RULE_LIST_MARKER}{END_RULE_LIST_MARKER}"
        generator = RuleListGenerator()
        once = generator.update_rules_list(DETAILS, readme, CONFIGS, ALL_COLUMNS)
        assert generator.update_rules_list(DETAILS, once, CONFIGS, ALL_COLUMNS) == once

    def test_missing_markers_are_fatal(self) -> None:
        with pytest.raises(MissingRulesListMarkersError):
            RuleListGenerator().update_rules_list(DETAILS, "# Plugin\n", CONFIGS, ALL_COLUMNS)

    def test_markers_out_of_order_are_fatal(self) -> None:
        readme = f"{END_RULE_LIST_MARKER}\n{BEGIN_RULE_LIST_MARKER}\n"
        with pytest.raises(MissingRulesListMarkersError):
            RuleListGenerator().update_rules_list(DETAILS, readme, CONFIGS, ALL_COLUMNS)


class TestParseColumns:
    def test_none_selects_defaults(self) -> None:
        assert RuleListGenerator.parse_columns(None)[0] is ColumnType.NAME

    def test_unknown_column_is_fatal(self) -> None:
        with pytest.raises(UnknownColumnTypeError, match="Invalid rules list column: emoji"):
            RuleListGenerator.parse_columns(["name", "emoji"])

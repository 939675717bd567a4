"""Unit tests for NoticeComposer."""

import pytest

from rule_doc_generator.domain.constants import END_RULE_HEADER_MARKER
from rule_doc_generator.domain.entities import NoticeType, RuleDetails
from rule_doc_generator.domain.errors import UnknownNoticeTypeError
from rule_doc_generator.domain.notices import NoticeComposer

CONFIGS = {
    "recommended": frozenset({"no-bar", "no-baz"}),
    "strict": frozenset({"no-baz"}),
    "all": frozenset({"no-foo", "no-bar", "no-baz"}),
}


class TestApplicableNotices:
    """Test which notices apply to a rule."""

    def test_recommended_only_uses_the_recommended_notice(self) -> None:
        applies = NoticeComposer.applicable_notices(RuleDetails("no-bar"), ["recommended"])
        assert applies["config-recommended"] is True
        assert applies["configs"] is False

    def test_several_configs_use_the_configs_notice(self) -> None:
        applies = NoticeComposer.applicable_notices(RuleDetails("no-bar"), ["all", "recommended"])
        assert applies["configs"] is True
        assert applies["config-recommended"] is False

    def test_config_notices_are_exclusive(self) -> None:
        for enabled in ([], ["recommended"], ["strict"], ["all", "recommended"]):
            applies = NoticeComposer.applicable_notices(RuleDetails("x"), enabled)
            assert not (applies["configs"] and applies["config-recommended"])

    def test_no_configs_no_config_notice(self) -> None:
        applies = NoticeComposer.applicable_notices(RuleDetails("x"), [])
        assert applies["configs"] is False
        assert applies["config-recommended"] is False

    def test_flags_map_to_notices(self) -> None:
        rule = RuleDetails("x", fixable=True, has_suggestions=True, deprecated=True)
        applies = NoticeComposer.applicable_notices(rule, [])
        assert applies["fixable"] and applies["has-suggestions"] and applies["deprecated"]
        assert applies["requires-type-checking"] is False


class TestComposeNotices:
    """Test notice line rendering."""

    def test_deprecated_fixable_rule_in_all_config(self) -> None:
        rule = RuleDetails("no-foo", fixable=True, deprecated=True, replaced_by=("no-bar",))
        lines = NoticeComposer.compose_notices(rule, CONFIGS)
        assert lines == [
            "",
            "💼 This rule is enabled in the following configs: `all`.",
            "",
            "❌ This rule is deprecated. It was replaced by [no-bar](no-bar.md).",
            "",
            "🔧 This rule is automatically fixable by the `--fix` CLI option.",
        ]

    def test_deprecated_with_replacement_and_no_configs(self) -> None:
        rule = RuleDetails("no-foo", deprecated=True, replaced_by=("no-bar",))
        assert NoticeComposer.compose_notices(rule, {}) == [
            "",
            "❌ This rule is deprecated. It was replaced by [no-bar](no-bar.md).",
        ]

    def test_deprecated_without_replacement(self) -> None:
        lines = NoticeComposer.compose_notices(RuleDetails("old", deprecated=True), {})
        assert lines == ["", "❌ This rule is deprecated."]

    def test_recommended_only_rule(self) -> None:
        lines = NoticeComposer.compose_notices(RuleDetails("no-bar"), CONFIGS, ignore_config=["all"])
        assert lines == ["", "✅ This rule is enabled in the `recommended` config."]

    def test_ignored_configs_are_hidden(self) -> None:
        lines = NoticeComposer.compose_notices(RuleDetails("no-baz"), CONFIGS, ignore_config=["all"])
        assert lines == ["", "💼 This rule is enabled in the following configs: `recommended`, `strict`."]

    def test_url_configs_links_the_word(self) -> None:
        lines = NoticeComposer.compose_notices(
            RuleDetails("no-bar"), {"recommended": frozenset({"no-bar"})}, url_configs="https://x/configs")
        assert lines == ["", "✅ This rule is enabled in the `recommended` [config](https://x/configs)."]

    def test_url_configs_in_configs_notice(self) -> None:
        lines = NoticeComposer.compose_notices(RuleDetails("no-baz"), CONFIGS, url_configs="/configs")
        assert lines[1] == (
            "💼 This rule is enabled in the following [configs](/configs): `all`, `recommended`, `strict`."
        )

    def test_caller_order_is_kept(self) -> None:
        rule = RuleDetails("x", fixable=True, has_suggestions=True)
        lines = NoticeComposer.compose_notices(
            rule, {}, notices=(NoticeType.HAS_SUGGESTIONS, NoticeType.FIXABLE))
        assert lines[1].startswith("💡")
        assert lines[3].startswith("🔧")

    def test_unselected_notices_are_skipped(self) -> None:
        rule = RuleDetails("x", fixable=True, requires_type_checking=True)
        assert NoticeComposer.compose_notices(rule, {}) == [
            "",
            "🔧 This rule is automatically fixable by the `--fix` CLI option.",
        ]
        lines = NoticeComposer.compose_notices(
            rule, {}, notices=(NoticeType.REQUIRES_TYPE_CHECKING,))
        assert lines == ["", "💭 This rule requires type information."]

    def test_function_style_rule_has_no_notices(self) -> None:
        rule = RuleDetails("legacy", has_meta=False)
        assert NoticeComposer.compose_notices(rule, {"all": frozenset({"legacy"})}) == []


class TestHeaderLines:
    """Test the full generated header."""

    def test_header_ends_with_marker(self) -> None:
        rule = RuleDetails("no-bar", description="Disallow bar", has_suggestions=True)
        lines = NoticeComposer.header_lines(rule, {"recommended": frozenset({"no-bar"})}, "widgets")
        assert lines == [
            "# Disallow bar (`widgets/no-bar`)",
            "",
            "✅ This rule is enabled in the `recommended` config.",
            "",
            "💡 This rule is manually fixable by editor suggestions.",
            "",
            END_RULE_HEADER_MARKER,
        ]

    def test_header_without_notices(self) -> None:
        lines = NoticeComposer.header_lines(RuleDetails("legacy", has_meta=False), {}, "widgets")
        assert lines == ["# `widgets/legacy`", "", END_RULE_HEADER_MARKER]


class TestParseNotices:
    """Test notice name parsing."""

    def test_none_selects_defaults(self) -> None:
        assert NoticeType.REQUIRES_TYPE_CHECKING not in NoticeComposer.parse_notices(None)

    def test_duplicates_are_dropped(self) -> None:
        parsed = NoticeComposer.parse_notices(["fixable", "configs", "fixable"])
        assert parsed == (NoticeType.FIXABLE, NoticeType.CONFIGS)

    def test_unknown_notice_is_fatal(self) -> None:
        with pytest.raises(UnknownNoticeTypeError, match="Invalid rule doc notice: sparkles"):
            NoticeComposer.parse_notices(["configs", "sparkles"])

"""Rule doc header notices: which apply to a rule and how they read."""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

from rule_doc_generator.domain.configs import ConfigMembership
from rule_doc_generator.domain.constants import (
    EMOJI_CONFIG_RECOMMENDED,
    EMOJI_CONFIGS,
    EMOJI_DEPRECATED,
    EMOJI_FIXABLE,
    EMOJI_HAS_SUGGESTIONS,
    EMOJI_REQUIRES_TYPE_CHECKING,
    END_RULE_HEADER_MARKER,
    RECOMMENDED_CONFIG,
)
from rule_doc_generator.domain.entities import (
    DEFAULT_NOTICES,
    ConfigsToRules,
    NoticeType,
    RuleDetails,
)
from rule_doc_generator.domain.errors import UnknownNoticeTypeError
from rule_doc_generator.domain.title import TitleFormatter


@dataclass(frozen=True)
class NoticeContext:
    """Everything a notice needs to decide applicability and render itself."""
    rule: RuleDetails
    configs_enabled: tuple[str, ...]
    url_configs: Optional[str] = None

    def link_or_word(self, word: str) -> str:
        return f"[{word}]({self.url_configs})" if self.url_configs else word


@dataclass(frozen=True)
class NoticeSpec:
    """One row of the notice table."""
    kind: str
    notice_type: NoticeType
    applies: Callable[[NoticeContext], bool]
    render: Callable[[NoticeContext], str]


def _is_recommended_only(ctx: NoticeContext) -> bool:
    return ctx.configs_enabled == (RECOMMENDED_CONFIG,)


def _render_configs(ctx: NoticeContext) -> str:
    names = ConfigMembership.config_names_to_list(ctx.configs_enabled)
    return (
        f"{EMOJI_CONFIGS} This rule is enabled in the following "
        f"{ctx.link_or_word('configs')}: {names}."
    )


def _render_config_recommended(ctx: NoticeContext) -> str:
    return (
        f"{EMOJI_CONFIG_RECOMMENDED} This rule is enabled in the "
        f"`{RECOMMENDED_CONFIG}` {ctx.link_or_word('config')}."
    )


def _render_deprecated(ctx: NoticeContext) -> str:
    message = f"{EMOJI_DEPRECATED} This rule is deprecated."
    if ctx.rule.replaced_by:
        links = ", ".join(f"[{name}]({name}.md)" for name in ctx.rule.replaced_by)
        message += f" It was replaced by {links}."
    return message


# Canonical order. Both config rows answer to NoticeType.CONFIGS and never
# apply together.
NOTICE_TABLE: tuple[NoticeSpec, ...] = (
    NoticeSpec(
        kind="configs",
        notice_type=NoticeType.CONFIGS,
        applies=lambda ctx: bool(ctx.configs_enabled) and not _is_recommended_only(ctx),
        render=_render_configs,
    ),
    NoticeSpec(
        kind="config-recommended",
        notice_type=NoticeType.CONFIGS,
        applies=_is_recommended_only,
        render=_render_config_recommended,
    ),
    NoticeSpec(
        kind="deprecated",
        notice_type=NoticeType.DEPRECATED,
        applies=lambda ctx: ctx.rule.deprecated,
        render=_render_deprecated,
    ),
    NoticeSpec(
        kind="fixable",
        notice_type=NoticeType.FIXABLE,
        applies=lambda ctx: ctx.rule.fixable,
        render=lambda ctx: (
            f"{EMOJI_FIXABLE} This rule is automatically fixable by the `--fix` CLI option."
        ),
    ),
    NoticeSpec(
        kind="has-suggestions",
        notice_type=NoticeType.HAS_SUGGESTIONS,
        applies=lambda ctx: ctx.rule.has_suggestions,
        render=lambda ctx: (
            f"{EMOJI_HAS_SUGGESTIONS} This rule is manually fixable by editor suggestions."
        ),
    ),
    NoticeSpec(
        kind="requires-type-checking",
        notice_type=NoticeType.REQUIRES_TYPE_CHECKING,
        applies=lambda ctx: ctx.rule.requires_type_checking,
        render=lambda ctx: (
            f"{EMOJI_REQUIRES_TYPE_CHECKING} This rule requires type information."
        ),
    ),
)


class NoticeComposer:
    """Computes and renders the notices of a rule doc header."""

    @staticmethod
    def parse_notices(values: Optional[Iterable[str]]) -> tuple[NoticeType, ...]:
        """Map notice names to NoticeType, keeping caller order. None selects the defaults."""
        if values is None:
            return DEFAULT_NOTICES
        parsed: list[NoticeType] = []
        for value in values:
            try:
                notice_type = NoticeType(value.strip())
            except ValueError:
                choices = ", ".join(n.value for n in NoticeType)
                raise UnknownNoticeTypeError(
                    f"Invalid rule doc notice: {value} (choices: {choices})"
                ) from None
            if notice_type not in parsed:
                parsed.append(notice_type)
        return tuple(parsed)

    @staticmethod
    def applicable_notices(
        rule: RuleDetails,
        configs_enabled: Sequence[str],
        url_configs: Optional[str] = None,
    ) -> dict[str, bool]:
        """Return the ordered notice-kind -> applicability mapping for a rule."""
        ctx = NoticeContext(rule, tuple(configs_enabled), url_configs)
        return {spec.kind: spec.applies(ctx) for spec in NOTICE_TABLE}

    @staticmethod
    def compose_notices(
        rule: RuleDetails,
        configs_to_rules: ConfigsToRules,
        ignore_config: Iterable[str] = (),
        url_configs: Optional[str] = None,
        notices: Sequence[NoticeType] = DEFAULT_NOTICES,
    ) -> list[str]:
        """
        Build the notice lines for a rule: a blank line, then the message,
        for each applicable notice in the order given by `notices`.
        """
        if not rule.has_meta:
            return []

        configs_enabled = ConfigMembership.configs_for_rule(
            rule.name, configs_to_rules, ignore_config)
        ctx = NoticeContext(rule, tuple(configs_enabled), url_configs)

        lines: list[str] = []
        for notice_type in notices:
            for spec in NOTICE_TABLE:
                if spec.notice_type is notice_type and spec.applies(ctx):
                    lines.append("")
                    lines.append(spec.render(ctx))
        return lines

    @staticmethod
    def header_lines(
        rule: RuleDetails,
        configs_to_rules: ConfigsToRules,
        plugin_prefix: str,
        ignore_config: Iterable[str] = (),
        title_format: Optional[str] = None,
        url_configs: Optional[str] = None,
        notices: Sequence[NoticeType] = DEFAULT_NOTICES,
    ) -> list[str]:
        """Full generated header: title, notices, a blank line and the marker."""
        return [
            TitleFormatter.format_title(
                rule.name, rule.description, plugin_prefix, title_format),
            *NoticeComposer.compose_notices(
                rule, configs_to_rules, ignore_config, url_configs, notices),
            "",
            END_RULE_HEADER_MARKER,
        ]

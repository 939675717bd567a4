"""Rule List Generator - render the README rules table between its markers."""

from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from rule_doc_generator.domain.configs import ConfigMembership
from rule_doc_generator.domain.constants import (
    BEGIN_RULE_LIST_MARKER,
    DOCS_RULES_DIR,
    EMOJI_CONFIG_RECOMMENDED,
    EMOJI_CONFIGS,
    EMOJI_DEPRECATED,
    EMOJI_FIXABLE,
    EMOJI_HAS_SUGGESTIONS,
    EMOJI_REQUIRES_TYPE_CHECKING,
    END_RULE_LIST_MARKER,
    RECOMMENDED_CONFIG,
)
from rule_doc_generator.domain.entities import (
    DEFAULT_COLUMNS,
    ColumnType,
    ConfigsToRules,
    RuleDetails,
)
from rule_doc_generator.domain.errors import (
    MissingRulesListMarkersError,
    UnknownColumnTypeError,
)
from rule_doc_generator.domain.protocols import RuleListProtocol

COLUMN_HEADERS: dict[ColumnType, str] = {
    ColumnType.NAME: "Name",
    ColumnType.DESCRIPTION: "Description",
    ColumnType.CONFIGS: EMOJI_CONFIGS,
    ColumnType.FIXABLE: EMOJI_FIXABLE,
    ColumnType.HAS_SUGGESTIONS: EMOJI_HAS_SUGGESTIONS,
    ColumnType.REQUIRES_TYPE_CHECKING: EMOJI_REQUIRES_TYPE_CHECKING,
    ColumnType.DEPRECATED: EMOJI_DEPRECATED,
}

LEGENDS: dict[ColumnType, str] = {
    ColumnType.FIXABLE: f"{EMOJI_FIXABLE} Automatically fixable by the `--fix` CLI option.",
    ColumnType.HAS_SUGGESTIONS: f"{EMOJI_HAS_SUGGESTIONS} Manually fixable by editor suggestions.",
    ColumnType.REQUIRES_TYPE_CHECKING: f"{EMOJI_REQUIRES_TYPE_CHECKING} Requires type information.",
    ColumnType.DEPRECATED: f"{EMOJI_DEPRECATED} Deprecated.",
}


class RuleListGenerator(RuleListProtocol):
    """Builds the legend and table of all rules for the README."""

    @staticmethod
    def parse_columns(values: Optional[Iterable[str]]) -> tuple[ColumnType, ...]:
        if values is None:
            return DEFAULT_COLUMNS
        parsed: list[ColumnType] = []
        for value in values:
            try:
                column = ColumnType(value.strip())
            except ValueError:
                choices = ", ".join(c.value for c in ColumnType)
                raise UnknownColumnTypeError(
                    f"Invalid rules list column: {value} (choices: {choices})"
                ) from None
            if column not in parsed:
                parsed.append(column)
        return tuple(parsed)

    @staticmethod
    def escape_cell(text: str) -> str:
        return text.replace("|", "\\|").replace("\n", " ")

    def _cell_builders(
        self,
        configs_to_rules: ConfigsToRules,
        ignore_config: Sequence[str],
    ) -> dict[ColumnType, Callable[[RuleDetails], str]]:
        def configs_cell(rule: RuleDetails) -> str:
            names = ConfigMembership.configs_for_rule(rule.name, configs_to_rules, ignore_config)
            return " ".join(
                EMOJI_CONFIG_RECOMMENDED if name == RECOMMENDED_CONFIG else f"`{name}`"
                for name in names
            )

        return {
            ColumnType.NAME: lambda rule: f"[{rule.name}]({DOCS_RULES_DIR}/{rule.name}.md)",
            ColumnType.DESCRIPTION: lambda rule: self.escape_cell(rule.description or ""),
            ColumnType.CONFIGS: configs_cell,
            ColumnType.FIXABLE: lambda rule: EMOJI_FIXABLE if rule.fixable else "",
            ColumnType.HAS_SUGGESTIONS: lambda rule: EMOJI_HAS_SUGGESTIONS if rule.has_suggestions else "",
            ColumnType.REQUIRES_TYPE_CHECKING: (
                lambda rule: EMOJI_REQUIRES_TYPE_CHECKING if rule.requires_type_checking else ""
            ),
            ColumnType.DEPRECATED: lambda rule: EMOJI_DEPRECATED if rule.deprecated else "",
        }

    def render(
        self,
        details: Sequence[RuleDetails],
        configs_to_rules: ConfigsToRules,
        columns: Sequence[str],
        ignore_config: Sequence[str] = (),
        url_configs: Optional[str] = None,
    ) -> str:
        """Render legend plus table. Columns without any populated cell are hidden."""
        builders = self._cell_builders(configs_to_rules, ignore_config)
        rules = sorted(details, key=lambda rule: rule.name)
        requested = self.parse_columns(columns)

        rows = {column: [builders[column](rule) for rule in rules] for column in requested}
        visible = [
            column for column in requested
            if column is ColumnType.NAME or any(rows[column])
        ]

        legend: list[str] = []
        if ColumnType.CONFIGS in visible:
            configurations = f"[Configurations]({url_configs})" if url_configs else "Configurations"
            legend.append(f"{EMOJI_CONFIGS} {configurations} enabled in.")
            if any(EMOJI_CONFIG_RECOMMENDED in cell for cell in rows[ColumnType.CONFIGS]):
                legend.append(f"{EMOJI_CONFIG_RECOMMENDED} Set in the `{RECOMMENDED_CONFIG}` configuration.")
        legend.extend(LEGENDS[column] for column in visible if column in LEGENDS)

        table = [
            "| " + " | ".join(COLUMN_HEADERS[column] for column in visible) + " |",
            "| " + " | ".join(":--" for _ in visible) + " |",
        ]
        for index in range(len(rules)):
            table.append("| " + " | ".join(rows[column][index] for column in visible) + " |")

        blocks = []
        if legend:
            blocks.append("\\\n".join(legend))
        blocks.append("\n".join(table))
        return "\n\n".join(blocks)

    def update_rules_list(
        self,
        details: Sequence[RuleDetails],
        readme: str,
        configs_to_rules: ConfigsToRules,
        columns: Sequence[str],
        ignore_config: Sequence[str] = (),
        url_configs: Optional[str] = None,
    ) -> str:
        begin = readme.find(BEGIN_RULE_LIST_MARKER)
        end = readme.find(END_RULE_LIST_MARKER)
        if begin == -1 or end == -1 or end < begin:
            raise MissingRulesListMarkersError(
                f"README.md is missing rules list markers: {BEGIN_RULE_LIST_MARKER} "
                f"and {END_RULE_LIST_MARKER}"
            )

        rendered = self.render(details, configs_to_rules, columns, ignore_config, url_configs)
        before = readme[:begin + len(BEGIN_RULE_LIST_MARKER)]
        after = readme[end:]
        return f"{before}\n\n{rendered}\n\n{after}"

"""Rule doc title line rendering."""

from typing import Optional

from rule_doc_generator.domain.entities import DEFAULT_TITLE_FORMAT, TitleFormat
from rule_doc_generator.domain.errors import UnknownTitleFormatError


class TitleFormatter:
    """Renders the level-1 title of a rule doc."""

    @staticmethod
    def parse_format(value: Optional[str]) -> TitleFormat:
        """Map a format name to TitleFormat. None selects the default."""
        if value is None:
            return DEFAULT_TITLE_FORMAT
        try:
            return TitleFormat(value)
        except ValueError:
            choices = ", ".join(f.value for f in TitleFormat)
            raise UnknownTitleFormatError(
                f"Unhandled rule doc title format: {value} (choices: {choices})"
            ) from None

    @staticmethod
    def to_sentence_case(text: str) -> str:
        if not text:
            return text
        return text[0].upper() + text[1:].lower()

    @staticmethod
    def remove_trailing_period(text: str) -> str:
        return text[:-1] if text.endswith(".") else text

    @staticmethod
    def format_title(
        name: str,
        description: Optional[str],
        plugin_prefix: str,
        title_format: Optional[str] = None,
    ) -> str:
        """
        Build the title line for a rule doc.

        Description-based formats fall back to prefix-name when the rule has
        no description.
        """
        chosen = TitleFormatter.parse_format(title_format)
        if chosen.needs_description and not description:
            chosen = TitleFormat.PREFIX_NAME

        desc = TitleFormatter.remove_trailing_period(
            TitleFormatter.to_sentence_case(description or ""))

        if chosen is TitleFormat.DESC:
            return f"# {desc}"
        if chosen is TitleFormat.DESC_PARENS_NAME:
            return f"# {desc} (`{name}`)"
        if chosen is TitleFormat.DESC_PARENS_PREFIX_NAME:
            return f"# {desc} (`{plugin_prefix}/{name}`)"
        if chosen is TitleFormat.NAME:
            return f"# `{name}`"
        return f"# `{plugin_prefix}/{name}`"

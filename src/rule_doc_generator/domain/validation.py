"""Structural policy checks on a rule doc body. Problems become Diagnostics, never exceptions."""

from collections.abc import Iterable, Sequence

from rule_doc_generator.domain.constants import OPTIONS_SECTION_HEADERS
from rule_doc_generator.domain.entities import Diagnostic, RuleDetails
from rule_doc_generator.domain.markdown import MarkdownSections
from rule_doc_generator.domain.rule_options import RuleOptions


class RuleDocValidator:
    """Validates one rule doc against the section and options policy."""

    def __init__(
        self,
        required_sections: Iterable[str] = (),
        forbidden_sections: Iterable[str] = (),
        check_options_section: bool = True,
    ) -> None:
        self.required_sections = tuple(required_sections)
        self.forbidden_sections = tuple(forbidden_sections)
        self.check_options_section = check_options_section

    def validate(self, rule: RuleDetails, contents: str) -> list[Diagnostic]:
        """
        Check a rule doc's original (pre-merge) contents.

        Required sections must be present, forbidden ones absent. An options
        section is expected exactly when the schema has options, and every
        named option must be mentioned somewhere in the doc.
        """
        diagnostics: list[Diagnostic] = []

        for section in self.required_sections:
            diagnostics.extend(
                self.expect_section_header(rule.name, contents, [section], True))

        for section in self.forbidden_sections:
            diagnostics.extend(
                self.expect_section_header(rule.name, contents, [section], False))

        if self.check_options_section:
            diagnostics.extend(
                self.expect_section_header(
                    rule.name,
                    contents,
                    OPTIONS_SECTION_HEADERS,
                    RuleOptions.has_options(rule.schema),
                )
            )

        for option_name in RuleOptions.named_options(rule.schema):
            diagnostics.extend(
                self.expect_content(rule.name, contents, option_name, True))

        return diagnostics

    @staticmethod
    def expect_content(
        rule_name: str, contents: str, content: str, expected: bool
    ) -> list[Diagnostic]:
        """Ensure the doc contains (or lacks) a literal piece of text."""
        if (content in contents) == expected:
            return []
        should = "should" if expected else "should not"
        return [Diagnostic(rule_name, f"`{rule_name}` rule doc {should} have included: {content}")]

    @staticmethod
    def expect_section_header(
        rule_name: str,
        contents: str,
        possible_headers: Sequence[str],
        expected: bool,
    ) -> list[Diagnostic]:
        """Ensure one of the headers is present (or none is)."""
        found = any(
            MarkdownSections.find_section_header(contents, header) is not None
            for header in possible_headers
        )
        if found == expected:
            return []

        should = "should" if expected else "should not"
        headers = ", ".join(possible_headers)
        if len(possible_headers) > 1:
            which = "one" if expected else "any"
            message = f"`{rule_name}` rule doc {should} have included {which} of these headers: {headers}"
        else:
            message = f"`{rule_name}` rule doc {should} have included the header: {headers}"
        return [Diagnostic(rule_name, message)]

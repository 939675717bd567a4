"""Unit tests for TerminalGenerationReporter."""

from unittest.mock import Mock

from rule_doc_generator.domain.entities import Diagnostic, GenerationResult
from rule_doc_generator.infrastructure.reporters import TerminalGenerationReporter


class TestTerminalGenerationReporter:
    """Test the end-of-run summary."""

    def test_updated_files(self) -> None:
        telemetry = Mock()
        TerminalGenerationReporter(telemetry).report(GenerationResult(written_paths=["a.md", "README.md"]))
        telemetry.step.assert_called_once_with("Updated 2 file(s).")

    def test_no_changes(self) -> None:
        reporter = TerminalGenerationReporter(Mock())
        assert reporter.summary_lines(GenerationResult()) == ["No changes."]

    def test_check_mode_up_to_date(self) -> None:
        reporter = TerminalGenerationReporter(Mock())
        assert reporter.summary_lines(GenerationResult(), check=True) == ["All docs are up to date."]

    def test_check_mode_stale_is_a_warning(self) -> None:
        telemetry = Mock()
        TerminalGenerationReporter(telemetry).report(GenerationResult(stale_paths=["README.md"]), check=True)
        telemetry.warning.assert_called_once_with("1 file(s) out of date.")
        telemetry.step.assert_not_called()

    def test_diagnostics_are_summarized_by_rule(self) -> None:
        result = GenerationResult(diagnostics=[
            Diagnostic("no-foo", "a"),
            Diagnostic("no-bar", "b"),
            Diagnostic("no-foo", "c"),
        ])
        lines = TerminalGenerationReporter(Mock()).summary_lines(result)
        assert lines == ["No changes.", "3 rule doc problem(s) in: no-bar, no-foo"]

    def test_fatal_error(self) -> None:
        reporter = TerminalGenerationReporter(Mock())
        assert reporter.summary_lines(GenerationResult(fatal_error="boom")) == ["Generation aborted."]

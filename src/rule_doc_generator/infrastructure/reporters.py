"""Terminal reporter for generation results."""

from rule_doc_generator.domain.entities import GenerationResult
from rule_doc_generator.domain.protocols import TelemetryPort
from rule_doc_generator.interface.reporters import GenerationReporter


class TerminalGenerationReporter(GenerationReporter):
    """Prints a one-block summary after the per-file lines the use case emitted."""

    def __init__(self, telemetry: TelemetryPort) -> None:
        self.telemetry = telemetry

    def summary_lines(self, result: GenerationResult, check: bool = False) -> list[str]:
        lines: list[str] = []
        if result.has_fatal_error:
            lines.append("Generation aborted.")
            return lines
        if check:
            if result.stale_paths:
                lines.append(f"{len(result.stale_paths)} file(s) out of date.")
            else:
                lines.append("All docs are up to date.")
        elif result.written_paths:
            lines.append(f"Updated {len(result.written_paths)} file(s).")
        else:
            lines.append("No changes.")
        if result.diagnostics:
            rules = sorted({d.rule_name for d in result.diagnostics})
            lines.append(
                f"{len(result.diagnostics)} rule doc problem(s) in: {', '.join(rules)}")
        return lines

    def report(self, result: GenerationResult, check: bool = False) -> None:
        for line in self.summary_lines(result, check):
            if result.failed:
                self.telemetry.warning(line)
            else:
                self.telemetry.step(line)

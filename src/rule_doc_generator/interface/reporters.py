"""Protocol for generation reporting - no infrastructure imports."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from rule_doc_generator.domain.entities import GenerationResult


class GenerationReporter(Protocol):
    """Protocol for reporting the outcome of a generation run."""

    def report(self, result: "GenerationResult", check: bool = False) -> None:
        """Summarize the run: updated files, stale files, diagnostics, fatal error."""
        ...

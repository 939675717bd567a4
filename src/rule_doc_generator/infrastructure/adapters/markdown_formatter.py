"""Markdown formatter adapter - pipe generated docs through an external formatter."""

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from rule_doc_generator.domain.errors import FormatterError
from rule_doc_generator.domain.protocols import MarkdownFormatterProtocol

logger = logging.getLogger(__name__)


class MarkdownFormatterAdapter(MarkdownFormatterProtocol):
    """
    Runs a formatter command (e.g. ``mdformat -``) reading stdin, writing stdout.

    The command runs in the target file's directory so the formatter can
    discover its own style config. With no command, text passes through.
    """

    def __init__(self, command: Sequence[str] = (), timeout: int = 60) -> None:
        self.command = tuple(command)
        self.timeout = timeout

    def format(self, text: str, file_path: str) -> str:
        if not self.command:
            return text

        logger.debug("Formatting %s with %s", file_path, " ".join(self.command))
        try:
            result = subprocess.run(
                list(self.command),
                input=text,
                capture_output=True,
                text=True,
                cwd=str(Path(file_path).parent),
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise FormatterError(f"Markdown formatter not found: {self.command[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise FormatterError(
                f"Markdown formatter timed out after {self.timeout}s on {file_path}") from exc

        if result.returncode != 0:
            raise FormatterError(
                f"Markdown formatter failed on {file_path} "
                f"(exit {result.returncode}): {result.stderr.strip()}"
            )
        return result.stdout

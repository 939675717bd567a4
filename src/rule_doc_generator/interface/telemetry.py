"""Console telemetry: progress and status lines on the terminal."""

import os

import typer

from rule_doc_generator.domain.protocols import TelemetryPort


class ConsoleTelemetry(TelemetryPort):
    """Implements TelemetryPort with typer.secho. Honors NO_COLOR."""

    def __init__(self, name: str, color: str = "cyan", welcome: str = "") -> None:
        self.name = name
        self.color = color
        self.welcome = welcome
        self.use_color = not os.getenv("NO_COLOR")

    def _emit(self, message: str, color: str | None = None, err: bool = False) -> None:
        typer.secho(message, fg=color if self.use_color else None, err=err)

    def handshake(self) -> None:
        label = typer.style(f"[{self.name}]", fg=self.color, bold=True) if self.use_color else f"[{self.name}]"
        typer.echo(f"{label} {self.welcome}".rstrip())

    def step(self, message: str) -> None:
        self._emit(message)

    def warning(self, message: str) -> None:
        self._emit(f"WARNING: {message}", typer.colors.YELLOW, err=True)

    def error(self, message: str) -> None:
        self._emit(f"ERROR: {message}", typer.colors.RED, err=True)

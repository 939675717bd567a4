from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from rule_doc_generator.domain.entities import (
        ColumnType,
        ConfigsToRules,
        Plugin,
        RuleDetails,
    )


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read text content from a file."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        ...

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        ...

    def relative_to(self, path: str, root: str) -> str:
        """Return path relative to root for display."""
        ...


class PluginLoaderProtocol(Protocol):
    """Loads a plugin's rule registry and config presets from a filesystem path."""

    def load(self, path: str) -> "Plugin":
        """Raise PluginLoadError when the path is not a loadable plugin."""
        ...


class ConfigResolverProtocol(Protocol):
    """Flattens config inheritance into the config -> rule names mapping."""

    def resolve(self, plugin: "Plugin") -> "ConfigsToRules":
        ...


class RuleListProtocol(Protocol):
    """Renders the README rules list."""

    def parse_columns(self, values: Optional[Sequence[str]]) -> tuple["ColumnType", ...]:
        """Raise UnknownColumnTypeError for unsupported column names."""
        ...

    def update_rules_list(
        self,
        details: Sequence["RuleDetails"],
        readme: str,
        configs_to_rules: "ConfigsToRules",
        columns: Sequence[str],
        ignore_config: Sequence[str] = (),
        url_configs: Optional[str] = None,
    ) -> str:
        """Return README contents with the rules list replaced."""
        ...


class MarkdownFormatterProtocol(Protocol):
    """Pretty-prints markdown. The path is used for style-config discovery."""

    def format(self, text: str, file_path: str) -> str: ...

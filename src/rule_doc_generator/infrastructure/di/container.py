from typing import TYPE_CHECKING, Any, Optional, Sequence, cast

from rule_doc_generator.infrastructure.adapters.markdown_formatter import (
    MarkdownFormatterAdapter,
)
from rule_doc_generator.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from rule_doc_generator.infrastructure.gateways.plugin_loader import PluginLoaderGateway
from rule_doc_generator.infrastructure.reporters import TerminalGenerationReporter
from rule_doc_generator.infrastructure.services.config_resolution import ConfigResolver
from rule_doc_generator.infrastructure.services.rule_list import RuleListGenerator
from rule_doc_generator.interface.telemetry import ConsoleTelemetry

if TYPE_CHECKING:
    from rule_doc_generator.domain.protocols import (
        ConfigResolverProtocol,
        FileSystemProtocol,
        MarkdownFormatterProtocol,
        PluginLoaderProtocol,
        RuleListProtocol,
        TelemetryPort,
    )
    from rule_doc_generator.interface.reporters import GenerationReporter


class RuleDocsContainer:
    """Dependency Injection Container for the rule doc generator."""

    _instance: Optional["RuleDocsContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        telemetry = ConsoleTelemetry("RULE-DOCS", "cyan", "Generating rule docs")
        self.register_singleton("TelemetryPort", telemetry)
        self.register_singleton("FileSystemGateway", FileSystemGateway())
        self.register_singleton("PluginLoaderGateway", PluginLoaderGateway())
        self.register_singleton("ConfigResolver", ConfigResolver())
        self.register_singleton("RuleListGenerator", RuleListGenerator())
        self.register_singleton("GenerationReporter", TerminalGenerationReporter(telemetry))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_plugin_loader(self) -> "PluginLoaderProtocol":
        return cast("PluginLoaderProtocol", self.get("PluginLoaderGateway"))

    def get_config_resolver(self) -> "ConfigResolverProtocol":
        return cast("ConfigResolverProtocol", self.get("ConfigResolver"))

    def get_rule_list(self) -> "RuleListProtocol":
        return cast("RuleListProtocol", self.get("RuleListGenerator"))

    def get_reporter(self) -> "GenerationReporter":
        return cast("GenerationReporter", self.get("GenerationReporter"))

    def make_formatter(self, command: Sequence[str]) -> "MarkdownFormatterProtocol":
        """Build the markdown formatter for one run; the command comes from the plugin's config."""
        return MarkdownFormatterAdapter(command=command)

    @classmethod
    def get_instance(cls) -> "RuleDocsContainer":
        """Return the process-wide container, creating it on first use."""
        if cls._instance is None:
            cls._instance = RuleDocsContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide container (tests)."""
        cls._instance = None

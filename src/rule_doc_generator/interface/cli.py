"""CLI entry points for rule-docs - Thin Controller using Typer."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

import typer

from rule_doc_generator.domain.protocols import (
    ConfigResolverProtocol,
    FileSystemProtocol,
    MarkdownFormatterProtocol,
    PluginLoaderProtocol,
    RuleListProtocol,
    TelemetryPort,
)
from rule_doc_generator.infrastructure.config_file_loader import ConfigFileLoader
from rule_doc_generator.interface.reporters import GenerationReporter
from rule_doc_generator.use_cases.generate_docs import GenerateDocsUseCase

PACKAGE_NAME = "rule-doc-generator"


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    filesystem: FileSystemProtocol
    plugin_loader: PluginLoaderProtocol
    config_resolver: ConfigResolverProtocol
    rule_list: RuleListProtocol
    reporter: GenerationReporter
    formatter_factory: Callable[[Sequence[str]], MarkdownFormatterProtocol]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def split_csv(value: str | None) -> list[str] | None:
        """'a, b' -> ['a', 'b']; None stays None so file config applies."""
        if value is None:
            return None
        return [item.strip() for item in value.split(",") if item.strip()]

    @staticmethod
    def or_none(values: list[str] | None) -> list[str] | None:
        """Repeatable options default to []; treat that as unset."""
        return values or None

    @staticmethod
    def package_version() -> str:
        try:
            return version(PACKAGE_NAME)
        except PackageNotFoundError:
            return "unknown"

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="rule-docs",
            help="Generate and check the docs of a lint plugin's rules. Run 'rule-docs generate' in the plugin root.",
            add_completion=False,
        )

        def _print_version(value: bool) -> None:
            if value:
                typer.echo(CLIAppFactory.package_version())
                raise typer.Exit()

        @app.callback()
        def main_callback(
            show_version: bool = typer.Option(
                False, "--version", callback=_print_version, is_eager=True, help="Show the version and exit"),
        ) -> None:
            """Rule doc generator for lint plugins."""

        @app.command()
        def generate(
            path: Path | None = typer.Argument(None, help="Plugin root (default: current directory)"),  # noqa: B008, RUF100
            check: bool = typer.Option(
                False, "--check", help="Write nothing; fail if any doc or the README is out of date"),
            ignore_config: list[str] = typer.Option(  # noqa: B008, RUF100
                [], "--ignore-config", help="Config to leave out of notices and the rules list (repeatable)"),
            ignore_deprecated_rules: bool = typer.Option(
                False, "--ignore-deprecated-rules", help="Skip deprecated rules entirely"),
            rule_doc_notices: str | None = typer.Option(
                None, "--rule-doc-notices", help="Comma-separated notices to show, in order"),
            rule_doc_section_include: list[str] = typer.Option(  # noqa: B008, RUF100
                [], "--rule-doc-section-include", help="Section every rule doc must have (repeatable)"),
            rule_doc_section_exclude: list[str] = typer.Option(  # noqa: B008, RUF100
                [], "--rule-doc-section-exclude", help="Section no rule doc may have (repeatable)"),
            rule_doc_section_options: bool | None = typer.Option(
                None,
                "--rule-doc-section-options/--no-rule-doc-section-options",
                help="Require an Options section for rules with options",
            ),
            rule_doc_title_format: str | None = typer.Option(
                None, "--rule-doc-title-format", help="Title format, e.g. desc-parens-prefix-name"),
            rule_list_columns: str | None = typer.Option(
                None, "--rule-list-columns", help="Comma-separated README rules list columns, in order"),
            url_configs: str | None = typer.Option(
                None, "--url-configs", help="Link target for the word 'configs' in notices"),
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
        ) -> None:
            """Regenerate every rule doc header and the README rules list."""
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )
            deps.telemetry.handshake()
            target_path = str(path) if path else "."

            settings = ConfigFileLoader.load(target_path)
            options = settings.to_generation_options(
                rule_doc_section_include=CLIAppFactory.or_none(rule_doc_section_include),
                rule_doc_section_exclude=CLIAppFactory.or_none(rule_doc_section_exclude),
                rule_doc_section_options=rule_doc_section_options,
                rule_doc_title_format=rule_doc_title_format,
                rule_doc_notices=CLIAppFactory.split_csv(rule_doc_notices),
                rule_list_columns=CLIAppFactory.split_csv(rule_list_columns),
                ignore_config=CLIAppFactory.or_none(ignore_config),
                ignore_deprecated_rules=True if ignore_deprecated_rules else None,
                url_configs=url_configs,
                check=check,
            )

            use_case = GenerateDocsUseCase(
                plugin_loader=deps.plugin_loader,
                config_resolver=deps.config_resolver,
                rule_list=deps.rule_list,
                formatter=deps.formatter_factory(settings.formatter),
                filesystem=deps.filesystem,
                telemetry=deps.telemetry,
            )
            result = use_case.execute(target_path, options)
            deps.reporter.report(result, check=check)

            if result.failed:
                sys.exit(1)
            sys.exit(0)

        return app

"""Use Case: Generate Docs - regenerate rule doc headers and the README rules list."""

from dataclasses import dataclass, field

from rule_doc_generator.domain.constants import (
    DOCS_RULES_DIR,
    END_RULE_HEADER_MARKER,
    README_FILE,
)
from rule_doc_generator.domain.entities import (
    ConfigsToRules,
    Diagnostic,
    GenerationOptions,
    GenerationResult,
    NoticeType,
    Plugin,
    RuleDetails,
)
from rule_doc_generator.domain.errors import (
    MissingReadmeError,
    MissingRuleDocError,
    PluginLoadError,
    RuleDocGeneratorError,
)
from rule_doc_generator.domain.markdown import MarkdownSections
from rule_doc_generator.domain.notices import NoticeComposer
from rule_doc_generator.domain.protocols import (
    ConfigResolverProtocol,
    FileSystemProtocol,
    MarkdownFormatterProtocol,
    PluginLoaderProtocol,
    RuleListProtocol,
    TelemetryPort,
)
from rule_doc_generator.domain.rule_details import RuleDetailsExtractor
from rule_doc_generator.domain.title import TitleFormatter
from rule_doc_generator.domain.validation import RuleDocValidator


@dataclass
class _RunState:
    """Mutable accumulator for one run; frozen into a GenerationResult at the end."""
    diagnostics: list[Diagnostic] = field(default_factory=list)
    written_paths: list[str] = field(default_factory=list)
    stale_paths: list[str] = field(default_factory=list)

    def to_result(self, fatal_error: str | None = None) -> GenerationResult:
        return GenerationResult(
            diagnostics=list(self.diagnostics),
            fatal_error=fatal_error,
            written_paths=list(self.written_paths),
            stale_paths=list(self.stale_paths),
        )


class GenerateDocsUseCase:
    """Orchestrate header synthesis, merge and validation for every rule doc, then the README."""

    def __init__(
        self,
        plugin_loader: PluginLoaderProtocol,
        config_resolver: ConfigResolverProtocol,
        rule_list: RuleListProtocol,
        formatter: MarkdownFormatterProtocol,
        filesystem: FileSystemProtocol,
        telemetry: TelemetryPort,
    ) -> None:
        self.plugin_loader = plugin_loader
        self.config_resolver = config_resolver
        self.rule_list = rule_list
        self.formatter = formatter
        self.filesystem = filesystem
        self.telemetry = telemetry

    def execute(self, path: str, options: GenerationOptions | None = None) -> GenerationResult:
        """
        Run the full generation sequence for the plugin at `path`.

        Fatal errors stop the run and are returned in `fatal_error`; doc
        validation problems are collected as diagnostics and never stop it.

        Args:
            path: Plugin root (the directory holding pyproject.toml).
            options: Policy inputs; defaults when omitted.

        Returns:
            GenerationResult with diagnostics, written and stale paths.
        """
        options = options or GenerationOptions()
        state = _RunState()
        try:
            self._run(path, options, state)
        except RuleDocGeneratorError as exc:
            self.telemetry.error(str(exc))
            return state.to_result(fatal_error=str(exc))
        return state.to_result()

    def _run(self, path: str, options: GenerationOptions, state: _RunState) -> None:
        # Reject bad policy values before touching any file.
        notices = NoticeComposer.parse_notices(options.rule_doc_notices)
        TitleFormatter.parse_format(options.rule_doc_title_format)
        self.rule_list.parse_columns(options.rule_list_columns)

        self.telemetry.step(f"Loading plugin: {path}")
        plugin = self.plugin_loader.load(path)
        if plugin.rules is None:
            raise PluginLoadError("Could not find exported `rules` object in plugin.")

        configs_to_rules = self.config_resolver.resolve(plugin)
        details = RuleDetailsExtractor.extract_all(plugin.rules)
        if options.ignore_deprecated_rules:
            details = [rule for rule in details if not rule.deprecated]

        readme_path = self.filesystem.join_path(plugin.root, README_FILE)
        if not self.filesystem.exists(readme_path):
            raise MissingReadmeError(
                f"Could not find README: {self.filesystem.relative_to(readme_path, plugin.root)}")
        docs = self._collect_rule_docs(plugin, details)

        # Rendered up front so missing list markers fail before any doc is written.
        readme = self.filesystem.read_text(readme_path)
        readme_new = self.rule_list.update_rules_list(
            details,
            readme,
            configs_to_rules,
            options.rule_list_columns,
            options.ignore_config,
            options.url_configs,
        )

        validator = RuleDocValidator(
            required_sections=options.rule_doc_section_include,
            forbidden_sections=options.rule_doc_section_exclude,
            check_options_section=options.rule_doc_section_options,
        )

        for rule, doc_path in docs:
            self._update_rule_doc(
                rule, doc_path, plugin, configs_to_rules, options, notices, validator, state)

        self.telemetry.step(f"Updating rules list: {README_FILE}")
        readme_new = self.formatter.format(readme_new, readme_path)
        self._write_or_compare(readme_path, readme, readme_new, plugin, options, state)

    def _collect_rule_docs(
        self, plugin: Plugin, details: list[RuleDetails]
    ) -> list[tuple[RuleDetails, str]]:
        """Pair each rule with its doc path. Deprecated rules may go without a doc."""
        docs: list[tuple[RuleDetails, str]] = []
        for rule in details:
            doc_path = self.filesystem.join_path(plugin.root, DOCS_RULES_DIR, f"{rule.name}.md")
            if self.filesystem.exists(doc_path):
                docs.append((rule, doc_path))
            elif not rule.deprecated:
                raise MissingRuleDocError(
                    f"Could not find rule doc: {self.filesystem.relative_to(doc_path, plugin.root)}")
        return docs

    def _update_rule_doc(
        self,
        rule: RuleDetails,
        doc_path: str,
        plugin: Plugin,
        configs_to_rules: ConfigsToRules,
        options: GenerationOptions,
        notices: tuple[NoticeType, ...],
        validator: RuleDocValidator,
        state: _RunState,
    ) -> None:
        header = NoticeComposer.header_lines(
            rule,
            configs_to_rules,
            plugin.prefix,
            ignore_config=options.ignore_config,
            title_format=options.rule_doc_title_format,
            url_configs=options.url_configs,
            notices=notices,
        )
        contents = self.filesystem.read_text(doc_path)
        lines = MarkdownSections.replace_or_create_header(
            contents.split("\n"), header, END_RULE_HEADER_MARKER)
        contents_new = self.formatter.format("\n".join(lines), doc_path)
        self._write_or_compare(doc_path, contents, contents_new, plugin, options, state)

        # Validate what the author wrote, not what was just generated.
        for diagnostic in validator.validate(rule, contents):
            self.telemetry.error(diagnostic.message)
            state.diagnostics.append(diagnostic)

    def _write_or_compare(
        self,
        path: str,
        old: str,
        new: str,
        plugin: Plugin,
        options: GenerationOptions,
        state: _RunState,
    ) -> None:
        relative = self.filesystem.relative_to(path, plugin.root)
        if options.check:
            if old != new:
                self.telemetry.error(f"{relative} is out of date. Run without --check to regenerate it.")
                state.stale_paths.append(path)
            return
        if old != new:
            self.filesystem.write_text(path, new)
            state.written_paths.append(path)
            self.telemetry.step(f"Updated: {relative}")

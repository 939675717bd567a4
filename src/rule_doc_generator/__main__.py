"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from rule_doc_generator.infrastructure.di.container import RuleDocsContainer
from rule_doc_generator.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = RuleDocsContainer.get_instance()

    deps = CLIDependencies(
        telemetry=container.get_telemetry_port(),
        filesystem=container.get_filesystem_gateway(),
        plugin_loader=container.get_plugin_loader(),
        config_resolver=container.get_config_resolver(),
        rule_list=container.get_rule_list(),
        reporter=container.get_reporter(),
        formatter_factory=container.make_formatter,
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()

"""Lookups over the resolved config-to-rules mapping."""

from collections.abc import Iterable

from rule_doc_generator.domain.entities import ConfigsToRules


class ConfigMembership:
    """Which config presets enable a given rule."""

    @staticmethod
    def configs_for_rule(
        rule_name: str,
        configs_to_rules: ConfigsToRules,
        ignore_config: Iterable[str] = (),
    ) -> list[str]:
        """Return the sorted names of configs enabling the rule, minus ignored ones."""
        ignored = set(ignore_config)
        return sorted(
            config_name
            for config_name, rule_names in configs_to_rules.items()
            if rule_name in rule_names and config_name not in ignored
        )

    @staticmethod
    def config_names_to_list(config_names: Iterable[str]) -> str:
        return ", ".join(f"`{name}`" for name in config_names)

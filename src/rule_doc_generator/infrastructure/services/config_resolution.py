"""Config Resolution - flatten config presets (extends + rule overrides) to rule name sets."""

import logging
from collections.abc import Mapping
from typing import Any

from rule_doc_generator.domain.constants import DISABLED_RULE_VALUES
from rule_doc_generator.domain.entities import ConfigsToRules, Plugin
from rule_doc_generator.domain.errors import ConfigResolutionError
from rule_doc_generator.domain.protocols import ConfigResolverProtocol

logger = logging.getLogger(__name__)


class ConfigResolver(ConfigResolverProtocol):
    """
    Resolves each config preset of a plugin.

    A preset is a mapping with optional `extends` (names of other presets)
    and `rules`, given as a list of enabled rule names or as a mapping of
    rule name to severity. Severities in DISABLED_RULE_VALUES, False and 0
    turn a rule off, overriding what a parent enabled. Rule names may carry
    the plugin prefix (`prefix/name`).
    """

    def resolve(self, plugin: Plugin) -> ConfigsToRules:
        resolved: dict[str, set[str]] = {}
        for config_name in plugin.configs:
            resolved[config_name] = self._resolve_one(plugin, config_name, ())

        known = set(plugin.rules)
        result: ConfigsToRules = {}
        for config_name, rule_names in resolved.items():
            unknown = sorted(rule_names - known)
            if unknown:
                logger.warning(
                    "Config '%s' references unknown rules: %s", config_name, ", ".join(unknown))
            result[config_name] = frozenset(rule_names & known)
        return result

    def _resolve_one(self, plugin: Plugin, config_name: str, chain: tuple[str, ...]) -> set[str]:
        if config_name in chain:
            cycle = " -> ".join((*chain, config_name))
            raise ConfigResolutionError(f"Config inheritance cycle: {cycle}")
        if config_name not in plugin.configs:
            raise ConfigResolutionError(
                f"Config '{chain[-1]}' extends unknown config '{config_name}'.")

        config = plugin.configs[config_name]
        if not isinstance(config, Mapping):
            raise ConfigResolutionError(f"Config '{config_name}' must be a mapping.")

        enabled: set[str] = set()
        extends = config.get("extends") or []
        if isinstance(extends, str):
            extends = [extends]
        for parent in extends:
            enabled |= self._resolve_one(plugin, str(parent), (*chain, config_name))

        for rule_name, on in self._iter_rules(config.get("rules")):
            bare = self.strip_prefix(rule_name, plugin.prefix)
            if on:
                enabled.add(bare)
            else:
                enabled.discard(bare)
        return enabled

    @staticmethod
    def strip_prefix(rule_name: str, prefix: str) -> str:
        qualified = f"{prefix}/"
        return rule_name[len(qualified):] if rule_name.startswith(qualified) else rule_name

    @staticmethod
    def is_enabled(value: Any) -> bool:
        if value is None or value is False:
            return False
        if isinstance(value, (list, tuple)):
            return bool(value) and ConfigResolver.is_enabled(value[0])
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return value != 0
        return str(value).strip().lower() not in DISABLED_RULE_VALUES

    @staticmethod
    def _iter_rules(rules: Any) -> list[tuple[str, bool]]:
        if rules is None:
            return []
        if isinstance(rules, Mapping):
            return [(str(name), ConfigResolver.is_enabled(value)) for name, value in rules.items()]
        if isinstance(rules, (list, tuple, set, frozenset)):
            return [(str(name), True) for name in rules]
        raise ConfigResolutionError("Config `rules` must be a list or a mapping.")

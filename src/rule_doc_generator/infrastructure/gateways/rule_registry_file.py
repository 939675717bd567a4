"""Reads a plugin's rule_registry.yaml (rule metadata overlay and config presets)."""

from pathlib import Path
from typing import cast

import yaml

from rule_doc_generator.domain.errors import PluginLoadError
from rule_doc_generator.domain.registry_types import RuleRegistryEntry


class RuleRegistryFile:
    """
    Loads rule_registry.yaml.

    Expected shape::

        rules:
          no-foo:
            fixable: code
            deprecated: true
            replaced_by: [no-bar]
        configs:
          recommended:
            rules: [no-foo]
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._rules: dict[str, RuleRegistryEntry] = {}
        self._configs: dict[str, object] = {}
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            return
        try:
            with open(self._path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise PluginLoadError(f"Invalid rule registry {self._path}: {exc}") from exc

        if data is None:
            return
        if not isinstance(data, dict):
            raise PluginLoadError(f"Rule registry {self._path} must be a mapping.")

        rules = data.get("rules") or {}
        configs = data.get("configs") or {}
        if not isinstance(rules, dict) or not isinstance(configs, dict):
            raise PluginLoadError(
                f"Rule registry {self._path}: 'rules' and 'configs' must be mappings.")

        self._rules = {
            str(name): cast(RuleRegistryEntry, dict(entry))
            for name, entry in rules.items()
            if isinstance(entry, dict)
        }
        self._configs = {str(name): value for name, value in configs.items()}

    def get_entry(self, rule_name: str) -> RuleRegistryEntry:
        """Return the overlay entry for a rule, or an empty entry."""
        return cast(RuleRegistryEntry, dict(self._rules.get(rule_name, {})))

    @property
    def configs(self) -> dict[str, object]:
        return dict(self._configs)

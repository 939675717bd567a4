"""Configuration for rule doc generation, read from [tool.rule-docs]."""

import logging
from dataclasses import fields, replace
from typing import Optional

from rule_doc_generator.domain.entities import GenerationOptions

KNOWN_KEYS: frozenset[str] = frozenset(
    {
        "rule_doc_section_include",
        "rule_doc_section_exclude",
        "rule_doc_section_options",
        "rule_doc_title_format",
        "rule_doc_notices",
        "rule_list_columns",
        "ignore_config",
        "ignore_deprecated_rules",
        "url_configs",
        "formatter",
        "module",
        "plugin_prefix",
        "registry",
    }
)


class ConfigurationLoader:
    """
    Typed view over the [tool.rule-docs] table of a plugin's pyproject.toml.

    File discovery lives in infrastructure (ConfigFileLoader); this class only
    interprets the loaded values.
    """

    def __init__(
        self,
        config: Optional[dict[str, object]] = None,
        project: Optional[dict[str, object]] = None,
    ) -> None:
        self._config: dict[str, object] = dict(config or {})
        self._project: dict[str, object] = dict(project or {})
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Warn about keys this tool does not understand."""
        for key in sorted(set(config) - KNOWN_KEYS):
            logging.warning("Configuration Warning: unknown key '%s' in [tool.rule-docs].", key)

    @property
    def project_name(self) -> Optional[str]:
        """[project].name of the plugin's pyproject.toml, if any."""
        name = self._project.get("name")
        return name if isinstance(name, str) and name else None

    def _get_list(self, key: str) -> Optional[tuple[str, ...]]:
        """Helper to safely get a list of strings. Comma-separated strings are split."""
        raw = self._config.get(key)
        if raw is None:
            return None
        if isinstance(raw, str):
            return tuple(item.strip() for item in raw.split(",") if item.strip())
        if isinstance(raw, (list, tuple)):
            return tuple(str(item) for item in raw if isinstance(item, str))
        logging.warning("Configuration Warning: '%s' should be a list of strings.", key)
        return None

    def _get_bool(self, key: str) -> Optional[bool]:
        raw = self._config.get(key)
        if raw is None:
            return None
        return bool(raw)

    def _get_str(self, key: str) -> Optional[str]:
        raw = self._config.get(key)
        if raw is None:
            return None
        return str(raw)

    @property
    def module(self) -> Optional[str]:
        """Import name of the plugin module (default: project name with '-' -> '_')."""
        return self._get_str("module")

    @property
    def plugin_prefix(self) -> Optional[str]:
        return self._get_str("plugin_prefix")

    @property
    def registry(self) -> Optional[str]:
        """Path of the YAML rule registry, relative to the plugin root."""
        return self._get_str("registry")

    @property
    def formatter(self) -> tuple[str, ...]:
        """Command line of the external markdown formatter; empty when unset."""
        raw = self._config.get("formatter")
        if isinstance(raw, str):
            return tuple(raw.split())
        return self._get_list("formatter") or ()

    def to_generation_options(self, **overrides: object) -> GenerationOptions:
        """
        Build GenerationOptions from the file values.

        Overrides (typically CLI flags) win over the file; None overrides are
        ignored so unset flags fall through to the file and then to defaults.
        """
        values: dict[str, object] = {}
        for option in fields(GenerationOptions):
            if option.name == "check":
                continue
            if isinstance(option.default, bool):
                value: object = self._get_bool(option.name)
            elif isinstance(option.default, tuple):
                value = self._get_list(option.name)
            else:
                value = self._get_str(option.name)
            if value is not None:
                values[option.name] = value

        for key, value in overrides.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = tuple(value)
            values[key] = value

        return replace(GenerationOptions(), **values)

"""Load [tool.rule-docs] and [project] from a plugin's pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path

from rule_doc_generator.domain.config import ConfigurationLoader
from rule_doc_generator.domain.constants import CONFIG_SECTION


class ConfigFileLoader:
    """Finds the nearest pyproject.toml at or above a start path."""

    @staticmethod
    def load_config_from_fs(start: str) -> tuple[dict[str, object], dict[str, object]]:
        """Return ([tool.rule-docs], [project]) tables; empty dicts when nothing is found."""
        current_path = Path(start).resolve()
        if current_path.is_file():
            current_path = current_path.parent
        empty: dict[str, object] = {}

        for candidate in (current_path, *current_path.parents):
            config_file = candidate / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logging.warning("Could not read %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            config_dict = tool_section.get(CONFIG_SECTION, {}) or {}
            project = data.get("project", {}) or {}
            return (dict(config_dict), dict(project))
        return (empty, empty)

    @staticmethod
    def load(start: str) -> ConfigurationLoader:
        config_dict, project = ConfigFileLoader.load_config_from_fs(start)
        return ConfigurationLoader(config_dict, project)

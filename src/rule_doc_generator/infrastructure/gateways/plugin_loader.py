"""Plugin Loader Gateway - import a plugin package from disk and expose its rules and configs."""

import importlib
import importlib.util
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType

from rule_doc_generator.domain.constants import PLUGIN_NAME_PREFIXES, RULE_REGISTRY_FILE
from rule_doc_generator.domain.entities import Plugin
from rule_doc_generator.domain.errors import PluginLoadError
from rule_doc_generator.domain.protocols import PluginLoaderProtocol
from rule_doc_generator.infrastructure.config_file_loader import ConfigFileLoader
from rule_doc_generator.infrastructure.gateways.pylint_rules import PylintRuleCollector
from rule_doc_generator.infrastructure.gateways.rule_registry_file import RuleRegistryFile

logger = logging.getLogger(__name__)


class PluginLoaderGateway(PluginLoaderProtocol):
    """
    Loads a plugin rooted at a directory holding its pyproject.toml.

    The module is found under `src/` or the root itself. A module exporting
    `rules` is used as is; a pylint plugin exporting `register(linter)` has
    its messages collected instead.
    """

    @staticmethod
    def plugin_prefix(name: str) -> str:
        """Rule name prefix for a distribution name, e.g. pylint-foo -> foo."""
        for prefix in PLUGIN_NAME_PREFIXES:
            if name.startswith(prefix) and len(name) > len(prefix):
                return name[len(prefix):]
        return name

    @staticmethod
    def find_module_file(root: Path, module_name: str) -> tuple[Path, bool] | None:
        """Return (file, is_package) for the top-level module, or None."""
        top = module_name.split(".")[0]
        for base in (root / "src", root):
            package_init = base / top / "__init__.py"
            if package_init.is_file():
                return (package_init, True)
            module_file = base / f"{top}.py"
            if module_file.is_file():
                return (module_file, False)
        return None

    @staticmethod
    def import_plugin_module(root: Path, module_name: str) -> ModuleType:
        found = PluginLoaderGateway.find_module_file(root, module_name)
        if found is None:
            raise PluginLoadError(
                f"Could not find plugin module '{module_name}' under {root}.")
        file_path, is_package = found
        top = module_name.split(".")[0]

        # Drop stale copies so each load reflects the files on disk.
        for loaded in [m for m in sys.modules if m == top or m.startswith(f"{top}.")]:
            del sys.modules[loaded]

        spec = importlib.util.spec_from_file_location(
            top,
            file_path,
            submodule_search_locations=[str(file_path.parent)] if is_package else None,
        )
        if spec is None or spec.loader is None:
            raise PluginLoadError(f"Could not import plugin module from {file_path}.")

        module = importlib.util.module_from_spec(spec)
        sys.modules[top] = module
        try:
            spec.loader.exec_module(module)
            if module_name != top:
                module = importlib.import_module(module_name)
        except Exception as exc:
            sys.modules.pop(top, None)
            raise PluginLoadError(
                f"Failed to import plugin module '{module_name}': {exc}") from exc
        return module

    def load(self, path: str) -> Plugin:
        root = Path(path).resolve()
        if not root.is_dir():
            raise PluginLoadError(f"Plugin path is not a directory: {path}")

        settings = ConfigFileLoader.load(str(root))
        name = settings.project_name or root.name
        prefix = settings.plugin_prefix or self.plugin_prefix(name)
        module_name = settings.module or name.replace("-", "_")

        module = self.import_plugin_module(root, module_name)
        registry = RuleRegistryFile(root / (settings.registry or RULE_REGISTRY_FILE))

        rules = getattr(module, "rules", None)
        if rules is None and callable(getattr(module, "register", None)):
            logger.debug("Collecting pylint messages from %s", module_name)
            rules = PylintRuleCollector.collect(module, registry)

        if not isinstance(rules, Mapping):
            raise PluginLoadError("Could not find exported `rules` object in plugin.")

        configs = getattr(module, "configs", None)
        if configs is None:
            configs = registry.configs
        if not isinstance(configs, Mapping):
            logger.warning("Ignoring `configs` of %s: expected a mapping.", module_name)
            configs = {}

        return Plugin(
            name=name,
            prefix=prefix,
            root=str(root),
            rules=dict(rules),
            configs=dict(configs),
        )

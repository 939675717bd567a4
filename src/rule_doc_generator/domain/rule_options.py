"""Option discovery in rule schemas (JSON-schema shaped lists and mappings)."""

from collections.abc import Mapping
from typing import Any

_BRANCH_KEYS: tuple[str, ...] = ("anyOf", "oneOf", "allOf")


class RuleOptions:
    """Answers whether a rule is configurable and which options it names."""

    @staticmethod
    def has_options(schema: Any) -> bool:
        """A list schema has options when non-empty; a mapping likewise."""
        if isinstance(schema, (list, tuple)):
            return len(schema) > 0
        if isinstance(schema, Mapping):
            return len(schema) > 0
        return False

    @staticmethod
    def named_options(schema: Any) -> list[str]:
        """Return every named option in the schema, in first-seen order."""
        names: list[str] = []
        RuleOptions._collect(schema, names)
        return names

    @staticmethod
    def _collect(schema: Any, names: list[str]) -> None:
        if isinstance(schema, (list, tuple)):
            for item in schema:
                RuleOptions._collect(item, names)
            return
        if not isinstance(schema, Mapping):
            return

        properties = schema.get("properties")
        if isinstance(properties, Mapping):
            for key in properties:
                if key not in names:
                    names.append(str(key))

        items = schema.get("items")
        if items is not None:
            RuleOptions._collect(items, names)

        for branch_key in _BRANCH_KEYS:
            branch = schema.get(branch_key)
            if branch is not None:
                RuleOptions._collect(branch, names)

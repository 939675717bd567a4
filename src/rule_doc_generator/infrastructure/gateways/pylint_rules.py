"""Turn a pylint plugin's messages into object-style rules."""

import re
from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from pylint.checkers import BaseChecker
from pylint.lint import PyLinter

from rule_doc_generator.infrastructure.gateways.rule_registry_file import RuleRegistryFile

_SENTENCE_END = re.compile(r"(?<=\.)\s")


@dataclass(frozen=True)
class PylintMessageRule:
    """One pylint message seen as a documented rule. `meta` mirrors rule-registry plugins."""
    msgid: str
    checker_name: str
    meta: dict[str, Any] = field(default_factory=dict)


class PylintRuleCollector:
    """Registers a pylint plugin into a fresh linter and reads its message definitions."""

    @staticmethod
    def first_sentence(description: str) -> str:
        text = " ".join(description.split())
        return _SENTENCE_END.split(text, maxsplit=1)[0] if text else text

    @staticmethod
    def options_schema(checker: BaseChecker, only: list[str] | None = None) -> list[dict[str, Any]]:
        """Describe checker options as a one-item object schema; [] when there are none."""
        properties: dict[str, Any] = {}
        for name, optdict in checker.options:
            if only is not None and name not in only:
                continue
            properties[name] = {
                "type": optdict.get("type"),
                "default": optdict.get("default"),
                "description": optdict.get("help", ""),
            }
        if not properties:
            return []
        return [{"type": "object", "properties": properties}]

    @staticmethod
    def collect(module: ModuleType, registry: RuleRegistryFile) -> dict[str, PylintMessageRule]:
        """Return symbol -> rule for every message the plugin's checkers define."""
        linter = PyLinter()
        module.register(linter)

        rules: dict[str, PylintMessageRule] = {}
        checkers = sorted(
            (c for c in linter.get_checkers() if c is not linter), key=lambda c: c.name)
        for checker in checkers:
            for message in checker.messages:
                entry = registry.get_entry(message.symbol)
                only = entry.get("options")
                meta: dict[str, Any] = {
                    "docs": {
                        "description": entry.get(
                            "description", PylintRuleCollector.first_sentence(message.description)),
                        "requires_type_checking": entry.get("requires_type_checking", False),
                    },
                    "fixable": entry.get("fixable"),
                    "has_suggestions": entry.get("has_suggestions", False),
                    "deprecated": entry.get("deprecated", False),
                    "replaced_by": entry.get("replaced_by", []),
                    "schema": PylintRuleCollector.options_schema(
                        checker, list(only) if only is not None else None),
                }
                rules[message.symbol] = PylintMessageRule(
                    msgid=message.msgid, checker_name=checker.name, meta=meta)
        return rules

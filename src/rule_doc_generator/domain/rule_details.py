"""Extract RuleDetails from a plugin's rule registry."""

from collections.abc import Mapping
from typing import Any

from rule_doc_generator.domain.constants import FIXABLE_KINDS
from rule_doc_generator.domain.entities import RuleDetails

_MISSING = object()


class RuleDetailsExtractor:
    """
    Reads rule metadata from object-style rules.

    A rule is object-style when it has a `meta` attribute; `meta` and its
    nested `docs` may be mappings or plain objects. Anything else (a bare
    function, say) is function-style and yields a RuleDetails with no
    metadata.
    """

    @staticmethod
    def read(source: Any, key: str, default: Any = None) -> Any:
        """Read `key` from a mapping or an attribute-bearing object."""
        if source is None:
            return default
        if isinstance(source, Mapping):
            return source.get(key, default)
        value = getattr(source, key, _MISSING)
        return default if value is _MISSING else value

    @staticmethod
    def replacement_names(value: Any) -> tuple[str, ...]:
        """A bare string names one replacement; anything but a list or tuple names none."""
        if isinstance(value, str):
            return (value,) if value else ()
        if isinstance(value, (list, tuple)):
            return tuple(str(name) for name in value)
        return ()

    @staticmethod
    def is_object_style(rule: Any) -> bool:
        return getattr(rule, "meta", _MISSING) is not _MISSING

    @staticmethod
    def extract(name: str, rule: Any) -> RuleDetails:
        if not RuleDetailsExtractor.is_object_style(rule):
            return RuleDetails(name=name, has_meta=False)

        read = RuleDetailsExtractor.read
        meta = rule.meta
        docs = read(meta, "docs")
        fixable = read(meta, "fixable")
        description = read(docs, "description")
        replaced_by = RuleDetailsExtractor.replacement_names(read(meta, "replaced_by"))
        schema = read(meta, "schema")

        return RuleDetails(
            name=name,
            description=str(description) if description else None,
            fixable=fixable is True or (isinstance(fixable, str) and fixable in FIXABLE_KINDS),
            has_suggestions=bool(read(meta, "has_suggestions", False)),
            requires_type_checking=bool(read(docs, "requires_type_checking", False)),
            deprecated=bool(read(meta, "deprecated", False)),
            replaced_by=replaced_by,
            schema=schema if schema is not None else [],
        )

    @staticmethod
    def extract_all(rules: Mapping[str, Any]) -> list[RuleDetails]:
        """Extract details for every rule, in registry order."""
        return [RuleDetailsExtractor.extract(name, rule) for name, rule in rules.items()]

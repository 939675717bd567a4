from typing import TypedDict


class RuleRegistryEntry(TypedDict, total=False):
    description: str
    fixable: str | bool
    has_suggestions: bool
    requires_type_checking: bool
    deprecated: bool
    replaced_by: list[str]
    # Subset of the checker's options that belong to this rule.
    options: list[str]

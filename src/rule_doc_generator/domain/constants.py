"""
Rule Doc Generator: Markers, Emojis and Defaults
"""

# Sentinel line closing the generated header of every rule doc.
END_RULE_HEADER_MARKER: str = "<!-- end auto-generated rule header -->"

# README rules list boundaries.
BEGIN_RULE_LIST_MARKER: str = "<!-- begin auto-generated rules list -->"
END_RULE_LIST_MARKER: str = "<!-- end auto-generated rules list -->"

EMOJI_CONFIGS: str = "💼"
EMOJI_CONFIG_RECOMMENDED: str = "✅"
EMOJI_DEPRECATED: str = "❌"
EMOJI_FIXABLE: str = "🔧"
EMOJI_HAS_SUGGESTIONS: str = "💡"
EMOJI_REQUIRES_TYPE_CHECKING: str = "💭"

RECOMMENDED_CONFIG: str = "recommended"

# Values of meta.fixable that mean the rule ships an autofix.
FIXABLE_KINDS: frozenset[str] = frozenset({"code", "whitespace"})

# Mapping values that switch a rule off inside a config preset.
DISABLED_RULE_VALUES: frozenset[str] = frozenset({"off", "disable", "disabled", "0"})

PLUGIN_NAME_PREFIXES: tuple[str, ...] = ("pylint-plugin-", "pylint-")

DOCS_RULES_DIR: str = "docs/rules"
README_FILE: str = "README.md"
RULE_REGISTRY_FILE: str = "rule_registry.yaml"
CONFIG_SECTION: str = "rule-docs"

# Headings accepted as the options section of a rule doc.
OPTIONS_SECTION_HEADERS: tuple[str, ...] = ("Options", "Config")

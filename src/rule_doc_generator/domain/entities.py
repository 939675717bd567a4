from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class NoticeType(Enum):
    """Status notices that can appear in a rule doc header."""
    CONFIGS = "configs"
    DEPRECATED = "deprecated"
    FIXABLE = "fixable"
    HAS_SUGGESTIONS = "has-suggestions"
    REQUIRES_TYPE_CHECKING = "requires-type-checking"


class TitleFormat(Enum):
    """Supported rule doc title formats."""
    NAME = "name"
    PREFIX_NAME = "prefix-name"
    DESC = "desc"
    DESC_PARENS_NAME = "desc-parens-name"
    DESC_PARENS_PREFIX_NAME = "desc-parens-prefix-name"

    @property
    def needs_description(self) -> bool:
        return self.value.startswith("desc")


class ColumnType(Enum):
    """Columns of the README rules list."""
    NAME = "name"
    DESCRIPTION = "description"
    CONFIGS = "configs"
    FIXABLE = "fixable"
    HAS_SUGGESTIONS = "has-suggestions"
    REQUIRES_TYPE_CHECKING = "requires-type-checking"
    DEPRECATED = "deprecated"


DEFAULT_TITLE_FORMAT = TitleFormat.DESC_PARENS_PREFIX_NAME

DEFAULT_NOTICES: tuple[NoticeType, ...] = (
    NoticeType.CONFIGS,
    NoticeType.DEPRECATED,
    NoticeType.FIXABLE,
    NoticeType.HAS_SUGGESTIONS,
)

DEFAULT_COLUMNS: tuple[ColumnType, ...] = (
    ColumnType.NAME,
    ColumnType.DESCRIPTION,
    ColumnType.CONFIGS,
    ColumnType.FIXABLE,
    ColumnType.HAS_SUGGESTIONS,
    ColumnType.REQUIRES_TYPE_CHECKING,
    ColumnType.DEPRECATED,
)

# Config name -> resolved set of bare rule names it enables.
ConfigsToRules = dict[str, frozenset[str]]


@dataclass(frozen=True)
class RuleDetails:
    """
    Metadata of one rule, extracted once per run from the plugin's registry.

    Function-style rules carry no metadata: has_meta is False and every
    flag keeps its default.
    """
    name: str
    description: Optional[str] = None
    fixable: bool = False
    has_suggestions: bool = False
    requires_type_checking: bool = False
    deprecated: bool = False
    replaced_by: tuple[str, ...] = ()
    schema: Any = field(default_factory=list)
    has_meta: bool = True


@dataclass(frozen=True)
class Plugin:
    """A loaded lint plugin: its rule registry and config presets."""
    name: str
    prefix: str
    root: str
    rules: Mapping[str, Any]
    configs: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found in one rule's doc."""
    rule_name: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary for reporter."""
        return {"rule": self.rule_name, "message": self.message}


@dataclass(frozen=True)
class GenerationOptions:
    """Policy inputs of a generation run. Every field is optional."""
    rule_doc_section_include: tuple[str, ...] = ()
    rule_doc_section_exclude: tuple[str, ...] = ()
    rule_doc_section_options: bool = True
    rule_doc_title_format: str = DEFAULT_TITLE_FORMAT.value
    rule_doc_notices: tuple[str, ...] = tuple(n.value for n in DEFAULT_NOTICES)
    rule_list_columns: tuple[str, ...] = tuple(c.value for c in DEFAULT_COLUMNS)
    ignore_config: tuple[str, ...] = ()
    ignore_deprecated_rules: bool = False
    url_configs: Optional[str] = None
    check: bool = False


@dataclass(frozen=True)
class GenerationResult:
    """Aggregated outcome of a generation run."""
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fatal_error: Optional[str] = None
    written_paths: list[str] = field(default_factory=list)
    stale_paths: list[str] = field(default_factory=list)

    @property
    def has_fatal_error(self) -> bool:
        return self.fatal_error is not None

    @property
    def failed(self) -> bool:
        """True when the run should exit with a failure status."""
        return self.has_fatal_error or bool(self.diagnostics) or bool(self.stale_paths)

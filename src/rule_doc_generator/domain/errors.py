"""Fatal errors. Any of these aborts a generation run before further writes."""


class RuleDocGeneratorError(Exception):
    """Base class for unrecoverable generation failures."""


class PluginLoadError(RuleDocGeneratorError):
    """The plugin could not be imported or exports no rule registry."""


class ConfigResolutionError(RuleDocGeneratorError):
    """A config preset extends an unknown or cyclic parent."""


class MissingRuleDocError(RuleDocGeneratorError):
    """A non-deprecated rule has no doc file."""


class MissingReadmeError(RuleDocGeneratorError):
    """The top-level README holding the rules list does not exist."""


class MissingRulesListMarkersError(RuleDocGeneratorError):
    """The README lacks the begin/end rules list markers."""


class UnknownTitleFormatError(RuleDocGeneratorError):
    """An unsupported rule doc title format was requested."""


class UnknownNoticeTypeError(RuleDocGeneratorError):
    """An unsupported rule doc notice was requested."""


class UnknownColumnTypeError(RuleDocGeneratorError):
    """An unsupported rules list column was requested."""


class FormatterError(RuleDocGeneratorError):
    """The external markdown formatter exited with an error."""

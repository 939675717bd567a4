"""Shared fixtures: a small lint plugin written to tmp_path.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
on the path.
"""

import textwrap
from pathlib import Path
from typing import Callable

import pytest

BEGIN = "<!-- begin auto-generated rules list -->"
END = "<!-- end auto-generated rules list -->"

PLUGIN_MODULE = '''
class Rule:
    def __init__(self, meta):
        self.meta = meta


def legacy(context):
    return {}


rules = {
    "no-foo": Rule({
        "docs": {"description": "disallow foo."},
        "fixable": "code",
        "deprecated": True,
        "replaced_by": ["no-bar"],
    }),
    "no-bar": Rule({
        "docs": {"description": "Disallow bar"},
        "has_suggestions": True,
        "schema": [{"type": "object", "properties": {"allowList": {"type": "array"}}}],
    }),
    "legacy": legacy,
}

configs = {
    "recommended": {"rules": {"widgets/no-bar": "error"}},
    "all": {"extends": ["recommended"], "rules": ["no-foo", "legacy"]},
}
'''

NO_BAR_DOC = textwrap.dedent(
    """\
    # Old title

    Some intro.

    ## Options

    - `allowList`
    """
)

LEGACY_DOC = textwrap.dedent(
    """\
    Legacy rule.

    ## Examples

    Nothing to see.
    """
)

README = f"# pylint-plugin-widgets\n\n## Rules\n\n{BEGIN}\n{END}\n\nFooter.\n"


@pytest.fixture
def write_file() -> Callable[[Path, str], Path]:
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def plugin_root(tmp_path: Path, write_file: Callable[[Path, str], Path]) -> Path:
    """A module-style plugin with three rules and two configs."""
    root = tmp_path / "pylint-plugin-widgets"
    write_file(
        root / "pyproject.toml",
        '[project]\nname = "pylint-plugin-widgets"\nversion = "0.1.0"\n',
    )
    write_file(root / "src" / "pylint_plugin_widgets" / "__init__.py", PLUGIN_MODULE)
    write_file(root / "docs" / "rules" / "no-bar.md", NO_BAR_DOC)
    write_file(root / "docs" / "rules" / "legacy.md", LEGACY_DOC)
    write_file(root / "README.md", README)
    return root

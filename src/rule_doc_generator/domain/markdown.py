"""Line-oriented helpers for rule doc markdown. No parse tree, only text and regex."""

import re
from typing import Optional, Sequence


class MarkdownSections:
    """Locate section headings and splice generated headers into markdown."""

    @staticmethod
    def find_section_header(markdown: str, text: str) -> Optional[str]:
        """
        Find the heading most likely to be the section named by `text`.

        Every level-2 or deeper heading containing the phrase is a candidate,
        matched case-insensitively. With several candidates the shortest wins,
        since a sub-heading that merely mentions the phrase tends to be longer
        than the section it belongs to.
        """
        pattern = re.compile(
            rf"^#{{2,}}.* {re.escape(text)}.*$", re.IGNORECASE | re.MULTILINE)
        matches = pattern.findall(markdown)

        if not matches:
            return None

        if len(matches) == 1:
            return str(matches[0])

        # min() keeps the first of equally short candidates.
        return str(min(matches, key=len))

    @staticmethod
    def replace_or_create_header(
        lines: Sequence[str], new_header_lines: Sequence[str], marker: str
    ) -> list[str]:
        """
        Replace the header of a doc up to and including `marker`.

        Without a marker the header is inserted at the top. A legacy
        level-1 title on the first line is dropped first so the doc never
        ends up with two titles.

        Args:
            lines: Lines of the doc.
            new_header_lines: Lines of the new header, ending with the marker.
            marker: Line that closes the header.

        Returns:
            A new list of lines. The input is left untouched.
        """
        result = list(lines)
        marker_index = result.index(marker) if marker in result else -1

        if marker_index == -1 and result and result[0].startswith("# "):
            del result[0]

        result[0:marker_index + 1] = list(new_header_lines)
        return result

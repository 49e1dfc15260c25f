from __future__ import annotations

import re

LINE_BREAK_RE = re.compile(r"\r?\n")


def strip_base_indent(text: str, base_indent: int | None) -> str:
    """Remove ``base_indent`` leading spaces from every line that has them.

    Lines indented by fewer than ``base_indent`` spaces are left as they are.
    """
    if not base_indent or base_indent <= 0:
        return text
    pattern = re.compile(rf"^ {{{base_indent}}}", re.MULTILINE)
    return pattern.sub("", text)


def line_offset(needle: str, haystack: str) -> int:
    """Return the 0-based line of ``haystack`` where ``needle`` first occurs.

    Only the first occurrence is considered, so repeated identical snippets all
    map to the same line. A snippet that is not found maps to line 0.
    """
    position = haystack.find(needle)
    if position <= 0:
        return 0
    return count_line_breaks(haystack[:position])


def count_line_breaks(text: str) -> int:
    return len(LINE_BREAK_RE.findall(text))

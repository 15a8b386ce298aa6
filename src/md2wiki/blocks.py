"""Line-level block conversions: ATX headings and horizontal rules."""

from __future__ import annotations

import re

from md2wiki.theme_manager import Theme

_HEADER_RE = re.compile(r"^(#{1,6})\s+(.+)$")
RULE_RE = re.compile(r"^[ \t]*(?:-{3,}|\*{3,}|_{3,})[ \t]*$", re.MULTILINE)

WIKI_RULE = "----"


def convert_header_line(line: str, theme: Theme) -> str:
    """Convert one ``## Title`` line; other lines are returned unchanged."""
    match = _HEADER_RE.match(line)
    if match is None:
        return line

    level = len(match.group(1))
    content = match.group(2)
    equals = "=" * level

    color = theme.heading_color(level)
    if color:
        return f'{equals}<span style="color:{color};">{content}</span>{equals}'
    return f"{equals}{content}{equals}"


def convert_headers(text: str, theme: Theme) -> str:
    """Convert Markdown headings to ``==Title==`` form with theme colours."""
    return "\n".join(convert_header_line(line, theme) for line in text.split("\n"))


def convert_horizontal_rules(text: str) -> str:
    """Replace ``---``, ``***`` and ``___`` lines with a wiki rule."""
    return RULE_RE.sub(WIKI_RULE, text)

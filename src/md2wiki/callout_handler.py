"""Callout (admonition) conversion.

Converts GitHub/Obsidian style callouts into one-cell styled wiki tables::

    > [!WARNING]                       {| class="wikitable" style="..."
    > Check the backups first.   -->   | <div style="padding:0.5em;">
                                       <strong ...>⚠️ Warning:</strong><br/>Check ...
                                       </div>
                                       |}

Two shapes are recognised for every callout type of the theme:

* multi-line -- a marker line followed by ``>``-prefixed continuation
  lines.  Text after the marker on its own line becomes the first
  content line.
* single-line -- a marker line with trailing text and no continuation.

The multi-line shape is tried first, so a marker line with trailing text
followed by quote lines is always one box holding all of the text.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from md2wiki.context import Placeholders
from md2wiki.theme_manager import CalloutStyle, Theme

logger = logging.getLogger(__name__)

_QUOTE_PREFIX_RE = re.compile(r"^>\s?")

_BOX_TEMPLATE = (
    '{{| class="wikitable" style="border-left:4px solid {border}; '
    'background-color:{background}; width:100%;"\n'
    '| <div style="padding:0.5em;">\n'
    '<strong style="color:{color};">{emoji} {label}:</strong>{separator}{content}\n'
    "</div>\n"
    "|}}"
)


def render_callout(style: CalloutStyle, content: str, *, multiline: bool) -> str:
    """Render a styled callout box around already cleaned *content*."""
    return _BOX_TEMPLATE.format(
        border=style.border_color,
        background=style.bg_color,
        color=style.text_color,
        emoji=style.emoji,
        label=style.label,
        separator="<br/>" if multiline else " ",
        content=content,
    )


def _clean_content(lines: list[str]) -> str:
    cleaned: list[str] = []
    for line in lines:
        line = _QUOTE_PREFIX_RE.sub("", line)
        # Leading blank lines are dropped, inner ones kept.
        if line.strip() or cleaned:
            cleaned.append(line)
    return "<br/>".join(cleaned).strip()


def _multiline_pattern(kind: str) -> re.Pattern[str]:
    return re.compile(
        rf"^>[ \t]*\[!{re.escape(kind)}\][ \t]*(?P<first>[^\n]*)\n"
        r"(?P<body>>[^\n]*(?:\n>[^\n]*)*)",
        re.IGNORECASE | re.MULTILINE,
    )


def _single_line_pattern(kind: str) -> re.Pattern[str]:
    return re.compile(
        rf"^>[ \t]*\[!{re.escape(kind)}\][ \t]+(?P<content>\S[^\n]*)$",
        re.IGNORECASE | re.MULTILINE,
    )


def convert_callouts(
    text: str,
    theme: Theme,
    placeholders: Optional[Placeholders] = None,
) -> str:
    """Convert every callout whose type is defined by *theme*.

    With *placeholders* each rendered box is replaced by a token, so the
    list and table stages never see the box markup.
    """
    converted = 0

    def _emit(box: str) -> str:
        if placeholders is None:
            return box
        return placeholders.protect(box)

    for kind, style in theme.callouts.items():

        def _multiline(match: re.Match[str], style: CalloutStyle = style) -> str:
            lines = match.group("body").split("\n")
            first = match.group("first").strip()
            if first:
                lines.insert(0, first)
            return _emit(render_callout(style, _clean_content(lines), multiline=True))

        def _single(match: re.Match[str], style: CalloutStyle = style) -> str:
            return _emit(render_callout(style, match.group("content").strip(), multiline=False))

        text, count = _multiline_pattern(kind).subn(_multiline, text)
        converted += count
        text, count = _single_line_pattern(kind).subn(_single, text)
        converted += count

    if converted:
        logger.debug("Converted %d callouts", converted)
    return text

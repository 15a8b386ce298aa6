"""Inline formatting: highlights, bold, italic and external links."""

from __future__ import annotations

import re

from md2wiki.blocks import RULE_RE
from md2wiki.code_handler import protect_code_markup
from md2wiki.context import Placeholders

HIGHLIGHT_COLOR = "#f5ff56"

_HIGHLIGHT_RE = re.compile(r"==([^=\n]+)==")
_BOLD_STAR_RE = re.compile(r"\*\*(.+?)\*\*")
_BOLD_UNDERSCORE_RE = re.compile(r"__(.+?)__")
# The characters around the delimiters are only looked at, never consumed,
# so the spacing on both sides survives and adjacent spans still match.
_ITALIC_STAR_RE = re.compile(r"(?<!\*)\*(?![\s*])([^*\n]+?)(?<!\s)\*(?!\*)")
_ITALIC_UNDERSCORE_RE = re.compile(r"(?<![\w_])_(?![\s_])([^_\n]+?)(?<!\s)_(?![\w_])")

_EXTERNAL_LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)")


def convert_inline_styles(text: str) -> str:
    """Convert ``==mark==``, ``**bold**`` and ``*italic*`` to wiki markup.

    Code elements and horizontal rule lines are set aside first and put
    back untouched afterwards, since they may contain delimiter characters.
    """
    shielded = Placeholders(tag="C")
    text = protect_code_markup(text, shielded)
    # Rule lines such as `*****` are delimiters only, never emphasis.
    text = shielded.protect_all(RULE_RE, text)

    text = _HIGHLIGHT_RE.sub(rf'<mark style="background-color:{HIGHLIGHT_COLOR}">\1</mark>', text)

    text = _BOLD_STAR_RE.sub(r"'''\1'''", text)
    text = _BOLD_UNDERSCORE_RE.sub(r"'''\1'''", text)

    text = _ITALIC_STAR_RE.sub(r"''\1''", text)
    text = _ITALIC_UNDERSCORE_RE.sub(r"''\1''", text)

    return shielded.restore(text)


def convert_links(text: str) -> str:
    """Rewrite ``[text](https://url)`` as ``[https://url text]``.

    ``[[Page]]`` links are already MediaWiki syntax and are not matched.
    """
    return _EXTERNAL_LINK_RE.sub(r"[\2 \1]", text)

"""Fenced and inline code conversion.

Fenced blocks become ``<syntaxhighlight>`` elements, inline spans become
theme-styled ``<code>`` elements.  Once converted, code markup is swapped
for placeholders so the structural stages that follow never see its
content.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from md2wiki.context import Placeholders
from md2wiki.theme_manager import Theme

logger = logging.getLogger(__name__)

_FENCED_RE = re.compile(r"```(\w+)?\n(.*?)```", re.DOTALL)
# Inline spans are matched alongside finished blocks so that backticks
# inside a highlighted block are left alone.
_INLINE_RE = re.compile(
    r"(<syntaxhighlight[^>]*>.*?</syntaxhighlight>)|`([^`\n]+)`", re.DOTALL
)

# Converted markup, either produced above or already present in the input.
SYNTAXHIGHLIGHT_RE = re.compile(r"<syntaxhighlight[^>]*>.*?</syntaxhighlight>", re.DOTALL)
CODE_TAG_RE = re.compile(r"<code[^>]*>.*?</code>")

_SQL_KEYWORDS = ("SELECT", "FROM")


def detect_language(code: str) -> str:
    """Guess a highlighter language for an untagged code block."""
    stripped = code.strip()
    if stripped.startswith(("{", "[")):
        return "json"
    if stripped.startswith("<"):
        return "xml"
    upper = code.upper()
    if any(keyword in upper for keyword in _SQL_KEYWORDS):
        return "sql"
    return "text"


def inline_code_open_tag(theme: Theme) -> str:
    style = theme.inline_code
    return (
        f'<code style="background-color:{style.background_color};'
        f"color:{style.text_color};"
        f"padding:{style.padding};"
        f"border-radius:{style.border_radius};"
        f'font-family:{style.font_family};">'
    )


def convert_code(text: str, theme: Theme) -> str:
    """Convert fenced blocks and inline code spans to wiki markup."""

    def _fenced(match: re.Match[str]) -> str:
        lang = (match.group(1) or "").strip()
        code = match.group(2).strip()
        if not lang:
            lang = detect_language(code)
        return f'<syntaxhighlight lang="{lang}" line>\n{code}\n</syntaxhighlight>'

    text = _FENCED_RE.sub(_fenced, text)

    open_tag = inline_code_open_tag(theme)

    def _inline(match: re.Match[str]) -> str:
        if match.group(1):
            return match.group(1)
        return f"{open_tag}{match.group(2)}</code>"

    return _INLINE_RE.sub(_inline, text)


def protect_code_markup(text: str, placeholders: Placeholders) -> str:
    """Replace every code block and inline code element with a token."""
    text = placeholders.protect_all(SYNTAXHIGHLIGHT_RE, text)
    return placeholders.protect_all(CODE_TAG_RE, text)


def protect_code(
    text: str,
    theme: Theme,
    placeholders: Optional[Placeholders] = None,
) -> str:
    """Convert code spans and, when *placeholders* is given, shield them.

    Without *placeholders* this is a plain conversion.
    """
    text = convert_code(text, theme)
    if placeholders is None:
        return text
    before = len(placeholders)
    text = protect_code_markup(text, placeholders)
    logger.debug("Protected %d code spans", len(placeholders) - before)
    return text

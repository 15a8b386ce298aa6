"""Nested list conversion.

MediaWiki writes list nesting as a prefix of marker characters, one per
depth (``*`` unordered, ``#`` ordered)::

    - a            * a
      - b          ** b
        1. c       **# c

The conversion is a fold over the lines of the document.  Its state is
the tuple of marker characters active at each depth; any line that is not
a list item resets it, so lists separated by blank lines start afresh.
"""

from __future__ import annotations

import re

from md2wiki.context import ConversionContext

UNORDERED = "*"
ORDERED = "#"

# Two columns of leading whitespace make one nesting level.
INDENT_WIDTH = 2

_UNORDERED_RE = re.compile(r"^(\s*)[-*]\s+(.*)$")
_ORDERED_RE = re.compile(r"^(\s*)\d+\.\s+(.*)$")

ListStack = tuple[str, ...]


def classify_list_line(line: str) -> tuple[str, int, str] | None:
    """Return ``(marker, level, content)`` for a list item, else ``None``."""
    match = _UNORDERED_RE.match(line)
    marker = UNORDERED
    if match is None:
        match = _ORDERED_RE.match(line)
        marker = ORDERED
    if match is None:
        return None
    return marker, len(match.group(1)) // INDENT_WIDTH, match.group(2)


def list_step(stack: ListStack, line: str) -> tuple[ListStack, str]:
    """Advance the list fold by one *line*.

    Returns the new stack and the text to emit for *line*.
    """
    item = classify_list_line(line)
    if item is None:
        return (), line

    marker, level, content = item
    # A jump of several levels opens a single new depth.
    level = min(level, len(stack))
    stack = stack[:level] + (marker,)
    return stack, f"{''.join(stack)} {content}"


def convert_lists(text: str, context: ConversionContext | None = None) -> str:
    """Convert ``-``/``*``/``1.`` list items to wiki list prefixes."""
    if context is None:
        context = ConversionContext()

    result: list[str] = []
    for line in text.split("\n"):
        context.list_stack, emitted = list_step(context.list_stack, line)
        result.append(emitted)

    context.list_stack = ()
    return "\n".join(result)

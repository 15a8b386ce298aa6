"""Pipe table conversion.

Converts Markdown pipe tables into MediaWiki tables::

    | Name | Value |          {| class="wikitable"
    |------|-------|          ! Name
    | A    | 1     |   -->    ! Value
                              |-
                              | A
                              | 1
                              |}

The conversion is a line fold whose only state is whether a table is
currently open.  It tolerates repeated separator rows and closes a table
left open at the end of the document.
"""

from __future__ import annotations

import logging
import re

from md2wiki.context import ConversionContext

logger = logging.getLogger(__name__)

TABLE_OPEN = '{| class="wikitable"'
TABLE_ROW = "|-"
TABLE_CLOSE = "|}"

_PIPE_ROW_RE = re.compile(r"^\|.*\|$")
_SEPARATOR_RE = re.compile(r"^\|[\s\-:|]+\|$")


def _is_separator(line: str) -> bool:
    return bool(_SEPARATOR_RE.match(line)) and "-" in line


def _split_cells(line: str) -> list[str]:
    """Return the trimmed cells between the outer pipes of *line*."""
    return [cell.strip() for cell in line.split("|")[1:-1]]


def _is_filler(cells: list[str]) -> bool:
    return all(not cell.replace("-", "").replace(":", "").strip() for cell in cells)


def table_step(in_table: bool, line: str) -> tuple[bool, list[str]]:
    """Advance the table fold by one *line*.

    Returns the new ``in_table`` flag and the lines to emit (possibly none).
    """
    stripped = line.strip()

    if not in_table:
        if _PIPE_ROW_RE.match(stripped):
            header = [f"! {cell}" for cell in _split_cells(stripped)]
            return True, [TABLE_OPEN, *header]
        return False, [line]

    if "|" not in stripped:
        return False, [TABLE_CLOSE, line]

    if _is_separator(stripped):
        return True, []

    parts = stripped.split("|")
    if len(parts) < 3:
        return True, []

    cells = _split_cells(stripped)
    if _is_filler(cells):
        return True, []
    return True, [TABLE_ROW, *(f"| {cell}" for cell in cells)]


def convert_tables(text: str, context: ConversionContext | None = None) -> str:
    """Convert every pipe table in *text* to a wikitable."""
    if context is None:
        context = ConversionContext()

    result: list[str] = []
    tables = 0
    for line in text.split("\n"):
        was_open = context.in_table
        context.in_table, emitted = table_step(context.in_table, line)
        if context.in_table and not was_open:
            tables += 1
        result.extend(emitted)

    if context.in_table:
        result.append(TABLE_CLOSE)
        context.in_table = False

    if tables:
        logger.debug("Converted %d tables", tables)
    return "\n".join(result)

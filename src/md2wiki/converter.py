"""High-level Markdown-to-MediaWiki conversion orchestrator.

Runs the conversion stages in their fixed order over the whole document
and exposes a single public API for converting Markdown text or files.
Stage order matters: code is converted and shielded before emphasis,
structural stages and the changelog pass run on the shielded text, and
the shielded spans are put back before the check mark pass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from md2wiki.blocks import convert_headers, convert_horizontal_rules
from md2wiki.callout_handler import convert_callouts
from md2wiki.code_handler import protect_code
from md2wiki.context import ConversionContext
from md2wiki.css import generate_css
from md2wiki.inline import convert_inline_styles, convert_links
from md2wiki.list_handler import convert_lists
from md2wiki.postprocess import prettify_checkmarks, reverse_changelog
from md2wiki.table_handler import convert_tables
from md2wiki.theme_manager import DEFAULT_THEME, THEME_NAMES, Theme, get_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionConfig:
    """Options for one conversion."""

    theme: str = DEFAULT_THEME
    add_css: bool = False
    reverse_changelog: bool = True
    prettify_checks: bool = True


DEFAULT_CONFIG = ConversionConfig()


def convert(
    markdown_text: str,
    config: Optional[ConversionConfig] = None,
    *,
    theme: Optional[Theme] = None,
) -> str:
    """Convert Markdown text to MediaWiki markup.

    Args:
        markdown_text: Markdown source string.
        config: Conversion options, :data:`DEFAULT_CONFIG` when omitted.
        theme: Theme to apply instead of looking up ``config.theme``.

    Returns:
        MediaWiki markup.  Never raises for string input; constructs that
        are not recognised pass through unchanged.
    """
    config = config or DEFAULT_CONFIG
    if theme is None:
        theme = get_theme(config.theme)

    context = ConversionContext()
    text = context.placeholders.escape(markdown_text)

    if config.add_css:
        text = context.placeholders.protect(generate_css(theme)) + "\n\n" + text

    text = protect_code(text, theme, context.placeholders)
    text = convert_inline_styles(text)
    text = convert_headers(text, theme)
    text = convert_links(text)
    text = convert_callouts(text, theme, context.placeholders)
    text = convert_lists(text, context)
    text = convert_tables(text, context)
    text = convert_horizontal_rules(text)

    # Headings inside code blocks stay hidden from the changelog pass.
    if config.reverse_changelog:
        text = reverse_changelog(text)
    text = context.placeholders.restore(text)

    if config.prettify_checks:
        text = prettify_checkmarks(text)

    return text


class Converter:
    """Convert Markdown content to MediaWiki markup.

    Usage::

        converter = Converter(ConversionConfig(theme="tieto"))
        converter.convert_file("input.md", "output.wiki")

        # or from string
        wikitext = converter.convert_text("# Hello")
    """

    THEMES = THEME_NAMES

    def __init__(
        self,
        config: Optional[ConversionConfig] = None,
        *,
        theme: Optional[Theme] = None,
    ) -> None:
        self.config = config or DEFAULT_CONFIG
        self.theme = theme if theme is not None else get_theme(self.config.theme)

    def convert_text(self, markdown_text: str) -> str:
        """Convert Markdown text to MediaWiki markup."""
        return convert(markdown_text, self.config, theme=self.theme)

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> None:
        """Read a Markdown file and write the MediaWiki output.

        Args:
            input_path: Path to the input ``.md`` file.
            output_path: Path for the output ``.wiki`` file.
            encoding: Text encoding of the source file.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        md_text = input_path.read_text(encoding=encoding)
        wikitext = self.convert_text(md_text)
        logger.debug("Converted %s (%d -> %d chars)", input_path, len(md_text), len(wikitext))

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(wikitext, encoding="utf-8")

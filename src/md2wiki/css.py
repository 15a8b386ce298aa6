"""Theme CSS block generation.

MediaWiki ignores ``<style>`` outside of templates on most setups, but
wikis running TemplateStyles or an equivalent extension pick it up.  The
block is wrapped in a hidden ``<div>`` so it never renders as text.
"""

from __future__ import annotations

from md2wiki.theme_manager import Theme

_HEADING_RULE = """
.mw-parser-output h{level},
h{level} {{
    color: {color} !important;
    font-weight: 600 !important;
}}
"""

_CSS_TEMPLATE = """<div style="display:none;">
<!-- Theme: {theme.name} - {theme.description} -->
<style>
/* Code block container */
.mw-highlight {{
    background-color: {block.background_color} !important;
    border: 1px solid {block.border_color} !important;
    border-left: 3px solid {block.border_left_color} !important;
    padding: 1em !important;
    border-radius: 4px;
    font-family: {block.font_family} !important;
    font-size: 0.95em !important;
    line-height: 1.5 !important;
}}

/* Inline code styling */
code {{
    background-color: {inline.background_color} !important;
    color: {inline.text_color} !important;
    padding: {inline.padding} !important;
    border-radius: {inline.border_radius} !important;
    font-family: {inline.font_family} !important;
}}
{headings}
</style>
</div>"""


def generate_css(theme: Theme) -> str:
    """Build the hidden style block for *theme*."""
    headings = "".join(
        _HEADING_RULE.format(level=level, color=theme.heading_color(level))
        for level in range(1, 7)
        if theme.heading_color(level)
    )
    return _CSS_TEMPLATE.format(
        theme=theme,
        block=theme.code_block,
        inline=theme.inline_code,
        headings=headings,
    )

"""MediaWiki colour theme registry.

Manages the built-in themes (neutral, tieto, dark) that map heading
levels, code styling and callout types to the concrete colours used by
the conversion stages.  Unknown theme names fall back to ``neutral``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

DEFAULT_THEME = "neutral"


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class InlineCodeStyle:
    """Styling for inline code spans (`code`)."""

    background_color: str = "#f4f4f4"
    text_color: str = "#333333"
    padding: str = "2px 4px"
    border_radius: str = "3px"
    font_family: str = "monospace"

    def derive(self, **overrides) -> InlineCodeStyle:
        """Return a copy with selected fields overridden."""
        return replace(self, **overrides)


@dataclass(frozen=True)
class CodeBlockStyle:
    """Styling for fenced code blocks, used by the CSS block."""

    background_color: str = "#f8f8f8"
    border_color: str = "#ddd"
    border_left_color: str = "#ccc"
    font_family: str = "monospace"

    def derive(self, **overrides) -> CodeBlockStyle:
        return replace(self, **overrides)


@dataclass(frozen=True)
class CalloutStyle:
    """Styling for one callout box type (> [!NOTE], ...)."""

    emoji: str
    label: str
    border_color: str
    bg_color: str
    text_color: str

    def derive(self, **overrides) -> CalloutStyle:
        return replace(self, **overrides)


@dataclass(frozen=True)
class Theme:
    """Complete colour scheme applied during one conversion."""

    name: str
    description: str
    headings: Mapping[int, str] = field(default_factory=dict)
    inline_code: InlineCodeStyle = field(default_factory=InlineCodeStyle)
    code_block: CodeBlockStyle = field(default_factory=CodeBlockStyle)
    callouts: Mapping[str, CalloutStyle] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the mappings so stages cannot alter a shared theme.
        object.__setattr__(self, "headings", MappingProxyType(dict(self.headings)))
        object.__setattr__(self, "callouts", MappingProxyType(dict(self.callouts)))

    def heading_color(self, level: int) -> str:
        """Return the colour for heading *level*, or ``""`` when uncoloured."""
        return self.headings.get(level, "") or ""

    def derive(self, **overrides) -> Theme:
        """Return a copy with selected fields overridden."""
        return replace(self, **overrides)


@dataclass(frozen=True)
class ThemeInfo:
    """Name and description of a registered theme."""

    name: str
    description: str


# ---------------------------------------------------------------------------
# Theme definitions
# ---------------------------------------------------------------------------

def _callouts(**styles: tuple[str, str, str, str, str]) -> dict[str, CalloutStyle]:
    return {kind: CalloutStyle(*values) for kind, values in styles.items()}


def _build_neutral_theme() -> Theme:
    """Build the **neutral** theme -- plain output, no heading colours."""

    return Theme(
        name="neutral",
        description="Clean MediaWiki output without custom colors or branding",
        headings={},
        inline_code=InlineCodeStyle(),
        code_block=CodeBlockStyle(),
        callouts=_callouts(
            note=("\U0001f4dd", "Note", "#0066cc", "#f0f7ff", "#003366"),
            info=("\u2139\ufe0f", "Info", "#0066cc", "#f0f7ff", "#003366"),
            tip=("\U0001f4a1", "Tip", "#28a745", "#f0f9f4", "#155724"),
            warning=("\u26a0\ufe0f", "Warning", "#ffc107", "#fff8e6", "#856404"),
            caution=("\U0001f536", "Caution", "#fd7e14", "#fff0e6", "#8a3800"),
            important=("\u2757", "Important", "#dc3545", "#fdf2f2", "#721c24"),
            success=("\u2705", "Success", "#28a745", "#f0f9f4", "#155724"),
        ),
    )


def _build_tieto_theme() -> Theme:
    """Build the **tieto** theme -- Hero Blue headings, yellow code."""

    hero_blue = "#021e57"

    return Theme(
        name="tieto",
        description="Tieto brand colors with Hero Blue headings and yellow code highlights",
        headings={level: hero_blue for level in range(1, 7)},
        inline_code=InlineCodeStyle(
            background_color="#f5ff56",
            text_color=hero_blue,
            padding="2px 6px",
            font_family="Consolas,Monaco,monospace",
        ),
        code_block=CodeBlockStyle(
            background_color="#FAFAFA",
            border_color="#CCCCCC",
            border_left_color=hero_blue,
            font_family="'Consolas', 'Monaco', 'Courier New', monospace",
        ),
        callouts=_callouts(
            note=("\U0001f4dd", "Note", "#839df9", "#f7f7fa", "#071d49"),
            info=("\u2139\ufe0f", "Info", hero_blue, "#f7f7fa", hero_blue),
            tip=("\U0001f4a1", "Tip", "#4e60e7", "#f7f7fa", "#071d49"),
            warning=("\u26a0\ufe0f", "Warning", "#e6a700", "#fff8e6", "#8a6500"),
            caution=("\U0001f536", "Caution", "#e65c00", "#fff0e6", "#8a3800"),
            important=("\u2757", "Important", "#d63384", "#fdf2f8", "#9d174d"),
            success=("\u2705", "Success", "#4e60e7", "#f7f7fa", "#071d49"),
        ),
    )


def _build_dark_theme() -> Theme:
    """Build the **dark** theme -- for wikis with a dark skin."""

    accent = "#7cb3ff"

    return Theme(
        name="dark",
        description="Dark mode optimized colors for wikis with dark themes",
        headings={level: accent for level in range(1, 7)},
        inline_code=InlineCodeStyle(
            background_color="#2d2d2d",
            text_color="#e6e6e6",
        ),
        code_block=CodeBlockStyle(
            background_color="#1e1e1e",
            border_color="#444",
            border_left_color=accent,
        ),
        callouts=_callouts(
            note=("\U0001f4dd", "Note", "#5c9aff", "#1a2744", "#a8c7ff"),
            info=("\u2139\ufe0f", "Info", "#5c9aff", "#1a2744", "#a8c7ff"),
            tip=("\U0001f4a1", "Tip", "#4ade80", "#1a3328", "#86efac"),
            warning=("\u26a0\ufe0f", "Warning", "#fbbf24", "#3d3214", "#fcd34d"),
            caution=("\U0001f536", "Caution", "#fb923c", "#3d2814", "#fdba74"),
            important=("\u2757", "Important", "#f87171", "#3d1a1a", "#fca5a5"),
            success=("\u2705", "Success", "#4ade80", "#1a3328", "#86efac"),
        ),
    )


# ---------------------------------------------------------------------------
# Theme registry
# ---------------------------------------------------------------------------

_THEME_BUILDERS = {
    "neutral": _build_neutral_theme,
    "tieto": _build_tieto_theme,
    "dark": _build_dark_theme,
}

_THEMES: Mapping[str, Theme] = MappingProxyType(
    {name: builder() for name, builder in _THEME_BUILDERS.items()}
)

THEME_NAMES = list(_THEME_BUILDERS.keys())


def get_theme(name: str) -> Theme:
    """Return the theme called *name*, falling back to the default.

    Lookup is case-sensitive; any unknown name resolves to ``neutral``.
    """
    theme = _THEMES.get(name)
    if theme is None:
        logger.debug("Unknown theme %r, using %r", name, DEFAULT_THEME)
        return _THEMES[DEFAULT_THEME]
    return theme


def list_themes() -> list[ThemeInfo]:
    """Return name and description of every built-in theme."""
    return [ThemeInfo(name=t.name, description=t.description) for t in _THEMES.values()]

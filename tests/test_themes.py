"""Tests for the theme registry."""

from __future__ import annotations

import dataclasses

import pytest

from md2wiki.theme_manager import (
    DEFAULT_THEME,
    THEME_NAMES,
    CalloutStyle,
    Theme,
    get_theme,
    list_themes,
)

CALLOUT_TYPES = ["note", "info", "tip", "warning", "caution", "important", "success"]


class TestGetTheme:

    @pytest.mark.parametrize("name", ["neutral", "tieto", "dark"])
    def test_known_themes(self, name: str) -> None:
        assert get_theme(name).name == name

    def test_unknown_falls_back_to_neutral(self) -> None:
        assert get_theme("nonexistent").name == "neutral"

    def test_lookup_is_case_sensitive(self) -> None:
        assert get_theme("Tieto").name == DEFAULT_THEME

    def test_default_theme_name(self) -> None:
        assert DEFAULT_THEME == "neutral"
        assert DEFAULT_THEME in THEME_NAMES


class TestThemeContent:

    @pytest.mark.parametrize("name", THEME_NAMES)
    def test_all_callout_types_defined(self, name: str) -> None:
        assert list(get_theme(name).callouts) == CALLOUT_TYPES

    def test_neutral_has_no_heading_colors(self) -> None:
        theme = get_theme("neutral")
        assert all(theme.heading_color(level) == "" for level in range(1, 7))

    def test_tieto_heading_color(self) -> None:
        theme = get_theme("tieto")
        assert theme.heading_color(1) == "#021e57"
        assert theme.heading_color(6) == "#021e57"

    def test_tieto_inline_code(self) -> None:
        style = get_theme("tieto").inline_code
        assert style.background_color == "#f5ff56"
        assert style.padding == "2px 6px"

    def test_dark_code_block(self) -> None:
        assert get_theme("dark").code_block.background_color == "#1e1e1e"


class TestImmutability:

    def test_theme_is_frozen(self) -> None:
        theme = get_theme("tieto")
        with pytest.raises(dataclasses.FrozenInstanceError):
            theme.name = "other"  # type: ignore[misc]

    def test_mappings_are_read_only(self) -> None:
        theme = get_theme("tieto")
        with pytest.raises(TypeError):
            theme.headings[1] = "#ffffff"  # type: ignore[index]
        with pytest.raises(TypeError):
            theme.callouts["note"] = None  # type: ignore[index]

    def test_derive_leaves_original_untouched(self) -> None:
        theme = get_theme("neutral")
        custom = theme.derive(name="custom", headings={1: "#ff0000"})
        assert isinstance(custom, Theme)
        assert custom.heading_color(1) == "#ff0000"
        assert theme.heading_color(1) == ""
        assert dict(custom.callouts) == dict(theme.callouts)

    def test_callout_style_derive(self) -> None:
        note = get_theme("neutral").callouts["note"]
        loud = note.derive(label="Hey")
        assert isinstance(loud, CalloutStyle)
        assert loud.label == "Hey"
        assert note.label == "Note"


class TestListThemes:

    def test_lists_all_themes(self) -> None:
        infos = list_themes()
        assert [i.name for i in infos] == THEME_NAMES
        assert len(infos) >= 3

    def test_descriptions_present(self) -> None:
        for info in list_themes():
            assert info.name
            assert info.description

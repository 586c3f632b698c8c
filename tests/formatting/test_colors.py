"""
ANSI-цвета: обёртка, вложенность, переопределение палитры.
"""

from __future__ import annotations

from statsprinter.formatting import AVAILABLE_COLORS, ColorPalette, make_color, resolve_color_starts
from statsprinter.formatting.colors import COLOR_END

RED = AVAILABLE_COLORS["red"]
GREEN = AVAILABLE_COLORS["green"]


def test_disabled_palette_is_identity():
    palette = ColorPalette.from_option(False)
    assert palette.red("x") == "x"
    assert palette.bold(42) == 42


def test_wrap_adds_start_and_end():
    assert make_color(RED)("x") == f"{RED}x{COLOR_END}"


def test_nested_color_is_reopened_after_reset():
    red, green = make_color(RED), make_color(GREEN)
    result = red(f"a{green('b')}c")
    assert result == f"{RED}a{GREEN}b{COLOR_END}{RED}c{COLOR_END}"


def test_full_reset_also_reopens():
    red = make_color(RED)
    assert red("a\x1b[0mb") == f"{RED}a\x1b[0m{RED}b{COLOR_END}"


def test_non_string_is_wrapped():
    assert make_color(RED)(5) == f"{RED}5{COLOR_END}"


class TestResolveStarts:
    def test_true_means_default_palette(self):
        assert resolve_color_starts(True) == AVAILABLE_COLORS

    def test_override_by_name(self):
        starts = resolve_color_starts({"green": "\x1b[92m", "pink": "\x1b[95m"})
        assert starts["green"] == "\x1b[92m"
        assert starts["red"] == RED
        assert "pink" not in starts

    def test_none_disables_all(self):
        assert set(resolve_color_starts(None).values()) == {None}

    def test_empty_mapping_keeps_default_palette(self):
        assert resolve_color_starts({}) == AVAILABLE_COLORS

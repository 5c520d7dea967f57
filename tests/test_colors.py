"""Tests for lerndeutsch.ui.colors – palette and hover blending."""

from __future__ import annotations

import re

import pytest

from lerndeutsch.ui.colors import HomeColors, blend_hex

HEX = re.compile(r"^#[0-9a-fA-F]{6}$")


# ===========================================================================
# HomeColors
# ===========================================================================

class TestHomeColors:
    @pytest.mark.parametrize("name", [
        "BG_TOP", "BG_BOTTOM", "PRIMARY", "SECONDARY", "TEXT_PRIMARY",
        "SUCCESS", "SUCCESS_BG", "ERROR", "ERROR_BG",
    ])
    def test_solid_colors_are_hex(self, name):
        assert HEX.match(getattr(HomeColors, name))

    def test_card_backgrounds_are_rgba(self):
        assert HomeColors.CARD_BG.startswith("rgba(")
        assert HomeColors.CARD_BG_HOVER.startswith("rgba(")

    def test_feedback_colors_differ(self):
        assert HomeColors.SUCCESS != HomeColors.ERROR


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_endpoints(self):
        assert blend_hex(HomeColors.PRIMARY, "#FFFFFF", 0.0) == HomeColors.PRIMARY.upper()
        assert blend_hex(HomeColors.PRIMARY, "#FFFFFF", 1.0) == "#FFFFFF"

    def test_hover_tint_is_lighter(self):
        tint = blend_hex("#000000", "#FFFFFF", 0.25)
        assert int(tint[1:3], 16) in (63, 64)

    def test_factor_clamped(self):
        assert blend_hex("#112233", "#445566", -3) == "#112233"
        assert blend_hex("#112233", "#445566", 7) == "#445566"

    def test_surrounding_whitespace(self):
        assert blend_hex(" #00B894 ", "#FFFFFF", 0) == "#00B894"

    @pytest.mark.parametrize("a, b", [
        ("00b894", "#ffffff"),
        ("#fff", "#ffffff"),
        ("#zzzzzz", "#ffffff"),
        ("", ""),
    ])
    def test_unusable_input_returns_first_color(self, a, b):
        assert blend_hex(a, b, 0.5) == a.strip()

    def test_non_numeric_factor(self):
        assert blend_hex("#000000", "#FFFFFF", "half") == "#000000"

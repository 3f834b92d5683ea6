"""Tests for lightness and opacity adjustments."""

import pytest

from tonelab.core.adjust import darken, lighten, shift_lightness, with_lightness, with_opacity
from tonelab.shared.sanitizer import HexParseError


class TestLightness:
    def test_lighten_black(self) -> None:
        assert lighten("#000000", 50) == "#808080"

    def test_darken_white(self) -> None:
        assert darken("#FFFFFF", 100) == "#000000"

    def test_sign_of_amount_ignored(self) -> None:
        assert darken("#FFFFFF", -100) == "#000000"
        assert lighten("#000000", -50) == "#808080"

    def test_clamped_at_white(self) -> None:
        assert lighten("#FFFFFF", 10) == "#ffffff"

    def test_nan_is_no_op(self, brand_orange) -> None:
        assert shift_lightness(brand_orange, float("nan")) == "#f2a30f"

    def test_with_lightness(self) -> None:
        assert with_lightness("#FF0000", 25) == "#800000"
        assert with_lightness("#FF0000", 150) == "#ffffff"

    def test_invalid_hex(self) -> None:
        with pytest.raises(HexParseError):
            lighten("#12", 10)


class TestOpacity:
    def test_rgba(self, brand_orange) -> None:
        assert with_opacity(brand_orange, 0.5) == "rgba(242, 163, 15, 0.5)"

    def test_opacity_clamped(self) -> None:
        assert with_opacity("#000", 2) == "rgba(0, 0, 0, 1)"
        assert with_opacity("#000", -1) == "rgba(0, 0, 0, 0)"

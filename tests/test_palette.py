"""Tests for tonal palette generation."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tonelab.core.conversions import hex_to_hsl
from tonelab.logic.palette.engine import generate_named_palette, generate_palette, palette_labels
from tonelab.shared.sanitizer import HexParseError, is_valid_hex
from tests.strategies import hex_colors


class TestGeneratePalette:
    def test_default_size(self, brand_orange) -> None:
        assert len(generate_palette(brand_orange)) == 9

    def test_lightest_to_darkest(self, brand_orange) -> None:
        lightness = [hex_to_hsl(h)[2] for h in generate_palette(brand_orange)]
        assert lightness[0] == pytest.approx(95.0, abs=1.0)
        assert lightness[-1] == pytest.approx(5.0, abs=1.0)
        assert all(a > b for a, b in zip(lightness, lightness[1:]))

    def test_keeps_seed_hue_and_saturation(self, brand_orange) -> None:
        seed_h, seed_s, _ = hex_to_hsl(brand_orange)
        for hex_code in generate_palette(brand_orange):
            h, s, _ = hex_to_hsl(hex_code)
            assert h == pytest.approx(seed_h, abs=2.0)
            assert s == pytest.approx(seed_s, abs=3.0)

    def test_grey_ramp(self) -> None:
        assert generate_palette("#808080", 3) == ["#f2f2f2", "#808080", "#0d0d0d"]

    def test_custom_range(self) -> None:
        assert generate_palette("#808080", 3, lightest=80, darkest=20) == ["#cccccc", "#808080", "#333333"]

    def test_reversed_range_is_swapped(self) -> None:
        assert generate_palette("#808080", 3, lightest=20, darkest=80) == ["#cccccc", "#808080", "#333333"]

    def test_single_step_returns_seed(self, brand_orange) -> None:
        assert generate_palette(brand_orange, 1) == ["#f2a30f"]

    def test_single_step_clamps_lightness(self) -> None:
        assert generate_palette("#FFFFFF", 1) == ["#f2f2f2"]

    @pytest.mark.parametrize("steps", [0, -5])
    def test_non_positive_steps(self, brand_orange, steps) -> None:
        assert len(generate_palette(brand_orange, steps)) == 1

    def test_invalid_seed(self) -> None:
        with pytest.raises(HexParseError):
            generate_palette("orange")

    @settings(max_examples=50, deadline=None)
    @given(hex_colors, st.integers(min_value=-5, max_value=30))
    def test_shape(self, seed, steps) -> None:
        palette = generate_palette(seed, steps)
        assert len(palette) == max(1, steps)
        assert all(is_valid_hex(h) for h in palette)
        lightness = [hex_to_hsl(h)[2] for h in palette]
        assert lightness == sorted(lightness, reverse=True)


class TestLabels:
    def test_nine(self) -> None:
        assert palette_labels(9) == [100, 200, 300, 400, 500, 600, 700, 800, 900]

    def test_ten_uses_50_to_900(self) -> None:
        assert palette_labels(10) == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]

    def test_odd_sizes_center_on_500(self) -> None:
        assert palette_labels(1) == [500]
        assert palette_labels(3) == [250, 500, 750]
        assert palette_labels(5) == [167, 333, 500, 667, 833]

    def test_named_palette(self, brand_orange) -> None:
        named = generate_named_palette(brand_orange, 10)
        assert list(named) == [50, 100, 200, 300, 400, 500, 600, 700, 800, 900]
        assert list(named.values()) == generate_palette(brand_orange, 10)

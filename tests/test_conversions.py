"""Tests for color space conversions."""

import pytest
from hypothesis import given

from tonelab.core import conversions as conv
from tonelab.shared.sanitizer import HexParseError
from tests.strategies import hex_colors, rgb_triples


class TestHex:
    def test_hex_to_rgb(self, brand_orange) -> None:
        assert conv.hex_to_rgb(brand_orange) == (242, 163, 15)

    def test_hex_to_rgb_shorthand(self) -> None:
        assert conv.hex_to_rgb("#0f0") == (0, 255, 0)

    def test_hex_to_rgb_invalid(self) -> None:
        with pytest.raises(HexParseError):
            conv.hex_to_rgb("#12")

    def test_rgb_to_hex_lowercase(self) -> None:
        assert conv.rgb_to_hex(242, 163, 15) == "#f2a30f"

    def test_rgb_to_hex_clamps_and_rounds(self) -> None:
        assert conv.rgb_to_hex(300, -5, 127.5) == "#ff0080"

    def test_coerce_rgb(self) -> None:
        assert conv.coerce_rgb("#000") == (0, 0, 0)
        assert conv.coerce_rgb((10.4, 20.6, 300)) == (10, 21, 255)

    @given(hex_colors)
    def test_hex_round_trip(self, hex_code) -> None:
        assert conv.rgb_to_hex(*conv.hex_to_rgb(hex_code)) == hex_code


class TestHsl:
    @pytest.mark.parametrize(
        "rgb, hsl",
        [
            ((255, 0, 0), (0.0, 100.0, 50.0)),
            ((0, 255, 0), (120.0, 100.0, 50.0)),
            ((0, 0, 255), (240.0, 100.0, 50.0)),
            ((255, 255, 255), (0.0, 0.0, 100.0)),
            ((0, 0, 0), (0.0, 0.0, 0.0)),
        ],
    )
    def test_rgb_to_hsl_primaries(self, rgb, hsl) -> None:
        assert conv.rgb_to_hsl(*rgb) == pytest.approx(hsl, abs=1e-9)

    def test_brand_orange(self, brand_orange) -> None:
        h, s, L = conv.hex_to_hsl(brand_orange)
        assert h == pytest.approx(39.12, abs=0.01)
        assert s == pytest.approx(89.72, abs=0.01)
        assert L == pytest.approx(50.39, abs=0.01)

    def test_achromatic_has_no_hue_or_saturation(self) -> None:
        h, s, L = conv.rgb_to_hsl(128, 128, 128)
        assert (h, s) == (0.0, 0.0)
        assert L == pytest.approx(50.196, abs=1e-3)

    def test_hsl_to_rgb(self) -> None:
        assert conv.hsl_to_rgb(0, 100, 50) == (255, 0, 0)
        assert conv.hsl_to_rgb(240, 100, 50) == (0, 0, 255)
        assert conv.hsl_to_rgb(0, 100, 25) == (128, 0, 0)

    def test_hsl_to_rgb_wraps_and_clamps(self) -> None:
        assert conv.hsl_to_rgb(360, 100, 50) == (255, 0, 0)
        assert conv.hsl_to_rgb(-120, 100, 50) == (0, 0, 255)
        assert conv.hsl_to_rgb(0, 250, 150) == (255, 255, 255)

    def test_hsl_to_hex(self) -> None:
        assert conv.hsl_to_hex(60, 100, 24) == "#7a7a00"

    @given(rgb_triples)
    def test_round_trip(self, rgb) -> None:
        assert conv.hsl_to_rgb(*conv.rgb_to_hsl(*rgb)) == rgb


class TestXyzLab:
    def test_white_xyz_is_d65(self) -> None:
        assert conv.rgb_to_xyz(255, 255, 255) == pytest.approx((95.047, 100.0, 108.883), abs=0.01)

    def test_black_xyz(self) -> None:
        assert conv.rgb_to_xyz(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_white_lab(self) -> None:
        assert conv.rgb_to_lab(255, 255, 255) == pytest.approx((100.0, 0.0, 0.0), abs=0.01)

    def test_black_lab(self) -> None:
        assert conv.rgb_to_lab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_red_lab(self) -> None:
        L, a, b = conv.rgb_to_lab(255, 0, 0)
        assert L == pytest.approx(53.24, abs=0.05)
        assert a == pytest.approx(80.09, abs=0.1)
        assert b == pytest.approx(67.20, abs=0.1)

    def test_xyz_to_rgb_clips_out_of_gamut(self) -> None:
        assert conv.xyz_to_rgb(200, 200, 200) == (255, 255, 255)
        assert conv.xyz_to_rgb(-10, -10, -10) == (0, 0, 0)

    @given(rgb_triples)
    def test_xyz_round_trip(self, rgb) -> None:
        assert conv.xyz_to_rgb(*conv.rgb_to_xyz(*rgb)) == rgb

    @given(rgb_triples)
    def test_lab_round_trip_within_one_step(self, rgb) -> None:
        back = conv.lab_to_rgb(*conv.rgb_to_lab(*rgb))
        assert all(abs(x - y) <= 1 for x, y in zip(back, rgb))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/conversions.py

import math
from typing import Sequence, Tuple, Union

from . import config as c
from tonelab.shared.clamping import _clamp, _clamp01, _clamp_channel
from tonelab.shared.sanitizer import HexParseError, normalize_hex

RGB = Tuple[int, int, int]
ColorInput = Union[str, Sequence[float]]


def hex_to_rgb(hex_code: str) -> RGB:
    """Convert hex string to RGB tuple. Raises HexParseError on malformed input."""
    h = normalize_hex(hex_code)
    return tuple(int(h[i : i + 2], 16) for i in (1, 3, 5))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB components to a lowercase '#rrggbb' string, clamping each channel."""
    return f"#{_clamp_channel(r):02x}{_clamp_channel(g):02x}{_clamp_channel(b):02x}"


def coerce_rgb(color: ColorInput) -> RGB:
    """
    Accept a hex string or an (r, g, b) sequence and return a clamped int triple.
    Anything else raises HexParseError.
    """
    if isinstance(color, str):
        return hex_to_rgb(color)
    try:
        r, g, b = color
    except (TypeError, ValueError):
        raise HexParseError(color) from None
    return _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)


def _finite_hue(h: float) -> float:
    h = float(h)
    if not math.isfinite(h):
        return 0.0
    return h % c.HUE_MAX


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """
    Convert RGB to HSL.

    Hue is in degrees [0, 360), saturation and lightness are percentages.
    Achromatic colors report hue 0 and saturation 0.
    """
    r_f = _clamp_channel(r) / c.RGB_MAX
    g_f = _clamp_channel(g) / c.RGB_MAX
    b_f = _clamp_channel(b) / c.RGB_MAX
    cmax = max(r_f, g_f, b_f)
    cmin = min(r_f, g_f, b_f)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        h = 0.0
        s = 0.0
    else:
        denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
        s = 0.0 if abs(denom) < c.EPS else delta / denom
        if cmax == r_f:
            h = c.HUE_SECTOR * (((g_f - b_f) / delta) % c.HSL_HUE_MOD)
        elif cmax == g_f:
            h = c.HUE_SECTOR * ((b_f - r_f) / delta + c.HUE_G_OFFSET)
        else:
            h = c.HUE_SECTOR * ((r_f - g_f) / delta + c.HUE_B_OFFSET)
        h = (h + c.HUE_MAX) % c.HUE_MAX
    return (h, _clamp01(s) * c.PERCENT_MAX, L * c.PERCENT_MAX)


def _hsl_to_rgb_float(h: float, s: float, L: float) -> Tuple[float, float, float]:
    h = _finite_hue(h)
    s = _clamp(float(s), 0.0, c.PERCENT_MAX) / c.PERCENT_MAX
    L = _clamp(float(L), 0.0, c.PERCENT_MAX) / c.PERCENT_MAX
    if s == 0:
        r = g = b = L
    else:
        chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
        x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
        m = L - chroma / c.DIV_2
        if 0 <= h < 60:
            r_p, g_p, b_p = chroma, x, 0
        elif 60 <= h < 120:
            r_p, g_p, b_p = x, chroma, 0
        elif 120 <= h < 180:
            r_p, g_p, b_p = 0, chroma, x
        elif 180 <= h < 240:
            r_p, g_p, b_p = 0, x, chroma
        elif 240 <= h < 300:
            r_p, g_p, b_p = x, 0, chroma
        else:
            r_p, g_p, b_p = chroma, 0, x
        r, g, b = (r_p + m), (g_p + m), (b_p + m)
    return _clamp01(r) * c.RGB_MAX, _clamp01(g) * c.RGB_MAX, _clamp01(b) * c.RGB_MAX


def hsl_to_rgb(h: float, s: float, L: float) -> RGB:
    """Convert HSL (degrees, percent, percent) to an int RGB triple."""
    r, g, b = _hsl_to_rgb_float(h, s, L)
    return _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)


def hex_to_hsl(hex_code: str) -> Tuple[float, float, float]:
    return rgb_to_hsl(*hex_to_rgb(hex_code))


def hsl_to_hex(h: float, s: float, L: float) -> str:
    return rgb_to_hex(*hsl_to_rgb(h, s, L))


def _srgb_to_linear(color_comp: float) -> float:
    """Linearize sRGB component."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.SRGB_TO_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def _linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to linear component."""
    l_val = max(l_val, 0.0)
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to CIE XYZ (D65, Y = 100 for white)."""
    r_lin = _srgb_to_linear(float(r))
    g_lin = _srgb_to_linear(float(g))
    b_lin = _srgb_to_linear(float(b))
    x = r_lin * c.M_SRGB_XYZ_X[0] + g_lin * c.M_SRGB_XYZ_X[1] + b_lin * c.M_SRGB_XYZ_X[2]
    y = r_lin * c.M_SRGB_XYZ_Y[0] + g_lin * c.M_SRGB_XYZ_Y[1] + b_lin * c.M_SRGB_XYZ_Y[2]
    z = r_lin * c.M_SRGB_XYZ_Z[0] + g_lin * c.M_SRGB_XYZ_Z[1] + b_lin * c.M_SRGB_XYZ_Z[2]
    return x * c.XYZ_SCALING, y * c.XYZ_SCALING, z * c.XYZ_SCALING


def xyz_to_rgb(x: float, y: float, z: float) -> RGB:
    """Convert CIE XYZ to RGB, clipping out-of-gamut values."""
    x_n, y_n, z_n = (_finite(v) / c.XYZ_SCALING for v in (x, y, z))
    r_lin = x_n * c.M_XYZ_SRGB_R[0] + y_n * c.M_XYZ_SRGB_R[1] + z_n * c.M_XYZ_SRGB_R[2]
    g_lin = x_n * c.M_XYZ_SRGB_G[0] + y_n * c.M_XYZ_SRGB_G[1] + z_n * c.M_XYZ_SRGB_G[2]
    b_lin = x_n * c.M_XYZ_SRGB_B[0] + y_n * c.M_XYZ_SRGB_B[1] + z_n * c.M_XYZ_SRGB_B[2]
    r = _clamp01(_linear_to_srgb(r_lin)) * c.RGB_MAX
    g = _clamp01(_linear_to_srgb(g_lin)) * c.RGB_MAX
    b = _clamp01(_linear_to_srgb(b_lin)) * c.RGB_MAX
    return _clamp_channel(r), _clamp_channel(g), _clamp_channel(b)


def _finite(v: float) -> float:
    v = float(v)
    return v if math.isfinite(v) else 0.0


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t ** 3 if t > c.LAB_INV_THR else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB using the D65 reference white."""
    x_r = _xyz_f(max(_finite(x), 0.0) / c.D65_X)
    y_r = _xyz_f(max(_finite(y), 0.0) / c.D65_Y)
    z_r = _xyz_f(max(_finite(z), 0.0) / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert LAB to CIE XYZ."""
    y_r = (_finite(L) + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = _finite(a) / c.LAB_A_MULT + y_r
    z_r = y_r - _finite(b) / c.LAB_B_MULT
    x = max(_xyz_f_inv(x_r), 0.0) * c.D65_X
    y = max(_xyz_f_inv(y_r), 0.0) * c.D65_Y
    z = max(_xyz_f_inv(z_r), 0.0) * c.D65_Z
    return x, y, z


def rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to LAB conversion."""
    x, y, z = rgb_to_xyz(r, g, b)
    return xyz_to_lab(x, y, z)


def lab_to_rgb(L: float, a: float, b: float) -> RGB:
    x, y, z = lab_to_xyz(L, a, b)
    return xyz_to_rgb(x, y, z)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/adjust.py

from . import config as c
from .conversions import hex_to_hsl, hex_to_rgb, hsl_to_hex
from tonelab.shared.clamping import _clamp, _clamp01


def shift_lightness(hex_code: str, amount: float) -> str:
    """Shift the HSL lightness of a color by `amount` points, clamped to [0, 100]."""
    h, s, L = hex_to_hsl(hex_code)
    amount = float(amount)
    if amount != amount:
        amount = 0.0
    return hsl_to_hex(h, s, _clamp(L + amount, 0.0, c.PERCENT_MAX))


def lighten(hex_code: str, amount: float) -> str:
    return shift_lightness(hex_code, abs(float(amount)))


def darken(hex_code: str, amount: float) -> str:
    return shift_lightness(hex_code, -abs(float(amount)))


def with_lightness(hex_code: str, lightness: float) -> str:
    """Replace the HSL lightness of a color, keeping hue and saturation."""
    h, s, _ = hex_to_hsl(hex_code)
    return hsl_to_hex(h, s, _clamp(float(lightness), 0.0, c.PERCENT_MAX))


def with_opacity(hex_code: str, opacity: float) -> str:
    """Format a color as a CSS rgba() string, opacity clamped to [0, 1]."""
    r, g, b = hex_to_rgb(hex_code)
    alpha = _clamp01(float(opacity))
    return f"rgba({r}, {g}, {b}, {alpha:g})"

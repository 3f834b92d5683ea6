#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/luminance.py

from . import config as c
from tonelab.shared.clamping import _clamp01


def _wcag_linear(color_comp: float) -> float:
    """Linearize an sRGB channel with the WCAG 2.x threshold (0.03928)."""
    c_norm = _clamp01(color_comp / c.RGB_MAX)
    if c_norm <= c.WCAG_LINEAR_TH:
        return c_norm / c.SRGB_SLOPE
    return ((c_norm + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def get_luminance(r: float, g: float, b: float) -> float:
    return (
        c.LUMA_R * _wcag_linear(float(r)) +
        c.LUMA_G * _wcag_linear(float(g)) +
        c.LUMA_B * _wcag_linear(float(b))
    )

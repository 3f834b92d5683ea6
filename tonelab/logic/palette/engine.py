#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/palette/engine.py

from typing import Dict, List

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.shared.clamping import _clamp


def palette_labels(steps: int) -> List[int]:
    """
    Conventional shade labels for a palette of `steps` entries.

    Ten entries get the familiar 50..900 scale; otherwise labels are spread
    evenly over (0, 1000), which puts 500 on the midpoint of odd sizes.
    """
    steps = max(1, int(steps))
    if steps == len(c.PALETTE_TAILWIND_LABELS):
        return list(c.PALETTE_TAILWIND_LABELS)
    if steps == 1:
        return [c.PALETTE_ANCHOR_LABEL]
    return [int(round(c.PALETTE_LABEL_SPAN * (i + 1) / (steps + 1))) for i in range(steps)]


def generate_palette(
    seed_hex: str,
    steps: int = c.PALETTE_DEFAULT_STEPS,
    lightest: float = c.PALETTE_LIGHTEST,
    darkest: float = c.PALETTE_DARKEST,
) -> List[str]:
    """
    Build a tonal scale from one seed color, ordered lightest to darkest.

    Hue and saturation come from the seed; lightness ramps linearly from
    `lightest` down to `darkest`. A single step returns the seed with its
    lightness clamped into that range.
    """
    h, s, L = conv.hex_to_hsl(seed_hex)
    steps = max(1, int(steps))

    top = _clamp(float(lightest), 0.0, c.PERCENT_MAX)
    bottom = _clamp(float(darkest), 0.0, c.PERCENT_MAX)
    if top < bottom:
        top, bottom = bottom, top

    if steps == 1:
        return [conv.hsl_to_hex(h, s, _clamp(L, bottom, top))]

    step = (top - bottom) / (steps - 1)
    return [conv.hsl_to_hex(h, s, top - i * step) for i in range(steps)]


def generate_named_palette(seed_hex: str, steps: int = c.PALETTE_DEFAULT_STEPS) -> Dict[int, str]:
    colors = generate_palette(seed_hex, steps)
    return dict(zip(palette_labels(len(colors)), colors))

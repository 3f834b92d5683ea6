#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/clamping.py

import math


def _clamp(v: float, lo: float, hi: float) -> float:
    """Clamp v into [lo, hi]. NaN maps to lo, infinities to the nearest bound."""
    if v != v:
        return lo
    return max(lo, min(hi, v))


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(1.0, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(255.0, v))


def _clamp_channel(v: float) -> int:
    """Round and clamp a single RGB channel to an int in [0, 255]."""
    v = _clamp255(float(v))
    return int(math.floor(v + 0.5))

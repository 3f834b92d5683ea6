#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/accessible/engine.py

from dataclasses import dataclass

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.core.adjust import shift_lightness
from tonelab.core.contrast import get_contrast_ratio
from tonelab.core.luminance import get_luminance
from tonelab.shared.clamping import _clamp


@dataclass(frozen=True)
class AccessibleColorResult:
    """
    Outcome of an accessible color search.

    `converged` is False when the iteration budget ran out before the
    target ratio was met; `color` is then the last adjusted candidate.
    """
    color: str
    converged: bool
    iterations: int
    ratio: float


def _coerce_ratio(target_ratio: float) -> float:
    ratio = float(target_ratio)
    if ratio != ratio:
        return c.SEARCH_DEFAULT_RATIO
    return _clamp(ratio, c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO)


def search_accessible_color(
    target: str,
    background: str,
    target_ratio: float = c.SEARCH_DEFAULT_RATIO,
    max_iterations: int = c.SEARCH_MAX_ITERATIONS,
) -> AccessibleColorResult:
    """
    Walk the HSL lightness of `target` away from `background` until the pair
    reaches `target_ratio`.

    The direction is fixed up front: light backgrounds (luminance > 0.5)
    darken the target, dark ones lighten it. Iteration i moves the original
    lightness by 2 * i points.
    """
    target_ratio = _coerce_ratio(target_ratio)
    max_iterations = max(0, int(max_iterations))

    fg_rgb = conv.hex_to_rgb(target)
    bg_rgb = conv.hex_to_rgb(background)

    ratio = get_contrast_ratio(fg_rgb, bg_rgb)
    if ratio >= target_ratio:
        return AccessibleColorResult(color=target, converged=True, iterations=0, ratio=ratio)

    direction = -1.0 if get_luminance(*bg_rgb) > c.SEARCH_LIGHT_BG_TH else 1.0

    adjusted = target
    for i in range(1, max_iterations + 1):
        adjusted = shift_lightness(target, direction * c.SEARCH_STEP * i)
        ratio = get_contrast_ratio(adjusted, bg_rgb)
        if ratio >= target_ratio:
            return AccessibleColorResult(color=adjusted, converged=True, iterations=i, ratio=ratio)

    return AccessibleColorResult(color=adjusted, converged=False, iterations=max_iterations, ratio=ratio)


def find_accessible_color(
    target: str,
    background: str,
    target_ratio: float = c.SEARCH_DEFAULT_RATIO,
    max_iterations: int = c.SEARCH_MAX_ITERATIONS,
) -> str:
    """Best-effort accessible variant of `target`; see search_accessible_color."""
    return search_accessible_color(target, background, target_ratio, max_iterations).color

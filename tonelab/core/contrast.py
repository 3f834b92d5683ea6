#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/contrast.py

import enum
from dataclasses import dataclass

from . import config as c
from .conversions import ColorInput, coerce_rgb
from .luminance import get_luminance
from tonelab.shared.clamping import _clamp
from tonelab.shared.sanitizer import HexParseError


class ComplianceLevel(str, enum.Enum):
    FAIL = "fail"
    AA = "aa"
    AAA = "aaa"


@dataclass(frozen=True)
class ContrastResult:
    ratio: float
    wcag_aa: bool
    wcag_aaa: bool
    level: ComplianceLevel


FAILED_RESULT = ContrastResult(ratio=0.0, wcag_aa=False, wcag_aaa=False, level=ComplianceLevel.FAIL)


def get_wcag_contrast(lum: float) -> dict:
    """
    Calculate WCAG contrast ratios against pure white and pure black.

    Source: Web Content Accessibility Guidelines (WCAG) 2.1
    Formula: (L1 + 0.05) / (L2 + 0.05), where L is the relative luminance.
    """
    lum = _clamp(float(lum), 0.0, c.UNIT)
    contrast_white = (c.UNIT + c.WCAG_LUMINANCE_OFFSET) / (lum + c.WCAG_LUMINANCE_OFFSET)
    contrast_black = (lum + c.WCAG_LUMINANCE_OFFSET) / (0.0 + c.WCAG_LUMINANCE_OFFSET)

    def get_pass_fail(ratio: float) -> dict:
        return {
            "AA-Large": "Pass" if ratio >= c.WCAG_AA_LARGE else "Fail",
            "AA": "Pass" if ratio >= c.WCAG_AA_NORMAL else "Fail",
            "AAA-Large": "Pass" if ratio >= c.WCAG_AAA_LARGE else "Fail",
            "AAA": "Pass" if ratio >= c.WCAG_AAA_NORMAL else "Fail",
        }

    return {
        "white": {
            "ratio": round(contrast_white, c.WCAG_RATIO_DECIMALS),
            "levels": get_pass_fail(contrast_white)
        },
        "black": {
            "ratio": round(contrast_black, c.WCAG_RATIO_DECIMALS),
            "levels": get_pass_fail(contrast_black)
        },
    }


def _ratio_from_luminance(y1: float, y2: float) -> float:
    l1, l2 = (y1, y2) if y1 > y2 else (y2, y1)
    ratio = (l1 + c.WCAG_LUMINANCE_OFFSET) / (l2 + c.WCAG_LUMINANCE_OFFSET)
    return _clamp(ratio, c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO)


def get_contrast_ratio(color_a: ColorInput, color_b: ColorInput) -> float:
    """
    Calculate the WCAG 2.1 contrast ratio between two colors.

    Colors may be hex strings or (r, g, b) tuples. The result lies in
    [1, 21] and does not depend on argument order.

    Source: https://www.w3.org/TR/WCAG21/#dfn-contrast-ratio
    """
    y1 = get_luminance(*coerce_rgb(color_a))
    y2 = get_luminance(*coerce_rgb(color_b))
    return _ratio_from_luminance(y1, y2)


def thresholds(large_text: bool = False) -> tuple:
    """Return the (AA, AAA) minimum ratios for normal or large text."""
    if large_text:
        return c.WCAG_AA_LARGE, c.WCAG_AAA_LARGE
    return c.WCAG_AA_NORMAL, c.WCAG_AAA_NORMAL


def classify_ratio(ratio: float, large_text: bool = False) -> ContrastResult:
    aa_min, aaa_min = thresholds(large_text)
    wcag_aa = ratio >= aa_min
    wcag_aaa = ratio >= aaa_min
    if wcag_aaa:
        level = ComplianceLevel.AAA
    elif wcag_aa:
        level = ComplianceLevel.AA
    else:
        level = ComplianceLevel.FAIL
    return ContrastResult(
        ratio=round(ratio, c.WCAG_RATIO_DECIMALS),
        wcag_aa=wcag_aa,
        wcag_aaa=wcag_aaa,
        level=level,
    )


def test_contrast(foreground: ColorInput, background: ColorInput, large_text: bool = False) -> ContrastResult:
    """
    Test a foreground/background pair against WCAG AA and AAA.

    Malformed hex input never raises: it yields a result with ratio 0,
    both flags False and level 'fail'.
    """
    try:
        ratio = get_contrast_ratio(foreground, background)
    except HexParseError:
        return FAILED_RESULT
    return classify_ratio(ratio, large_text)


# Keeps pytest from collecting the public API function as a test.
test_contrast.__test__ = False


def is_accessible(foreground: ColorInput, background: ColorInput, level: str = "AA", large_text: bool = False) -> bool:
    """Check whether a pair passes the given WCAG level ('AA' or 'AAA')."""
    result = test_contrast(foreground, background, large_text)
    if str(level).upper() == "AAA":
        return result.wcag_aaa
    return result.wcag_aa

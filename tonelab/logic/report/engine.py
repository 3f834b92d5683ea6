#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/report/engine.py

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, NamedTuple

from tonelab.core import config as c
from tonelab.core.brand import (
    ACCESSIBLE_ORANGE,
    BRAND_COLORS,
    BrandScale,
    Shade,
)
from tonelab.core.contrast import ContrastResult, test_contrast, thresholds


class ColorPair(NamedTuple):
    name: str
    foreground: str
    background: str


_ORANGE = BRAND_COLORS[BrandScale.ORANGE]
_GREY = BRAND_COLORS[BrandScale.GREY]

APPLICATION_PAIRS = (
    ColorPair("primary-button", "#FFFFFF", _ORANGE[Shade.S500]),
    ColorPair("primary-button-hover", "#FFFFFF", _ORANGE[Shade.S600]),
    ColorPair("secondary-button", "#FFFFFF", _GREY[Shade.S900]),
    ColorPair("body-text", _GREY[Shade.S900], "#FFFFFF"),
    ColorPair("body-text-muted-bg", _GREY[Shade.S900], _GREY[Shade.S200]),
    ColorPair("muted-text", _GREY[Shade.S600], _ORANGE[Shade.S50]),
    ColorPair("link-text", _ORANGE[Shade.S500], "#FFFFFF"),
    ColorPair("link-hover", _ORANGE[Shade.S700], "#FFFFFF"),
    ColorPair("nav-text", _GREY[Shade.S900], "#FFFFFF"),
    ColorPair("nav-active", "#FFFFFF", _ORANGE[Shade.S500]),
    ColorPair("success-text", "#FFFFFF", "#22C55E"),
    ColorPair("error-text", "#FFFFFF", "#EF4444"),
    ColorPair("high-contrast-primary", "#FFFFFF", ACCESSIBLE_ORANGE),
    ColorPair("high-contrast-secondary", "#FFFFFF", "#000000"),
    ColorPair("high-contrast-text", "#000000", "#FFFFFF"),
)

GENERAL_RECOMMENDATIONS = (
    "Consider implementing a high contrast mode for users with visual impairments.",
    "Test with users who have visual impairments.",
    "Run automated contrast checks in your CI pipeline.",
)


@dataclass(frozen=True)
class ComplianceReport:
    results: Dict[str, ContrastResult]
    total: int
    passed_aa: int
    passed_aaa: int
    failed_aa: int
    compliance_percentage: int
    recommendations: List[str] = field(default_factory=list)
    critical_issues: List[str] = field(default_factory=list)


def _is_critical(name: str) -> bool:
    return any(key in name for key in c.CRITICAL_PAIR_KEYWORDS)


def build_compliance_report(pairs: Iterable[ColorPair] = APPLICATION_PAIRS, large_text: bool = False) -> ComplianceReport:
    """
    Test every named pair and summarise WCAG compliance.

    Failing pairs produce a recommendation; failing buttons, body text and
    navigation are also listed as critical issues.
    """
    aa_min, _ = thresholds(large_text)
    results: Dict[str, ContrastResult] = {}
    recommendations: List[str] = []
    critical_issues: List[str] = []
    passed_aa = passed_aaa = failed_aa = 0

    for name, foreground, background in pairs:
        result = test_contrast(foreground, background, large_text)
        results[name] = result

        if result.wcag_aaa:
            passed_aaa += 1
        if result.wcag_aa:
            passed_aa += 1
            continue

        failed_aa += 1
        if _is_critical(name):
            critical_issues.append(
                f"CRITICAL: {name} has insufficient contrast ({result.ratio:.2f}:1). This affects core functionality."
            )
        recommendations.append(
            f"{name}: contrast ratio {result.ratio:.2f}:1 fails WCAG AA (needs {aa_min:g}:1). "
            "Consider using darker/lighter colors."
        )

    total = passed_aa + failed_aa
    compliance = int(round(passed_aa / total * c.PERCENT_MAX)) if total else int(c.PERCENT_MAX)
    if compliance < c.PERCENT_MAX:
        recommendations.extend(GENERAL_RECOMMENDATIONS)

    return ComplianceReport(
        results=results,
        total=total,
        passed_aa=passed_aa,
        passed_aaa=passed_aaa,
        failed_aa=failed_aa,
        compliance_percentage=compliance,
        recommendations=recommendations,
        critical_issues=critical_issues,
    )

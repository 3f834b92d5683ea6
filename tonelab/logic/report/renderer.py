#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/report/renderer.py

from typing import Iterable

from tonelab.core import config as c
from tonelab.core.contrast import ComplianceLevel
from tonelab.shared.formatting import format_ratio
from tonelab.shared.preview import sample_text
from .engine import ColorPair, ComplianceReport


def render_report(report: ComplianceReport, pairs: Iterable[ColorPair]) -> None:
    info = c.MSG_BOLD_COLORS["info"]
    print()
    for name, foreground, background in pairs:
        result = report.results[name]
        tag_color = c.MSG_BOLD_COLORS["error"] if result.level is ComplianceLevel.FAIL else c.MSG_BOLD_COLORS["success"]
        print(
            f"{info}{name:<26}{c.RESET} {sample_text(foreground, background, ' Aa ')} "
            f"{c.BOLD_WHITE}{format_ratio(result.ratio):>8}{c.RESET}  {tag_color}{result.level.value.upper()}{c.RESET}"
        )

    print()
    print(
        f"{c.BOLD_WHITE}total {report.total}  passed AA {report.passed_aa}  passed AAA {report.passed_aaa}  "
        f"failed {report.failed_aa}  compliance {report.compliance_percentage}%{c.RESET}"
    )

    if report.critical_issues:
        print()
        for issue in report.critical_issues:
            print(f"{c.MSG_BOLD_COLORS['error']}{issue}{c.RESET}")

    if report.recommendations:
        print()
        for rec in report.recommendations:
            print(f"{c.MSG_COLORS['warning']}- {rec}{c.RESET}")
    print()

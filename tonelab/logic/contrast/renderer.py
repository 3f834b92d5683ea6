#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/contrast/renderer.py

from tonelab.core import config as c
from tonelab.core.contrast import ComplianceLevel, ContrastResult, thresholds
from tonelab.shared.formatting import format_ratio
from tonelab.shared.preview import print_color_block, sample_text


def _pass_fail(ok: bool) -> str:
    if ok:
        return f"{c.MSG_BOLD_COLORS['success']}Pass{c.RESET}"
    return f"{c.MSG_BOLD_COLORS['error']}Fail{c.RESET}"


def _level_tag(level: ComplianceLevel) -> str:
    color = c.MSG_BOLD_COLORS["error"] if level is ComplianceLevel.FAIL else c.MSG_BOLD_COLORS["success"]
    return f"{color}{level.value.upper()}{c.RESET}"


def render_contrast(fg_hex: str, bg_hex: str, result: ContrastResult, large_text: bool = False) -> None:
    """Print both swatches, a text sample and the WCAG verdict."""
    aa_min, aaa_min = thresholds(large_text)
    info = c.MSG_BOLD_COLORS["info"]

    print()
    print_color_block(fg_hex, f"{info}foreground{c.RESET}")
    print_color_block(bg_hex, f"{info}background{c.RESET}")
    print()
    print(f"{info}sample{c.RESET}            {c.BOLD_WHITE}:{c.RESET}   {sample_text(fg_hex, bg_hex)}")
    print(f"{info}ratio{c.RESET}             {c.BOLD_WHITE}: {format_ratio(result.ratio)}{c.RESET}")
    print(f"{info}AA  (>= {aa_min:g}){c.RESET}      {c.BOLD_WHITE}:{c.RESET} {_pass_fail(result.wcag_aa)}")
    print(f"{info}AAA (>= {aaa_min:g}){c.RESET}      {c.BOLD_WHITE}:{c.RESET} {_pass_fail(result.wcag_aaa)}")
    print(f"{info}level{c.RESET}             {c.BOLD_WHITE}:{c.RESET} {_level_tag(result.level)}")
    print()

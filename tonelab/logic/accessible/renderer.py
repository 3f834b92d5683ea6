#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/accessible/renderer.py

from tonelab.core import config as c
from tonelab.shared.formatting import format_ratio
from tonelab.shared.preview import print_color_block, sample_text
from .engine import AccessibleColorResult


def render_search(target_hex: str, bg_hex: str, target_ratio: float, result: AccessibleColorResult) -> None:
    info = c.MSG_BOLD_COLORS["info"]
    print()
    print_color_block(target_hex, f"{info}original{c.RESET}")
    print_color_block(bg_hex, f"{info}background{c.RESET}")
    print_color_block(result.color, f"{c.BOLD_WHITE}accessible{c.RESET}")
    print()
    print(f"{info}sample{c.RESET}            {c.BOLD_WHITE}:{c.RESET}   {sample_text(result.color, bg_hex)}")
    print(f"{info}ratio{c.RESET}             {c.BOLD_WHITE}: {format_ratio(result.ratio)} (target {format_ratio(target_ratio)}){c.RESET}")
    print(f"{info}iterations{c.RESET}        {c.BOLD_WHITE}: {result.iterations}{c.RESET}")
    print()

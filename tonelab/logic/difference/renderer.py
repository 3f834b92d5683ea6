#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/difference/renderer.py

from tonelab.core import config as c
from tonelab.core.difference import describe_delta_e
from tonelab.shared.preview import print_color_block


def render_delta_e(hex_a: str, hex_b: str, value: float, method: str) -> None:
    info = c.MSG_BOLD_COLORS["info"]
    print()
    print_color_block(hex_a, f"{info}color 1{c.RESET}")
    print_color_block(hex_b, f"{info}color 2{c.RESET}")
    print()
    print(f"{info}delta e ({method}){c.RESET}  {c.BOLD_WHITE}: {value:.4f}{c.RESET}")
    print(f"{info}perception{c.RESET}        {c.BOLD_WHITE}: {describe_delta_e(value)}{c.RESET}")
    print()

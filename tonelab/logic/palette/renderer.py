#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/palette/renderer.py

from typing import Dict

from tonelab.core import config as c
from tonelab.shared.preview import print_color_block


def render_palette(seed_hex: str, palette: Dict[int, str]) -> None:
    """Print the seed followed by every labeled palette entry."""
    print()
    print_color_block(seed_hex, f"{c.BOLD_WHITE}seed{c.RESET}")
    print()
    for label, hex_code in palette.items():
        tag = f"{c.MSG_BOLD_COLORS['info']}{label:>5}{c.RESET}"
        print_color_block(hex_code, tag)
    print()

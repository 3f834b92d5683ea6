#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/convert/renderer.py

from tonelab.core import config as c
from tonelab.core import conversions as conv
from tonelab.shared.formatting import format_colorspace


def render_convert_info(r: int, g: int, b: int, fmt: str) -> str:
    """Composes RGB into a formatted output string."""
    def bold(t): return f"{c.BOLD_WHITE}{t}{c.RESET}"

    maps = {
        "hex": lambda: (conv.rgb_to_hex(r, g, b),),
        "rgb": lambda: (r, g, b),
        "hsl": lambda: conv.rgb_to_hsl(r, g, b),
        "xyz": lambda: conv.rgb_to_xyz(r, g, b),
        "lab": lambda: conv.rgb_to_lab(r, g, b),
    }

    return bold(format_colorspace(fmt, *maps[fmt]())) if fmt in maps else ""

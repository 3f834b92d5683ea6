#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/preview.py

import re

from tonelab.core.conversions import hex_to_rgb
from tonelab.core import config as c


def get_visible_len(s: str) -> int:
    ansi_escape = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')
    return len(ansi_escape.sub('', s))


def print_color_block(hex_code: str, title: str = "color", end: str = "\n") -> None:
    r, g, b = hex_to_rgb(hex_code)
    vis_len = get_visible_len(title)
    padding = " " * max(0, 18 - vis_len)

    print(f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   \033[48;2;{r};{g};{b}m                {c.RESET}  {c.BOLD_WHITE}{hex_code.upper()}{c.RESET}", end=end)


def sample_text(fg_hex: str, bg_hex: str, text: str = " Sample text ") -> str:
    """Render `text` in the foreground color on the background color."""
    fr, fg, fb = hex_to_rgb(fg_hex)
    br, bg, bb = hex_to_rgb(bg_hex)
    return f"\033[48;2;{br};{bg};{bb}m\033[38;2;{fr};{fg};{fb}m{text}{c.RESET}"

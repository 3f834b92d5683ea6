#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/difference/resolver.py

import argparse
import sys

from tonelab.core.difference import delta_e
from tonelab.shared.logger import log
from .renderer import render_delta_e


def resolve_delta_e_input(args: argparse.Namespace) -> None:
    colors = args.hex or []
    if len(colors) != 2:
        log("error", "exactly two hex codes are required for delta e")
        log("info", "use -H HEX twice")
        sys.exit(2)

    hex_a, hex_b = colors
    value = delta_e(hex_a, hex_b, method=args.method)
    render_delta_e(hex_a, hex_b, value, args.method)

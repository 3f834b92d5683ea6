#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/convert/engine.py

import argparse
import sys

from tonelab.core import config as c
from tonelab.shared.logger import log
from .resolver import to_rgb
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    if args.hex:
        src_fmt, value = "hex", args.hex
    elif args.value is not None:
        if not args.from_format or args.from_format == "hex":
            log("error", "--value needs -f/--from rgb, hsl, xyz or lab")
            sys.exit(2)
        src_fmt, value = args.from_format, args.value
    else:
        log("error", "one of the arguments -H/--hex or -V/--value is required")
        log("info", "use 'tonelab convert --help' for more information")
        sys.exit(2)

    r, g, b = to_rgb(value, src_fmt)
    out = render_convert_info(r, g, b, args.to_format)

    if args.verbose:
        src = render_convert_info(r, g, b, src_fmt)
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/palette.py

import argparse

from tonelab.core import config as c
from tonelab.shared.logger import ToneLabArgumentParser
from tonelab.shared.sanitizer import INPUT_HANDLERS
from tonelab.shared.truecolor import ensure_truecolor
from tonelab.logic.palette.resolver import resolve_palette_input


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = ToneLabArgumentParser(
        prog="tonelab palette",
        description="tonelab palette: tonal scale from a single seed color",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        required=True,
        help="seed color as hex"
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=c.PALETTE_DEFAULT_STEPS,
        help=f"number of shades (default: {c.PALETTE_DEFAULT_STEPS}, max: {c.MAX_STEPS})"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    resolve_palette_input(args)
    return 0


if __name__ == "__main__":
    main()

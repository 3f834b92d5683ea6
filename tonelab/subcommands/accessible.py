#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/accessible.py

import argparse

from tonelab.core import config as c
from tonelab.shared.logger import ToneLabArgumentParser
from tonelab.shared.sanitizer import INPUT_HANDLERS
from tonelab.shared.truecolor import ensure_truecolor
from tonelab.logic.accessible.resolver import resolve_accessible_input


def get_accessible_parser() -> argparse.ArgumentParser:
    """Create argument parser for accessible command."""
    parser = ToneLabArgumentParser(
        prog="tonelab accessible",
        description="tonelab accessible: find the nearest variant of a color that meets a contrast ratio",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        type=INPUT_HANDLERS["hex"],
        required=True,
        help="color to adjust, as hex"
    )
    parser.add_argument(
        "-bg",
        "--background",
        type=INPUT_HANDLERS["hex"],
        required=True,
        help="background color as hex"
    )
    parser.add_argument(
        "-R",
        "--ratio",
        type=INPUT_HANDLERS["ratio"],
        default=c.SEARCH_DEFAULT_RATIO,
        help=f"target contrast ratio (default: {c.SEARCH_DEFAULT_RATIO:g}, range 1-21)"
    )
    parser.add_argument(
        "-I",
        "--iterations",
        type=INPUT_HANDLERS["iterations"],
        default=c.SEARCH_MAX_ITERATIONS,
        help=f"search budget (default: {c.SEARCH_MAX_ITERATIONS}, max: {c.MAX_ITERATIONS})"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for accessible command."""
    parser = get_accessible_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    resolve_accessible_input(args)
    return 0


if __name__ == "__main__":
    main()

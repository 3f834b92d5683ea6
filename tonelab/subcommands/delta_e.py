#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/delta_e.py

import argparse

from tonelab.core import config as c
from tonelab.shared.logger import ToneLabArgumentParser
from tonelab.shared.sanitizer import INPUT_HANDLERS
from tonelab.shared.truecolor import ensure_truecolor
from tonelab.logic.difference.resolver import resolve_delta_e_input


def get_delta_e_parser() -> argparse.ArgumentParser:
    """Create argument parser for delta-e command."""
    parser = ToneLabArgumentParser(
        prog="tonelab delta-e",
        description="tonelab delta-e: perceptual difference between two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX twice"
    )
    parser.add_argument(
        "-m",
        "--method",
        type=INPUT_HANDLERS["metric"],
        choices=c.DELTA_E_METHODS,
        default="cie76",
        help="difference metric (default: cie76)"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for delta-e command."""
    parser = get_delta_e_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    resolve_delta_e_input(args)
    return 0


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/contrast.py

import argparse

from tonelab.shared.logger import ToneLabArgumentParser
from tonelab.shared.sanitizer import INPUT_HANDLERS
from tonelab.shared.truecolor import ensure_truecolor
from tonelab.logic.contrast.resolver import resolve_contrast_input


def get_contrast_parser() -> argparse.ArgumentParser:
    """Create argument parser for contrast command."""
    parser = ToneLabArgumentParser(
        prog="tonelab contrast",
        description="tonelab contrast: WCAG contrast ratio and compliance of a color pair",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-fg",
        "--foreground",
        type=INPUT_HANDLERS["hex"],
        required=True,
        help="foreground (text) color as hex"
    )
    parser.add_argument(
        "-bg",
        "--background",
        type=INPUT_HANDLERS["hex"],
        required=True,
        help="background color as hex"
    )
    parser.add_argument(
        "-L",
        "--large-text",
        action="store_true",
        help="use large text thresholds (AA 3.0, AAA 4.5)"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for contrast command."""
    parser = get_contrast_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    resolve_contrast_input(args)
    return 0


if __name__ == "__main__":
    main()

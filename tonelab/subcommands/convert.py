#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/convert.py

import argparse

from tonelab.core import config as c
from tonelab.shared.logger import ToneLabArgumentParser
from tonelab.shared.sanitizer import INPUT_HANDLERS
from tonelab.logic.convert.engine import run


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = ToneLabArgumentParser(
        prog="tonelab convert",
        description="tonelab convert: convert a color between hex, rgb, hsl, xyz and lab",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        type=INPUT_HANDLERS["hex"],
        help="source color as hex (3 or 6 digits, optional #)"
    )
    parser.add_argument(
        "-V",
        "--value",
        type=INPUT_HANDLERS["triple"],
        help="source color as three components, e.g. \"rgb(242, 163, 15)\""
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="from_format",
        type=INPUT_HANDLERS["format"],
        choices=[fmt for fmt in c.CONVERT_FORMATS if fmt != "hex"],
        help="format of --value"
    )
    parser.add_argument(
        "-t",
        "--to",
        dest="to_format",
        type=INPUT_HANDLERS["format"],
        choices=c.CONVERT_FORMATS,
        required=True,
        help="output format"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show the source value next to the result"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(argv)
    run(args)
    return 0


if __name__ == "__main__":
    main()

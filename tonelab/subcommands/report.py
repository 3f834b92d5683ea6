#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/report.py

import argparse

from tonelab.shared.logger import ToneLabArgumentParser
from tonelab.shared.truecolor import ensure_truecolor
from tonelab.logic.report.resolver import resolve_report_input


def get_report_parser() -> argparse.ArgumentParser:
    """Create argument parser for report command."""
    parser = ToneLabArgumentParser(
        prog="tonelab report",
        description="tonelab report: WCAG compliance of the brand color combinations",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-L",
        "--large-text",
        action="store_true",
        help="use large text thresholds (AA 3.0, AAA 4.5)"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="exit with status 1 when any combination fails AA"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point for report command."""
    parser = get_report_parser()
    args = parser.parse_args(argv)
    ensure_truecolor()
    return resolve_report_input(args)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/main.py

import argparse
import sys

from tonelab import __version__
from tonelab.subcommands.command_registry import SUBCOMMANDS
from tonelab.shared.logger import log, ToneLabArgumentParser
from tonelab.shared.truecolor import ensure_truecolor


def get_main_parser() -> argparse.ArgumentParser:
    """Create argument parser for the top-level tonelab command."""
    parser = ToneLabArgumentParser(
        prog="tonelab",
        description="tonelab: color science and WCAG accessibility toolkit",
        epilog="commands: " + ", ".join(SUBCOMMANDS),
        formatter_class=argparse.RawTextHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "-h",
        "--help",
        action="help",
        default=argparse.SUPPRESS,
        help="show this help message and exit",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"tonelab {__version__}",
        help="show program version and exit",
    )
    parser.add_argument(
        "-hf",
        "--help-full",
        action="store_true",
        help="show full help message including subcommands",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=argparse.SUPPRESS,
    )
    return parser


def handle_main_command(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            try:
                getter = getattr(module, f"get_{name.replace('-', '_')}_parser")
                getter().print_help()
            except AttributeError:
                log("info", f"help for '{name}' not available")
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        log("info", "use 'tonelab --help' for more information")
        sys.exit(2)

    parser.print_help()


def main() -> None:
    """Main entry point for tonelab CLI"""
    # Subcommand Routing
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            ensure_truecolor()
            sys.exit(SUBCOMMANDS[cmd].main() or 0)

    parser = get_main_parser()
    args = parser.parse_args()
    handle_main_command(args, parser)


if __name__ == "__main__":
    main()

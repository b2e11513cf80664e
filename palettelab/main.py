#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/main.py

import argparse
import sys

from palettelab import __version__
from palettelab.subcommands.command_registry import SUBCOMMANDS
from palettelab.shared.logger import log, PalettelabArgumentParser


def get_main_parser() -> argparse.ArgumentParser:
    """Create the top-level parser, which only handles help and version."""
    parser = PalettelabArgumentParser(
        prog="palettelab",
        description="palettelab: color conversions, perceptual distances, gradients and palettes",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="commands: " + ", ".join(SUBCOMMANDS),
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
        version=f"palettelab {__version__}",
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


def main() -> None:
    """Main entry point for palettelab CLI"""
    # Subcommand Routing (Global behavior)
    if len(sys.argv) > 1:
        cmd = sys.argv[1].lower()
        if cmd in SUBCOMMANDS:
            sys.argv.pop(1)
            SUBCOMMANDS[cmd].main()
            sys.exit(0)

    parser = get_main_parser()
    args = parser.parse_args()

    if args.help_full:
        parser.print_help()
        for name, module in SUBCOMMANDS.items():
            print("\n" * 2)
            getter = getattr(module, f"get_{name}_parser")
            getter().print_help()
        sys.exit(0)

    if args.command:
        log("error", f"unrecognized command or argument: '{args.command}'")
        sys.exit(2)

    parser.print_help()


if __name__ == "__main__":
    main()

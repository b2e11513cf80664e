#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/gradient.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor
from palettelab.logic.gradient.engine import run


def get_gradient_parser() -> argparse.ArgumentParser:
    """Create argument parser for gradient command."""
    parser = PalettelabArgumentParser(
        prog="palettelab gradient",
        description="palettelab gradient: generate color gradients between multiple hex codes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX multiple times for inputs"
    )
    parser.add_argument(
        "-S",
        "--steps",
        type=INPUT_HANDLERS["steps"],
        default=c.DEFAULT_STEPS,
        help=f"total steps in gradient (default: {c.DEFAULT_STEPS}, max: {c.MAX_STEPS})",
    )
    parser.add_argument(
        "-cs",
        "--colorspace",
        default="lab",
        type=INPUT_HANDLERS["colorspace"],
        choices=c.BLEND_SPACES,
        help="colorspace interpolation (default: lab)"
    )
    return parser


def main() -> None:
    """Main entry point for gradient command."""
    parser = get_gradient_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()

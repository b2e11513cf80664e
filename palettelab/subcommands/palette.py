#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/palette.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor
from palettelab.logic.palette.engine import run


def get_palette_parser() -> argparse.ArgumentParser:
    """Create argument parser for palette command."""
    parser = PalettelabArgumentParser(
        prog="palettelab palette",
        description="palettelab palette: generate warm or happy color palettes",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-p",
        "--profile",
        default="warm",
        type=INPUT_HANDLERS["profile"],
        choices=c.PALETTE_PROFILES,
        help="palette profile (default: warm)"
    )
    parser.add_argument(
        "-c",
        "--count",
        type=INPUT_HANDLERS["count"],
        default=c.DEFAULT_COUNT,
        help=f"number of colors (default: {c.DEFAULT_COUNT}, max: {c.MAX_COUNT})"
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=INPUT_HANDLERS["seed"],
        default=None,
        help="seed for reproducibility of random"
    )
    parser.add_argument(
        "-f",
        "--fast",
        action="store_true",
        help="evenly spaced hues, no rejection sampling"
    )
    parser.add_argument(
        "-sf",
        "--soft",
        action="store_true",
        help="k-means clustering of the profile's Lab region (slower)"
    )
    parser.add_argument(
        "-st",
        "--sort",
        action="store_true",
        help="order colors so neighbors look alike, darkest first"
    )
    return parser


def main() -> None:
    """Main entry point for palette command."""
    parser = get_palette_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()

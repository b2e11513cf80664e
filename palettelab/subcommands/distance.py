#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/distance.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.shared.truecolor import ensure_truecolor
from palettelab.logic.distance.engine import run


def get_distance_parser() -> argparse.ArgumentParser:
    """Create argument parser for distance command."""
    parser = PalettelabArgumentParser(
        prog="palettelab distance",
        description="palettelab distance: perceptual distance between two colors",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        action="append",
        type=INPUT_HANDLERS["hex"],
        help="use -H HEX twice for the two inputs",
    )
    parser.add_argument(
        "-m",
        "--metric",
        default="lab",
        type=INPUT_HANDLERS["distance_metric"],
        choices=c.DISTANCE_METRICS,
        help="distance metric (default: lab)",
    )
    return parser


def main() -> None:
    """Main entry point for distance command."""
    parser = get_distance_parser()
    args = parser.parse_args(sys.argv[1:])
    ensure_truecolor()
    run(args)


if __name__ == "__main__":
    main()

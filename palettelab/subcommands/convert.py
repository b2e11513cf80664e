#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/subcommands/convert.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.shared.logger import PalettelabArgumentParser
from palettelab.shared.sanitizer import INPUT_HANDLERS
from palettelab.logic.convert.engine import run


def get_convert_parser() -> argparse.ArgumentParser:
    """Create argument parser for convert command."""
    parser = PalettelabArgumentParser(
        prog="palettelab convert",
        description="palettelab convert: show a hex color in another colorspace",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "-H",
        "--hex",
        required=True,
        type=INPUT_HANDLERS["hex"],
        help="hex color code, '#' optional",
    )
    parser.add_argument(
        "-t",
        "--to-format",
        dest="to_format",
        default="lab",
        type=INPUT_HANDLERS["to_format"],
        choices=c.OUTPUT_FORMATS,
        help="output format (default: lab)",
    )
    parser.add_argument(
        "-V",
        "--verbose",
        action="store_true",
        help="show the input next to the output",
    )
    return parser


def main() -> None:
    """Main entry point for convert command."""
    parser = get_convert_parser()
    args = parser.parse_args(sys.argv[1:])
    run(args)


if __name__ == "__main__":
    main()

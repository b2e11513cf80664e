#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/distance/engine.py

import argparse
import sys

from palettelab.core import config as c
from palettelab.core import difference as diff
from palettelab.core.color import parse_hex
from palettelab.shared.logger import log
from palettelab.shared.preview import print_color_block

METRICS = {
    "lab": diff.distance_lab,
    "ciede2000": diff.distance_ciede2000,
    "cie94": diff.distance_cie94,
    "luv": diff.distance_luv,
    "rgb": diff.distance_rgb,
    "linear": diff.distance_linear_rgb,
    "riemersma": diff.distance_riemersma,
}


def run(args: argparse.Namespace) -> None:
    """Print the distance between exactly two colors."""
    if not args.hex or len(args.hex) != 2:
        log("error", "exactly two hex codes are required for a distance")
        log("info", "use -H HEX twice")
        sys.exit(2)

    c1, c2 = (parse_hex(h) for h in args.hex)
    value = METRICS[args.metric](c1, c2)

    print()
    print_color_block(c1, "first")
    print_color_block(c2, "second")
    print()
    print(f"{c.MSG_BOLD_COLORS['info']}{args.metric} distance{c.RESET}: {c.BOLD_WHITE}{value:.4f}{c.RESET}")

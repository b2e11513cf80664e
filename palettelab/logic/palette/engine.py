#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/palette/engine.py

import argparse
import random
import sys

from palettelab.core import palette as pal
from palettelab.core import soft_palette as soft
from palettelab.core.errors import GenerationError
from palettelab.core.sort import sorted_colors
from palettelab.shared.logger import log
from .renderer import render_palette

FAST_GENERATORS = {
    "warm": pal.fast_warm_palette,
    "happy": pal.fast_happy_palette,
}

SOFT_GENERATORS = {
    "warm": soft.soft_warm_palette,
    "happy": soft.soft_happy_palette,
}


def run(args: argparse.Namespace) -> None:
    """Main execution engine for palette generation"""
    if args.fast and args.soft:
        log("error", "--fast and --soft cannot be combined")
        sys.exit(2)

    # A dedicated generator keeps seeded runs reproducible
    rand = random.Random(args.seed)

    try:
        if args.fast:
            colors = FAST_GENERATORS[args.profile](args.count, rand)
        elif args.soft:
            colors = SOFT_GENERATORS[args.profile](args.count, rand)
        else:
            colors = pal.generate_palette(args.count, pal.PROFILES[args.profile], rand)
    except GenerationError as e:
        log("error", str(e))
        sys.exit(1)

    if args.sort:
        colors = sorted_colors(colors)

    render_palette(args.profile, colors)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/gradient/engine.py

import argparse
import sys

from palettelab.core.blend import gradient
from palettelab.core.color import parse_hex
from palettelab.shared.logger import log
from .renderer import render_gradient


def run(args: argparse.Namespace) -> None:
    """Orchestrate input resolution and gradient generation."""
    colors_hex = args.hex or []
    if len(colors_hex) < 2:
        log("error", "at least two hex codes are required for a gradient")
        log("info", "use -H HEX multiple times")
        sys.exit(2)

    stops = [parse_hex(h) for h in colors_hex]
    render_gradient(gradient(stops, args.steps, args.colorspace))

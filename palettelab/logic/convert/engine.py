#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/convert/engine.py

import argparse

from palettelab.core import config as c
from palettelab.core.color import parse_hex
from .renderer import render_convert_info


def run(args: argparse.Namespace) -> None:
    """Main execution engine for color conversion"""
    color = parse_hex(args.hex)
    out = render_convert_info(color, args.to_format)

    if args.verbose:
        src = render_convert_info(color, "hex")
        print(f"{src} {c.MSG_BOLD_COLORS['info']}->{c.RESET} {out}")
    else:
        print(out)

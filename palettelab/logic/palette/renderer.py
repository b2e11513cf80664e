#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/palette/renderer.py

from typing import List

from palettelab.core import config as c
from palettelab.core.color import Color
from palettelab.shared.preview import print_color_block


def render_palette(name: str, colors: List[Color]) -> None:
    """Print one swatch per palette color."""
    print()
    for i, color in enumerate(colors):
        label = f"{c.MSG_BOLD_COLORS['info']}{name}{f'{i + 1}':>{15 - len(name)}}{c.RESET}"
        print_color_block(color, label)
    print()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/gradient/renderer.py

from typing import List

from palettelab.core import config as c
from palettelab.core.color import Color
from palettelab.shared.preview import print_color_block


def render_gradient(gradient_colors: List[Color]) -> None:
    """Print the generated gradient steps to the terminal."""
    print()
    for i, color in enumerate(gradient_colors):
        label = f"{c.MSG_BOLD_COLORS['info']}step{f'{i + 1}':>11}{c.RESET}"
        print_color_block(color, label)
    print()

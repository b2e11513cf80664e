#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/preview.py

import re

from palettelab.core import config as c
from palettelab.core.color import Color

_ANSI_ESCAPE = re.compile(r'\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])')


def get_visible_len(s: str) -> int:
    return len(_ANSI_ESCAPE.sub('', s))


def format_color_block(color: Color, title: str = "color") -> str:
    """One swatch line: padded title, a 24-bit background block and the hex code."""
    r, g, b = color.rgb255()
    padding = " " * max(0, 18 - get_visible_len(title))
    return (
        f"{title}{padding}{c.BOLD_WHITE}:{c.RESET}   "
        f"\033[48;2;{r};{g};{b}m                {c.RESET}  "
        f"{c.BOLD_WHITE}{color.hex()}{c.RESET}"
    )


def print_color_block(color: Color, title: str = "color", end: str = "\n") -> None:
    print(format_color_block(color, title), end=end)

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/logic/convert/renderer.py

from palettelab.core import config as c
from palettelab.core.color import Color
from palettelab.shared.formatting import format_colorspace


def render_convert_info(color: Color, fmt: str) -> str:
    """Formats a color in the requested colorspace, in bold."""
    return f"{c.BOLD_WHITE}{format_colorspace(fmt, color)}{c.RESET}"

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/__init__.py

__version__ = "0.1.0"

from palettelab.core.color import Color, parse_hex
from palettelab.core.errors import PalettelabError, FormatError, GenerationError
from palettelab.core.difference import (
    distance_lab,
    distance_rgb,
    distance_linear_rgb,
    distance_ciede2000,
    distance_cie94,
    distance_luv,
    distance_riemersma,
)
from palettelab.core.blend import (
    blend_lab,
    blend_rgb,
    blend_linear_rgb,
    blend_hsv,
    blend_hcl,
    blend_luv,
    blend_luvlch,
    blend_oklab,
    blend_oklch,
    gradient,
)
from palettelab.core.palette import (
    PaletteProfile,
    PROFILES,
    WARM,
    HAPPY,
    generate_palette,
    generate_warm_palette,
    generate_happy_palette,
    fast_warm_palette,
    fast_happy_palette,
)
from palettelab.core.colorgens import (
    fast_warm_color,
    fast_happy_color,
    warm_color,
    happy_color,
)
from palettelab.core.soft_palette import (
    SoftPaletteSettings,
    soft_palette_ex,
    soft_palette,
    soft_warm_palette,
    soft_happy_palette,
)
from palettelab.core.sort import sorted_colors

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/colorgens.py

# Single random colors, warm (dark) or happy (bright).
# The fast variants sample HSV directly; the others sample HCL and redraw
# until the color is inside the sRGB gamut, which keeps their perceived
# warmth / brightness consistent across draws.

from . import config as c
from . import conversions as conv
from .color import Color
from .errors import GenerationError
from .palette import Range, _draw


def fast_warm_color(rand) -> Color:
    return Color.from_hsv(
        rand.random() * c.HUE_MAX,
        _draw(rand, c.FAST_WARM_COLOR_SATURATION),
        _draw(rand, c.FAST_WARM_COLOR_VALUE),
    )


def fast_happy_color(rand) -> Color:
    return Color.from_hsv(
        rand.random() * c.HUE_MAX,
        _draw(rand, c.FAST_HAPPY_COLOR_SATURATION),
        _draw(rand, c.FAST_HAPPY_COLOR_VALUE),
    )


def _in_gamut_hcl(rand, chroma: Range, lightness: Range, kind: str) -> Color:
    for _ in range(c.COLOR_MAX_ATTEMPTS):
        h = rand.random() * c.HUE_MAX
        ch = _draw(rand, chroma)
        L = _draw(rand, lightness)
        raw = Color(*conv.lab_to_rgb_unclamped(*conv.hcl_to_lab(h, ch, L)))
        if raw.is_valid():
            return raw
    raise GenerationError(f"no in-gamut {kind} color after {c.COLOR_MAX_ATTEMPTS} draws")


def warm_color(rand) -> Color:
    return _in_gamut_hcl(rand, c.WARM_COLOR_CHROMA, c.WARM_COLOR_LIGHTNESS, "warm")


def happy_color(rand) -> Color:
    return _in_gamut_hcl(rand, c.HAPPY_COLOR_CHROMA, c.HAPPY_COLOR_LIGHTNESS, "happy")

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/blend.py

from typing import Callable, Dict, List, Sequence

from . import config as c
from .color import Color


def _lerp(v1: float, v2: float, t: float) -> float:
    return v1 + t * (v2 - v1)


def _interp_angle(h1: float, h2: float, t: float) -> float:
    """Interpolate hue along the shortest arc, result in [0, 360)."""
    delta = ((h2 - h1) % c.HUE_MAX + c.HUE_MAX + c.HUE_HALF) % c.HUE_MAX - c.HUE_HALF
    return (h1 + t * delta + c.HUE_MAX) % c.HUE_MAX


def blend_lab(c1: Color, c2: Color, t: float) -> Color:
    """
    Blend two colors in CIE Lab.

    Each Lab component is interpolated linearly by t; t is not clamped, so
    values outside [0, 1] extrapolate. The result is converted back to sRGB
    with gamut clamping, which gives perceptually even gradients.
    """
    L1, a1, b1 = c1.lab()
    L2, a2, b2 = c2.lab()
    return Color.from_lab(_lerp(L1, L2, t), _lerp(a1, a2, t), _lerp(b1, b2, t))


def blend_rgb(c1: Color, c2: Color, t: float) -> Color:
    """Plain sRGB interpolation. Usually not what you want."""
    return Color(_lerp(c1.r, c2.r, t), _lerp(c1.g, c2.g, t), _lerp(c1.b, c2.b, t))


def blend_linear_rgb(c1: Color, c2: Color, t: float) -> Color:
    r1, g1, b1 = c1.linear_rgb()
    r2, g2, b2 = c2.linear_rgb()
    return Color.from_linear_rgb(_lerp(r1, r2, t), _lerp(g1, g2, t), _lerp(b1, b2, t))


def blend_hsv(c1: Color, c2: Color, t: float) -> Color:
    h1, s1, v1 = c1.hsv()
    h2, s2, v2 = c2.hsv()

    # A gray has no hue, borrow the other endpoint's
    if s1 == 0 and s2 != 0:
        h1 = h2
    elif s2 == 0 and s1 != 0:
        h2 = h1

    return Color.from_hsv(_interp_angle(h1, h2, t), _lerp(s1, s2, t), _lerp(v1, v2, t))


def blend_hcl(c1: Color, c2: Color, t: float) -> Color:
    h1, ch1, L1 = c1.hcl()
    h2, ch2, L2 = c2.hcl()

    if ch1 <= c.HCL_ACHROMATIC_CHROMA and ch2 >= c.HCL_ACHROMATIC_CHROMA:
        h1 = h2
    elif ch2 <= c.HCL_ACHROMATIC_CHROMA and ch1 >= c.HCL_ACHROMATIC_CHROMA:
        h2 = h1

    return Color.from_hcl(_interp_angle(h1, h2, t), _lerp(ch1, ch2, t), _lerp(L1, L2, t))


def blend_luv(c1: Color, c2: Color, t: float) -> Color:
    L1, u1, v1 = c1.luv()
    L2, u2, v2 = c2.luv()
    return Color.from_luv(_lerp(L1, L2, t), _lerp(u1, u2, t), _lerp(v1, v2, t))


def blend_luvlch(c1: Color, c2: Color, t: float) -> Color:
    L1, ch1, h1 = c1.luvlch()
    L2, ch2, h2 = c2.luvlch()

    if ch1 <= c.HCL_ACHROMATIC_CHROMA and ch2 >= c.HCL_ACHROMATIC_CHROMA:
        h1 = h2
    elif ch2 <= c.HCL_ACHROMATIC_CHROMA and ch1 >= c.HCL_ACHROMATIC_CHROMA:
        h2 = h1

    return Color.from_luvlch(_lerp(L1, L2, t), _lerp(ch1, ch2, t), _interp_angle(h1, h2, t))


def blend_oklab(c1: Color, c2: Color, t: float) -> Color:
    L1, a1, b1 = c1.oklab()
    L2, a2, b2 = c2.oklab()
    return Color.from_oklab(_lerp(L1, L2, t), _lerp(a1, a2, t), _lerp(b1, b2, t))


def blend_oklch(c1: Color, c2: Color, t: float) -> Color:
    L1, ch1, h1 = c1.oklch()
    L2, ch2, h2 = c2.oklch()

    if ch1 <= c.OKLCH_ACHROMATIC_CHROMA and ch2 >= c.OKLCH_ACHROMATIC_CHROMA:
        h1 = h2
    elif ch2 <= c.OKLCH_ACHROMATIC_CHROMA and ch1 >= c.OKLCH_ACHROMATIC_CHROMA:
        h2 = h1

    return Color.from_oklch(_lerp(L1, L2, t), _lerp(ch1, ch2, t), _interp_angle(h1, h2, t))


BLENDERS: Dict[str, Callable[[Color, Color, float], Color]] = {
    "lab": blend_lab,
    "rgb": blend_rgb,
    "linear": blend_linear_rgb,
    "hsv": blend_hsv,
    "hcl": blend_hcl,
    "luv": blend_luv,
    "luvlch": blend_luvlch,
    "oklab": blend_oklab,
    "oklch": blend_oklch,
}


def gradient(stops: Sequence[Color], steps: int, space: str = "lab") -> List[Color]:
    """
    Sample `steps` evenly spaced colors through two or more stops.

    The stops are spread evenly over [0, 1] and each segment is blended in
    `space` (one of BLENDERS). The first and last samples are the end stops.
    """
    if space not in BLENDERS:
        raise ValueError(f"unknown blend space '{space}', expected one of {sorted(BLENDERS)}")
    if len(stops) < 2:
        raise ValueError("a gradient needs at least two stops")
    if steps < 1:
        raise ValueError("a gradient needs at least one step")

    if steps == 1:
        return [stops[0]]

    blend = BLENDERS[space]
    num_segments = len(stops) - 1
    total_intervals = steps - 1
    colors: List[Color] = []

    for i in range(steps):
        t_scaled = (i / total_intervals) * num_segments
        idx = min(int(t_scaled), num_segments - 1)
        colors.append(blend(stops[idx], stops[idx + 1], t_scaled - idx))

    return colors

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/shared/formatting.py

from palettelab.core.color import Color


def format_colorspace(fmt: str, color: Color) -> str:
    if fmt == 'hex':
        return color.hex()
    elif fmt == 'rgb':
        r, g, b = color.rgb255()
        return f"rgb({r}, {g}, {b})"
    elif fmt == 'hsl':
        h, s, l = color.hsl()
        return f"hsl({h:.2f}deg, {s * 100:.2f}%, {l * 100:.2f}%)"
    elif fmt == 'hsv':
        h, s, v = color.hsv()
        return f"hsv({h:.2f}deg, {s * 100:.2f}%, {v * 100:.2f}%)"
    elif fmt == 'xyz':
        x, y, z = color.xyz()
        return f"xyz({x:.4f}, {y:.4f}, {z:.4f})"
    elif fmt == 'lab':
        L, a, b = color.lab()
        return f"lab({L:.4f} {a:.4f} {b:.4f})"
    elif fmt == 'hcl':
        h, ch, L = color.hcl()
        return f"hcl({h:.4f}deg {ch:.4f} {L:.4f})"
    elif fmt == 'xyy':
        x, y, Y = color.xyy()
        return f"xyY({x:.4f}, {y:.4f}, {Y:.4f})"
    elif fmt == 'luv':
        L, u, v = color.luv()
        return f"luv({L:.4f} {u:.4f} {v:.4f})"
    elif fmt == 'luvlch':
        L, ch, h = color.luvlch()
        return f"lchuv({L:.4f} {ch:.4f} {h:.4f}deg)"
    elif fmt == 'oklab':
        L, a, b = color.oklab()
        return f"oklab({L:.4f} {a:.4f} {b:.4f})"
    elif fmt == 'oklch':
        L, ch, h = color.oklch()
        return f"oklch({L:.4f} {ch:.4f} {h:.4f}deg)"

    return ""

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/color.py

import math
from typing import NamedTuple, Tuple

from . import config as c
from . import conversions as conv
from palettelab.shared.clamping import _clamp01


class Color(NamedTuple):
    """
    An sRGB color with gamma-encoded components nominally in [0, 1].

    Components outside [0, 1] are allowed (e.g. after extrapolated blends);
    the 8-bit, 16-bit and hex views clamp before scaling. Instances are
    immutable and compare by value.
    """

    r: float
    g: float
    b: float

    # ==========================================
    # Constructors
    # ==========================================

    @classmethod
    def from_hex(cls, hex_code: str) -> "Color":
        """Parse a strict '#RRGGBB' string. Raises FormatError."""
        return cls(*conv.hex_to_rgb(hex_code))

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / c.RGB_MAX, g / c.RGB_MAX, b / c.RGB_MAX)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> "Color":
        return cls(*conv.hsv_to_rgb(h, s, v))

    @classmethod
    def from_hsl(cls, h: float, s: float, L: float) -> "Color":
        return cls(*conv.hsl_to_rgb(h, s, L))

    @classmethod
    def from_linear_rgb(cls, r: float, g: float, b: float) -> "Color":
        """Gamma-encode linear RGB. No clamping is applied."""
        return cls(conv.linear_to_srgb(r), conv.linear_to_srgb(g), conv.linear_to_srgb(b))

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> "Color":
        return cls(*conv.xyz_to_rgb(x, y, z))

    @classmethod
    def from_lab(cls, L: float, a: float, b: float) -> "Color":
        """Build a color from CIE Lab; out-of-gamut values are clamped."""
        return cls(*conv.lab_to_rgb(L, a, b))

    @classmethod
    def from_hcl(cls, h: float, chroma: float, L: float) -> "Color":
        return cls(*conv.hcl_to_rgb(h, chroma, L))

    @classmethod
    def from_xyy(cls, x: float, y: float, Y: float) -> "Color":
        return cls(*conv.xyy_to_rgb(x, y, Y))

    @classmethod
    def from_luv(cls, L: float, u: float, v: float) -> "Color":
        """Build a color from CIE LUV (L in [0, 100]); clamped to gamut."""
        return cls(*conv.luv_to_rgb(L, u, v))

    @classmethod
    def from_luvlch(cls, L: float, chroma: float, h: float) -> "Color":
        return cls(*conv.luvlch_to_rgb(L, chroma, h))

    @classmethod
    def from_oklab(cls, L: float, a: float, b: float) -> "Color":
        """Build a color from OkLab (L in [0, 1]); clamped to gamut."""
        return cls(*conv.oklab_to_rgb(L, a, b))

    @classmethod
    def from_oklch(cls, L: float, chroma: float, h: float) -> "Color":
        return cls(*conv.oklch_to_rgb(L, chroma, h))

    # ==========================================
    # Byte / Hex Views
    # ==========================================

    def rgb255(self) -> Tuple[int, int, int]:
        """8-bit channels, clamped, rounded half away from zero."""
        return tuple(conv._to_byte(v) for v in self)

    def rgba(self) -> Tuple[int, int, int, int]:
        """
        16-bit channels plus a fully opaque alpha.

        Legacy view for APIs that expect 0..0xFFFF channels; there is no
        alpha channel, so alpha is always 0xFFFF.
        """
        r, g, b = (
            int(math.floor(_clamp01(v) * c.RGBA_MAX + c.ROUND_HALF)) for v in self
        )
        return r, g, b, int(c.RGBA_MAX)

    def hex(self) -> str:
        """Uppercase '#RRGGBB'."""
        return conv.rgb_to_hex(self.r, self.g, self.b)

    def values(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    # ==========================================
    # Gamut Helpers
    # ==========================================

    def is_valid(self) -> bool:
        """True when every component lies in [0, 1]."""
        return all(0.0 <= v <= 1.0 for v in self)

    def clamped(self) -> "Color":
        return Color(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b))

    def almost_equal_rgb(self, other: "Color") -> bool:
        """Equality within one 8-bit step per channel on average."""
        diff = abs(self.r - other.r) + abs(self.g - other.g) + abs(self.b - other.b)
        return diff < 3.0 * c.DELTA_RGB

    # ==========================================
    # Color Space Views
    # ==========================================

    def linear_rgb(self) -> Tuple[float, float, float]:
        return (
            conv.srgb_to_linear(self.r),
            conv.srgb_to_linear(self.g),
            conv.srgb_to_linear(self.b),
        )

    def xyz(self) -> Tuple[float, float, float]:
        return conv.rgb_to_xyz(self.r, self.g, self.b)

    def lab(self) -> Tuple[float, float, float]:
        return conv.rgb_to_lab(self.r, self.g, self.b)

    def hcl(self) -> Tuple[float, float, float]:
        return conv.rgb_to_hcl(self.r, self.g, self.b)

    def hsv(self) -> Tuple[float, float, float]:
        return conv.rgb_to_hsv(self.r, self.g, self.b)

    def hsl(self) -> Tuple[float, float, float]:
        return conv.rgb_to_hsl(self.r, self.g, self.b)

    def xyy(self) -> Tuple[float, float, float]:
        return conv.rgb_to_xyy(self.r, self.g, self.b)

    def luv(self) -> Tuple[float, float, float]:
        return conv.rgb_to_luv(self.r, self.g, self.b)

    def luvlch(self) -> Tuple[float, float, float]:
        """LuvLCh as (lightness, chroma, hue)."""
        return conv.rgb_to_luvlch(self.r, self.g, self.b)

    def oklab(self) -> Tuple[float, float, float]:
        return conv.rgb_to_oklab(self.r, self.g, self.b)

    def oklch(self) -> Tuple[float, float, float]:
        return conv.rgb_to_oklch(self.r, self.g, self.b)


def parse_hex(hex_code: str) -> Color:
    """Parse '#RRGGBB' (case-insensitive) into a Color. Raises FormatError."""
    return Color.from_hex(hex_code)

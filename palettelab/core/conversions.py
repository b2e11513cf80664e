#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/conversions.py

import functools
import math
import re
from typing import Tuple

from . import config as c
from .errors import FormatError
from palettelab.shared.clamping import _clamp01

_HEX_RE = re.compile(r"#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})")


# ==========================================
# Hex Codec
# ==========================================


def hex_to_rgb(hex_code: str) -> Tuple[float, float, float]:
    """
    Decode a strict '#RRGGBB' string into sRGB components in [0, 1].
    Raises FormatError for a missing '#', a wrong digit count or non-hex digits.
    """
    if not isinstance(hex_code, str):
        raise FormatError(f"hex color must be a string, got {type(hex_code).__name__}")
    if not hex_code.startswith(c.HEX_PREFIX):
        raise FormatError(f"hex color must start with '#': {hex_code!r}")
    digits = len(hex_code) - len(c.HEX_PREFIX)
    if digits != c.HEX_DIGITS:
        raise FormatError(f"hex color needs {c.HEX_DIGITS} digits, got {digits}: {hex_code!r}")
    m = _HEX_RE.fullmatch(hex_code)
    if m is None:
        raise FormatError(f"invalid hex digit in {hex_code!r}")
    return tuple(int(pair, 16) / c.RGB_MAX for pair in m.groups())


def _to_byte(v: float) -> int:
    """Clamp to [0, 1], scale to 8 bits, round half away from zero."""
    return int(math.floor(_clamp01(v) * c.RGB_MAX + c.ROUND_HALF))


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode sRGB components as uppercase '#RRGGBB'."""
    return f"{c.HEX_PREFIX}{_to_byte(r):02X}{_to_byte(g):02X}{_to_byte(b):02X}"


# ==========================================
# HSV / HSL
# ==========================================


def _hue(r: float, g: float, b: float, cmax: float, delta: float) -> float:
    """Shared HSV/HSL hue from the max channel, normalized into [0, 360)."""
    if delta == 0:
        return 0.0
    if cmax == r:
        h = c.HUE_SECTOR * (((g - b) / delta) % c.HSL_HUE_MOD)
    elif cmax == g:
        h = c.HUE_SECTOR * ((b - r) / delta + c.HUE_OFFSET_G)
    else:
        h = c.HUE_SECTOR * ((r - g) / delta + c.HUE_OFFSET_B)
    return (h + c.HUE_MAX) % c.HUE_MAX


def _hue_sector_rgb(h: float, chroma: float, x: float) -> Tuple[float, float, float]:
    if 0 <= h < 60:
        return chroma, x, 0.0
    if 60 <= h < 120:
        return x, chroma, 0.0
    if 120 <= h < 180:
        return 0.0, chroma, x
    if 180 <= h < 240:
        return 0.0, x, chroma
    if 240 <= h < 300:
        return x, 0.0, chroma
    return chroma, 0.0, x


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSV."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    v = cmax
    s = delta / v if v != 0 else 0.0
    return (_hue(r, g, b, cmax, delta), s, v)


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV to RGB."""
    h = h % c.HUE_MAX
    chroma = v * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = v - chroma
    r_p, g_p, b_p = _hue_sector_rgb(h, chroma, x)
    return r_p + m, g_p + m, b_p + m


def rgb_to_hsl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB to HSL."""
    cmax = max(r, g, b)
    cmin = min(r, g, b)
    delta = cmax - cmin
    L = (cmax + cmin) / c.DIV_2
    if delta == 0:
        return (0.0, 0.0, L)
    denom = c.UNIT - abs(c.DIV_2 * L - c.UNIT)
    s = 0.0 if abs(denom) < c.EPS else delta / denom
    return (_hue(r, g, b, cmax, delta), s, L)


def hsl_to_rgb(h: float, s: float, L: float) -> Tuple[float, float, float]:
    """Convert HSL to RGB."""
    if s == 0:
        return L, L, L
    h = h % c.HUE_MAX
    chroma = (c.UNIT - abs(c.DIV_2 * L - c.UNIT)) * s
    x = chroma * (c.UNIT - abs(((h / c.HUE_SECTOR) % c.DIV_2) - c.UNIT))
    m = L - chroma / c.DIV_2
    r_p, g_p, b_p = _hue_sector_rgb(h, chroma, x)
    return r_p + m, g_p + m, b_p + m


# ==========================================
# Gamma, XYZ, Lab
# ==========================================


def srgb_to_linear(comp: float) -> float:
    """Linearize an sRGB component."""
    if comp <= c.SRGB_TO_LINEAR_TH:
        return comp / c.SRGB_SLOPE
    return ((comp + c.SRGB_OFFSET) / c.SRGB_DIVISOR) ** c.SRGB_GAMMA


def linear_to_srgb(l_val: float) -> float:
    """Apply sRGB gamma to a linear component."""
    if l_val <= c.LINEAR_TO_SRGB_TH:
        return c.SRGB_SLOPE * l_val
    return c.SRGB_DIVISOR * (l_val ** (c.UNIT / c.SRGB_GAMMA)) - c.SRGB_OFFSET


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert linear RGB to CIE XYZ (D65, Y of white = 1)."""
    x = r * c.M_SRGB_XYZ_X[0] + g * c.M_SRGB_XYZ_X[1] + b * c.M_SRGB_XYZ_X[2]
    y = r * c.M_SRGB_XYZ_Y[0] + g * c.M_SRGB_XYZ_Y[1] + b * c.M_SRGB_XYZ_Y[2]
    z = r * c.M_SRGB_XYZ_Z[0] + g * c.M_SRGB_XYZ_Z[1] + b * c.M_SRGB_XYZ_Z[2]
    return x, y, z


def xyz_to_linear_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to linear RGB. The result may fall outside [0, 1]."""
    r = x * c.M_XYZ_SRGB_R[0] + y * c.M_XYZ_SRGB_R[1] + z * c.M_XYZ_SRGB_R[2]
    g = x * c.M_XYZ_SRGB_G[0] + y * c.M_XYZ_SRGB_G[1] + z * c.M_XYZ_SRGB_G[2]
    b = x * c.M_XYZ_SRGB_B[0] + y * c.M_XYZ_SRGB_B[1] + z * c.M_XYZ_SRGB_B[2]
    return r, g, b


def rgb_to_xyz(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert sRGB to CIE XYZ."""
    return linear_rgb_to_xyz(srgb_to_linear(r), srgb_to_linear(g), srgb_to_linear(b))


def xyz_to_rgb(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert CIE XYZ to sRGB, clamping linear RGB into gamut first."""
    r_lin, g_lin, b_lin = xyz_to_linear_rgb(x, y, z)
    return (
        linear_to_srgb(_clamp01(r_lin)),
        linear_to_srgb(_clamp01(g_lin)),
        linear_to_srgb(_clamp01(b_lin)),
    )


def _xyz_f(t: float) -> float:
    """Helper function for XYZ to LAB."""
    return t ** c.LAB_POW if t > c.LAB_E else (c.LAB_K * t) + c.LAB_OFFSET


def _xyz_f_inv(t: float) -> float:
    """Helper function for LAB to XYZ."""
    return t ** 3 if t > c.LAB_DELTA else (t - c.LAB_OFFSET) / c.LAB_K


def xyz_to_lab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LAB."""
    x_r = _xyz_f(x / c.D65_X)
    y_r = _xyz_f(y / c.D65_Y)
    z_r = _xyz_f(z / c.D65_Z)
    L = (c.LAB_L_MULT * y_r) - c.LAB_L_SUB
    a = c.LAB_A_MULT * (x_r - y_r)
    b = c.LAB_B_MULT * (y_r - z_r)
    return L, a, b


def lab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert LAB to CIE XYZ."""
    y_r = (L + c.LAB_L_SUB) / c.LAB_L_MULT
    x_r = a / c.LAB_A_MULT + y_r
    z_r = y_r - b / c.LAB_B_MULT
    x = _xyz_f_inv(x_r) * c.D65_X
    y = _xyz_f_inv(y_r) * c.D65_Y
    z = _xyz_f_inv(z_r) * c.D65_Z
    return x, y, z


def rgb_to_lab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to LAB conversion."""
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def lab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Direct LAB to RGB conversion. Out-of-gamut colors are clamped."""
    return xyz_to_rgb(*lab_to_xyz(L, a, b))


def lab_to_rgb_unclamped(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """LAB to RGB without gamut clamping, for in-gamut checks."""
    r_lin, g_lin, b_lin = xyz_to_linear_rgb(*lab_to_xyz(L, a, b))
    return linear_to_srgb(r_lin), linear_to_srgb(g_lin), linear_to_srgb(b_lin)


# ==========================================
# HCL (polar Lab)
# ==========================================


def lab_to_hcl(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert LAB to HCL as (hue, chroma, lightness)."""
    chroma = math.hypot(a, b)
    hue = math.degrees(math.atan2(b, a)) % c.HUE_MAX
    return hue, chroma, L


def hcl_to_lab(h: float, chroma: float, L: float) -> Tuple[float, float, float]:
    """Convert HCL to LAB."""
    a = chroma * math.cos(math.radians(h))
    b = chroma * math.sin(math.radians(h))
    return L, a, b


def rgb_to_hcl(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Direct RGB to HCL conversion."""
    return lab_to_hcl(*rgb_to_lab(r, g, b))


def hcl_to_rgb(h: float, chroma: float, L: float) -> Tuple[float, float, float]:
    """Direct HCL to RGB conversion."""
    return lab_to_rgb(*hcl_to_lab(h, chroma, L))


# ==========================================
# xyY
# ==========================================


def xyz_to_xyy(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to xyY. Black takes the chromaticity of the D65 white."""
    n = x + y + z
    if abs(n) < c.XYY_EPS:
        n_white = c.D65_X + c.D65_Y + c.D65_Z
        return c.D65_X / n_white, c.D65_Y / n_white, y
    return x / n, y / n, y


def xyy_to_xyz(x: float, y: float, Y: float) -> Tuple[float, float, float]:
    """Convert xyY to XYZ."""
    if abs(y) < c.XYY_EPS:
        return 0.0, Y, 0.0
    return Y / y * x, Y, Y / y * (c.UNIT - x - y)


def rgb_to_xyy(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return xyz_to_xyy(*rgb_to_xyz(r, g, b))


def xyy_to_rgb(x: float, y: float, Y: float) -> Tuple[float, float, float]:
    return xyz_to_rgb(*xyy_to_xyz(x, y, Y))


# ==========================================
# CIELUV and LuvLCh
# ==========================================


def _xyz_to_uv(x: float, y: float, z: float) -> Tuple[float, float]:
    """Chromaticity (u', v'); (0, 0) for black."""
    denom = x + c.LUV_Y_WEIGHT * y + c.LUV_Z_WEIGHT * z
    if denom == 0:
        return 0.0, 0.0
    return c.LUV_U_MULT * x / denom, c.LUV_V_MULT * y / denom


def xyz_to_luv(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ to CIE LUV (D65), L in [0, 100]."""
    L = c.LAB_L_MULT * _xyz_f(y / c.D65_Y) - c.LAB_L_SUB
    u_p, v_p = _xyz_to_uv(x, y, z)
    u_n, v_n = _xyz_to_uv(c.D65_X, c.D65_Y, c.D65_Z)
    u = c.LUV_UV_MULT * L * (u_p - u_n)
    v = c.LUV_UV_MULT * L * (v_p - v_n)
    return L, u, v


def luv_to_xyz(L: float, u: float, v: float) -> Tuple[float, float, float]:
    """Convert CIE LUV to XYZ."""
    y = c.D65_Y * _xyz_f_inv((L + c.LAB_L_SUB) / c.LAB_L_MULT)
    if L == 0:
        return 0.0, y, 0.0
    u_n, v_n = _xyz_to_uv(c.D65_X, c.D65_Y, c.D65_Z)
    u_p = u / (c.LUV_UV_MULT * L) + u_n
    v_p = v / (c.LUV_UV_MULT * L) + v_n
    if abs(v_p) < c.EPS:
        return 0.0, y, 0.0
    x = y * c.LUV_V_MULT * u_p / (c.LUV_U_MULT * v_p)
    z = y * (c.LUV_Z_NUM - c.LUV_Z_WEIGHT * u_p - c.LUV_Z_V_MULT * v_p) / (c.LUV_U_MULT * v_p)
    return x, y, z


def luv_to_luvlch(L: float, u: float, v: float) -> Tuple[float, float, float]:
    """Convert LUV to LuvLCh as (lightness, chroma, hue)."""
    chroma = math.hypot(u, v)
    hue = math.degrees(math.atan2(v, u)) % c.HUE_MAX
    return L, chroma, hue


def luvlch_to_luv(L: float, chroma: float, h: float) -> Tuple[float, float, float]:
    return L, chroma * math.cos(math.radians(h)), chroma * math.sin(math.radians(h))


def rgb_to_luv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return xyz_to_luv(*rgb_to_xyz(r, g, b))


def luv_to_rgb(L: float, u: float, v: float) -> Tuple[float, float, float]:
    """LUV to RGB. Out-of-gamut colors are clamped."""
    return xyz_to_rgb(*luv_to_xyz(L, u, v))


def rgb_to_luvlch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return luv_to_luvlch(*rgb_to_luv(r, g, b))


def luvlch_to_rgb(L: float, chroma: float, h: float) -> Tuple[float, float, float]:
    return luv_to_rgb(*luvlch_to_luv(L, chroma, h))


# ==========================================
# OkLab and OkLch
# ==========================================


def _cbrt(v: float) -> float:
    return math.copysign(abs(v) ** c.LAB_POW, v)


def _mat3(m: Tuple[Tuple[float, float, float], ...], x: float, y: float, z: float) -> Tuple[float, float, float]:
    return tuple(row[0] * x + row[1] * y + row[2] * z for row in m)


def xyz_to_oklab(x: float, y: float, z: float) -> Tuple[float, float, float]:
    """Convert XYZ (D65) to OkLab, L in [0, 1]."""
    lms = _mat3((c.M_XYZ_LMS_L, c.M_XYZ_LMS_M, c.M_XYZ_LMS_S), x, y, z)
    l_, m_, s_ = (_cbrt(v) for v in lms)
    return _mat3((c.M_LMS_OKLAB_L, c.M_LMS_OKLAB_A, c.M_LMS_OKLAB_B), l_, m_, s_)


def oklab_to_xyz(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OkLab to XYZ (D65)."""
    l_, m_, s_ = _mat3((c.M_OKLAB_LMS_L, c.M_OKLAB_LMS_M, c.M_OKLAB_LMS_S), L, a, b)
    return _mat3((c.M_LMS_XYZ_X, c.M_LMS_XYZ_Y, c.M_LMS_XYZ_Z), l_ ** 3, m_ ** 3, s_ ** 3)


def oklab_to_oklch(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """Convert OkLab to OkLch as (lightness, chroma, hue)."""
    return L, math.hypot(a, b), math.degrees(math.atan2(b, a)) % c.HUE_MAX


def oklch_to_oklab(L: float, chroma: float, h: float) -> Tuple[float, float, float]:
    return L, chroma * math.cos(math.radians(h)), chroma * math.sin(math.radians(h))


def rgb_to_oklab(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return xyz_to_oklab(*rgb_to_xyz(r, g, b))


def oklab_to_rgb(L: float, a: float, b: float) -> Tuple[float, float, float]:
    """OkLab to RGB. Out-of-gamut colors are clamped."""
    return xyz_to_rgb(*oklab_to_xyz(L, a, b))


def rgb_to_oklch(r: float, g: float, b: float) -> Tuple[float, float, float]:
    return oklab_to_oklch(*rgb_to_oklab(r, g, b))


def oklch_to_rgb(L: float, chroma: float, h: float) -> Tuple[float, float, float]:
    return oklab_to_rgb(*oklch_to_oklab(L, chroma, h))


# Apply LRU caching to all functions in this module.
# hex_to_rgb stays uncached so unhashable input still reaches its type check.
_UNCACHED = {"hex_to_rgb"}
for _name, _obj in list(globals().items()):
    if callable(_obj) and getattr(_obj, "__module__", None) == __name__ and _name not in _UNCACHED:
        globals()[_name] = functools.lru_cache(maxsize=c.LRU_CACHE_SIZE)(_obj)

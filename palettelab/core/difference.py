#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/difference.py

import math
from typing import Tuple

from . import config as c
from .color import Color


def _euclidean(p1: Tuple[float, float, float], p2: Tuple[float, float, float]) -> float:
    return math.sqrt(
        (p1[0] - p2[0]) ** c.EXP_2 + (p1[1] - p2[1]) ** c.EXP_2 + (p1[2] - p2[2]) ** c.EXP_2
    )


def distance_lab(c1: Color, c2: Color) -> float:
    """
    Euclidean distance between two colors in CIE Lab (CIE76 delta E).
    A good measure of visual similarity; red vs. green is about 170.6.
    """
    return _euclidean(c1.lab(), c2.lab())


def distance_rgb(c1: Color, c2: Color) -> float:
    """
    Euclidean distance in gamma-encoded sRGB.
    Note: This is a mathematical distance, not a perceptual one.
    """
    return _euclidean(c1.values(), c2.values())


def distance_linear_rgb(c1: Color, c2: Color) -> float:
    """Euclidean distance in linear RGB."""
    return _euclidean(c1.linear_rgb(), c2.linear_rgb())


def delta_e_ciede2000(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """
    Calculate the CIEDE2000 color difference (ΔE_00) between two CIE LAB colors.
    This formula is the CIE recommendation for perceptual color difference.

    Source: Sharma, G., Wu, W., & Dalal, E. N. (2005).
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)
    C_bar = (C1 + C2) / c.DIV_2

    C_bar_7 = C_bar ** c.EXP_7
    G = c.G_FACTOR * (c.UNIT - math.sqrt(C_bar_7 / (C_bar_7 + c.POW7_25)))

    a1_prime = (c.UNIT + G) * a1
    a2_prime = (c.UNIT + G) * a2

    C1_prime = math.hypot(a1_prime, b1)
    C2_prime = math.hypot(a2_prime, b2)

    h1_prime_deg = math.degrees(math.atan2(b1, a1_prime) % (c.DIV_2 * math.pi))
    h2_prime_deg = math.degrees(math.atan2(b2, a2_prime) % (c.DIV_2 * math.pi))

    delta_L_prime = L2 - L1
    delta_C_prime = C2_prime - C1_prime
    C_prime_bar = (C1_prime + C2_prime) / c.DIV_2

    if C1_prime * C2_prime == 0:
        delta_h_prime_deg = 0.0
    elif abs(h2_prime_deg - h1_prime_deg) <= c.HUE_HALF:
        delta_h_prime_deg = h2_prime_deg - h1_prime_deg
    elif h2_prime_deg - h1_prime_deg > c.HUE_HALF:
        delta_h_prime_deg = (h2_prime_deg - h1_prime_deg) - c.HUE_MAX
    else:
        delta_h_prime_deg = (h2_prime_deg - h1_prime_deg) + c.HUE_MAX

    delta_H_prime = c.DIV_2 * math.sqrt(max(0.0, C1_prime * C2_prime)) * math.sin(
        math.radians(delta_h_prime_deg) / c.DIV_2
    )

    L_prime_bar = (L1 + L2) / c.DIV_2

    if C1_prime * C2_prime == 0:
        h_prime_bar_deg = h1_prime_deg + h2_prime_deg
    elif abs(h2_prime_deg - h1_prime_deg) <= c.HUE_HALF:
        h_prime_bar_deg = (h1_prime_deg + h2_prime_deg) / c.DIV_2
    elif (h1_prime_deg + h2_prime_deg) < c.HUE_MAX:
        h_prime_bar_deg = (h1_prime_deg + h2_prime_deg + c.HUE_MAX) / c.DIV_2
    else:
        h_prime_bar_deg = (h1_prime_deg + h2_prime_deg - c.HUE_MAX) / c.DIV_2

    T = (
        c.UNIT
        - c.T_K1 * math.cos(math.radians(h_prime_bar_deg - c.T_OFFSET_1))
        + c.T_K2 * math.cos(math.radians(c.DIV_2 * h_prime_bar_deg))
        + c.T_K3 * math.cos(math.radians(c.T_MUL_3 * h_prime_bar_deg + c.T_OFFSET_2))
        - c.T_K4 * math.cos(math.radians(c.T_MUL_4 * h_prime_bar_deg - c.T_OFFSET_3))
    )

    L_L_50_SQ = (L_prime_bar - c.L_OFFSET) ** c.EXP_2
    S_L = c.UNIT + (c.S_L_K * L_L_50_SQ) / math.sqrt(c.S_L_DIV + L_L_50_SQ + c.EPS)
    S_C = c.UNIT + c.S_C_K * C_prime_bar
    S_H = c.UNIT + c.S_L_K * C_prime_bar * T

    delta_theta_deg = c.RT_D30 * math.exp(-(((h_prime_bar_deg - c.RT_H_OFFSET) / c.RT_DIV) ** c.EXP_2))
    C_prime_bar_7 = C_prime_bar ** c.EXP_7

    R_C = c.DIV_2 * math.sqrt(C_prime_bar_7 / (C_prime_bar_7 + c.POW7_25))
    R_T = -R_C * math.sin(math.radians(c.DIV_2 * delta_theta_deg))

    k_L, k_C, k_H = c.K_FACTORS

    delta_E = math.sqrt(
        max(
            0.0,
            (delta_L_prime / (k_L * S_L)) ** c.EXP_2
            + (delta_C_prime / (k_C * S_C)) ** c.EXP_2
            + (delta_H_prime / (k_H * S_H)) ** c.EXP_2
            + R_T * (delta_C_prime / (k_C * S_C)) * (delta_H_prime / (k_H * S_H)),
        )
    )

    return delta_E


def distance_ciede2000(c1: Color, c2: Color) -> float:
    """CIEDE2000 difference between two colors, in standard Lab units."""
    return delta_e_ciede2000(c1.lab(), c2.lab())


def distance_luv(c1: Color, c2: Color) -> float:
    """Euclidean distance in CIE LUV."""
    return _euclidean(c1.luv(), c2.luv())


def delta_e_cie94(
    lab1: Tuple[float, float, float], lab2: Tuple[float, float, float]
) -> float:
    """
    CIE94 color difference in standard Lab units (graphic arts weights).
    Weighted by the chroma of the first color, so it is not symmetric.
    """
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2

    C1 = math.hypot(a1, b1)
    C2 = math.hypot(a2, b2)

    delta_L = L1 - L2
    delta_C = C1 - C2
    delta_H_sq = max(
        0.0, (a1 - a2) ** c.EXP_2 + (b1 - b2) ** c.EXP_2 - delta_C ** c.EXP_2
    )

    S_C = c.UNIT + c.CIE94_K1 * C1
    S_H = c.UNIT + c.CIE94_K2 * C1
    k_L, k_C, k_H = c.CIE94_K_FACTORS

    return math.sqrt(
        (delta_L / k_L) ** c.EXP_2
        + (delta_C / (k_C * S_C)) ** c.EXP_2
        + delta_H_sq / (k_H * S_H) ** c.EXP_2
    )


def distance_cie94(c1: Color, c2: Color) -> float:
    return delta_e_cie94(c1.lab(), c2.lab())


def distance_riemersma(c1: Color, c2: Color) -> float:
    """
    Weighted sRGB distance ("redmean", Thiadmer Riemersma).
    Cheap approximation of perceptual distance; black vs. white is 3.0.
    """
    r_avg = (c1.r + c2.r) / c.DIV_2
    dr = c1.r - c2.r
    dg = c1.g - c2.g
    db = c1.b - c2.b
    return math.sqrt(
        (c.REDMEAN_R + r_avg) * dr * dr
        + c.REDMEAN_G * dg * dg
        + (c.REDMEAN_B + (c.UNIT - r_avg)) * db * db
    )

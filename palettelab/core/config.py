#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

# Max size for conversion cache
LRU_CACHE_SIZE = 4096

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
RGBA_MAX = 65535.0                 # 16-bit color depth limit (legacy RGBA view)
ROUND_HALF = 0.5                   # Offset for round-half-away-from-zero on non-negative values
HUE_MAX = 360.0                    # Full circle degrees
HUE_HALF = 180.0                   # Half circle degrees, shortest-arc threshold
HUE_SECTOR = 60.0                  # Degrees per HSL/HSV sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL/HSV
HUE_OFFSET_G = 2.0                 # Sector offset when green is the max channel
HUE_OFFSET_B = 4.0                 # Sector offset when blue is the max channel
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation

# Tolerance used by almost_equal_rgb (one 8-bit step per channel)
DELTA_RGB = 1.0 / 255.0

# Chroma below which an HCL hue is treated as undefined when blending
HCL_ACHROMATIC_CHROMA = 0.015

# Hex Text Format
HEX_DIGITS = 6                     # Digits after the leading '#'
HEX_PREFIX = "#"

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White, Y normalized to 1 (Source: ASTM E308-01 / CIE D65)
D65_X = 0.95047                    # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 1.0                        # Y coordinate (Luminance) for D65 illuminant
D65_Z = 1.08883                    # Z coordinate for D65 illuminant

# Linear sRGB to XYZ Matrix (Source: sRGB primaries, D65, full double precision)
M_SRGB_XYZ_X = (0.4123907992659595, 0.35758433938387796, 0.18048078840183429)
M_SRGB_XYZ_Y = (0.21263900587151036, 0.7151686787677559, 0.07219231536073371)
M_SRGB_XYZ_Z = (0.01933081871559185, 0.11919477979462599, 0.9505321522496606)

# XYZ to Linear sRGB Matrix (exact inverse of the matrix above)
M_XYZ_SRGB_R = (3.2409699419045213, -1.5373831775700935, -0.4986107602930033)
M_XYZ_SRGB_G = (-0.9692436362808798, 1.8759675015077206, 0.04155505740717561)
M_XYZ_SRGB_B = (0.05563007969699361, -0.20397695888897657, 1.0569715142428786)

# CIELAB Constants (Source: CIE 15:2004)
LAB_DELTA = 6.0 / 29.0             # Knee of the piecewise cube-root function
LAB_E = LAB_DELTA ** 3             # Threshold for switching between linear and power functions
LAB_K = 1.0 / (3.0 * LAB_DELTA ** 2)  # Slope of the linear segment for low luminance values
LAB_OFFSET = 4.0 / 29.0            # Constant offset of the linear segment
LAB_POW = 1.0 / 3.0                # Cube-root exponent
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation

# CIEDE2000 Constants (Source: Sharma, G., Wu, W., & Dalal, E. N. (2005))
POW7_25 = 6103515625.0             # Constant for chroma normalization (25^7)
G_FACTOR = 0.5                     # Axial adjustment factor for neutral gray
T_K1 = 0.17                        # First T-factor coefficient for hue weighting
T_K2 = 0.24                        # Second T-factor coefficient for hue weighting
T_K3 = 0.32                        # Third T-factor coefficient for hue weighting
T_K4 = 0.20                        # Fourth T-factor coefficient for hue weighting
T_OFFSET_1 = 30.0                  # Primary phase offset for hue angle T-factor
T_OFFSET_2 = 6.0                   # Secondary phase offset for hue angle T-factor
T_OFFSET_3 = 63.0                  # Tertiary phase offset for hue angle T-factor
T_MUL_3 = 3.0                      # Multiplier for tertiary hue angle calculation
T_MUL_4 = 4.0                      # Multiplier for quaternary hue angle calculation
L_OFFSET = 50.0                    # Lightness midpoint for S_L weighting function
S_L_K = 0.015                      # Lightness weighting coefficient for S_L
S_C_K = 0.045                      # Chroma weighting coefficient for S_C
S_L_DIV = 20.0                     # Divisor term for S_L weighting calculation
RT_D30 = 30.0                      # Degree factor for rotation term (R_T) calculation
RT_H_OFFSET = 275.0                # Hue offset for blue region in R_T calculation
RT_DIV = 25.0                      # Hue divisor for blue region in R_T calculation
K_FACTORS = (1.0, 1.0, 1.0)        # Parametric weighting factors (k_L, k_C, k_H)

# CIE94 Constants (graphic arts weighting, Source: CIE 116-1995)
CIE94_K1 = 0.045                   # Chroma weighting coefficient for S_C
CIE94_K2 = 0.015                   # Chroma weighting coefficient for S_H
CIE94_K_FACTORS = (1.0, 1.0, 1.0)  # Parametric weighting factors (k_L, k_C, k_H)

# Riemersma "redmean" weights (Source: Thiadmer Riemersma, compuphase.com)
REDMEAN_R = 2.0                    # Base weight of the red difference
REDMEAN_G = 4.0                    # Weight of the green difference
REDMEAN_B = 2.0                    # Base weight of the blue difference

# CIELUV Constants (Source: CIE 15:2004), same L* curve as CIELAB
LUV_U_MULT = 4.0                   # Numerator factor of u'
LUV_V_MULT = 9.0                   # Numerator factor of v'
LUV_Y_WEIGHT = 15.0                # Y weight in the u'v' denominator
LUV_Z_WEIGHT = 3.0                 # Z weight in the u'v' denominator
LUV_UV_MULT = 13.0                 # Scale of u* and v*
LUV_Z_NUM = 12.0                   # Constant term of the inverse z
LUV_Z_V_MULT = 20.0                # v' factor of the inverse z

# xyY black falls back to the white point's chromaticity below this sum
XYY_EPS = 1e-14

# OkLab Matrices (Source: B. Ottosson, "A perceptual color space for image processing", 2020)
M_XYZ_LMS_L = (0.8189330101, 0.3618667424, -0.1288597137)
M_XYZ_LMS_M = (0.0329845436, 0.9293118715, 0.0361456387)
M_XYZ_LMS_S = (0.0482003018, 0.2643662691, 0.633851707)
M_LMS_OKLAB_L = (0.2104542553, 0.793617785, -0.0040720468)
M_LMS_OKLAB_A = (1.9779984951, -2.428592205, 0.4505937099)
M_LMS_OKLAB_B = (0.0259040371, 0.7827717662, -0.808675766)
M_OKLAB_LMS_L = (0.9999999984505196, 0.39633779217376774, 0.2158037580607588)
M_OKLAB_LMS_M = (1.0000000088817607, -0.10556134232365633, -0.0638541747717059)
M_OKLAB_LMS_S = (1.0000000546724108, -0.08948418209496574, -1.2914855378640917)
M_LMS_XYZ_X = (1.2268798733741557, -0.5578149965554813, 0.28139105017721594)
M_LMS_XYZ_Y = (-0.04057576262431372, 1.1122868293970594, -0.07171106666151696)
M_LMS_XYZ_Z = (-0.07637294974672142, -0.4214933239627916, 1.5869240244272422)

# Chroma below which an OkLch hue is treated as undefined when blending
OKLCH_ACHROMATIC_CHROMA = 0.00015

# ==========================================
# Palette Profiles (HSV sampling + Lab acceptance)
# ==========================================

# Warm: reds, oranges and yellows, muted and dark
WARM_HUE_RANGES = ((0.0, 60.0), (335.0, 360.0))
WARM_SATURATION = (0.5, 0.75)
WARM_VALUE = (0.35, 0.55)
WARM_LIGHTNESS = (20.0, 55.0)      # Accepted Lab L* band
WARM_MIN_SEPARATION = 5.0          # Minimum Lab distance between palette members

# Happy: any hue, saturated and bright
HAPPY_HUE_RANGES = ((0.0, 360.0),)
HAPPY_SATURATION = (0.4, 1.0)
HAPPY_VALUE = (0.35, 1.0)
HAPPY_LIGHTNESS = (40.0, 90.0)
HAPPY_MIN_SEPARATION = 10.0

# Rejection sampler safety bound, exceeded -> GenerationError
PALETTE_MIN_ATTEMPTS = 1000
PALETTE_ATTEMPTS_PER_COLOR = 1000

# Evenly spaced ("fast") palettes: saturation / value draw ranges
FAST_WARM_SATURATION = (0.55, 0.75)
FAST_WARM_VALUE = (0.35, 0.55)
FAST_HAPPY_SATURATION = (0.8, 1.0)
FAST_HAPPY_VALUE = (0.65, 0.85)

# ==========================================
# Single Random Colors
# ==========================================

FAST_WARM_COLOR_SATURATION = (0.5, 0.8)
FAST_WARM_COLOR_VALUE = (0.3, 0.6)
FAST_HAPPY_COLOR_SATURATION = (0.7, 1.0)
FAST_HAPPY_COLOR_VALUE = (0.6, 0.9)
WARM_COLOR_CHROMA = (10.0, 40.0)   # HCL chroma in Lab units
WARM_COLOR_LIGHTNESS = (20.0, 50.0)
HAPPY_COLOR_CHROMA = (50.0, 80.0)
HAPPY_COLOR_LIGHTNESS = (50.0, 80.0)
COLOR_MAX_ATTEMPTS = 10000         # Redraw bound for in-gamut HCL sampling

# ==========================================
# Soft (k-means) Palettes
# ==========================================

# Lab grid the clusters are fitted on: L in [0, 100], a and b in [-100, 100]
SOFT_L_RANGE = (0.0, 100.0)
SOFT_AB_RANGE = (-100.0, 100.0)
SOFT_STEP_L = 5.0
SOFT_STEP_AB = 10.0
SOFT_MANY_STEP_L = 1.0             # Fine grid, about 170k candidate points
SOFT_MANY_STEP_AB = 5.0
SOFT_ITERATIONS = 50

# Constraints of the soft warm / happy palettes (HCL chroma and L*)
SOFT_WARM_CHROMA = (10.0, 40.0)
SOFT_WARM_LIGHTNESS = (20.0, 50.0)
SOFT_HAPPY_MIN_CHROMA = 30.0
SOFT_HAPPY_LIGHTNESS = (40.0, 80.0)

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_STEPS = 1000                   # Maximum gradient steps
MAX_COUNT = 100                    # Maximum number of colors allowed in batch processing
DEFAULT_STEPS = 10
DEFAULT_COUNT = 5

BLEND_SPACES = ["lab", "rgb", "linear", "hsv", "hcl", "luv", "luvlch", "oklab", "oklch"]
DISTANCE_METRICS = ["lab", "ciede2000", "cie94", "luv", "rgb", "linear", "riemersma"]
OUTPUT_FORMATS = [
    "hex", "rgb", "hsl", "hsv", "xyz", "xyy", "lab", "hcl", "luv", "luvlch", "oklab", "oklch",
]
PALETTE_PROFILES = ["warm", "happy"]

# ==========================================
# CLI UI
# ==========================================

# ANSI Terminal Styling
MSG_BOLD_COLORS = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
    "info": "\033[1;36m",
    "success": "\033[1;32m",
    "dim": "\033[1;2;37m",
}

MSG_COLORS = {
    "error": "\033[0;31m",
    "warning": "\033[0;33m",
    "info": "\033[0;36m",
    "success": "\033[0;32m",
}

RESET = "\033[0m"
BOLD_WHITE = "\033[1;37m"

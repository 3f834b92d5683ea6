#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/config.py

# ==========================================
# Color Science Constants & Coefficients
# ==========================================

EPS = 1e-12                        # Floating-point precision and division-by-zero safety

# Relative Luminance Coefficients (Source: ITU-R BT.709 / Rec. 709)
LUMA_R = 0.2126                    # Red component contribution to relative luminance
LUMA_G = 0.7152                    # Green component contribution to relative luminance
LUMA_B = 0.0722                    # Blue component contribution to relative luminance

# WCAG Contrast Thresholds (Source: https://www.w3.org/TR/WCAG21/#contrast-minimum)
WCAG_AA_LARGE = 3.0                # Minimum contrast for large text (Level AA)
WCAG_AA_NORMAL = 4.5               # Minimum contrast for normal text (Level AA)
WCAG_AAA_LARGE = 4.5               # Enhanced contrast for large text (Level AAA)
WCAG_AAA_NORMAL = 7.0              # Enhanced contrast for normal text (Level AAA)
WCAG_MIN_RATIO = 1.0               # Lower bound for WCAG calculation
WCAG_MAX_RATIO = 21.0              # Upper bound for WCAG calculation (Black on White)
WCAG_LUMINANCE_OFFSET = 0.05       # Standard offset constant in the (L + 0.05) contrast formula
WCAG_LINEAR_TH = 0.03928           # WCAG 2.x threshold for the linear part of the sRGB curve
WCAG_RATIO_DECIMALS = 2            # Reported contrast ratios are rounded to 2 decimals

# Standard Scaling & Mathematical Constants
UNIT = 1.0                         # Normalized maximum
DIV_2 = 2.0                        # Standard divisor for averages
RGB_MAX = 255.0                    # 8-bit color depth limit
HUE_MAX = 360.0                    # Full circle degrees
PERCENT_MAX = 100.0                # Saturation / lightness upper bound
HUE_SECTOR = 60.0                  # Degrees per HSL sector
HSL_HUE_MOD = 6.0                  # Hue sector divisor for HSL
HUE_G_OFFSET = 2.0                 # Sector offset when green is the max channel
HUE_B_OFFSET = 4.0                 # Sector offset when blue is the max channel
EXP_2 = 2                          # Square power
EXP_7 = 7                          # Power for CIEDE2000 chroma calculation
DEG_180 = 180.0                    # Half circle degrees
DEG_360 = 360.0                    # Full circle degrees

# sRGB Transfer Function Constants (Source: IEC 61966-2-1:1999)
SRGB_SLOPE = 12.92                 # Slope of the linear portion of the sRGB curve
SRGB_OFFSET = 0.055                # Constant offset used in the non-linear sRGB segment
SRGB_DIVISOR = 1.055               # Divisor for normalizing the sRGB component
SRGB_GAMMA = 2.4                   # Effective gamma exponent for sRGB transfer
SRGB_TO_LINEAR_TH = 0.04045        # Threshold for switching from linear to non-linear sRGB
LINEAR_TO_SRGB_TH = 0.0031308      # Threshold for switching from linear to sRGB space

# XYZ D65 Reference White (Source: ASTM E308-01 / CIE D65)
D65_X = 95.047                     # X coordinate for D65 illuminant (2-degree observer)
D65_Y = 100.0                      # Y coordinate (Luminance) for D65 illuminant
D65_Z = 108.883                    # Z coordinate for D65 illuminant
XYZ_SCALING = 100.0                # Factor for normalizing/scaling XYZ coordinates

# sRGB to XYZ Matrix (Source: sRGB D65)
M_SRGB_XYZ_X = (0.4124564, 0.3575761, 0.1804375)  # Coefficients for X coordinate calculation
M_SRGB_XYZ_Y = (0.2126729, 0.7151522, 0.0721750)  # Coefficients for Y (Luminance) calculation
M_SRGB_XYZ_Z = (0.0193339, 0.1191920, 0.9503041)  # Coefficients for Z coordinate calculation

# XYZ to sRGB Matrix (Source: sRGB D65 inverse)
M_XYZ_SRGB_R = (3.2404542, -1.5371385, -0.4985314)  # Coefficients for linear Red component calculation
M_XYZ_SRGB_G = (-0.9692660, 1.8760108, 0.0415560)   # Coefficients for linear Green component calculation
M_XYZ_SRGB_B = (0.0556434, -0.2040259, 1.0572252)   # Coefficients for linear Blue component calculation

# CIELAB Constants (Source: CIE 15:2004)
LAB_E = 0.008856                   # Threshold for switching between linear and power functions
LAB_K = 7.787                      # Slope of the linear segment for low luminance values
LAB_POW = 1.0 / 3.0                # Cube-root exponent of the non-linear segment
LAB_OFFSET = 16.0 / 116.0          # Constant offset for normalization in XYZ to Lab conversion
LAB_L_MULT = 116.0                 # Multiplier for Lightness (L*) calculation
LAB_L_SUB = 16.0                   # Subtraction constant for Lightness (L*) calculation
LAB_A_MULT = 500.0                 # Multiplier for 'a*' (green-red) channel calculation
LAB_B_MULT = 200.0                 # Multiplier for 'b*' (blue-yellow) channel calculation
LAB_INV_THR = 0.20689655           # Threshold for inverse conversion (Lab to XYZ)

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

# Delta E interpretation bands (documentation only, never enforced)
DELTA_E_IMPERCEPTIBLE = 1.0        # Below this: not perceptible by the human eye
DELTA_E_CLOSE = 2.0                # Up to this: perceptible through close observation
DELTA_E_GLANCE = 10.0              # Up to this: perceptible at a glance

# ==========================================
# Accessible Search & Palette Constants
# ==========================================

SEARCH_DEFAULT_RATIO = 4.5         # Default target ratio (WCAG AA, normal text)
SEARCH_MAX_ITERATIONS = 50         # Default iteration budget
SEARCH_STEP = 2.0                  # HSL lightness points added per iteration
SEARCH_LIGHT_BG_TH = 0.5           # Background luminance above which we darken

PALETTE_DEFAULT_STEPS = 9          # Default palette size
PALETTE_LIGHTEST = 95.0            # HSL lightness of the first palette entry
PALETTE_DARKEST = 5.0              # HSL lightness of the last palette entry
PALETTE_ANCHOR_LABEL = 500         # Conventional label of the midpoint entry
PALETTE_LABEL_SPAN = 1000          # Labels are spread over (0, 1000)
PALETTE_TAILWIND_LABELS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

# ==========================================
# Application Logic & Constraints
# ==========================================

MAX_STEPS = 100                    # Upper bound for palette steps from the CLI
MAX_ITERATIONS = 1000              # Upper bound for search iterations from the CLI

# Names containing these fragments are critical UI elements in compliance reports
CRITICAL_PAIR_KEYWORDS = ("button", "body-text", "nav")

# Supported formats for the 'convert' command
CONVERT_FORMATS = ["hex", "rgb", "hsl", "xyz", "lab"]

# Supported Delta E metrics
DELTA_E_METHODS = ["cie76", "cie2000"]

# ==========================================
# CLI UI & Data Structures
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

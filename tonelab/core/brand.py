#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/core/brand.py

import enum
from typing import Dict, Tuple


class BrandScale(enum.Enum):
    ORANGE = "orange"
    GREY = "grey"


class Shade(enum.IntEnum):
    S50 = 50
    S100 = 100
    S200 = 200
    S300 = 300
    S400 = 400
    S500 = 500
    S600 = 600
    S700 = 700
    S800 = 800
    S900 = 900


class ThemeMode(enum.Enum):
    LIGHT = "light"
    DARK = "dark"
    HIGH_CONTRAST = "high-contrast"


class ButtonVariant(enum.Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    OUTLINE = "outline"


BRAND_COLORS: Dict[BrandScale, Dict[Shade, str]] = {
    BrandScale.ORANGE: {
        Shade.S50: "#FFF7ED",
        Shade.S100: "#FFEDD5",
        Shade.S200: "#FED7AA",
        Shade.S300: "#FDBA74",
        Shade.S400: "#FB923C",
        Shade.S500: "#F2A30F",   # primary brand orange
        Shade.S600: "#EA580C",
        Shade.S700: "#C2410C",
        Shade.S800: "#9A3412",
        Shade.S900: "#7C2D12",
    },
    BrandScale.GREY: {
        Shade.S50: "#FAFAFA",
        Shade.S100: "#F5F5F5",
        Shade.S200: "#EEEEEE",   # light grey background
        Shade.S300: "#D4D4D4",
        Shade.S400: "#A3A3A3",
        Shade.S500: "#737373",
        Shade.S600: "#525252",
        Shade.S700: "#404040",
        Shade.S800: "#262626",
        Shade.S900: "#212121",   # dark grey / near black
    },
}

# Darker orange that passes AA against white
ACCESSIBLE_ORANGE = "#A85C00"

TRANSPARENT = "transparent"


def brand_color(scale: BrandScale, shade: Shade) -> str:
    return BRAND_COLORS[scale][shade]


_ORANGE = BRAND_COLORS[BrandScale.ORANGE]
_GREY = BRAND_COLORS[BrandScale.GREY]

BUTTON_COLORS: Dict[Tuple[ThemeMode, ButtonVariant], Dict[str, str]] = {
    (ThemeMode.HIGH_CONTRAST, ButtonVariant.PRIMARY): {
        "background": ACCESSIBLE_ORANGE,
        "foreground": "#FFFFFF",
        "hover": "#8B4A00",
        "active": "#6D3700",
    },
    (ThemeMode.HIGH_CONTRAST, ButtonVariant.SECONDARY): {
        "background": "#000000",
        "foreground": "#FFFFFF",
        "hover": "#333333",
        "active": "#1A1A1A",
    },
    (ThemeMode.HIGH_CONTRAST, ButtonVariant.OUTLINE): {
        "background": TRANSPARENT,
        "foreground": ACCESSIBLE_ORANGE,
        "border": ACCESSIBLE_ORANGE,
        "hover": ACCESSIBLE_ORANGE,
        "hoverForeground": "#FFFFFF",
    },
    (ThemeMode.DARK, ButtonVariant.PRIMARY): {
        "background": _ORANGE[Shade.S500],
        "foreground": "#FFFFFF",
        "hover": _ORANGE[Shade.S600],
        "active": _ORANGE[Shade.S700],
    },
    (ThemeMode.DARK, ButtonVariant.SECONDARY): {
        "background": _GREY[Shade.S700],
        "foreground": "#FFFFFF",
        "hover": _GREY[Shade.S600],
        "active": _GREY[Shade.S800],
    },
    (ThemeMode.DARK, ButtonVariant.OUTLINE): {
        "background": TRANSPARENT,
        "foreground": _ORANGE[Shade.S400],
        "border": _ORANGE[Shade.S400],
        "hover": _ORANGE[Shade.S400],
        "hoverForeground": _GREY[Shade.S900],
    },
    (ThemeMode.LIGHT, ButtonVariant.PRIMARY): {
        "background": _ORANGE[Shade.S500],
        "foreground": "#FFFFFF",
        "hover": _ORANGE[Shade.S600],
        "active": _ORANGE[Shade.S700],
    },
    (ThemeMode.LIGHT, ButtonVariant.SECONDARY): {
        "background": _GREY[Shade.S900],
        "foreground": "#FFFFFF",
        "hover": _GREY[Shade.S800],
        "active": _GREY[Shade.S700],
    },
    (ThemeMode.LIGHT, ButtonVariant.OUTLINE): {
        "background": TRANSPARENT,
        "foreground": _ORANGE[Shade.S500],
        "border": _ORANGE[Shade.S500],
        "hover": _ORANGE[Shade.S500],
        "hoverForeground": "#FFFFFF",
    },
}


def get_button_colors(theme: ThemeMode, variant: ButtonVariant = ButtonVariant.PRIMARY) -> Dict[str, str]:
    return dict(BUTTON_COLORS[(theme, variant)])


def get_high_contrast_colors(high_contrast: bool) -> Dict[str, str]:
    """Core UI colors, switched to their high-contrast variants when requested."""
    if high_contrast:
        return {
            "primary": ACCESSIBLE_ORANGE,
            "secondary": "#000000",
            "background": "#FFFFFF",
            "foreground": "#000000",
        }
    return {
        "primary": _ORANGE[Shade.S500],
        "secondary": _GREY[Shade.S900],
        "background": _GREY[Shade.S200],
        "foreground": _GREY[Shade.S900],
    }

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/__init__.py

__version__ = "0.1.0"

from tonelab.shared.sanitizer import HexParseError, is_valid_hex, normalize_hex
from tonelab.core.conversions import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    lab_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
)
from tonelab.core.luminance import get_luminance
from tonelab.core.contrast import (
    ComplianceLevel,
    ContrastResult,
    get_contrast_ratio,
    is_accessible,
    test_contrast,
)
from tonelab.core.difference import (
    delta_e,
    delta_e_cie76,
    delta_e_ciede2000,
    describe_delta_e,
)
from tonelab.core.adjust import darken, lighten, shift_lightness, with_lightness, with_opacity
from tonelab.core.brand import (
    ACCESSIBLE_ORANGE,
    BRAND_COLORS,
    BrandScale,
    ButtonVariant,
    Shade,
    ThemeMode,
    brand_color,
    get_button_colors,
    get_high_contrast_colors,
)
from tonelab.logic.accessible.engine import (
    AccessibleColorResult,
    find_accessible_color,
    search_accessible_color,
)
from tonelab.logic.palette.engine import generate_named_palette, generate_palette, palette_labels
from tonelab.logic.report.engine import (
    APPLICATION_PAIRS,
    ColorPair,
    ComplianceReport,
    build_compliance_report,
)

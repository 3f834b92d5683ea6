#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/convert/resolver.py

from typing import Tuple

from tonelab.core import conversions as conv


def to_rgb(value, fmt: str) -> Tuple[int, int, int]:
    """Resolves any supported input format into an RGB tuple."""
    if fmt == "hex":
        return conv.hex_to_rgb(value)

    maps = {
        "rgb": lambda: conv.coerce_rgb(value),
        "hsl": lambda: conv.hsl_to_rgb(*value),
        "xyz": lambda: conv.xyz_to_rgb(*value),
        "lab": lambda: conv.lab_to_rgb(*value),
    }
    if fmt not in maps:
        raise ValueError(f"unsupported input format: '{fmt}'")
    return maps[fmt]()

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/sanitizer.py

import argparse
import re

from tonelab.core import config as c

_HEX_RE = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class HexParseError(ValueError):
    """Raised when a string is not a 3 or 6 digit hex color."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"invalid hex color: '{_sanitize_for_log(value)}'")


def _sanitize_for_log(value) -> str:
    """
    Cleans up the input value for safe terminal logging by removing
    excessive whitespace and newlines.
    """
    if value is None:
        return ""
    return " ".join(str(value).split())


def normalize_hex(value: str) -> str:
    """
    Normalize a hex color into the canonical lowercase ``#rrggbb`` form.

    Accepts exactly 3 or 6 hex digits with one optional leading ``#``.
    Shorthand is expanded by digit duplication ('F0A' becomes 'ff00aa').
    Anything else raises HexParseError; input is never guessed at.
    """
    if not isinstance(value, str):
        raise HexParseError(value)
    s = value.strip()
    if s.startswith("#"):
        s = s[1:]
    if not _HEX_RE.match(s):
        raise HexParseError(value)
    if len(s) == 3:
        s = "".join(ch * 2 for ch in s)
    return f"#{s.lower()}"


def is_valid_hex(value: str) -> bool:
    try:
        normalize_hex(value)
    except HexParseError:
        return False
    return True


def _extract_signed_float(value: str) -> float:
    """
    Extracts a floating-point number from a string, preserving the sign and
    handling multiple decimal points by keeping only the first one encountered.
    """
    if value is None:
        return None

    s = str(value)

    is_negative = s.strip().startswith("-")

    raw_chars = re.findall(r"[0-9\.]", s)
    if not raw_chars:
        return None

    clean_str = ""
    dot_seen = False

    for char in raw_chars:
        if char == '.':
            if not dot_seen:
                clean_str += char
                dot_seen = True
        else:
            clean_str += char

    if not clean_str or clean_str == '.':
        return None

    val = float(clean_str)
    return -val if is_negative else val


def _extract_signed_int(value: str) -> int:
    """
    Extracts an integer from a string while preserving its mathematical sign (+ or -).
    Ignores alphabetical characters mixed in the string.
    """
    if value is None:
        return None

    s = str(value)
    is_negative = s.strip().startswith("-")
    digits_only = "".join(re.findall(r"[0-9]", s))

    if not digits_only:
        return None

    val = int(digits_only)
    return -val if is_negative else val


def parse_triple(value: str) -> tuple:
    """
    Parse three numbers out of strings like 'rgb(242, 163, 15)',
    '39 90% 50%' or 'lab(71.2 12.4 71.9)'.
    """
    if value is None:
        return None
    nums = re.findall(r"[-+]?(?:\d+\.?\d*|\.\d+)", str(value))
    if len(nums) != 3:
        return None
    return tuple(float(n) for n in nums)


# ==========================================
# CLI Argument Type Handlers (Validators)
# ==========================================

def handle_hex(v: str) -> str:
    """Validator for hex string CLI arguments."""
    try:
        return normalize_hex(v)
    except HexParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def handle_string_clean(v: str) -> str:
    """Validator for option names: lowercased, non-letters and digits removed."""
    cleaned = "".join(re.findall(r"[a-z0-9]", str(v).lower()))
    if not cleaned:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"invalid string value: '{raw}'")
    return cleaned


def handle_triple(v: str) -> tuple:
    """Validator for three-component color values."""
    val = parse_triple(v)
    if val is None:
        raw = _sanitize_for_log(v)
        raise argparse.ArgumentTypeError(f"expected three numeric components: '{raw}'")
    return val


def handle_int_range(min_v: int, max_v: int):
    """
    Factory function returning a validator that ensures an integer
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> int:
        val = _extract_signed_int(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid integer value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


def handle_float_range(min_v: float, max_v: float):
    """
    Factory function returning a validator that ensures a float
    is clamped within a specific [min_v, max_v] range.
    """
    def validator(v: str) -> float:
        val = _extract_signed_float(v)

        if val is None:
            raw = _sanitize_for_log(v)
            raise argparse.ArgumentTypeError(f"invalid float value: '{raw}'")

        if val < min_v:
            val = min_v
        elif val > max_v:
            val = max_v
        return val
    return validator


# ==========================================
# Central Mapping for Argparse types
# ==========================================

INPUT_HANDLERS = {
    "hex": handle_hex,
    "format": handle_string_clean,
    "metric": handle_string_clean,
    "triple": handle_triple,
    "ratio": handle_float_range(c.WCAG_MIN_RATIO, c.WCAG_MAX_RATIO),
    "steps": handle_int_range(1, c.MAX_STEPS),
    "iterations": handle_int_range(0, c.MAX_ITERATIONS),
}

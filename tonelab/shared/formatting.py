#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/shared/formatting.py


def format_colorspace(fmt: str, *args) -> str:
    if fmt == 'hex':
        return str(args[0]).upper()
    elif fmt == 'rgb':
        return f"rgb({args[0]}, {args[1]}, {args[2]})"
    elif fmt == 'hsl':
        h, s, l = args
        return f"hsl({h:.2f}deg, {s:.2f}%, {l:.2f}%)"
    elif fmt == 'xyz':
        return f"xyz({args[0]:.4f}, {args[1]:.4f}, {args[2]:.4f})"
    elif fmt == 'lab':
        return f"lab({args[0]:.4f} {args[1]:.4f} {args[2]:.4f})"

    return ""


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"

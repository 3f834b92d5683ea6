#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/contrast/resolver.py

import argparse

from tonelab.core.contrast import test_contrast
from .renderer import render_contrast


def resolve_contrast_input(args: argparse.Namespace) -> None:
    """Evaluate a foreground/background pair and print the verdict."""
    large = bool(getattr(args, "large_text", False))
    result = test_contrast(args.foreground, args.background, large_text=large)
    render_contrast(args.foreground, args.background, result, large_text=large)

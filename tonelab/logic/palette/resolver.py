#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/palette/resolver.py

import argparse

from .engine import generate_named_palette
from .renderer import render_palette


def resolve_palette_input(args: argparse.Namespace) -> None:
    render_palette(args.hex, generate_named_palette(args.hex, args.steps))

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/accessible/resolver.py

import argparse

from tonelab.shared.logger import log
from .engine import search_accessible_color
from .renderer import render_search


def resolve_accessible_input(args: argparse.Namespace) -> None:
    """Search for an accessible variant and report whether it converged."""
    result = search_accessible_color(
        args.foreground,
        args.background,
        target_ratio=args.ratio,
        max_iterations=args.iterations,
    )
    render_search(args.foreground, args.background, args.ratio, result)

    if not result.converged:
        log(
            "warning",
            f"no variant reached {args.ratio:g}:1 within {result.iterations} iterations; "
            "showing the closest candidate",
        )

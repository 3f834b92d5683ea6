#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/subcommands/command_registry.py

from . import (
    accessible,
    contrast,
    convert,
    delta_e,
    palette,
    report,
)

SUBCOMMANDS = {
    'convert': convert,
    'contrast': contrast,
    'accessible': accessible,
    'palette': palette,
    'delta-e': delta_e,
    'report': report,
}

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: tonelab/logic/report/resolver.py

import argparse

from .engine import APPLICATION_PAIRS, build_compliance_report
from .renderer import render_report


def resolve_report_input(args: argparse.Namespace) -> int:
    """Print the brand compliance report; returns 1 when any pair fails AA."""
    report = build_compliance_report(APPLICATION_PAIRS, large_text=args.large_text)
    render_report(report, APPLICATION_PAIRS)
    return 1 if report.failed_aa and args.strict else 0

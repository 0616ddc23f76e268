# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Analysis core for EBCMeter.

This module provides deterministic beer color estimation from images.
All operations are pixel-based and side-effect free.
"""

from ebcmeter.measure.analyze import analyze, analyze_color, analyze_strict

__all__ = ["analyze", "analyze_strict", "analyze_color"]

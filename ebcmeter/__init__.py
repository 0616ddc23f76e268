# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
EBCMeter -- Beer color estimation from photographs.

Samples the center of a photo of beer in a glass, converts the mean
color to CIE L*a*b*, and estimates its EBC (European Brewery Convention)
color value and band name.

Quick start::

    from ebcmeter import analyze

    result = analyze("pint.jpg")
    result.formatted_ebc          # "5.3"
    result.color_name             # "Straw"
    result.accuracy_description   # "High"
    result.to_report()            # Labelled text for display
"""

from __future__ import annotations

__version__ = "1.0.0"

from ebcmeter.measure import analyze, analyze_color, analyze_strict
from ebcmeter.schema import (
    EBC_COLOR_BANDS,
    UNKNOWN_RESULT,
    AnalysisError,
    AnalysisResult,
    EBCColorBand,
    LabColor,
    RGBColor,
)

__all__ = [
    # Core API
    "analyze",
    "analyze_strict",
    "analyze_color",
    "AnalysisResult",
    "UNKNOWN_RESULT",
    "AnalysisError",
    # Types (commonly needed)
    "RGBColor",
    "LabColor",
    "EBCColorBand",
    "EBC_COLOR_BANDS",
    # Version
    "__version__",
]

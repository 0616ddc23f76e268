# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Schema definitions for beer color analysis.

All types in this module are immutable (frozen dataclasses).
The EBC band table is a module-level constant, validated at import.
"""

from ebcmeter.schema.analysis_result import (
    EBC_COLOR_BANDS,
    UNKNOWN_COLOR_NAME,
    UNKNOWN_RESULT,
    AnalysisError,
    AnalysisResult,
    EBCColorBand,
    LabColor,
    RGBColor,
    describe_accuracy,
    validate_bands,
)

__all__ = [
    # Color types
    "RGBColor",
    "LabColor",
    # Classification table
    "EBCColorBand",
    "EBC_COLOR_BANDS",
    "validate_bands",
    # Result
    "AnalysisResult",
    "UNKNOWN_RESULT",
    "UNKNOWN_COLOR_NAME",
    "describe_accuracy",
    "AnalysisError",
]

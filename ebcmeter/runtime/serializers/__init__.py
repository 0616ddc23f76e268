# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Serializers for AnalysisResult delivery to a display.

Each serializer formats an AnalysisResult for one kind of consumer.
All serializers preserve the result exactly -- no modification or rounding
beyond what the display format calls for.
"""

from ebcmeter.runtime.serializers.base import ReportFormat
from ebcmeter.runtime.serializers.report import to_report

__all__ = [
    "ReportFormat",
    "to_report",
]

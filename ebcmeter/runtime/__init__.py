# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Presentation runtime for EBCMeter.

Renders an AnalysisResult for whatever shows it to the user: labelled
text lines for a results panel, or JSON for a UI that lays the fields
out itself.

The presentation layer never modifies the analysis result.
"""

from ebcmeter.runtime.serializers import (
    ReportFormat,
    to_report,
)

__all__ = [
    "to_report",
    "ReportFormat",
]

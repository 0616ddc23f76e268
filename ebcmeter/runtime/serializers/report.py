# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""
Report serializer for results panels.

Formats an AnalysisResult as the labelled lines a results screen shows
next to the color swatch, or as plain JSON for a UI that lays the fields
out itself.
"""

from __future__ import annotations

import json

from ebcmeter.runtime.serializers.base import ReportFormat
from ebcmeter.schema import AnalysisResult


def to_report(
    result: AnalysisResult,
    *,
    format: ReportFormat = ReportFormat.TEXT,
    include_srm: bool = True,
    preamble: bool = False,
) -> str:
    """Serialize an AnalysisResult as a display report.

    Args:
        result: The AnalysisResult to serialize.
        format: TEXT (labelled lines), JSON or JSON_PRETTY.
        include_srm: Include the SRM equivalent (TEXT only).
        preamble: Include a "Results" heading (TEXT only).

    Returns:
        Report string.

    Example (TEXT)::

        EBC Value: 7.5
        Beer Color: Straw
        Accuracy: High
        SRM: 3.8
        Swatch: #FFFFFF
    """
    if format == ReportFormat.TEXT:
        return _to_text(result, include_srm, preamble)
    elif format == ReportFormat.JSON_PRETTY:
        return json.dumps(_report_dict(result), indent=2)
    else:
        return json.dumps(_report_dict(result), separators=(",", ":"))


def _to_text(
    result: AnalysisResult,
    include_srm: bool,
    preamble: bool,
) -> str:
    """Generate labelled text lines."""
    lines: list[str] = []

    if preamble:
        lines.extend(["Results", ""])

    if result.is_unknown:
        lines.append("EBC Value: --")
        lines.append(f"Beer Color: {result.color_name}")
        lines.append(f"Accuracy: {result.accuracy_description}")
        return "\n".join(lines)

    lines.append(f"EBC Value: {result.formatted_ebc}")
    lines.append(f"Beer Color: {result.color_name}")
    lines.append(f"Accuracy: {result.accuracy_description}")
    if include_srm:
        lines.append(f"SRM: {result.srm_value:.1f}")
    lines.append(f"Swatch: {result.hex}")

    return "\n".join(lines)


def _report_dict(result: AnalysisResult) -> dict:
    """Display-ready fields: raw values plus their formatted views."""
    data = result.to_dict()
    data["formatted_ebc"] = result.formatted_ebc
    data["accuracy_description"] = result.accuracy_description
    data["hex"] = result.hex
    return data

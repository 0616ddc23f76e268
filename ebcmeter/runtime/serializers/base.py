# Copyright (c) 2026 EBCMeter
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum


class ReportFormat(Enum):
    """Output format for reports."""

    TEXT = "text"
    JSON = "json"
    JSON_PRETTY = "json_pretty"

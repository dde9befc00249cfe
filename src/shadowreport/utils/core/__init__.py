# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Core utilities package.

This package contains core functionality shared by the report builders:
- Data containers for records, payloads and relocation descriptors
- Exception hierarchy
- Cell formatting helpers
"""

from .cells import enforce_max_length, format_duration, letter_to_number, locale_sort_key, number_to_letter
from .errors import (
    FormulaError,
    ReportConfigError,
    ReportPayloadError,
    ShadowReportError,
    SummaryAggregationError,
)
from .models import (
    ColumnMetrics,
    CopyPasteDescriptor,
    GridRange,
    ReportEntry,
    ReportPayload,
    SourceFormat,
    SourceTab,
    SummaryPayload,
    TestRecord,
)

# Make sub-modules available
from . import cells, errors, models

__all__ = [
    # Cells
    "enforce_max_length",
    "format_duration",
    "letter_to_number",
    "locale_sort_key",
    "number_to_letter",
    # Errors
    "FormulaError",
    "ReportConfigError",
    "ReportPayloadError",
    "ShadowReportError",
    "SummaryAggregationError",
    # Models
    "ColumnMetrics",
    "CopyPasteDescriptor",
    "GridRange",
    "ReportEntry",
    "ReportPayload",
    "SourceFormat",
    "SourceTab",
    "SummaryPayload",
    "TestRecord",
    # Sub-modules
    "cells",
    "errors",
    "models",
]

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Exception types raised by the report and summary builders.
"""


class ShadowReportError(Exception):
    """Base exception for report generation failures."""

    pass


class ReportConfigError(ShadowReportError):
    """Exception raised when the report configuration is invalid."""

    pass


class ReportPayloadError(ShadowReportError):
    """Exception raised when raw test results cannot be turned into a report payload."""

    pass


class FormulaError(ShadowReportError):
    """Exception raised when a header cell references an unknown formula key."""

    pass


class SummaryAggregationError(ShadowReportError):
    """Exception raised when source tabs cannot be folded into a summary."""

    pass

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Reporting package.

Provides daily report building, summary aggregation and the spreadsheet
batch-update request builders shared by both.
"""

from .directives import (
    copy_paste_request,
    insert_dimension_requests,
    merge_cells_request,
    text_format_request,
    update_borders_request,
    value_range,
)

# Make sub-modules available
from . import daily, directives, summary

__all__ = [
    # Directives
    "copy_paste_request",
    "insert_dimension_requests",
    "merge_cells_request",
    "text_format_request",
    "update_borders_request",
    "value_range",
    # Sub-modules
    "daily",
    "directives",
    "summary",
]

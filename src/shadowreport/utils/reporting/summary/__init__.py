# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Summary reporting package.

Consolidates many daily report tabs into one weekly or monthly summary:
- Date-titled tab selection and summary titles
- Concurrent source tab retrieval
- Header, footer and metrics block location
- Cross-tab aggregation into relocation and style directives
"""

from .aggregator import SummaryAggregator, TabLayout, aggregate_summary
from .fetcher import fetch_source_tabs
from .layout import find_column_indices, find_footer_row_index, find_header_row_index, find_metrics_column
from .styles import SOLID_BLACK_WIDTH_ONE, SOLID_BLACK_WIDTH_TWO, metrics_block_styles
from .tabs import (
    format_tab_date,
    is_report_tab_title,
    is_summary_required,
    last_month_tab_titles,
    monthly_summary_title,
    parse_tab_date,
    previous_month,
    previous_month_window,
    report_tab_title,
    sort_tab_titles,
    week_tab_titles,
    week_window,
    weekly_summary_title,
)

# Make sub-modules available
from . import aggregator, fetcher, layout, styles, tabs

__all__ = [
    # Aggregation
    "SummaryAggregator",
    "TabLayout",
    "aggregate_summary",
    # Fetching
    "fetch_source_tabs",
    # Layout
    "find_column_indices",
    "find_footer_row_index",
    "find_header_row_index",
    "find_metrics_column",
    # Styles
    "SOLID_BLACK_WIDTH_ONE",
    "SOLID_BLACK_WIDTH_TWO",
    "metrics_block_styles",
    # Tabs
    "format_tab_date",
    "is_report_tab_title",
    "is_summary_required",
    "last_month_tab_titles",
    "monthly_summary_title",
    "parse_tab_date",
    "previous_month",
    "previous_month_window",
    "report_tab_title",
    "sort_tab_titles",
    "week_tab_titles",
    "week_window",
    "weekly_summary_title",
    # Sub-modules
    "aggregator",
    "fetcher",
    "layout",
    "styles",
    "tabs",
]

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Daily report package.

Builds one report tab from raw test results:
- Metadata extraction from file paths and titles
- Record collection, sorting and payload assembly
- Header metrics, formula rendering and body merges
- Playwright report conversion
"""

from .assembler import build_daily_payload, build_footer, build_record, collect_records, sort_body
from .converter import transform_format_b_report
from .extractor import (
    TokenMatcher,
    build_token_matchers,
    classify_title_tokens,
    classify_token,
    extract_area,
    extract_category,
    extract_manual_test_id,
    extract_spec,
    extract_team,
    extract_test_name,
    extract_type,
)
from .formulas import (
    build_formulas,
    construct_header_regex,
    determine_subject_column,
    finalize_daily_report,
    process_header_with_formulas,
)
from .header import (
    append_state_reports_to_header,
    combine_reports,
    construct_header_report,
    generate_placeholders,
    generate_report,
    generate_state_reports,
)
from .merges import create_merge_queries

# Make sub-modules available
from . import assembler, converter, extractor, formulas, header, merges

__all__ = [
    # Assembly
    "build_daily_payload",
    "build_footer",
    "build_record",
    "collect_records",
    "sort_body",
    # Conversion
    "transform_format_b_report",
    # Extraction
    "TokenMatcher",
    "build_token_matchers",
    "classify_title_tokens",
    "classify_token",
    "extract_area",
    "extract_category",
    "extract_manual_test_id",
    "extract_spec",
    "extract_team",
    "extract_test_name",
    "extract_type",
    # Formulas
    "build_formulas",
    "construct_header_regex",
    "determine_subject_column",
    "finalize_daily_report",
    "process_header_with_formulas",
    # Header
    "append_state_reports_to_header",
    "combine_reports",
    "construct_header_report",
    "generate_placeholders",
    "generate_report",
    "generate_state_reports",
    # Merges
    "create_merge_queries",
    # Sub-modules
    "assembler",
    "converter",
    "extractor",
    "formulas",
    "header",
    "merges",
]

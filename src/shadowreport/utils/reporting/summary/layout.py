# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Locating the header, footer and metrics block of a fetched report tab.

All indices are 0-based; "not found" is None.
"""

from typing import List, Optional, Sequence


def find_header_row_index(rows: Sequence[Sequence[str]], indicators: Sequence[str]) -> Optional[int]:
    """Index of the first row containing every header indicator."""
    for index, row in enumerate(rows):
        if all(indicator in row for indicator in indicators):
            return index
    return None


def find_footer_row_index(rows: Sequence[Sequence[str]], marker: str) -> Optional[int]:
    """Index of the first row containing the end marker."""
    for index, row in enumerate(rows):
        if marker in row:
            return index
    return None


def find_column_indices(header_row: Sequence[str], labels: Sequence[str]) -> List[int]:
    """Column index of each label present in the header row, in label order; missing labels are skipped."""
    header_row = list(header_row)
    return [header_row.index(label) for label in labels if label in header_row]


def find_metrics_column(first_row: Sequence[str], metrics: Sequence[str]) -> Optional[int]:
    """Index of the first cell containing any default header metric label."""
    for index, cell in enumerate(first_row):
        if isinstance(cell, str) and any(metric in cell.strip() for metric in metrics):
            return index
    return None

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Merge requests for repeated area and spec cells in the report body.
"""

import logging
from typing import Any, Dict, List

from shadowreport.utils.core.models import GridRange

logger = logging.getLogger(__name__)

MERGED_COLUMNS = (0, 1)


def _cell(row: List[str], column_index: int) -> str:
    return row[column_index] if column_index < len(row) else ""


def _column_runs(grid: List[List[str]], column_index: int, header_row_index: int, tab_id: int) -> List[GridRange]:
    runs = []
    run_start = 0
    for i in range(len(grid)):
        is_last_row = i == len(grid) - 1
        if is_last_row or _cell(grid[i], column_index) != _cell(grid[i + 1], column_index):
            if i > run_start:
                runs.append(
                    GridRange(
                        tab_id=tab_id,
                        row_start=header_row_index + run_start,
                        row_end=header_row_index + i + 1,
                        col_start=column_index,
                        col_end=column_index + 1,
                    )
                )
            run_start = i + 1
    return runs


def create_merge_queries(grid: List[List[str]], header_row_index: int, destination_tab_id: int) -> Dict[str, Any]:
    """
    Build merge requests for runs of identical cells in the first two columns.

    Grid row ``i`` lives at sheet row ``header_row_index + i`` (0-based). Each
    maximal run of at least two identical cells in column 0 or 1 becomes one
    ``MERGE_ALL`` request, column 0 runs first.

    Args:
        grid: Body rows of strings
        header_row_index: Sheet row of the first grid row
        destination_tab_id: Tab the merges apply to

    Returns:
        Batch-update body, ``{"requests": [...]}``

    Raises:
        TypeError: If the grid is not a list of string rows
        ValueError: If the row index or tab id is negative
    """
    if not isinstance(grid, list) or not all(
        isinstance(row, list) and all(isinstance(cell, str) for cell in row) for row in grid
    ):
        raise TypeError("Grid must be a 2D list of strings.")
    if isinstance(header_row_index, bool) or not isinstance(header_row_index, int) or header_row_index < 0:
        raise ValueError("Header row index must be a non-negative integer.")
    if isinstance(destination_tab_id, bool) or not isinstance(destination_tab_id, int) or destination_tab_id < 0:
        raise ValueError("Tab id must be a non-negative integer.")

    ranges = []
    for column_index in MERGED_COLUMNS:
        ranges.extend(_column_runs(grid, column_index, header_row_index, destination_tab_id))

    logger.debug(f"Created {len(ranges)} merge requests for tab {destination_tab_id}")
    return {"requests": [{"mergeCells": {"range": cell_range.to_request(), "mergeType": "MERGE_ALL"}} for cell_range in ranges]}

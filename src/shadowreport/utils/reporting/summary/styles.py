# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Structural styles for the per-tab metrics blocks of a summary.
"""

from typing import Any, Dict, List

from shadowreport.utils.core.models import GridRange
from shadowreport.utils.reporting.directives import merge_cells_request, text_format_request, update_borders_request

BLACK = {"red": 0, "green": 0, "blue": 0, "alpha": 1}

SOLID_BLACK_WIDTH_TWO = {"style": "SOLID", "width": 2, "color": BLACK}
SOLID_BLACK_WIDTH_ONE = {"style": "SOLID", "width": 1, "color": BLACK}

HEADER_FONT_SIZE = 12


def block_row_styles(tab_id: int, row: int, col_start: int, col_end: int) -> List[Dict[str, Any]]:
    """Merge, border and bold one row of a metrics block."""
    cell_range = GridRange(tab_id=tab_id, row_start=row, row_end=row + 1, col_start=col_start, col_end=col_end)
    return [
        merge_cells_request(cell_range),
        update_borders_request(cell_range, SOLID_BLACK_WIDTH_TWO, SOLID_BLACK_WIDTH_ONE),
        text_format_request(cell_range, bold=True, font_size=HEADER_FONT_SIZE),
    ]


def metrics_block_styles(
    tab_id: int, header_row: int, footer_row: int, col_start: int, col_end: int
) -> List[Dict[str, Any]]:
    """
    Build the style directives framing one source tab's block in the summary.

    Args:
        tab_id: Destination tab
        header_row: Row holding the source tab title
        footer_row: Row of the relocated end marker, just below the body
        col_start: First column of the block
        col_end: Column after the last one of the block

    Returns:
        Directives for the header row followed by those for the footer row
    """
    return block_row_styles(tab_id, header_row, col_start, col_end) + block_row_styles(
        tab_id, footer_row, col_start, col_end
    )

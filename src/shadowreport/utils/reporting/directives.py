# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Spreadsheet batch-update request builders.

Every function returns a plain dictionary in the batch-update wire shape,
ready to be serialized and handed to the spreadsheet writer.
"""

import logging
from typing import Any, Dict, List, Optional

from shadowreport.utils.core.models import CopyPasteDescriptor, GridRange

logger = logging.getLogger(__name__)


def copy_paste_request(descriptor: CopyPasteDescriptor) -> Dict[str, Any]:
    return descriptor.to_request()


def merge_cells_request(cell_range: GridRange, merge_type: str = "MERGE_ALL") -> Dict[str, Any]:
    return {"mergeCells": {"range": cell_range.to_request(), "mergeType": merge_type}}


def update_borders_request(
    cell_range: GridRange,
    outer_horizontal: Dict[str, Any],
    outer_vertical: Dict[str, Any],
    inner_horizontal: Optional[Dict[str, Any]] = None,
    inner_vertical: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build an ``updateBorders`` request.

    Args:
        cell_range: Range the borders apply to
        outer_horizontal: Style of the top and bottom borders
        outer_vertical: Style of the left and right borders
        inner_horizontal: Style between rows, defaults to outer_horizontal
        inner_vertical: Style between columns, defaults to outer_vertical
    """
    return {
        "updateBorders": {
            "range": cell_range.to_request(),
            "top": outer_horizontal,
            "bottom": outer_horizontal,
            "left": outer_vertical,
            "right": outer_vertical,
            "innerHorizontal": inner_horizontal or outer_horizontal,
            "innerVertical": inner_vertical or outer_vertical,
        }
    }


def text_format_request(cell_range: GridRange, bold: bool = True, font_size: int = 12) -> Dict[str, Any]:
    """Build a ``repeatCell`` request applying a text format to every cell of a range."""
    return {
        "repeatCell": {
            "range": cell_range.to_request(),
            "cell": {"userEnteredFormat": {"textFormat": {"bold": bold, "fontSize": font_size}}},
            "fields": "userEnteredFormat.textFormat",
        }
    }


def value_range(tab_title: str, a1_cell: str, value: str) -> Dict[str, Any]:
    """Build a single-cell value range such as ``{"range": "Summary!A1", "values": [["Oct 1, 2026"]]}``."""
    return {"range": f"{tab_title}!{a1_cell}", "values": [[value]]}


def insert_dimension_requests(tab_id: int, columns: int = 0, rows: int = 0) -> List[Dict[str, Any]]:
    """
    Build the requests growing a tab by inserting columns and rows at its start.

    Args:
        tab_id: Tab to grow
        columns: Number of columns to insert
        rows: Number of rows to insert

    Returns:
        Zero, one or two ``insertDimension`` requests
    """
    for name, value in (("tab_id", tab_id), ("columns", columns), ("rows", rows)):
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{name} must be a non-negative integer.")

    requests = []
    for dimension, quantity in (("COLUMNS", columns), ("ROWS", rows)):
        if quantity > 0:
            requests.append(
                {
                    "insertDimension": {
                        "range": {"sheetId": tab_id, "dimension": dimension, "startIndex": 0, "endIndex": quantity},
                        "inheritFromBefore": False,
                    }
                }
            )
    return requests

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Daily report header construction.

The header holds, above the column-name row, one label/formula-key pair per
vocabulary value seen in the body (types, categories and teams side by side)
and the aggregate state metrics aligned with the state column. Formula keys
are rendered into spreadsheet formulas later, once the final row numbers are
known.
"""

import logging
import math
from typing import List, Sequence, Tuple

from shadowreport.utils.core.models import ReportEntry

logger = logging.getLogger(__name__)

TYPE_COLUMN_INDEX = 3
CATEGORY_COLUMN_INDEX = 4
TEAM_COLUMN_INDEX = 5

PLACEHOLDER = ("", "")


def _validate_strings(values: Sequence[str], name: str) -> None:
    if isinstance(values, str) or not isinstance(values, (list, tuple)):
        raise TypeError(f"{name} must be a list of strings.")
    if not all(isinstance(value, str) for value in values):
        raise TypeError(f"All {name} must be strings.")


def generate_report(
    vocabulary: Sequence[str], body_rows: List[List[str]], column_index: int, is_team_series: bool = False
) -> List[ReportEntry]:
    """
    Generate the passed-tests entries for the vocabulary values present in a body column.

    A value is present when it occurs as a substring of the column's cell in at
    least one row. Values never seen produce no entry.

    Args:
        vocabulary: Values to look for
        body_rows: Report body rows
        column_index: Index of the column to search
        is_team_series: Whether the series describes teams

    Returns:
        One ReportEntry per present value, in vocabulary order

    Raises:
        TypeError: If any argument has the wrong type
    """
    _validate_strings(vocabulary, "vocabulary")
    if not isinstance(body_rows, list):
        raise TypeError("body_rows must be a list.")
    if isinstance(column_index, bool) or not isinstance(column_index, int) or column_index < 0:
        raise TypeError("column_index must be a non-negative integer.")
    if not isinstance(is_team_series, bool):
        raise TypeError("is_team_series must be a boolean.")

    report = []
    for value in vocabulary:
        occurrences = sum(
            1
            for row in body_rows
            if len(row) > column_index and isinstance(row[column_index], str) and value in row[column_index]
        )
        if occurrences:
            report.append(ReportEntry(f"# {value} tests passed", f"{value} formula tests passed"))

    logger.debug(f"Generated {len(report)} {'team' if is_team_series else 'column'} entries from column {column_index}")
    return report


def generate_placeholders(count: int) -> List[Tuple[str, str]]:
    """
    Generate blank entries used where a series has run out.

    Raises:
        TypeError: If count is not a non-negative integer
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError("The count must be an integer.")
    if count < 0:
        raise TypeError("The count must be a non-negative integer.")
    return [PLACEHOLDER] * count


def combine_reports(series_list: Sequence[Sequence[Tuple[str, str]]], placeholders: Sequence[Tuple[str, str]]) -> List[List[str]]:
    """
    Lay several report series out side by side, two entries per series per row pair.

    For every index ``i`` up to the longest series' half length, the first row
    holds entry ``2i`` of each series and the second row entry ``2i + 1``,
    each entry flattened into its two cells. A series with no entry at that
    position contributes ``placeholders[0]`` or ``placeholders[1]`` instead.

    Args:
        series_list: Report series, each a list of two-cell entries
        placeholders: Blank entries, usually from ``generate_placeholders``

    Returns:
        Header rows, an even number of them
    """
    if not isinstance(series_list, (list, tuple)) or not isinstance(placeholders, (list, tuple)):
        raise TypeError("Expected both series_list and placeholders to be lists.")
    if any(not isinstance(series, (list, tuple)) for series in series_list):
        raise TypeError("Invalid report series: Expected a list.")

    if not series_list:
        return []

    first_placeholder = tuple(placeholders[0]) if len(placeholders) > 0 else PLACEHOLDER
    second_placeholder = tuple(placeholders[1]) if len(placeholders) > 1 else PLACEHOLDER

    pair_count = max(math.ceil(len(series) / 2) for series in series_list)
    combined = []
    for i in range(pair_count):
        first_row = []
        second_row = []
        for series in series_list:
            first_row.extend(series[2 * i] if 2 * i < len(series) else first_placeholder)
            second_row.extend(series[2 * i + 1] if 2 * i + 1 < len(series) else second_placeholder)
        combined.append(first_row)
        combined.append(second_row)

    return combined


def construct_header_report(body_rows: List[List[str]], config) -> List[List[str]]:
    """
    Build the vocabulary rows of the header from the report body.

    Args:
        body_rows: Sorted report body rows in record column order
        config: ReportConfig with the type, category and team vocabularies

    Returns:
        Header rows with types, categories and teams side by side
    """
    if not isinstance(body_rows, list):
        raise TypeError("Invalid body_rows: Expected a list.")

    series_definitions = (
        (config.test_types, TYPE_COLUMN_INDEX, False),
        (config.test_categories, CATEGORY_COLUMN_INDEX, False),
        (config.team_names, TEAM_COLUMN_INDEX, True),
    )
    series_list = [
        generate_report(list(vocabulary), body_rows, column_index, is_team)
        for vocabulary, column_index, is_team in series_definitions
    ]

    longest_vocabulary = max(len(vocabulary) for vocabulary, _, _ in series_definitions)
    return combine_reports(series_list, generate_placeholders(max(longest_vocabulary, 2)))


def generate_state_reports(default_metrics: Sequence[str], index: int) -> List[ReportEntry]:
    """
    Generate the state metric entries for one header row.

    Every metric label is paired with a formula key derived from the metric
    at ``index`` only, so all entries of a call share the same kind of key.
    Callers keep entry ``index`` of the result for row ``index``.

    Args:
        default_metrics: Metric labels such as ``"# passed tests"``
        index: Position of the metric deciding the formula kind

    Returns:
        One ReportEntry per metric

    Raises:
        TypeError: If the metrics are not strings or index is not an integer
        IndexError: If index is out of bounds
    """
    _validate_strings(default_metrics, "default_metrics")
    if isinstance(index, bool) or not isinstance(index, int):
        raise TypeError("index must be an integer.")
    if index < 0 or index >= len(default_metrics):
        raise IndexError("index is out of bounds for default_metrics.")

    metric_type = default_metrics[index][2:].replace(" tests", "", 1).strip()
    if not metric_type:
        raise TypeError("The extracted metric type must be a non-empty string.")

    reports = []
    for metric in default_metrics:
        adjusted = metric.replace("# ", "", 1)
        if metric_type == "skipped/pending":
            formula_key = f"{adjusted} formula skipped/pending"
        elif metric_type == "total":
            formula_key = f"{adjusted} formula total"
        else:
            formula_key = f"{metric_type} formula base"
        reports.append(ReportEntry(f"# {adjusted}", formula_key))

    return reports


def append_state_reports_to_header(
    header_grid: List[List[str]], default_metrics: Sequence[str], columns: Sequence[str]
) -> None:
    """
    Append the state metric entries to the header grid in place.

    The grid is grown to one row per metric, and row ``i`` is padded so its
    label lands just left of the state column and its formula key under it.

    Raises:
        TypeError: If the grid or metrics have the wrong type
        ValueError: If the columns have no state column
    """
    if not isinstance(header_grid, list):
        raise TypeError("Invalid header_grid: Expected a list.")
    _validate_strings(default_metrics, "default_metrics")
    if "state" not in columns:
        raise ValueError("Column 'state' not found in columns")

    state_index = list(columns).index("state")

    if not header_grid and default_metrics:
        header_grid.append([""] * len(default_metrics))

    while len(header_grid) < len(default_metrics):
        header_grid.append([""] * len(header_grid[0]))

    for i in range(len(default_metrics)):
        entry = generate_state_reports(default_metrics, i)[i]
        row = header_grid[i]
        while len(row) < state_index - 1:
            row.append("")
        row.extend(entry)

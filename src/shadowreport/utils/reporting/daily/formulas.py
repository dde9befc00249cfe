# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Spreadsheet formula rendering for daily report headers.

Header cells of the form ``"<subject> <formula key>"`` are replaced by
COUNTIFS/ROWS formulas over the body rows once the final row layout is known.
"""

import logging
import re
from typing import Any, Dict, List, Pattern, Sequence

from shadowreport.utils.core.cells import number_to_letter
from shadowreport.utils.core.errors import FormulaError
from shadowreport.utils.core.models import ReportPayload

from .merges import create_merge_queries

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def build_formulas(
    type: str,
    header_row_index: int,
    total_rows: int,
    body_row_count: int,
    subject_column_letter: str,
    state_column_letter: str,
    config,
) -> Dict[str, str]:
    """
    Render every formula template for one subject.

    Args:
        type: Subject value matched by the COUNTIFS criteria
        header_row_index: 1-based sheet row of the column-name row
        total_rows: Last sheet row of the body
        body_row_count: Number of body rows
        subject_column_letter: Column holding the subject values
        state_column_letter: Column holding the test states
        config: ReportConfig with the formula templates and keys

    Returns:
        Dict mapping each formula key to its rendered formula

    Raises:
        TypeError: If type is not a string
        ValueError: If a row number, count or column letter is invalid
    """
    if not isinstance(type, str):
        raise TypeError("Type must be a string.")
    if not _is_int(header_row_index) or header_row_index <= 0:
        raise ValueError("Header row index must be a positive integer.")
    if not _is_int(total_rows) or total_rows <= header_row_index:
        raise ValueError("Total number of rows must be an integer greater than header row index.")
    if not _is_int(body_row_count) or body_row_count <= 0:
        raise ValueError("Body row count must be a positive integer.")
    if not isinstance(subject_column_letter, str) or not subject_column_letter.strip():
        raise ValueError("Subject column must be a non-empty string.")
    if not isinstance(state_column_letter, str) or not state_column_letter.strip():
        raise ValueError("State column must be a non-empty string.")

    substitutions = {
        "{type}": type,
        "{headerRowIndex}": str(header_row_index),
        "{totalNumberOfRows}": str(total_rows),
        "{bodyRowCount}": str(body_row_count),
        "{subjectColumn}": subject_column_letter,
        "{stateColumn}": state_column_letter,
    }
    placeholder_pattern = re.compile("|".join(re.escape(token) for token in substitutions))

    return {
        key: placeholder_pattern.sub(lambda match: substitutions[match.group(0)], template)
        for key, template in zip(config.formula_keys, config.formula_templates)
    }


def construct_header_regex(formula_keys: Sequence[str]) -> Pattern:
    """Build the pattern splitting a header cell into its subject and formula key."""
    if not formula_keys:
        raise ValueError("Formula keys must not be empty.")
    keys_pattern = "|".join(re.escape(key) for key in formula_keys)
    return re.compile(rf"(.+) ({keys_pattern})$")


def determine_subject_column(type: str, columns: Sequence[str], config) -> str:
    """
    Pick the column letter a subject is counted in.

    Categories are counted in the category column, test types in the type
    column and anything else in the team column.
    """
    if not isinstance(type, str):
        raise TypeError("Type must be a string.")

    if type in config.test_categories:
        column_name = "category"
    elif type in config.test_types:
        column_name = "type"
    else:
        column_name = "team"

    if column_name not in columns:
        raise ValueError(f"Column '{column_name}' not found in columns")
    return number_to_letter(list(columns).index(column_name))


def process_header_with_formulas(
    header_grid: List[List[str]],
    header_row_index: int,
    total_rows: int,
    body_row_count: int,
    columns: Sequence[str],
    config,
) -> None:
    """
    Replace every formula-key header cell with its rendered formula, in place.

    Raises:
        FormulaError: If a formula-key cell cannot be rendered
        ValueError: If the columns have no state column
    """
    if not isinstance(header_grid, list):
        raise TypeError("Invalid header_grid: Expected a list of rows.")
    if "state" not in columns:
        raise ValueError("Column 'state' not found in columns")

    state_column = number_to_letter(list(columns).index("state"))
    pattern = construct_header_regex(config.formula_keys)

    for row_index, row in enumerate(header_grid):
        if not isinstance(row, list):
            raise TypeError(f"Invalid header row at index {row_index}: Expected a list.")
        for col_index, cell in enumerate(row):
            if not isinstance(cell, str):
                continue
            match = pattern.search(cell)
            if not match:
                continue

            subject, formula_key = match.group(1), match.group(2)
            try:
                subject_column = determine_subject_column(subject, columns, config)
                formulas = build_formulas(
                    subject, header_row_index, total_rows, body_row_count, subject_column, state_column, config
                )
            except (TypeError, ValueError) as e:
                logger.error(f"Error processing header with formulas: {e}")
                raise FormulaError(f"Failed to render '{cell}': {e}") from e

            if formula_key not in formulas:
                logger.error(f"No formula found for key: {formula_key}")
                raise FormulaError(f"No formula found for key: {formula_key}")
            row[col_index] = formulas[formula_key]


def finalize_daily_report(payload: ReportPayload, destination_tab_id: int, columns: Sequence[str], config) -> Dict[str, Any]:
    """
    Render the header formulas for the final sheet layout and build the body merge requests.

    The header is written from the first sheet row, so the body starts on
    sheet row ``len(header) + 1`` (1-based) and ends on the returned total.

    Args:
        payload: Daily payload, its header is updated in place
        destination_tab_id: Tab the report is written to
        columns: Column names of the report
        config: ReportConfig

    Returns:
        Merge batch-update body, ``{"requests": [...]}``
    """
    header_row_index = len(payload.header_payload) + 1
    body_row_count = len(payload.body_payload)
    total_rows = header_row_index + body_row_count - 1

    process_header_with_formulas(
        payload.header_payload, header_row_index, total_rows, body_row_count, columns, config
    )
    merges = create_merge_queries(payload.body_payload, header_row_index - 1, destination_tab_id)
    logger.debug(f"Rendered header formulas over rows {header_row_index}-{total_rows}")
    return merges

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Daily report payload assembly.

Walks the raw result tree, turns every executed test into a ``TestRecord``,
sorts the records and wraps them with the metrics header and the end-marker
footer.
"""

import logging
from typing import Any, Dict, List, Sequence, Union

from shadowreport.utils.core.cells import enforce_max_length, format_duration, locale_sort_key
from shadowreport.utils.core.errors import ReportPayloadError
from shadowreport.utils.core.models import ReportPayload, SourceFormat, TestRecord

from .extractor import (
    extract_area,
    extract_category,
    extract_manual_test_id,
    extract_spec,
    extract_team,
    extract_test_name,
    extract_type,
)
from .header import append_state_reports_to_header, construct_header_report

logger = logging.getLogger(__name__)

STATE_COLUMN = "state"


def _child_list(node: Dict[str, Any], key: str) -> List[Any]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"Expected '{key}' to be a list, got {type(value).__name__}")
    return value


def _error_message(raw_test: Dict[str, Any], source_format: SourceFormat) -> Any:
    error = raw_test.get("err")
    if source_format is SourceFormat.FORMAT_B:
        return error
    if isinstance(error, dict):
        return error.get("message")
    return None


def build_record(
    containing_result: Dict[str, Any], raw_test: Dict[str, Any], source_format: SourceFormat, config
) -> TestRecord:
    """
    Build the record for one executed test.

    Args:
        containing_result: Top-level result holding the test, provides ``fullFile``
        raw_test: Raw test entry with ``title``, ``fullTitle``, ``state``,
            ``duration`` and ``err``
        source_format: Runner output shape
        config: ReportConfig with vocabularies and the cell length limit

    Returns:
        TestRecord with every field truncated to the cell length limit

    Raises:
        ReportPayloadError: If the result or test entry is not a mapping
        ValueError: If the spec file name or test name cannot be extracted
    """
    if not isinstance(containing_result, dict) or not isinstance(raw_test, dict):
        raise ReportPayloadError("Result and test entries must be objects")

    full_file = containing_result.get("fullFile") or ""
    full_title = raw_test.get("fullTitle") or ""
    title = raw_test.get("title") or ""

    try:
        if source_format is SourceFormat.FORMAT_B:
            area = raw_test.get("projectName")
        else:
            area = extract_area(full_file, config.test_types)

        values = {
            "area": area,
            "spec": extract_spec(full_file),
            "test_name": extract_test_name(full_title),
            "type": extract_type(full_file, config.test_types),
            "category": extract_category(full_title, config.test_categories, config.team_names),
            "team": extract_team(full_title, config.team_names),
            "priority": "",
            "status": "",
            "state": raw_test.get("state"),
            "manual_test_id": extract_manual_test_id(title),
            "error": _error_message(raw_test, source_format),
            "speed": format_duration(raw_test.get("duration")),
        }
    except (TypeError, ValueError) as e:
        logger.error(f"Error constructing report entry for '{full_title}' in '{full_file}': {e}")
        raise

    return TestRecord(**{key: enforce_max_length(value, config.max_cell_length) for key, value in values.items()})


def _results_of(result_tree: Union[List[Any], Dict[str, Any]]) -> List[Any]:
    if isinstance(result_tree, dict):
        return _child_list(result_tree, "results")
    if isinstance(result_tree, list):
        return result_tree
    raise TypeError(f"Expected a list of results, got {type(result_tree).__name__}")


def collect_records(
    result_tree: Union[List[Any], Dict[str, Any]], source_format: SourceFormat, config
) -> List[TestRecord]:
    """
    Collect one record per executed test from a result tree.

    Suites nest to any depth and each node may hold both tests and suites.
    Traversal is depth-first in document order, a node's own tests coming
    before those of its child suites.

    Args:
        result_tree: List of results, or a mapping with a ``results`` list
        source_format: Runner output shape
        config: ReportConfig

    Returns:
        Records for every leaf test, in document order

    Raises:
        TypeError: If a ``results``, ``tests`` or ``suites`` value is not a list
    """
    records = []
    for result in _results_of(result_tree):
        if not isinstance(result, dict):
            raise ReportPayloadError(f"Expected result entries to be objects, got {type(result).__name__}")

        stack = [result]
        while stack:
            node = stack.pop()
            for raw_test in _child_list(node, "tests"):
                records.append(build_record(result, raw_test, source_format, config))
            stack.extend(reversed(_child_list(node, "suites")))

    logger.debug(f"Collected {len(records)} test records")
    return records


def sort_body(records: Sequence[TestRecord]) -> List[TestRecord]:
    """Sort records by area, spec and test name using locale-aware, stable ordering."""
    return sorted(
        records,
        key=lambda record: (
            locale_sort_key(record.area),
            locale_sort_key(record.spec),
            locale_sort_key(record.test_name),
        ),
    )


def build_footer(header_grid: List[List[str]], config) -> List[List[str]]:
    """
    Build the footer holding the end marker under the state column.

    Raises:
        ValueError: If the header grid is empty or its last row has no state column
    """
    if not header_grid:
        raise ValueError("Header grid must contain the column-name row")
    column_names = header_grid[-1]
    if STATE_COLUMN not in column_names:
        raise ValueError(f"Column '{STATE_COLUMN}' not found in header row")

    return [[""] * column_names.index(STATE_COLUMN) + [config.footer_row]]


def build_daily_payload(
    result_tree: Union[List[Any], Dict[str, Any]], source_format: SourceFormat, config
) -> ReportPayload:
    """
    Build the complete daily report payload.

    Args:
        result_tree: Raw results in the shape of ``source_format``
        source_format: Runner output shape
        config: ReportConfig

    Returns:
        ReportPayload with header, sorted body and footer grids
    """
    if not isinstance(source_format, SourceFormat):
        raise TypeError("source_format must be a SourceFormat")

    columns = config.columns_for(source_format)
    records = sort_body(collect_records(result_tree, source_format, config))
    body = [record.to_row() for record in records]

    header = construct_header_report(body, config)
    append_state_reports_to_header(header, list(config.default_header_metrics), columns)
    header.append(list(columns))

    payload = ReportPayload(header_payload=header, body_payload=body, footer_payload=build_footer(header, config))
    logger.info(f"Built daily payload with {len(body)} rows and {len(header)} header rows")
    return payload

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Conversion of Playwright-style JSON reports into the nested results shape.

Playwright groups tests as ``file suite -> suites -> specs -> tests -> results``
while the report builder walks ``results -> suites -> tests``. The converted
tree keeps the per-test ``projectName`` used as the browser column.
"""

import logging
from typing import Any, Dict, List, Union

from shadowreport.utils.core.errors import ReportPayloadError

logger = logging.getLogger(__name__)

STATUS_TO_STATE = {
    "expected": "passed",
    "unexpected": "failed",
}


def _list_of(node: Dict[str, Any], key: str) -> List[Any]:
    value = node.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ReportPayloadError(f"Expected '{key}' to be a list, got {type(value).__name__}")
    return value


def convert_test(spec: Dict[str, Any], test: Dict[str, Any], suite_title: str = "") -> Dict[str, Any]:
    """
    Convert one Playwright test run of a spec into a flat test entry.

    Args:
        spec: Spec holding the test, provides the title
        test: Test with ``status``, ``results``, ``annotations`` and ``projectName``
        suite_title: Title of the enclosing suite, prefixed to the full title

    Returns:
        Test entry with ``title``, ``fullTitle``, ``state``, ``duration``,
        ``err`` and ``projectName``
    """
    status = test.get("status")
    state = STATUS_TO_STATE.get(status, status)
    results = _list_of(test, "results")

    error_messages = [
        (result.get("error") or {}).get("message", "") for result in results if result.get("error")
    ]
    title = spec.get("title", "")

    return {
        "title": title,
        "fullTitle": f"{suite_title} {title}" if suite_title else title,
        "timedOut": any(annotation.get("name") == "timeout" for annotation in _list_of(test, "annotations")),
        "duration": sum(result.get("duration") or 0 for result in results),
        "state": state,
        "pass": state == "passed",
        "fail": state == "failed",
        "pending": state == "skipped",
        "err": error_messages[0] if error_messages else "",
        "skipped": status == "skipped",
        "projectName": test.get("projectName", ""),
    }


def convert_suite(suite: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a Playwright suite, and the suites nested in it, into the nested results shape."""
    if not isinstance(suite, dict):
        raise ReportPayloadError(f"Expected suite to be an object, got {type(suite).__name__}")

    title = suite.get("title", "")
    tests = [
        convert_test(spec, test, title) for spec in _list_of(suite, "specs") for test in _list_of(spec, "tests")
    ]
    child_suites = [convert_suite(child) for child in _list_of(suite, "suites")]

    return {
        "title": title,
        "fullFile": suite.get("file", ""),
        "file": suite.get("file", ""),
        "tests": tests,
        "suites": child_suites,
        "duration": sum(test["duration"] for test in tests) + sum(child["duration"] for child in child_suites),
    }


def transform_format_b_report(report: Union[Dict[str, Any], List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """
    Transform a Playwright JSON report into a list of results.

    Each top-level file suite becomes one result whose ``fullFile`` is the
    suite's file. Specs directly under the file suite become the result's own
    tests, untitled by any suite.

    Args:
        report: Playwright report mapping with a ``suites`` list, or that list itself

    Returns:
        List of results ready for the report builder

    Raises:
        ReportPayloadError: If the report does not have the expected shape
    """
    if isinstance(report, dict):
        file_suites = _list_of(report, "suites")
    elif isinstance(report, list):
        file_suites = report
    else:
        raise ReportPayloadError(f"Expected a report object or a list of suites, got {type(report).__name__}")

    results = []
    for file_suite in file_suites:
        if not isinstance(file_suite, dict):
            raise ReportPayloadError(f"Expected file suite to be an object, got {type(file_suite).__name__}")

        own_tests = [
            convert_test(spec, test) for spec in _list_of(file_suite, "specs") for test in _list_of(spec, "tests")
        ]
        suites = [convert_suite(suite) for suite in _list_of(file_suite, "suites")]

        results.append(
            {
                "title": file_suite.get("title", ""),
                "fullFile": file_suite.get("file", ""),
                "file": file_suite.get("file", ""),
                "tests": own_tests,
                "suites": suites,
                "duration": sum(test["duration"] for test in own_tests) + sum(suite["duration"] for suite in suites),
            }
        )

    logger.debug(f"Converted {len(results)} file suites from Playwright format")
    return results

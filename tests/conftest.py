# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Shared fixtures for the report builder tests.
"""

import json
import logging

import pytest
from shadowreport.utils.config import ReportConfig
from shadowreport.utils.core import SourceTab
from shadowreport.utils.logging import cleanup_logging


@pytest.fixture
def config():
    """Default report configuration."""
    return ReportConfig()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep user configuration out of the tests."""
    for name in ("SHADOW_REPORT_CONFIG_PATH", "SHADOW_REPORT_TEAM_NAMES", "SHADOW_REPORT_MAX_CELL_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    yield
    cleanup_logging()
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
    logging.getLogger().setLevel(logging.WARNING)


def make_test(title, state="passed", duration=1500, full_title=None, error=None):
    """Build a raw format A test entry."""
    return {
        "title": title,
        "fullTitle": full_title or f"Cart {title}",
        "state": state,
        "duration": duration,
        "err": {"message": error} if error else {},
    }


def make_nested_result(depth, leaves, full_file="src/tests/unit/cart/shopping.spec.ts"):
    """Build a result whose tests sit ``depth`` suites deep."""
    suite = {"title": f"level {depth}", "tests": [make_test(f"leaf {i}") for i in range(leaves)], "suites": []}
    for level in range(depth - 1, 0, -1):
        suite = {"title": f"level {level}", "tests": [], "suites": [suite]}
    return {"fullFile": full_file, "tests": [], "suites": [suite]}


@pytest.fixture
def format_a_results():
    """Two result files with tagged titles, unsorted."""
    return {
        "results": [
            {
                "fullFile": "src/tests/ui/checkout/payment.spec.ts",
                "suites": [
                    {
                        "title": "Payment",
                        "tests": [
                            make_test(
                                "pays by card [C101]",
                                full_title="Payment pays by card [raptors] [smoke]",
                            ),
                            make_test(
                                "rejects expired card [C102]",
                                state="failed",
                                full_title="Payment rejects expired card [Kimchi] [regression]",
                                error="expected 402 to equal 200",
                            ),
                        ],
                        "suites": [],
                    }
                ],
            },
            {
                "fullFile": "src/tests/api/cart/shopping.spec.ts",
                "suites": [
                    {
                        "title": "Cart",
                        "tests": [
                            make_test("adds item", full_title="Cart adds item [smoke]"),
                            make_test("removes item", state="pending", duration=None, full_title="Cart removes item"),
                        ],
                        "suites": [],
                    }
                ],
            },
        ]
    }


@pytest.fixture
def format_b_report():
    """Playwright-style report with a nested describe block."""
    return {
        "suites": [
            {
                "title": "login.spec.ts",
                "file": "tests/e2e/login.spec.ts",
                "specs": [
                    {
                        "title": "shows form [C7]",
                        "tests": [
                            {
                                "projectName": "chromium",
                                "status": "expected",
                                "annotations": [],
                                "results": [{"duration": 100}, {"duration": 50}],
                            }
                        ],
                    }
                ],
                "suites": [
                    {
                        "title": "Login",
                        "specs": [
                            {
                                "title": "rejects bad password [raptors]",
                                "tests": [
                                    {
                                        "projectName": "firefox",
                                        "status": "unexpected",
                                        "annotations": [{"name": "timeout"}],
                                        "results": [
                                            {"duration": 30000, "error": {"message": "Timed out"}},
                                            {"duration": 2000, "error": {"message": "Still failing"}},
                                        ],
                                    }
                                ],
                            }
                        ],
                        "suites": [],
                    }
                ],
            }
        ]
    }


def make_source_values(rows, columns=("test name", "state"), metrics_column=0, config=None):
    """
    Build the values of an exported report tab.

    The metrics block occupies the first rows, followed by the column-name
    row, the body rows and the footer row.
    """
    config = config or ReportConfig()
    width = max(len(columns), metrics_column + len(config.header_indicators))
    values = []
    for metric in config.default_header_metrics:
        row = [""] * width
        row[metrics_column] = metric
        row[metrics_column + 1] = "1 (50%)"
        values.append(row)
    values.append(list(columns))
    values.extend(list(row) for row in rows)

    footer = [""] * len(columns)
    footer[list(columns).index("state") if "state" in columns else -1] = config.footer_row
    values.append(footer)
    return values


@pytest.fixture
def source_tab_factory():
    """Factory building date-titled source tabs."""

    def _factory(title, tab_id, rows=None, columns=("test name", "state"), config=None):
        if rows is None:
            rows = [[f"test {i}", "passed", "", ""][: len(columns)] for i in range(2)]
        return SourceTab(title=title, tab_id=tab_id, values=make_source_values(rows, columns, config=config))

    return _factory


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON document into the test directory."""

    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def nested_result():
    """Factory building a result with leaves at a given suite depth."""
    return make_nested_result


@pytest.fixture
def raw_test():
    """Factory building raw format A test entries."""
    return make_test

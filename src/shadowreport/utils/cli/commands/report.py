# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Daily report command implementation.

Builds the daily report payload from a test results file, renders the
header formulas for the final layout and writes the payload as JSON.
"""

import logging
from typing import Optional

import yaml

from shadowreport.utils.cli.helpers import load_json_file, write_json_output
from shadowreport.utils.config import load_report_config
from shadowreport.utils.core import ShadowReportError, SourceFormat
from shadowreport.utils.logging import setup_command_logging
from shadowreport.utils.reporting.daily import build_daily_payload, finalize_daily_report, transform_format_b_report
from shadowreport.utils.reporting.summary import report_tab_title

logger = logging.getLogger(__name__)


def generate_report(
    results_file: str,
    source_format: str = "a",
    output_file: Optional[str] = None,
    tab_id: int = 0,
    config_path: Optional[str] = None,
    verbose: bool = False,
    debug: bool = False,
    logs_dir: Optional[str] = None,
) -> int:
    """
    Generate the daily report payload.

    Args:
        results_file: Test results JSON file
        source_format: ``"a"`` for nested results, ``"b"`` for Playwright reports
        output_file: Optional output path, stdout when omitted
        tab_id: Destination tab id used in the merge requests
        config_path: Optional YAML configuration file
        verbose: Whether to show info level logs
        debug: Whether to show debug level logs
        logs_dir: Optional directory for the command log file

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    setup_command_logging("report", verbose=verbose, debug=debug, logs_dir=logs_dir)

    try:
        config = load_report_config(config_path)
        fmt = SourceFormat(source_format)

        logger.info(f"Loading test results from {results_file}")
        results = load_json_file(results_file)
        if fmt is SourceFormat.FORMAT_B:
            results = transform_format_b_report(results)

        payload = build_daily_payload(results, fmt, config)
        if not payload.body_payload:
            logger.error(f"No tests found in {results_file}")
            return 1

        columns = config.columns_for(fmt)
        merge_requests = finalize_daily_report(payload, tab_id, columns, config)

        output = {"tabTitle": report_tab_title(), **payload.to_dict(), "mergeRequests": merge_requests}
        write_json_output(output, output_file)
        logger.info(f"Daily report built with {len(payload.body_payload)} tests")
        return 0

    except (ShadowReportError, FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to generate daily report: {e}")
        return 1

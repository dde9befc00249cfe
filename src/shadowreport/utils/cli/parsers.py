# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Argument parser setup for CLI commands.

Contains the main argument parser configuration and the subparsers for
the daily report and summary commands, keeping argument definitions
centralized.
"""

import argparse

from shadowreport.utils.config import get_dist_version

CLI_NAME = "shadow-report"


def add_common_options(parser: argparse.ArgumentParser, default=False) -> None:
    """
    Add the verbosity options shared by the main parser and every subcommand.

    Subcommands pass ``argparse.SUPPRESS`` so their unset flags leave the
    global values in place.
    """
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=default,
        help="Display more detailed output with medium traceback",
    )
    parser.add_argument(
        "--debug", "-d", action="store_true", default=default, help="Display debug output with full traceback"
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the main argument parser with all subcommands.

    Returns:
        argparse.ArgumentParser: Configured parser ready for argument parsing
    """
    parser = argparse.ArgumentParser(
        prog=CLI_NAME,
        description="Test results spreadsheet report builder",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"{get_dist_version()}")
    parser.add_argument(
        "--config", "-c", dest="config_path", help="Path to the YAML configuration file (default: ./shadow-report.yaml)"
    )
    add_common_options(parser)

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # Report command
    report_parser = subparsers.add_parser(
        "report",
        help="Build the daily report payload from a test results JSON file",
        description=f"""
Build the daily report payload: header metrics with rendered formulas,
sorted body rows, footer and body merge requests.

EXAMPLES:
  {CLI_NAME} report results/mochawesome.json
  {CLI_NAME} report results/playwright.json --format b --output daily.json
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    report_parser.add_argument("results_file", help="Test results JSON file")
    report_parser.add_argument(
        "--format",
        "-F",
        dest="source_format",
        choices=["a", "b"],
        default="a",
        help="Results shape: 'a' for nested results/suites/tests, 'b' for Playwright JSON reports",
    )
    report_parser.add_argument("--output", "-o", dest="output_file", help="Write the payload JSON to this file")
    report_parser.add_argument(
        "--tab-id", type=int, default=0, help="Id of the destination tab used in the merge requests"
    )
    add_common_options(report_parser, default=argparse.SUPPRESS)

    # Summary command
    summary_parser = subparsers.add_parser(
        "summary",
        help="Build a monthly or weekly summary payload from exported report tabs",
        description=f"""
Fold the date-titled report tabs of a period into one summary payload.
The input is a JSON list of tabs: [{{"title": "Oct 1, 2026", "tabId": 12, "values": [[...]]}}, ...]

EXAMPLES:
  {CLI_NAME} summary tabs.json
  {CLI_NAME} summary tabs.json --period weekly --destination-tab-id 99
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    summary_parser.add_argument("tabs_file", help="Exported report tabs JSON file")
    summary_parser.add_argument(
        "--period", choices=["monthly", "weekly"], default="monthly", help="Summary period to select tabs for"
    )
    summary_parser.add_argument(
        "--destination-title", help="Title of the summary tab (default: derived from the period)"
    )
    summary_parser.add_argument("--destination-tab-id", type=int, default=0, help="Id of the summary tab")
    summary_parser.add_argument("--output", "-o", dest="output_file", help="Write the payload JSON to this file")
    summary_parser.add_argument(
        "--force", "-f", action="store_true", help="Build the summary even if a tab with its title already exists"
    )
    add_common_options(summary_parser, default=argparse.SUPPRESS)

    return parser

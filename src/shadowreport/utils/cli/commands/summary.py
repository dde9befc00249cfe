# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Summary command implementation.

Selects the exported report tabs of a period, folds them into one summary
payload and writes it as JSON together with the requests growing the
destination tab.
"""

import datetime
import logging
from typing import Any, Dict, List, Optional

import yaml

from shadowreport.utils.cli.helpers import load_json_file, write_json_output
from shadowreport.utils.config import load_report_config
from shadowreport.utils.core import ReportPayloadError, ShadowReportError, SourceTab
from shadowreport.utils.logging import setup_command_logging
from shadowreport.utils.reporting import insert_dimension_requests
from shadowreport.utils.reporting.summary import (
    aggregate_summary,
    fetch_source_tabs,
    is_summary_required,
    last_month_tab_titles,
    monthly_summary_title,
    previous_month_window,
    week_tab_titles,
    week_window,
    weekly_summary_title,
)

logger = logging.getLogger(__name__)


def parse_exported_tabs(data: Any) -> Dict[str, SourceTab]:
    """
    Index exported tabs by title.

    Raises:
        ReportPayloadError: If the export is not a list of ``{title, tabId, values}`` objects
    """
    if not isinstance(data, list):
        raise ReportPayloadError("Expected the tabs file to contain a list of tabs")

    tabs = {}
    for item in data:
        if not isinstance(item, dict) or not isinstance(item.get("title"), str):
            raise ReportPayloadError(f"Invalid tab entry: {item!r}")
        tabs[item["title"]] = SourceTab(title=item["title"], tab_id=item.get("tabId", 0), values=item.get("values"))
    return tabs


def generate_summary(
    tabs_file: str,
    period: str = "monthly",
    destination_title: Optional[str] = None,
    destination_tab_id: int = 0,
    output_file: Optional[str] = None,
    force: bool = False,
    config_path: Optional[str] = None,
    today: Optional[datetime.date] = None,
    verbose: bool = False,
    debug: bool = False,
    logs_dir: Optional[str] = None,
) -> int:
    """
    Generate a monthly or weekly summary payload.

    Args:
        tabs_file: Exported report tabs JSON file
        period: ``"monthly"`` for the previous month, ``"weekly"`` for the current week
        destination_title: Summary tab title, derived from the period when omitted
        destination_tab_id: Summary tab id
        output_file: Optional output path, stdout when omitted
        force: Build the summary even if its tab already exists
        config_path: Optional YAML configuration file
        today: Reference date, defaults to the current date
        verbose: Whether to show info level logs
        debug: Whether to show debug level logs
        logs_dir: Optional directory for the command log file

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    setup_command_logging("summary", verbose=verbose, debug=debug, logs_dir=logs_dir)

    try:
        config = load_report_config(config_path)
        exported = parse_exported_tabs(load_json_file(tabs_file))
        titles: List[str] = list(exported)

        if period == "weekly":
            if not config.weekly_summary_enabled:
                logger.warning("Weekly summaries are disabled in the configuration")
                return 0
            start, end = week_window(config.week_start, today)
            selected = week_tab_titles(titles, config.week_start, today)
            default_title = weekly_summary_title(config.week_start, today)
        elif period == "monthly":
            start, end = previous_month_window(today)
            selected = last_month_tab_titles(titles, today)
            default_title = monthly_summary_title(today)
        else:
            logger.error(f"Unknown summary period: {period}")
            return 1

        destination_title = destination_title or default_title
        if not force and not is_summary_required(titles, destination_title):
            logger.warning(f"Summary tab '{destination_title}' already exists, use --force to build it again")
            return 0
        if not selected:
            logger.error(f"No report tabs found between {start} and {end}")
            return 1

        logger.info(f"Building {period} summary '{destination_title}' from {len(selected)} tabs")
        source_tabs = fetch_source_tabs(selected, lambda title: exported[title])
        payload = aggregate_summary(
            source_tabs,
            config,
            destination_tab_id,
            destination_title,
            metadata={"summaryType": period, "startDate": start.isoformat(), "endDate": end.isoformat()},
        )

        output = payload.to_dict()
        output["destinationTitle"] = destination_title
        output["growRequests"] = insert_dimension_requests(
            destination_tab_id, payload.metadata["columnCount"], payload.metadata["rowCount"]
        )
        write_json_output(output, output_file)
        return 0

    except (ShadowReportError, FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to generate summary: {e}")
        return 1

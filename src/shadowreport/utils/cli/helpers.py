# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Helper functions for CLI operations.

Reading the JSON inputs of the commands and writing their payloads.
"""

import json
import logging
import os
import sys
from typing import Any, Optional

from shadowreport.utils.core.errors import ReportPayloadError

logger = logging.getLogger(__name__)


def load_json_file(path: str) -> Any:
    """
    Load and parse a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ReportPayloadError: If the file is not valid JSON
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ReportPayloadError(f"Failed to parse JSON file {path}: {e}")


def write_json_output(data: Any, output_file: Optional[str] = None) -> None:
    """
    Write a payload as JSON to a file, or to stdout when no file is given.

    Args:
        data: JSON-serializable payload
        output_file: Optional output path; parent directories are created
    """
    if output_file is None:
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return

    output_dir = os.path.dirname(os.path.abspath(output_file))
    os.makedirs(output_dir, exist_ok=True)
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Payload written to {output_file}")

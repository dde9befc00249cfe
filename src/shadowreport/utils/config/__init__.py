# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Configuration utilities package.

Provides the immutable report configuration and helpers for loading it from
YAML files and environment variables.
"""

from .config import *

# Re-export all functions and classes
__all__ = [
    # Report configuration
    "ReportConfig",
    "build_report_config",
    "load_report_config",
    # Loading helpers
    "load_yaml_config",
    "merge_configs",
    "get_environment_config",
    "find_config_file",
    "get_dist_version",
    # Defaults
    "CONFIG_FILENAME",
    "DEFAULT_COLUMNS",
    "DEFAULT_HEADER_METRICS",
    "DEFAULT_TEAM_NAMES",
    "DEFAULT_TEST_CATEGORIES",
    "DEFAULT_TEST_TYPES",
    "FOOTER_ROW",
    "FORMULA_KEYS",
    "FORMULA_TEMPLATES",
    "HEADER_INDICATORS",
    "MAX_CELL_LENGTH",
]

# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Utilities for handling report configuration.

Vocabularies, column names, formula templates and summary layout labels are
read once into an immutable ``ReportConfig`` that is passed explicitly to
every extractor and builder.
"""

import importlib.metadata
import logging
import os
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

import yaml

from shadowreport.utils.core.errors import ReportConfigError
from shadowreport.utils.core.models import SourceFormat

logger = logging.getLogger(__name__)

DIST_NAME = "shadow-report"
CONFIG_FILENAME = "shadow-report.yaml"
ENV_PREFIX = "SHADOW_REPORT_"

DEFAULT_TEST_TYPES = (
    "api",
    "ui",
    "unit",
    "integration",
    "endToEnd",
    "performance",
    "security",
    "database",
    "accessibility",
    "web",
    "mobile",
)

DEFAULT_TEST_CATEGORIES = (
    "smoke",
    "regression",
    "sanity",
    "exploratory",
    "functional",
    "load",
    "stress",
    "usability",
    "compatibility",
    "alpha",
    "beta",
)

DEFAULT_TEAM_NAMES = (
    "raptors",
    "kimchi",
    "protus",
    "danza",
    "sloth",
    "winter",
    "oregano",
    "spoofer",
    "juniper",
    "occaecati",
    "wilkins",
    "canonicus",
)

DEFAULT_COLUMNS = (
    "area",
    "spec",
    "test name",
    "type",
    "category",
    "team",
    "priority",
    "status",
    "state",
    "manual case",
    "error",
    "speed",
)

DEFAULT_HEADER_METRICS = (
    "# passed tests",
    "# failed tests",
    "# skipped/pending tests",
    "# total tests",
)

HEADER_INDICATORS = ("test name", "state")

FOOTER_ROW = "- END -"

MAX_CELL_LENGTH = 500

FORMULA_KEYS = (
    "formula tests passed",
    "formula base",
    "formula skipped/pending",
    "formula total",
)

FORMULA_TEMPLATES = (
    '=COUNTIFS({subjectColumn}{headerRowIndex}:{subjectColumn}{totalNumberOfRows}, "*{type}*", '
    '{stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "passed")&" of "&'
    'COUNTIFS({subjectColumn}{headerRowIndex}:{subjectColumn}{totalNumberOfRows}, "*{type}*")&"  -  "&"("&'
    'ROUND(COUNTIFS({subjectColumn}{headerRowIndex}:{subjectColumn}{totalNumberOfRows}, "*{type}*", '
    '{stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "passed")/'
    '(COUNTIFS({subjectColumn}{headerRowIndex}:{subjectColumn}{totalNumberOfRows}, "*{type}*")) * 100)&"%)"',
    '=COUNTIFS({stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "*{type}*")&" ("&'
    'ROUND(COUNTIFS({stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "*{type}*")'
    '/{bodyRowCount} * 100)&"%)"',
    '=COUNTIFS({stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "<>*passed*", '
    '{stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "<>*failed*")&" ("&'
    'ROUND(COUNTIFS({stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "<>*passed*", '
    '{stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows}, "<>*failed*")/{bodyRowCount} * 100)&"%)"',
    "=ROWS({stateColumn}{headerRowIndex}:{stateColumn}{totalNumberOfRows})",
)

WEEK_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Configuration keys holding lists of strings
_LIST_KEYS = (
    "test_types",
    "test_categories",
    "team_names",
    "columns",
    "default_header_metrics",
    "header_indicators",
    "summary_columns",
    "formula_templates",
    "formula_keys",
)


@dataclass(frozen=True)
class ReportConfig:
    """
    Immutable report configuration.

    Attributes:
        test_types: Type vocabulary matched against file paths
        test_categories: Category vocabulary matched against bracketed title tokens
        team_names: Team vocabulary matched against bracketed title tokens
        columns: Explicit column-name list; empty means the default for the source format
        default_header_metrics: Aggregate metric labels written above the column names
        header_indicators: Labels that must co-occur in a row for it to be the header row
        summary_columns: Columns relocated into a summary; empty means header_indicators
        formula_templates: Spreadsheet formula templates, parallel to formula_keys
        formula_keys: Keys selecting which template renders a header cell
        footer_row: End marker written below the body
        max_cell_length: Maximum cell length in UTF-8 code units
        week_start: First day of the week for weekly summaries
        weekly_summary_enabled: Whether weekly summaries are produced
    """

    test_types: Tuple[str, ...] = DEFAULT_TEST_TYPES
    test_categories: Tuple[str, ...] = DEFAULT_TEST_CATEGORIES
    team_names: Tuple[str, ...] = DEFAULT_TEAM_NAMES
    columns: Tuple[str, ...] = ()
    default_header_metrics: Tuple[str, ...] = DEFAULT_HEADER_METRICS
    header_indicators: Tuple[str, ...] = HEADER_INDICATORS
    summary_columns: Tuple[str, ...] = ()
    formula_templates: Tuple[str, ...] = FORMULA_TEMPLATES
    formula_keys: Tuple[str, ...] = FORMULA_KEYS
    footer_row: str = FOOTER_ROW
    max_cell_length: int = MAX_CELL_LENGTH
    week_start: str = "monday"
    weekly_summary_enabled: bool = True
    extra: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self):
        for key in _LIST_KEYS:
            value = getattr(self, key)
            if isinstance(value, str) or not all(isinstance(item, str) for item in value):
                raise ReportConfigError(f"Configuration key '{key}' must be a list of strings")
            object.__setattr__(self, key, tuple(value))

        if len(self.formula_templates) != len(self.formula_keys):
            raise ReportConfigError("formula_templates and formula_keys must have the same length")
        if not self.formula_keys:
            raise ReportConfigError("formula_keys must not be empty")
        if isinstance(self.max_cell_length, bool) or not isinstance(self.max_cell_length, int):
            raise ReportConfigError("max_cell_length must be an integer")
        if self.max_cell_length < 0:
            raise ReportConfigError("max_cell_length must not be negative")
        if not isinstance(self.footer_row, str) or not self.footer_row:
            raise ReportConfigError("footer_row must be a non-empty string")
        if str(self.week_start).lower() not in WEEK_DAYS:
            raise ReportConfigError(f"week_start must be one of {', '.join(WEEK_DAYS)}")
        object.__setattr__(self, "week_start", str(self.week_start).lower())

    def columns_for(self, source_format: SourceFormat) -> List[str]:
        """
        Get the report column names for a source format.

        The second runner shape labels its first column ``browser`` because
        its area comes from the per-test project label.
        """
        if self.columns:
            return list(self.columns)
        columns = list(DEFAULT_COLUMNS)
        if source_format is SourceFormat.FORMAT_B:
            columns[0] = "browser"
        return columns

    def relocated_columns(self) -> List[str]:
        """Get the column labels copied into summaries."""
        return list(self.summary_columns or self.header_indicators)


def get_dist_version(dist: str = DIST_NAME) -> str:
    """Get the version of a distribution."""
    try:
        return importlib.metadata.version(dist)
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def load_yaml_config(config_path: str) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to the YAML configuration file

    Returns:
        Dict containing the configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as file:
            config = yaml.safe_load(file)
            return config if config is not None else {}
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Invalid YAML in {config_path}: {e}")


def merge_configs(base_config: Dict[str, Any], override_config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Merge two configuration dictionaries.

    Args:
        base_config: Base configuration
        override_config: Configuration to override base with

    Returns:
        Merged configuration dictionary
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = value

    return merged


def get_environment_config() -> Dict[str, Any]:
    """
    Get configuration values from environment variables.

    List values are given comma-separated, e.g.
    ``SHADOW_REPORT_TEAM_NAMES=raptors,kimchi``.

    Returns:
        Dict containing environment-based configuration
    """
    env_config = {}

    for config_field in fields(ReportConfig):
        if config_field.name == "extra":
            continue
        var = f"{ENV_PREFIX}{config_field.name.upper()}"
        value = os.environ.get(var)
        if value is None:
            continue

        key = config_field.name
        if key in _LIST_KEYS:
            env_config[key] = [item.strip() for item in value.split(",") if item.strip()]
        elif key == "max_cell_length":
            try:
                env_config[key] = int(value)
            except ValueError:
                raise ReportConfigError(f"{var} must be an integer, got '{value}'")
        elif key == "weekly_summary_enabled":
            env_config[key] = value.strip().lower() in ("1", "true", "yes", "on")
        else:
            env_config[key] = value

    return env_config


def find_config_file(filename: str = CONFIG_FILENAME, search_paths: Optional[List[str]] = None) -> Optional[str]:
    """
    Find a configuration file in standard locations.

    Args:
        filename: Name of the configuration file
        search_paths: Optional list of paths to search

    Returns:
        Path to the configuration file if found, None otherwise
    """
    env_path = os.environ.get(f"{ENV_PREFIX}CONFIG_PATH")
    if env_path:
        return env_path

    if search_paths is None:
        search_paths = [
            os.getcwd(),
            os.path.join(os.getcwd(), "configs"),
            os.path.expanduser("~/.shadow-report"),
        ]

    for search_path in search_paths:
        config_path = os.path.join(search_path, filename)
        if os.path.exists(config_path):
            return config_path

    return None


def build_report_config(config: Dict[str, Any]) -> ReportConfig:
    """
    Build a ReportConfig from a configuration dictionary.

    Unknown keys are kept in ``ReportConfig.extra`` and logged.

    Raises:
        ReportConfigError: If the configuration has invalid values
    """
    if not isinstance(config, dict):
        raise ReportConfigError("Configuration must be a mapping")

    known = {config_field.name for config_field in fields(ReportConfig)} - {"extra"}
    values = {key: value for key, value in config.items() if key in known}
    extra = {key: value for key, value in config.items() if key not in known}
    if extra:
        logger.debug(f"Ignoring unknown configuration keys: {', '.join(sorted(extra))}")

    for key in _LIST_KEYS:
        if key in values and not isinstance(values[key], (list, tuple)):
            raise ReportConfigError(f"Configuration key '{key}' must be a list of strings")

    # Empty vocabularies fall back to the defaults
    for key in ("test_types", "test_categories", "team_names"):
        if key in values and not values[key]:
            logger.debug(f"Empty '{key}' list, using default list")
            del values[key]

    try:
        return ReportConfig(**values, extra=extra)
    except TypeError as e:
        raise ReportConfigError(f"Invalid configuration: {e}")


def load_report_config(config_path: Optional[str] = None) -> ReportConfig:
    """
    Load report configuration with fallback to defaults.

    Args:
        config_path: Optional explicit path to a YAML configuration file

    Returns:
        ReportConfig with file values and environment overrides applied

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ReportConfigError: If the configuration has invalid values
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path:
        config = load_yaml_config(config_path)
        logger.debug(f"Loaded configuration from {config_path}")
    else:
        logger.debug(f"Configuration file {CONFIG_FILENAME} not found, using defaults")
        config = {}

    config = merge_configs(config, get_environment_config())
    return build_report_config(config)

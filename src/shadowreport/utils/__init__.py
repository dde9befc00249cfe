# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Utility modules for the report builders.

This package is organized into focused sub-packages:
- core: Records, payloads, errors and cell helpers
- config: Vocabularies, formula templates and YAML/env configuration
- logging: Logging configuration and command log files
- reporting: Daily report and summary payload builders
- cli: Argument parsing and command implementations
"""

# Individual module imports for explicit access
from . import cli, config, core, logging, reporting

# Export all available utilities
__all__ = [
    # Sub-packages
    "core",
    "config",
    "logging",
    "reporting",
    "cli",
]

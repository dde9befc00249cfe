# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Logging utilities package.

Provides utilities for logging configuration, console and file handlers,
and command-specific log files.
"""

from .logging_config import *

# Re-export all functions and classes
__all__ = [
    # Logging configuration
    "init_core_logging",
    "configure_logging",
    "setup_command_logging",
    # Handler management
    "add_file_log_handler",
    "remove_log_handlers",
    "cleanup_logging",
    # Logger utilities
    "suppress_third_party_loggers",
    "get_log_file_path",
    # Constants
    "DEFAULT_LOG_FORMAT",
    "MESSAGE_ONLY_FORMAT",
    "DEBUG_MESSAGE_ONLY_FORMAT",
]

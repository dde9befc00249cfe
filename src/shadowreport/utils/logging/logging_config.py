# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Logging configuration utilities for the report tooling.

This module provides centralized logging configuration, including console
and file handler management, log level configuration, and command-specific
logging setup.
"""

import logging
import os
import sys
from typing import Optional

# Default logging format
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
# Simple message-only format for regular console output
MESSAGE_ONLY_FORMAT = "%(message)s"
DEBUG_MESSAGE_ONLY_FORMAT = "%(levelname)s - %(name)s - %(message)s"

LOG_FILE_PREFIX = "shadow-report"


def get_logs_dir() -> str:
    """Get the default logs directory under the working directory."""
    return os.path.join(os.getcwd(), "shadow_report_data", "logs")


def init_core_logging(debug: bool = False) -> logging.Logger:
    """
    Initialize core logging with basic configuration.

    Returns:
        logging.Logger: Configured core logger instance
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=MESSAGE_ONLY_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    logger = logging.getLogger(__name__)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.propagate = True

    suppress_third_party_loggers()

    return logger


def configure_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging level based on verbose and debug flags.

    Args:
        verbose: Whether to display INFO level messages
        debug: Whether to display DEBUG level logs

    Note:
        By default only warnings and errors reach the console. Verbose mode
        adds INFO messages and debug mode shows everything. Console logs go
        to stderr, leaving stdout to the payload JSON.
    """
    remove_log_handlers()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    console_handler = None
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) == sys.stderr:
            console_handler = handler
            break

    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stderr)
        root_logger.addHandler(console_handler)

    if debug:
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(DEBUG_MESSAGE_ONLY_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(MESSAGE_ONLY_FORMAT))
        if verbose:
            console_handler.setLevel(logging.INFO)
        else:
            console_handler.setLevel(logging.WARNING)


def remove_log_handlers() -> None:
    """
    Remove all file handlers from the root logger to avoid duplicates when reconfiguring.
    """
    root_logger = logging.getLogger()
    handlers_to_remove = [handler for handler in root_logger.handlers if isinstance(handler, logging.FileHandler)]

    for handler in handlers_to_remove:
        root_logger.removeHandler(handler)
        handler.close()


def get_log_file_path(command: str, logs_dir: Optional[str] = None) -> str:
    """
    Get the path to a command's log file.

    Args:
        command: Command name
        logs_dir: Optional logs directory path

    Returns:
        Path to the log file
    """
    if logs_dir is None:
        logs_dir = get_logs_dir()
    return os.path.join(logs_dir, f"{LOG_FILE_PREFIX}_{command}.log")


def add_file_log_handler(command: str, logs_dir: Optional[str] = None) -> str:
    """
    Add a file handler for logging to a command-specific log file.

    Args:
        command: The command name for the log file
        logs_dir: Optional logs directory path

    Returns:
        Path of the log file
    """
    log_file = get_log_file_path(command, logs_dir)
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    # Overwrite on each run
    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))

    logging.getLogger().addHandler(file_handler)
    return log_file


def suppress_third_party_loggers() -> None:
    """
    Suppress noisy third-party library loggers.
    """
    for logger_name in ("yaml", "urllib3", "filelock", "asyncio"):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def setup_command_logging(
    command: str, verbose: bool = False, debug: bool = False, logs_dir: Optional[str] = None
) -> None:
    """
    Set up logging for a specific command with both console and file output.

    Args:
        command: Command name
        verbose: Whether to enable verbose console output
        debug: Whether to enable debug console output
        logs_dir: Optional logs directory path
    """
    init_core_logging()
    configure_logging(verbose=verbose, debug=debug)
    add_file_log_handler(command, logs_dir)
    suppress_third_party_loggers()


def cleanup_logging() -> None:
    """
    Clean up logging handlers on application exit.
    """
    remove_log_handlers()

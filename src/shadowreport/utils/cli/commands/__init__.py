# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CLI command implementations package.

Contains individual command implementations for the CLI,
organized by functionality to maintain clean separation of concerns.
"""

# Commands are imported dynamically to keep CLI startup light
# Use get_command_function() to import and get command functions


def get_command_function(command_name: str):
    """
    Dynamically import and return a command function.

    Args:
        command_name: Name of the command to import

    Returns:
        The command function
    """
    if command_name == "generate_report":
        from .report import generate_report

        return generate_report
    elif command_name == "generate_summary":
        from .summary import generate_summary

        return generate_summary
    else:
        raise ValueError(f"Unknown command: {command_name}")


__all__ = ["get_command_function"]

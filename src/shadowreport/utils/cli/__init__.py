# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
CLI utilities package.

This package contains the argument parsers and the command
implementations to keep the main CLI file lightweight.
"""

from .commands import get_command_function
from .helpers import load_json_file, write_json_output
from .parsers import create_argument_parser

# Commands will be imported dynamically as needed

__all__ = [
    "create_argument_parser",
    "get_command_function",
    "load_json_file",
    "write_json_output",
]

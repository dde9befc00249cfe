# Copyright (C) 2025 Intel Corporation
# SPDX-License-Identifier: Apache-2.0

"""
Command Line Interface for the report builders.

This is the main CLI entry point. The command implementations live in
utils.cli.commands and are imported on demand.
"""

import atexit
import sys
from typing import List, Optional

from shadowreport.utils.cli.commands import get_command_function
from shadowreport.utils.cli.parsers import create_argument_parser
from shadowreport.utils.logging import cleanup_logging, configure_logging


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments, defaults to ``sys.argv[1:]``

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    # Create and parse arguments
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    # Global and subcommand flags share one destination
    verbose = args.verbose
    debug = args.debug

    # Configure logging based on command line options
    configure_logging(verbose=verbose, debug=debug)

    # Set up a signal handler to clean up log handlers on exit
    atexit.register(cleanup_logging)

    # Route to appropriate command handler
    try:
        if args.command == "report":
            generate_report = get_command_function("generate_report")
            return generate_report(
                results_file=args.results_file,
                source_format=args.source_format,
                output_file=args.output_file,
                tab_id=args.tab_id,
                config_path=args.config_path,
                verbose=verbose,
                debug=debug,
            )
        elif args.command == "summary":
            generate_summary = get_command_function("generate_summary")
            return generate_summary(
                tabs_file=args.tabs_file,
                period=args.period,
                destination_title=args.destination_title,
                destination_tab_id=args.destination_tab_id,
                output_file=args.output_file,
                force=args.force,
                config_path=args.config_path,
                verbose=verbose,
                debug=debug,
            )
        else:
            parser.print_help()
            return 0
    except Exception as e:
        # Import logging here to avoid potential issues during startup
        import logging

        logger = logging.getLogger(__name__)
        logger.error(f"Command execution failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())

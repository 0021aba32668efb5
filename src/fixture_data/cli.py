# Copyright (c) 2025 Henru Wang
# All rights reserved.

"""Command-line interface for printing fixture data."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .export import OUTPUT_FORMATS, dump_export, export_fixtures
from .logging_setup import fixture_fields, setup_logging
from .registry import FixtureNotFoundError, default_registry

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="fixture-data",
        description="Print built-in fixture data as JSON or YAML",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Configuration file (default: ./.fixture_data.yml)",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (overrides config)",
    )
    parser.add_argument(
        "--fixture",
        dest="fixtures",
        action="append",
        default=None,
        metavar="NAME",
        help="Fixture to print; repeat for several (default: all)",
    )
    parser.add_argument(
        "--no-passwords",
        action="store_true",
        help="Mask plain-text passwords in the output",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List registered fixture names and exit",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Write structured JSON logs to this directory",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Process exit status.
    """
    args = parse_args(argv)
    config = Config(config_path=args.config)

    level = getattr(logging, config.log_level)
    if args.log_dir is not None:
        setup_logging(log_dir=args.log_dir, log_level=level, console_output=False)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

    registry = default_registry()

    if args.list:
        for name in registry.names():
            print(name)
        return 0

    output_format = args.output_format or config.output_format
    include_passwords = config.include_passwords and not args.no_passwords

    try:
        export = export_fixtures(
            registry,
            names=args.fixtures,
            include_passwords=include_passwords,
            password_mask=config.password_mask,
        )
    except FixtureNotFoundError as e:
        logger.debug(str(e), extra=fixture_fields(fixture=e.name))
        print(f"error: {e}. Available: {', '.join(registry.names())}", file=sys.stderr)
        return 2

    print(dump_export(export, output_format=output_format, indent=config.indent))
    return 0

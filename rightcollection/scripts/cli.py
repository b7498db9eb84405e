#!/usr/bin/env python
# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""
Command-line interface for rightcollection.
"""

import argparse
import logging
import sys

from rightcollection import config

logger = logging.getLogger("rightcollection-cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="rightcollection command-line utilities",
        prog="rightcollection",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    subparsers = parser.add_subparsers(
        dest="command",
        help="Command to run",
        required=True,
    )
    subparsers.add_parser(
        "demo",
        help="Run the PersonCollection walkthrough",
        description="Build a collection of people, query it and print the results.",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the rightcollection command-line interface.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else config.settings.RIGHTCOLLECTION_LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("rightcollection").setLevel(level)

    logger.debug(f"Running command {args.command!r} at log level {level}")

    if args.command == "demo":
        from .demo import run_demo

        run_demo()
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())

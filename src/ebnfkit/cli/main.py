# Copyright 2026 EBNFKit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the EBNFKit command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from ebnfkit.demo.config import CONFIG_FILE_NAME, DemoConfig, DemoConfigError, load_demo_config
from ebnfkit.demo.driver import EXAMPLES, describe, render_demo, run_example
from ebnfkit.errors import FormatError
from ebnfkit.greeting import hello

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the EBNFKit CLI."""
    parser = argparse.ArgumentParser(
        prog="ebnfkit",
        description="EBNFKit - EBNF notation mapped onto string helpers",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # demo subcommand
    demo_parser = subparsers.add_parser(
        "demo",
        help="Print the notation examples",
        description="Run every example helper on its sample inputs and print the results.",
    )
    demo_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"YAML file overriding the samples (default: ./{CONFIG_FILE_NAME} if present)",
    )

    # hello subcommand
    hello_parser = subparsers.add_parser(
        "hello",
        help="Print a greeting",
        description="Print the hello-world greeting.",
    )
    hello_parser.add_argument(
        "name",
        nargs="?",
        default="",
        help="Name to greet (default: World)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Run one example helper on a string",
        description=(
            "Run a single recognizer or parser on TEXT. Exits with code 1 when "
            "the recognizer rejects TEXT or the parser reports a format error."
        ),
    )
    check_parser.add_argument(
        "kind",
        choices=[key for key, example in EXAMPLES.items() if example.checkable],
        help="Example to run",
    )
    check_parser.add_argument("text", help="Input string")

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "demo":
        return _cmd_demo(args)
    if args.command == "hello":
        return _cmd_hello(args)
    if args.command == "check":
        return _cmd_check(args)
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    """Handle the demo subcommand."""
    config_path = args.config
    if config_path is None and Path(CONFIG_FILE_NAME).exists():
        config_path = Path(CONFIG_FILE_NAME)

    config = DemoConfig()
    if config_path is not None:
        try:
            config = load_demo_config(config_path)
        except DemoConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    for line in render_demo(config):
        print(line)
    return 0


def _cmd_hello(args: argparse.Namespace) -> int:
    """Handle the hello subcommand."""
    print(hello(args.name))
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        result = run_example(args.kind, args.text)
    except FormatError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(describe(result))
    if result is False:
        return 1
    return 0

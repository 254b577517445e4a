#!/usr/bin/env python3
"""
payback: employee contact records from the command line or an interactive shell.

Every person lives in its own .person file under the data directory.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError

from config import get_log_level
from interface.cli_parser import build_parser as build_cli_parser
from interface.cli_commands import cmd_add, cmd_config, cmd_delete, cmd_find, cmd_list
from interface.cli_edit import cmd_edit
from interface.cli_shell import cmd_shell

__all__ = [
    "cmd_add",
    "cmd_edit",
    "cmd_list",
    "cmd_find",
    "cmd_delete",
    "cmd_config",
    "cmd_shell",
    "build_parser",
    "configure_logging",
    "main",
]

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "") -> None:
    """Send logs to stderr so JSON output on stdout stays parseable."""
    resolved = getattr(logging, (level or get_log_level()).upper(), logging.WARNING)
    logging.basicConfig(level=resolved, format=LOG_FORMAT, stream=sys.stderr, force=True)


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = build_cli_parser(commands=sys.modules[__name__])
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    parser.add_argument("--log-level", dest="log_level", help="override the configured log level")
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(getattr(args, "log_level", None) or "")
    if getattr(args, "version", False):
        try:
            print(pkg_version("payback"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "command", None):
        parser.print_help()
        return 1
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

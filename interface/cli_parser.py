"""CLI parser construction for the payback CLI and shell."""

import argparse
from typing import Any

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser(commands: Any, *, include_shell: bool = True, prog: str = "payback") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="payback: employee contact records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--data-dir", dest="data_dir", help="directory holding the .person files")

    def add_format_arg(sp):
        sp.add_argument("--format", choices=["json", "table"], help="output format (default: json; table in the shell)")
        return sp

    sub = parser.add_subparsers(dest="command", help="Commands")

    # add
    ap = sub.add_parser("add", help="Add a person")
    ap.add_argument("--name", "-n", required=True)
    ap.add_argument("--phone", "-p", required=True)
    ap.add_argument("--email", "-e", required=True)
    ap.add_argument("--address", "-a", required=True)
    ap.add_argument("--year", "-y", type=int, help="year joined (default: current year)")
    ap.add_argument("--tags", "-t", help="comma-separated tags")
    add_format_arg(ap)
    ap.set_defaults(func=commands.cmd_add)

    # edit
    ep = sub.add_parser(
        "edit",
        help="Edit a person",
        description=(
            "Edits the details of the person with the ID provided.\n"
            "Existing values will be overwritten by the input values.\n"
            "Remove all the employee's tags with --tag -1.\n"
            "Examples:\n"
            "  payback edit 240001 --phone 91234567 --email johndoe@example.com --tag 1 friend\n"
            "  payback edit 240001 --tag -1"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ep.add_argument("person_id", type=int, metavar="ID")
    ep.add_argument("--name", "-n")
    ep.add_argument("--phone", "-p")
    ep.add_argument("--email", "-e")
    ep.add_argument("--address", "-a")
    ep.add_argument("--tag", "-t", nargs="+", metavar="TAG_INDEX_THEN_NEW_TAG", help="TAG_INDEX NEW_TAG, or -1 to clear all tags")
    add_format_arg(ep)
    ep.set_defaults(func=commands.cmd_edit)

    # list
    lp = sub.add_parser("list", help="List every person and clear any filter")
    add_format_arg(lp)
    lp.set_defaults(func=commands.cmd_list)

    # find
    fp = sub.add_parser("find", help="Show people whose name contains any keyword")
    fp.add_argument("keywords", nargs="+")
    add_format_arg(fp)
    fp.set_defaults(func=commands.cmd_find)

    # delete
    dp = sub.add_parser("delete", help="Delete a person")
    dp.add_argument("person_id", type=int, metavar="ID")
    add_format_arg(dp)
    dp.set_defaults(func=commands.cmd_delete)

    # config
    cfg = sub.add_parser("config", help="Show or update the user configuration")
    cfg.add_argument("--set-data-dir", dest="set_data_dir", metavar="PATH", help="store the default data directory ('' to reset)")
    cfg.add_argument("--set-log-level", dest="set_log_level", choices=LOG_LEVELS + [""], help="store the default log level")
    add_format_arg(cfg)
    cfg.set_defaults(func=commands.cmd_config)

    if include_shell:
        sp = sub.add_parser("shell", help="Interactive session (filters persist between commands)")
        sp.set_defaults(func=commands.cmd_shell)

    return parser


__all__ = ["build_parser", "LOG_LEVELS"]

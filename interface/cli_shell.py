"""Interactive shell: one in-memory model shared by every command typed."""

import logging
import shlex
from types import SimpleNamespace
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from interface.cli_commands import CliDeps, cmd_add, cmd_config, cmd_delete, cmd_find, cmd_list, default_model_factory
from interface.cli_edit import cmd_edit
from interface.cli_parser import build_parser
from interface.serializers import person_to_dict

EXIT_WORDS = {"exit", "quit", "bye"}
COMMAND_WORDS = ["add", "edit", "list", "find", "delete", "config", "help"] + sorted(EXIT_WORDS)
PROMPT = "payback> "

logger = logging.getLogger("payback.shell")

SHELL_COMMANDS = SimpleNamespace(
    cmd_add=cmd_add,
    cmd_edit=cmd_edit,
    cmd_list=cmd_list,
    cmd_find=cmd_find,
    cmd_delete=cmd_delete,
    cmd_config=cmd_config,
)


class PaybackShell:
    def __init__(self, model, session: Optional[PromptSession] = None):
        self.model = model
        self.deps = CliDeps(model_factory=lambda _args: model, person_to_dict=person_to_dict, output="table")
        self.parser = build_parser(SHELL_COMMANDS, include_shell=False, prog="")
        self._session = session

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession(
                history=InMemoryHistory(),
                completer=WordCompleter(COMMAND_WORDS, sentence=True),
            )
        return self._session

    def execute_line(self, line: str) -> Optional[int]:
        """Run one command line. Returns None when the user asked to leave."""
        text = (line or "").strip()
        if not text:
            return 0
        if text.lower() in EXIT_WORDS:
            return None
        if text.lower() == "help":
            self.parser.print_help()
            return 0
        try:
            argv = shlex.split(text)
        except ValueError as exc:
            print(f"Error: {exc}")
            return 1
        try:
            args = self.parser.parse_args(argv)
        except SystemExit as exc:
            # argparse already printed usage/error
            return int(exc.code or 0)
        if not getattr(args, "func", None):
            self.parser.print_help()
            return 1
        logger.debug("shell command: %s", argv)
        return args.func(args, self.deps)

    def run(self) -> int:
        print("payback shell: type 'help' for commands, 'exit' to leave.")
        while True:
            try:
                line = self.session.prompt(PROMPT)
            except KeyboardInterrupt:
                continue
            except EOFError:
                break
            if self.execute_line(line) is None:
                break
        return 0


def cmd_shell(args) -> int:
    return PaybackShell(default_model_factory(args)).run()


__all__ = ["PaybackShell", "cmd_shell", "COMMAND_WORDS"]

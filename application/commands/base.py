from dataclasses import dataclass

from application.ports import Model


@dataclass(frozen=True)
class CommandResult:
    feedback: str


class Command:
    """A user command executed against the address book model."""

    COMMAND_WORD = ""

    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError

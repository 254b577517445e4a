from application.commands.base import Command, CommandResult
from application.ports import Model

MESSAGE_SUCCESS = "Listed and Refreshed the workers recorded in the system"


class ListCommand(Command):
    """Clear any active filter so every person is shown."""

    COMMAND_WORD = "list"

    def execute(self, model: Model) -> CommandResult:
        model.reset_filter()
        return CommandResult(MESSAGE_SUCCESS)

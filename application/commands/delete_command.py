from application.commands.base import Command, CommandResult
from core import PersonNotFoundError, format_person

MESSAGE_DELETE_PERSON_SUCCESS = "Deleted Person: {person}"


class DeleteCommand(Command):
    COMMAND_WORD = "delete"

    def __init__(self, person_id: int):
        self.person_id = int(person_id)

    def execute(self, model) -> CommandResult:
        target = next((p for p in model.filtered_persons() if p.id == self.person_id), None)
        if target is None:
            raise PersonNotFoundError()
        model.delete_person(target)
        return CommandResult(MESSAGE_DELETE_PERSON_SUCCESS.format(person=format_person(target)))

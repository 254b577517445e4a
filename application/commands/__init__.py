from .base import Command, CommandResult
from .add_command import AddCommand
from .delete_command import DeleteCommand
from .edit_command import EditCommand, EditPersonDescriptor
from .find_command import FindCommand, NameContainsKeywords
from .list_command import ListCommand

__all__ = [
    "Command",
    "CommandResult",
    "AddCommand",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "FindCommand",
    "NameContainsKeywords",
    "ListCommand",
]

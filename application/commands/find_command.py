from typing import Iterable, List

from application.commands.base import Command, CommandResult
from core import Person

MESSAGE_PERSONS_LISTED = "{count} persons listed!"


class NameContainsKeywords:
    """Matches people whose name contains any keyword as a whole word (case-insensitive)."""

    def __init__(self, keywords: Iterable[str]):
        self.keywords: List[str] = [k.strip().lower() for k in keywords if k and k.strip()]

    def __call__(self, person: Person) -> bool:
        words = person.name.lower().split()
        return any(keyword in words for keyword in self.keywords)

    def __eq__(self, other) -> bool:
        if not isinstance(other, NameContainsKeywords):
            return NotImplemented
        return self.keywords == other.keywords


class FindCommand(Command):
    COMMAND_WORD = "find"

    def __init__(self, keywords: Iterable[str]):
        self.predicate = NameContainsKeywords(keywords)
        if not self.predicate.keywords:
            raise ValueError("at least one keyword is required")

    def execute(self, model) -> CommandResult:
        model.update_filter(self.predicate)
        return CommandResult(MESSAGE_PERSONS_LISTED.format(count=len(model.filtered_persons())))

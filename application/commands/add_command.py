from typing import Optional, Sequence

from application.commands.base import Command, CommandResult
from core import (
    DuplicatePersonError,
    Person,
    format_person,
    normalize_address,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_tag,
    normalize_year_joined,
)

MESSAGE_SUCCESS = "New person added: {person}"


class AddCommand(Command):
    """Add a person; the id is allocated from the year joined."""

    COMMAND_WORD = "add"

    def __init__(
        self,
        name: str,
        phone: str,
        email: str,
        address: str,
        year_joined: int,
        tags: Optional[Sequence[str]] = None,
    ):
        self.name = normalize_name(name)
        self.phone = normalize_phone(phone)
        self.email = normalize_email(email)
        self.address = normalize_address(address)
        self.year_joined = normalize_year_joined(year_joined)
        self.tags = []
        for raw in tags or []:
            tag = normalize_tag(raw)
            if tag not in self.tags:
                self.tags.append(tag)

    def execute(self, model) -> CommandResult:
        person = Person(
            id=model.next_id(self.year_joined),
            name=self.name,
            phone=self.phone,
            email=self.email,
            address=self.address,
            year_joined=self.year_joined,
            tags=tuple(self.tags),
        )
        if model.has_person(person):
            raise DuplicatePersonError()
        model.add_person(person)
        return CommandResult(MESSAGE_SUCCESS.format(person=format_person(person)))

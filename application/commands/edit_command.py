"""Edit the details of an existing person."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from application.commands.base import Command, CommandResult
from application.ports import Model
from core import (
    DuplicatePersonError,
    Person,
    PersonNotFoundError,
    RedundantEditError,
    TagEdit,
    format_person,
    normalize_address,
    normalize_email,
    normalize_name,
    normalize_phone,
    resolve_tags,
)

MESSAGE_EDIT_PERSON_SUCCESS = "Edited Person: {person}"

EDITABLE_FIELDS = ("name", "phone", "email", "address")

logger = logging.getLogger("payback.edit")


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Replacement values for an edit. ``None`` keeps the current value.

    Tags are never overlaid directly: the final list comes from applying
    ``tag_edit`` to the person's current tags.
    """

    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    tag_edit: TagEdit = field(default_factory=TagEdit.none)

    @classmethod
    def from_input(
        cls,
        name: Optional[str] = None,
        phone: Optional[str] = None,
        email: Optional[str] = None,
        address: Optional[str] = None,
        tag_index: Optional[int] = None,
        tag_text: Optional[str] = None,
    ) -> "EditPersonDescriptor":
        """Validate raw user input. Raises FieldValidationError on bad values."""
        return cls(
            name=normalize_name(name) if name is not None else None,
            phone=normalize_phone(phone) if phone is not None else None,
            email=normalize_email(email) if email is not None else None,
            address=normalize_address(address) if address is not None else None,
            tag_edit=TagEdit.from_index(tag_index, tag_text) if tag_index is not None else TagEdit.none(),
        )

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, name) is not None for name in EDITABLE_FIELDS)

    def is_empty(self) -> bool:
        return not self.is_any_field_edited() and self.tag_edit.is_none

    def present_fields(self) -> List[str]:
        return [name for name in EDITABLE_FIELDS if getattr(self, name) is not None]

    def resolve_tags(self, current_tags: Sequence[str]) -> List[str]:
        return resolve_tags(current_tags, self.tag_edit)

    def repeats_current_value(self, person: Person) -> bool:
        """True when any supplied value equals the person's current one."""
        return any(getattr(self, name) == getattr(person, name) for name in self.present_fields())

    def merge(self, person: Person, tags: Optional[Sequence[str]] = None) -> Person:
        """Build the edited person. id and year_joined are never overlaid."""
        changes = {name: getattr(self, name) for name in self.present_fields()}
        if tags is not None:
            changes["tags"] = tuple(tags)
        return person.with_changes(**changes)


class EditCommand(Command):
    COMMAND_WORD = "edit"

    def __init__(self, person_id: int, descriptor: EditPersonDescriptor):
        if descriptor is None:
            raise ValueError("descriptor is required")
        self.person_id = int(person_id)
        self.descriptor = descriptor

    def execute(self, model: Model) -> CommandResult:
        person_to_edit = self._find_displayed(model)
        tags = self.descriptor.resolve_tags(person_to_edit.tags)
        if self.descriptor.repeats_current_value(person_to_edit):
            raise RedundantEditError()

        edited = self.descriptor.merge(person_to_edit, tags)

        clashes = [p for p in model.duplicates_of(edited) if p.id != edited.id]
        if clashes:
            logger.debug("Edit of %s clashes with %s", edited.id, [p.id for p in clashes])
            raise DuplicatePersonError()

        model.set_person(person_to_edit, edited)
        model.reset_filter()
        logger.info(
            "Edited person %s (fields: %s; tags: %s)",
            edited.id,
            ", ".join(self.descriptor.present_fields()) or "-",
            self.descriptor.tag_edit.describe(),
        )
        return CommandResult(MESSAGE_EDIT_PERSON_SUCCESS.format(person=format_person(edited)))

    def _find_displayed(self, model: Model) -> Person:
        for person in model.filtered_persons():
            if person.id == self.person_id:
                return person
        raise PersonNotFoundError()

    def __eq__(self, other) -> bool:
        if not isinstance(other, EditCommand):
            return NotImplemented
        return self.person_id == other.person_id and self.descriptor == other.descriptor

    def __repr__(self) -> str:
        return f"EditCommand(person_id={self.person_id}, descriptor={self.descriptor!r})"


__all__ = ["EditCommand", "EditPersonDescriptor", "MESSAGE_EDIT_PERSON_SUCCESS"]

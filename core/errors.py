"""Command failures surfaced to the user.

Every failure aborts the command before any mutation; callers render the
message and may re-issue a corrected command.
"""

MESSAGE_INVALID_PERSON_DISPLAYED_ID = "The person ID provided is invalid"
MESSAGE_EDIT_SAME_FIELD = "The new value provided for a field is the same as the current value."
MESSAGE_INVALID_TAG_INDEX = "The tag index provided is invalid"
MESSAGE_NO_TAG_PRESENT = "There is no tag present to edit."
MESSAGE_DUPLICATE_TAG = "This tag already exists for the person."
MESSAGE_DUPLICATE_PERSON = "This person already exists in the address book."
MESSAGE_NOT_EDITED = "At least one field to edit must be provided."


class CommandError(Exception):
    """Base class for user-facing command failures."""

    code = "error"
    default_message = "Command failed"

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class PersonNotFoundError(CommandError):
    code = "not_found"
    default_message = MESSAGE_INVALID_PERSON_DISPLAYED_ID


class RedundantEditError(CommandError):
    code = "same_field"
    default_message = MESSAGE_EDIT_SAME_FIELD


class InvalidTagIndexError(CommandError):
    code = "invalid_index"
    default_message = MESSAGE_INVALID_TAG_INDEX


class NoTagPresentError(CommandError):
    code = "no_tag"
    default_message = MESSAGE_NO_TAG_PRESENT


class DuplicateTagError(CommandError):
    code = "duplicate_tag"
    default_message = MESSAGE_DUPLICATE_TAG


class DuplicatePersonError(CommandError):
    code = "duplicate_person"
    default_message = MESSAGE_DUPLICATE_PERSON


class NotEditedError(CommandError):
    code = "not_edited"
    default_message = MESSAGE_NOT_EDITED


__all__ = [
    "CommandError",
    "PersonNotFoundError",
    "RedundantEditError",
    "InvalidTagIndexError",
    "NoTagPresentError",
    "DuplicateTagError",
    "DuplicatePersonError",
    "NotEditedError",
    "MESSAGE_INVALID_PERSON_DISPLAYED_ID",
    "MESSAGE_EDIT_SAME_FIELD",
    "MESSAGE_INVALID_TAG_INDEX",
    "MESSAGE_NO_TAG_PRESENT",
    "MESSAGE_DUPLICATE_TAG",
    "MESSAGE_DUPLICATE_PERSON",
    "MESSAGE_NOT_EDITED",
]

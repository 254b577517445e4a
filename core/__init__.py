from .errors import (
    CommandError,
    PersonNotFoundError,
    RedundantEditError,
    InvalidTagIndexError,
    NoTagPresentError,
    DuplicateTagError,
    DuplicatePersonError,
    NotEditedError,
)
from .fields import (
    FieldValidationError,
    normalize_name,
    normalize_phone,
    normalize_email,
    normalize_address,
    normalize_tag,
    normalize_year_joined,
)
from .person import (
    Person,
    same_person,
    same_record,
    compose_person_id,
    split_person_id,
    next_person_id,
    format_person,
)
from .tag_edit import TagEdit, CLEAR_ALL_INDEX, resolve_tags

__all__ = [
    "Person",
    "same_person",
    "same_record",
    "compose_person_id",
    "split_person_id",
    "next_person_id",
    "format_person",
    # Tags
    "TagEdit",
    "CLEAR_ALL_INDEX",
    "resolve_tags",
    # Fields
    "FieldValidationError",
    "normalize_name",
    "normalize_phone",
    "normalize_email",
    "normalize_address",
    "normalize_tag",
    "normalize_year_joined",
    # Errors
    "CommandError",
    "PersonNotFoundError",
    "RedundantEditError",
    "InvalidTagIndexError",
    "NoTagPresentError",
    "DuplicateTagError",
    "DuplicatePersonError",
    "NotEditedError",
]

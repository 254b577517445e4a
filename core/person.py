from dataclasses import dataclass, field, replace
from typing import Iterable, Tuple

# Person ids are YY followed by a 4-digit sequence number (2024, 1st hire -> 240001).
ID_SEQUENCE_WIDTH = 4
ID_SEQUENCE_LIMIT = 10 ** ID_SEQUENCE_WIDTH


@dataclass(frozen=True)
class Person:
    """An employee record. Immutable: edits always build a new instance.

    Identity fields (id, phone, email) drive weak equality; the rest are data.
    """

    id: int
    name: str
    phone: str
    email: str
    address: str
    year_joined: int
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable of tags but always store a tuple.
        object.__setattr__(self, "tags", tuple(self.tags))

    def with_changes(self, **changes) -> "Person":
        return replace(self, **changes)


def same_person(first: Person, second: Person) -> bool:
    """Weak equality: the records share an id, a phone number or an email."""
    if first is second:
        return True
    if first is None or second is None:
        return False
    return first.id == second.id or first.phone == second.phone or first.email == second.email


def same_record(first: Person, second: Person) -> bool:
    """Strong equality: every identity and data field matches, tags in order."""
    if first is second:
        return True
    if first is None or second is None:
        return False
    return (
        first.id == second.id
        and first.name == second.name
        and first.phone == second.phone
        and first.email == second.email
        and first.address == second.address
        and first.year_joined == second.year_joined
        and tuple(first.tags) == tuple(second.tags)
    )


def compose_person_id(year_joined: int, sequence: int) -> int:
    if not 0 < sequence < ID_SEQUENCE_LIMIT:
        raise ValueError(f"Person sequence out of range for {year_joined}: {sequence}")
    return (year_joined % 100) * ID_SEQUENCE_LIMIT + sequence


def split_person_id(person_id: int) -> Tuple[int, int]:
    """Return (two-digit year, sequence) for a person id."""
    return divmod(int(person_id), ID_SEQUENCE_LIMIT)


def next_person_id(existing_ids: Iterable[int], year_joined: int) -> int:
    """Next free id for people joining in ``year_joined``."""
    prefix = year_joined % 100
    sequences = [seq for yy, seq in (split_person_id(pid) for pid in existing_ids) if yy == prefix]
    return compose_person_id(year_joined, (max(sequences) + 1) if sequences else 1)


def format_person(person: Person) -> str:
    """One-line rendering used in command feedback."""
    tags = "".join(f"[{tag}]" for tag in person.tags)
    return (
        f"{person.name}; ID: {person.id}; Phone: {person.phone}; Email: {person.email}; "
        f"Address: {person.address}; Year joined: {person.year_joined}; Tags: {tags}"
    )


__all__ = [
    "Person",
    "same_person",
    "same_record",
    "compose_person_id",
    "split_person_id",
    "next_person_id",
    "format_person",
]

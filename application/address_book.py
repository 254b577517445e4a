"""In-memory address book with a filtered view, optionally backed by a repository."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from application.ports import PersonPredicate, PersonRepository
from core import DuplicatePersonError, Person, next_person_id, same_person


logger = logging.getLogger("payback.model")


def show_all_persons(_person: Person) -> bool:
    return True


class AddressBookModel:
    def __init__(
        self,
        persons: Optional[Iterable[Person]] = None,
        repository: Optional[PersonRepository] = None,
    ):
        self.repo = repository
        if persons is None:
            persons = repository.list() if repository is not None else []
        self._persons: List[Person] = []
        for person in persons:
            if self.has_person(person):
                logger.warning("Skipping %s: clashes with an existing record", person.id)
                continue
            self._persons.append(person)
        self._predicate: PersonPredicate = show_all_persons

    @classmethod
    def from_repository(cls, repository: PersonRepository) -> "AddressBookModel":
        return cls(repository=repository)

    def persons(self) -> List[Person]:
        """Every stored person, in insertion order."""
        return list(self._persons)

    def filtered_persons(self) -> List[Person]:
        return [p for p in self._persons if self._predicate(p)]

    def update_filter(self, predicate: PersonPredicate) -> None:
        self._predicate = predicate

    def reset_filter(self) -> None:
        self._predicate = show_all_persons

    @property
    def is_filtered(self) -> bool:
        return self._predicate is not show_all_persons

    def has_person(self, person: Person) -> bool:
        return any(same_person(existing, person) for existing in self._persons)

    def duplicates_of(self, candidate: Person) -> List[Person]:
        return [p for p in self._persons if same_person(p, candidate)]

    def find_by_id(self, person_id: int) -> Optional[Person]:
        for person in self._persons:
            if person.id == person_id:
                return person
        return None

    def next_id(self, year_joined: int) -> int:
        return next_person_id((p.id for p in self._persons), year_joined)

    def add_person(self, person: Person) -> None:
        if self.has_person(person):
            raise DuplicatePersonError()
        if self.repo is not None:
            self.repo.save(person)
        self._persons.append(person)
        logger.info("Added person %s", person.id)

    def set_person(self, target: Person, edited: Person) -> None:
        """Swap ``target`` for ``edited`` in place."""
        idx = self._index_of(target)
        if idx is None:
            raise ValueError(f"Person {target.id} is not in the address book")
        # disk first: a failed write must leave the list untouched
        if self.repo is not None:
            self.repo.save(edited)
            if edited.id != target.id:
                self.repo.delete(target.id)
        self._persons[idx] = edited
        logger.info("Replaced person %s", target.id)

    def delete_person(self, target: Person) -> None:
        idx = self._index_of(target)
        if idx is None:
            raise ValueError(f"Person {target.id} is not in the address book")
        if self.repo is not None:
            self.repo.delete(target.id)
        del self._persons[idx]
        logger.info("Deleted person %s", target.id)

    def _index_of(self, target: Person) -> Optional[int]:
        for idx, person in enumerate(self._persons):
            if person == target:
                return idx
        return None


__all__ = ["AddressBookModel", "show_all_persons"]

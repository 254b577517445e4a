from typing import Callable, List, Optional, Protocol

from core import Person

PersonPredicate = Callable[[Person], bool]


class PersonRepository(Protocol):
    def load(self, person_id: int) -> Optional[Person]:
        ...

    def save(self, person: Person) -> None:
        ...

    def list(self) -> List[Person]:
        ...

    def delete(self, person_id: int) -> bool:
        ...


class Model(Protocol):
    """What commands need from the address book."""

    def filtered_persons(self) -> List[Person]:
        ...

    def duplicates_of(self, candidate: Person) -> List[Person]:
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        ...

    def reset_filter(self) -> None:
        ...

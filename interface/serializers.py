"""Canonical JSON contract for person records.

CLI output and the shell both go through person_to_dict so the shape never drifts.
"""

from typing import Any, Dict

from core import Person


def person_to_dict(person: Person) -> Dict[str, Any]:
    return {
        "id": person.id,
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "year_joined": person.year_joined,
        "tags": list(person.tags),
    }


__all__ = ["person_to_dict"]

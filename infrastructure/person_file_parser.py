"""Person file format: YAML front matter followed by a Markdown title.

    ---
    id: 240001
    name: John Doe
    ...
    ---
    # John Doe
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from core import FieldValidationError, Person
from core.fields import (
    normalize_address,
    normalize_email,
    normalize_name,
    normalize_phone,
    normalize_tag,
    normalize_year_joined,
)

logger = logging.getLogger("payback.storage")


class PersonFileParser:
    CURRENT_SCHEMA_VERSION = 1
    SUFFIX = ".person"

    @staticmethod
    def _coerce_tags(raw: Any) -> List[str]:
        if raw is None:
            return []
        if isinstance(raw, str):
            raw = [t for t in raw.split(",")]
        tags: List[str] = []
        for item in raw:
            tag = normalize_tag(str(item))
            if tag not in tags:
                tags.append(tag)
        return tags

    @classmethod
    def from_metadata(cls, metadata: Dict[str, Any]) -> Person:
        try:
            person_id = int(metadata["id"])
        except (KeyError, TypeError, ValueError):
            raise FieldValidationError("id", f"Missing or invalid id: {metadata.get('id')!r}") from None
        return Person(
            id=person_id,
            name=normalize_name(str(metadata.get("name", "") or "")),
            # YAML may load an unquoted phone number as int.
            phone=normalize_phone(str(metadata.get("phone", "") or "")),
            email=normalize_email(str(metadata.get("email", "") or "")),
            address=normalize_address(str(metadata.get("address", "") or "")),
            year_joined=normalize_year_joined(metadata.get("year_joined")),
            tags=tuple(cls._coerce_tags(metadata.get("tags"))),
        )

    @classmethod
    def parse_text(cls, content: str) -> Optional[Person]:
        if not content.startswith("---"):
            return None
        _, _, rest = content.partition("\n")
        front, sep, _ = rest.partition("\n---")
        if not sep:
            return None
        metadata = yaml.safe_load(front) or {}
        if not isinstance(metadata, dict):
            return None
        return cls.from_metadata(metadata)

    @classmethod
    def parse(cls, filepath: Path) -> Optional[Person]:
        """Parse a person file; unreadable or invalid files yield None."""
        if not filepath.exists():
            return None
        try:
            return cls.parse_text(filepath.read_text(encoding="utf-8"))
        except (yaml.YAMLError, FieldValidationError) as exc:
            logger.warning("Skipping %s: %s", filepath, exc)
            return None

    @classmethod
    def to_metadata(cls, person: Person) -> Dict[str, Any]:
        return {
            "schema_version": cls.CURRENT_SCHEMA_VERSION,
            "id": person.id,
            "name": person.name,
            "phone": person.phone,
            "email": person.email,
            "address": person.address,
            "year_joined": person.year_joined,
            "tags": list(person.tags),
        }

    @classmethod
    def render(cls, person: Person) -> str:
        front = yaml.safe_dump(cls.to_metadata(person), allow_unicode=True, sort_keys=False)
        return f"---\n{front}---\n# {person.name}\n"


__all__ = ["PersonFileParser"]

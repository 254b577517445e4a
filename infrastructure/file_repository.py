import logging
from pathlib import Path
from typing import List, Optional

from core import Person
from application.ports import PersonRepository
from infrastructure.person_file_parser import PersonFileParser

logger = logging.getLogger("payback.storage")


class FilePersonRepository(PersonRepository):
    """One ``<id>.person`` file per record inside ``data_dir``."""

    def __init__(self, data_dir: Path | None):
        if data_dir is None:
            from interface.data_dir_resolver import get_data_dir

            self.data_dir = get_data_dir()
        else:
            self.data_dir = Path(data_dir)

    def _resolve_path(self, person_id: int) -> Path:
        try:
            pid = int(person_id)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid person id: {person_id!r}") from None
        if pid <= 0:
            raise ValueError(f"Invalid person id: {person_id!r}")
        return self.data_dir / f"{pid}{PersonFileParser.SUFFIX}"

    def _files(self) -> List[Path]:
        if not self.data_dir.exists():
            return []
        return sorted(self.data_dir.glob(f"*{PersonFileParser.SUFFIX}"))

    def load(self, person_id: int) -> Optional[Person]:
        return PersonFileParser.parse(self._resolve_path(person_id))

    def save(self, person: Person) -> None:
        path = self._resolve_path(person.id)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(path.suffix + ".tmp")
        tmp.write_text(PersonFileParser.render(person), encoding="utf-8")
        tmp.replace(path)
        logger.debug("Saved %s", path)

    def list(self) -> List[Person]:
        persons: List[Person] = []
        for file in self._files():
            parsed = PersonFileParser.parse(file)
            if parsed is None:
                continue
            if file.stem != str(parsed.id):
                logger.warning("File %s holds person %s; keeping it under its own id", file.name, parsed.id)
            persons.append(parsed)
        return sorted(persons, key=lambda p: p.id)

    def delete(self, person_id: int) -> bool:
        path = self._resolve_path(person_id)
        if not path.exists():
            return False
        path.unlink()
        logger.debug("Deleted %s", path)
        return True


__all__ = ["FilePersonRepository"]

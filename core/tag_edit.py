"""Single indexed tag edit attached to an edit command.

A TagEdit is one of:
- none: keep the current tags,
- clear: drop every tag (typed on the command line as index -1),
- set: replace the tag at a 1-based position with a new value.
"""

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from .errors import DuplicateTagError, InvalidTagIndexError, NoTagPresentError
from .fields import normalize_tag

CLEAR_ALL_INDEX = -1

TagEditKind = Literal["none", "clear", "set"]


@dataclass(frozen=True)
class TagEdit:
    kind: TagEditKind = "none"
    index: int = 0  # 1-based; only meaningful for kind == "set"
    tag: str = ""

    @classmethod
    def none(cls) -> "TagEdit":
        return cls("none")

    @classmethod
    def clear_all(cls) -> "TagEdit":
        return cls("clear", CLEAR_ALL_INDEX)

    @classmethod
    def set_at(cls, index: int, text: str) -> "TagEdit":
        return cls("set", int(index), normalize_tag(text))

    @classmethod
    def from_index(cls, index: int, text: Optional[str] = None) -> "TagEdit":
        """Build from the (index, new tag) pair typed by the user."""
        if int(index) == CLEAR_ALL_INDEX:
            return cls.clear_all()
        return cls.set_at(index, text or "")

    @property
    def is_none(self) -> bool:
        return self.kind == "none"

    def apply(self, tags: Sequence[str]) -> List[str]:
        """Return the tag list after this edit. The input is never mutated."""
        current = list(tags or [])
        if self.kind == "none":
            return current
        if self.kind == "clear":
            return []
        if self.index > len(current):
            raise InvalidTagIndexError()
        if self.index == 0 and not current:
            raise NoTagPresentError()
        if self.index < 1:
            raise InvalidTagIndexError()
        if self.tag in current:
            raise DuplicateTagError()
        current[self.index - 1] = self.tag
        return current

    def describe(self) -> str:
        if self.kind == "none":
            return "-"
        if self.kind == "clear":
            return "clear all"
        return f"{self.index} -> {self.tag}"


def resolve_tags(tags: Sequence[str], tag_edit: Optional[TagEdit]) -> List[str]:
    """Apply an optional tag edit to ``tags``."""
    if tag_edit is None:
        return list(tags or [])
    return tag_edit.apply(tags)


__all__ = ["TagEdit", "TagEditKind", "CLEAR_ALL_INDEX", "resolve_tags"]

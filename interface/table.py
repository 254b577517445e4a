"""Plain-text table of people for the terminal."""

import shutil
from typing import Dict, List, Optional, Sequence, Tuple

from core import Person
from util.display import display_width, ellipsize, pad_display

# (key, header, min width, weight for spare space)
COLUMNS: Tuple[Tuple[str, str, int, int], ...] = (
    ("id", "ID", 6, 0),
    ("name", "Name", 8, 3),
    ("phone", "Phone", 8, 1),
    ("email", "Email", 10, 3),
    ("address", "Address", 8, 3),
    ("year_joined", "Year", 4, 0),
    ("tags", "Tags", 6, 2),
)
SEPARATOR = " | "


def _cells(person: Person) -> Dict[str, str]:
    return {
        "id": str(person.id),
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "year_joined": str(person.year_joined),
        "tags": ", ".join(person.tags),
    }


def column_widths(rows: Sequence[Dict[str, str]], total_width: int) -> Dict[str, int]:
    """Natural widths when they fit, otherwise shrink weighted columns toward their minimum."""
    natural = {
        key: max([display_width(header)] + [display_width(r[key]) for r in rows])
        for key, header, _, _ in COLUMNS
    }
    budget = total_width - display_width(SEPARATOR) * (len(COLUMNS) - 1)
    if sum(natural.values()) <= budget:
        return natural

    widths = {key: min(natural[key], min_w) if weight else natural[key] for key, _, min_w, weight in COLUMNS}
    spare = budget - sum(widths.values())
    flexible = [(key, weight) for key, _, _, weight in COLUMNS if weight and natural[key] > widths[key]]
    total_weight = sum(weight for _, weight in flexible)
    for key, weight in flexible:
        if spare <= 0 or not total_weight:
            break
        extra = min(natural[key] - widths[key], max(0, spare * weight // total_weight))
        widths[key] += extra
    return widths


def render_person_table(persons: Sequence[Person], width: Optional[int] = None) -> str:
    if not persons:
        return "(no persons)"
    total_width = width or shutil.get_terminal_size((120, 24)).columns
    rows = [_cells(p) for p in persons]
    widths = column_widths(rows, total_width)

    def line(cells: Dict[str, str]) -> str:
        return SEPARATOR.join(pad_display(ellipsize(cells[key], widths[key]), widths[key]) for key, *_ in COLUMNS).rstrip()

    header = line({key: title for key, title, _, _ in COLUMNS})
    rule = "-+-".join("-" * widths[key] for key, *_ in COLUMNS)
    body: List[str] = [line(row) for row in rows]
    return "\n".join([header, rule] + body)


__all__ = ["render_person_table", "column_widths"]

"""
Filter and sort helpers for the admin tables.

The admin dashboard shows widgets, comments, categories and FAQs as tables
with a free-text filter and clickable column headers. Rows can be dataclasses
or plain documents (dicts) coming from the document store.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SortState:
    column: str
    descending: bool = False

    @property
    def direction(self) -> str:
        return "descending" if self.descending else "ascending"


def field_value(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _sort_key(value: Any) -> tuple:
    # None sorts first; numbers and strings never compare with each other.
    if value is None:
        return (0, 0, "")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return (1, value, "")
    return (2, 0, str(value))


def filter_and_sort(
    items: Iterable[T],
    *,
    query: str = "",
    fields: Sequence[str] = (),
    sort: SortState | None = None,
) -> List[T]:
    """Keep rows where any of `fields` contains `query`, then sort stably."""
    needle = (query or "").strip().lower()
    rows = list(items)
    if needle and fields:
        rows = [
            row
            for row in rows
            if any(needle in str(field_value(row, f) or "").lower() for f in fields)
        ]
    if sort is not None:
        rows.sort(key=lambda row: _sort_key(field_value(row, sort.column)), reverse=sort.descending)
    return rows


def toggle_sort(current: SortState, column: str) -> SortState:
    """Clicking the active column flips direction; a new column sorts ascending."""
    if current.column == column:
        return SortState(column=column, descending=not current.descending)
    return SortState(column=column)


def parse_sort(column: str | None, direction: str | None, *, allowed: Sequence[str], default: str) -> SortState:
    """Build a SortState from query parameters, rejecting unknown columns."""
    col = (column or default).strip()
    if col not in allowed:
        raise ValueError("invalid_sort")
    dir_value = (direction or "ascending").strip().lower()
    if dir_value in ("asc", "ascending"):
        return SortState(column=col)
    if dir_value in ("desc", "descending"):
        return SortState(column=col, descending=True)
    raise ValueError("invalid_direction")

"""
Admin dashboard components.

The dashboard lists widgets, comments, categories and FAQs as sortable,
filterable tables. Sorting and filtering happen server-side; header links
carry the next `sort`/`direction` pair so the page works without scripts and
HTMX only swaps the table fragment.
"""

from typing import Any, Dict, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

from widgetstore.catalog.listing import SortState, field_value, toggle_sort

from .base import Component

Column = Tuple[str, str]


class SortableHeader(Component):
    def __init__(self, column: str, label: str, *, base_path: str, sort: SortState, query: str = "") -> None:
        self.column = column
        self.label = label
        self.base_path = base_path
        self.sort = sort
        self.query = query

    def render(self) -> str:
        nxt = toggle_sort(self.sort, self.column)
        params = {"sort": nxt.column, "direction": nxt.direction}
        if self.query:
            params["q"] = self.query
        href = f"{self.base_path}?{urlencode(params)}"
        active = self.sort.column == self.column
        aria_sort = self.sort.direction if active else "none"
        indicator = ""
        if active:
            indicator = " &#9660;" if self.sort.descending else " &#9650;"
        attrs = self.attributes(
            href=href,
            hx_get=href,
            hx_target="closest .admin-table",
            hx_swap="outerHTML",
            class_=self.classes("sort-link", active=active),
        )
        return f'<th scope="col" aria-sort="{aria_sort}"><a {attrs}>{self.escape(self.label)}{indicator}</a></th>'


class AdminTable(Component):
    """
    Args:
        name: Table key (widgets, comments, categories, faqs); used in ids and URLs.
        title: Visible caption.
        columns: (field, label) pairs.
        rows: Dataclasses or dicts, already filtered and sorted.
        sort: Active sort state (drives header links and aria-sort).
        query: Active filter text.
        deletable: Render a delete button per row (hx-delete to the admin API).
        editable: Render an edit link per row (opens the editor form).
    """

    def __init__(
        self,
        name: str,
        title: str,
        columns: Sequence[Column],
        rows: Sequence[Any],
        *,
        sort: SortState,
        query: str = "",
        deletable: bool = False,
        editable: bool = False,
    ) -> None:
        self.name = name
        self.title = title
        self.columns = list(columns)
        self.rows = list(rows)
        self.sort = sort
        self.query = query
        self.deletable = deletable
        self.editable = editable

    @property
    def base_path(self) -> str:
        return f"/admin/{self.name}"

    @property
    def has_actions(self) -> bool:
        return self.deletable or self.editable

    def _cell(self, value: Any) -> str:
        text = "" if value is None else str(value)
        if len(text) > 120:
            text = text[:117] + "..."
        return f"<td>{self.escape(text)}</td>"

    def _row(self, row: Any) -> str:
        row_id = field_value(row, "id")
        cells = "".join(self._cell(field_value(row, key)) for key, _ in self.columns)
        actions = ""
        if self.editable and row_id:
            edit_href = f"{self.base_path}/{row_id}/edit"
            actions += f'<a class="btn btn-secondary btn-sm" href="{self.escape(edit_href)}">Edit</a>'
        if self.deletable and row_id:
            attrs = self.attributes(
                type="button",
                class_="btn btn-danger btn-sm",
                hx_delete=f"/api/admin/{self.name}/{row_id}",
                hx_confirm="Delete this entry?",
                hx_target="closest tr",
                hx_swap="outerHTML",
            )
            actions += f" <button {attrs}>Delete</button>"
        if self.has_actions:
            cells += f"<td>{actions.strip()}</td>"
        return f'<tr data-id="{self.escape(row_id)}">{cells}</tr>'

    def render(self) -> str:
        headers = "".join(
            SortableHeader(key, label, base_path=self.base_path, sort=self.sort, query=self.query).render()
            for key, label in self.columns
        )
        if self.has_actions:
            headers += '<th scope="col"><span class="visually-hidden">Actions</span></th>'
        if self.rows:
            body = "".join(self._row(r) for r in self.rows)
        else:
            span = len(self.columns) + (1 if self.has_actions else 0)
            body = f'<tr><td colspan="{span}" class="text-muted">No entries.</td></tr>'
        search = (
            f'<form class="admin-filter" method="get" action="{self.base_path}" '
            f'hx-get="{self.base_path}" hx-target="closest .admin-table" hx-swap="outerHTML">'
            f'<input type="hidden" name="sort" value="{self.escape(self.sort.column)}">'
            f'<input type="hidden" name="direction" value="{self.escape(self.sort.direction)}">'
            f'<input type="search" name="q" value="{self.escape(self.query)}" '
            f'placeholder="Filter {self.escape(self.title.lower())}..." aria-label="Filter {self.escape(self.title)}">'
            "</form>"
        )
        return (
            f'<section class="admin-table" id="admin-{self.escape(self.name)}">'
            f"<h2>{self.escape(self.title)}</h2>"
            f"{search}"
            f"<table><thead><tr>{headers}</tr></thead><tbody>{body}</tbody></table>"
            "</section>"
        )


class AdminDashboard(Component):
    """Tab strip, an optional editor form and the active admin table (or the settings form)."""

    TABS: List[Column] = [
        ("widgets", "Widgets"),
        ("comments", "Comments"),
        ("categories", "Categories"),
        ("faqs", "FAQs"),
        ("settings", "Settings"),
    ]

    def __init__(
        self,
        active: str,
        content_html: str,
        *,
        editor_html: str = "",
        counts: Optional[Dict[str, int]] = None,
    ) -> None:
        self.active = active
        self.content_html = content_html
        self.editor_html = editor_html
        self.counts = counts or {}

    def render(self) -> str:
        tabs = []
        for key, label in self.TABS:
            is_active = key == self.active
            count = self.counts.get(key)
            badge = f' <span class="badge">{count}</span>' if count is not None else ""
            attrs = self.attributes(
                href=f"/admin/{key}",
                hx_get=f"/admin/{key}",
                hx_target="#main-content",
                hx_push_url="true",
                class_=self.classes("tab", active=is_active),
                **self.aria(current="page" if is_active else None),
            )
            tabs.append(f"<a {attrs}>{self.escape(label)}{badge}</a>")
        return (
            '<div class="admin-dashboard">'
            "<h1>Admin Dashboard</h1>"
            f'<nav class="admin-tabs" aria-label="Admin sections">{"".join(tabs)}</nav>'
            f"{self.editor_html}"
            f"{self.content_html}"
            "</div>"
        )

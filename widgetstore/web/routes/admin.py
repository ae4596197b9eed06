"""
Admin dashboard and admin API.

Why:
    Store staff manage FAQs, categories, site settings and moderate comments.
    Widgets are static catalogue data and are listed read-only.

Permissions:
    None inside the app. The router is only mounted when
    WIDGETSTORE_ENABLE_ADMIN is true, and production refuses to start with it
    enabled; the panel is meant to run behind a protected deployment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import BaseModel, ValidationError
from pydantic.functional_validators import field_validator

from widgetstore.catalog import ALL_WIDGETS
from widgetstore.catalog.listing import SortState, filter_and_sort, parse_sort
from widgetstore.storefront import SiteSettings

from .. import wiring
from ..components import AdminDashboard, AdminTable, CategoryForm, FaqForm, NotFoundPage, SiteSettingsForm
from ..responses import (
    PRIVATE,
    bad_request,
    fragment_response,
    json_private,
    layout_response,
    not_found,
    private_error,
)
from ..security import csrf_guard

admin_router = APIRouter(tags=["Admin"])
logger = logging.getLogger("widgetstore.web.admin")


@dataclass(frozen=True)
class TableSpec:
    title: str
    columns: Sequence[tuple]
    search_fields: Sequence[str]
    default_sort: str
    default_direction: str
    rows: Callable[[], List[Any]]
    deletable: bool = False
    editable: bool = False
    serialize: Callable[[Any], dict] = lambda row: row.to_dict()

    @property
    def sortable(self) -> List[str]:
        return [key for key, _ in self.columns]


def _widget_row(widget) -> dict:
    return {**widget.summary(), "tags": ", ".join(widget.tags)}


TABLES: Dict[str, TableSpec] = {
    "widgets": TableSpec(
        title="Widgets",
        columns=[("id", "ID"), ("name", "Name"), ("category", "Category"), ("tags", "Tags")],
        search_fields=["name", "description", "category", "tags"],
        default_sort="name",
        default_direction="ascending",
        rows=lambda: [_widget_row(w) for w in ALL_WIDGETS],
        serialize=lambda row: row,
    ),
    "comments": TableSpec(
        title="Comments",
        columns=[("created_at", "Date"), ("widget_id", "Widget"), ("author", "Author"), ("rating", "Rating"), ("text", "Comment")],
        search_fields=["author", "text", "widget_id"],
        default_sort="created_at",
        default_direction="descending",
        rows=lambda: wiring.comments_service().list_all(),
        deletable=True,
    ),
    "categories": TableSpec(
        title="Categories",
        columns=[("name", "Name")],
        search_fields=["name"],
        default_sort="name",
        default_direction="ascending",
        rows=lambda: wiring.category_service().list(),
        deletable=True,
        editable=True,
    ),
    "faqs": TableSpec(
        title="FAQs",
        columns=[("question", "Question"), ("answer", "Answer")],
        search_fields=["question", "answer"],
        default_sort="question",
        default_direction="ascending",
        rows=lambda: wiring.faq_service().list(),
        deletable=True,
        editable=True,
    ),
}


def _sorted_rows(entry: TableSpec, q: str, sort: Optional[str], direction: Optional[str]) -> tuple[SortState, List[Any]]:
    state = parse_sort(sort, direction or entry.default_direction, allowed=entry.sortable, default=entry.default_sort)
    return state, filter_and_sort(entry.rows(), query=q, fields=entry.search_fields, sort=state)


def _table(name: str, q: str, sort: Optional[str], direction: Optional[str]) -> AdminTable:
    entry = TABLES[name]
    state, rows = _sorted_rows(entry, q, sort, direction)
    return AdminTable(
        name,
        entry.title,
        entry.columns,
        rows,
        sort=state,
        query=q,
        deletable=entry.deletable,
        editable=entry.editable,
    )


# --- Dashboard pages ------------------------------------------------------------

FAQ_FORM_ERRORS = {
    "invalid_question": ("question", "Please enter a question (up to 300 characters)."),
    "invalid_answer": ("answer", "Please enter an answer (up to 5000 characters)."),
}
CATEGORY_FORM_ERRORS = {
    "invalid_name": ("name", "Please enter a name (up to 60 characters)."),
    "reserved_name": ("name", '"All" is reserved for the unfiltered catalogue.'),
    "duplicate_name": ("name", "A category with this name already exists."),
}
URL_FORM_ERROR = "Please enter a full URL starting with http:// or https://."


def _field_errors(exc: ValueError, messages: Dict[str, tuple]) -> Dict[str, str]:
    field, message = messages.get(str(exc), ("form", "Please check your input."))
    return {field: message}


async def _form_values(request: Request, names: Sequence[str]) -> Dict[str, str]:
    form = await request.form()
    return {name: str(form.get(name) or "") for name in names}


def _editor(table: str) -> str:
    """Empty create form shown above the editable tables."""
    if table == "faqs":
        return FaqForm().render()
    if table == "categories":
        return CategoryForm().render()
    return ""


def _not_found_page(request: Request):
    return layout_response(request, "Not Found", NotFoundPage().render(), status_code=404)


def _dashboard(request: Request, active: str, content_html: str, *, editor_html: str = "", status_code: int = 200):
    counts = {name: len(entry.rows()) for name, entry in TABLES.items()}
    dashboard = AdminDashboard(active, content_html, editor_html=editor_html, counts=counts)
    return layout_response(request, "Admin", dashboard.render(), status_code=status_code, headers=dict(PRIVATE))


def _table_page(request: Request, table: str, *, editor_html: Optional[str] = None, status_code: int = 200):
    component = _table(table, "", None, None)
    if editor_html is None:
        editor_html = _editor(table)
    return _dashboard(request, table, component.render(), editor_html=editor_html, status_code=status_code)


@admin_router.get("/admin", response_class=HTMLResponse)
async def admin_dashboard(request: Request, q: str = "", sort: str | None = None, direction: str | None = None):
    return await admin_table_page(request, "widgets", q=q, sort=sort, direction=direction)


# Registered before `/admin/{table}` so "settings" is not read as a table name.
@admin_router.get("/admin/settings", response_class=HTMLResponse)
async def admin_settings_page(request: Request, saved: bool = False):
    current = wiring.site_settings_service().get()
    form = SiteSettingsForm(
        values=current.payload() if current else {},
        status_message="Settings saved." if saved else None,
    )
    return _dashboard(request, "settings", form.render())


@admin_router.post("/admin/settings", response_class=HTMLResponse)
async def admin_settings_submit(request: Request):
    """
    Save the site settings from the dashboard form.

    Behavior:
        - Creates the settings document on first save, updates it afterwards.
        - 303 back to the settings tab on success; 400 with field errors when
          a link is not an http(s) URL.
    """
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    values = await _form_values(request, tuple(SiteSettingsPayload.model_fields))
    try:
        payload = SiteSettingsPayload(**values)
    except ValidationError as exc:
        errors = {str(err["loc"][0]): URL_FORM_ERROR for err in exc.errors() if err.get("loc")}
        form = SiteSettingsForm(values=values, errors=errors)
        return _dashboard(request, "settings", form.render(), status_code=400)
    service = wiring.site_settings_service()
    current = service.get()
    if current is None:
        settings = service.create(payload.to_settings())
    else:
        settings = service.update(current.id, payload.to_settings())
    logger.info("admin.site_settings_saved id=%s via=form", settings.id)
    return RedirectResponse(url="/admin/settings?saved=1", status_code=303)


@admin_router.get("/admin/{table}", response_class=HTMLResponse)
async def admin_table_page(request: Request, table: str, q: str = "", sort: str | None = None, direction: str | None = None):
    if table not in TABLES:
        return _not_found_page(request)
    try:
        component = _table(table, q, sort, direction)
    except ValueError as exc:
        return bad_request(str(exc))
    # Header links and the filter box swap only the table.
    if request.headers.get("HX-Request") and (request.headers.get("HX-Target") or "").startswith("admin-"):
        return fragment_response(component.render(), headers=dict(PRIVATE))
    return _dashboard(request, table, component.render(), editor_html=_editor(table))


@admin_router.get("/admin/{table}/{item_id}/edit", response_class=HTMLResponse)
async def admin_edit_page(request: Request, table: str, item_id: str):
    try:
        if table == "faqs":
            faq = wiring.faq_service().get(item_id)
            editor = FaqForm(faq_id=faq.id, values=faq.to_dict())
        elif table == "categories":
            category = wiring.category_service().get(item_id)
            editor = CategoryForm(category_id=category.id, values=category.to_dict())
        else:
            return _not_found_page(request)
    except LookupError:
        return _not_found_page(request)
    return _table_page(request, table, editor_html=editor.render())


@admin_router.post("/admin/faqs", response_class=HTMLResponse)
async def admin_create_faq_form(request: Request):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    values = await _form_values(request, ("question", "answer"))
    try:
        item = wiring.faq_service().create(**values)
    except ValueError as exc:
        form = FaqForm(values=values, errors=_field_errors(exc, FAQ_FORM_ERRORS))
        return _table_page(request, "faqs", editor_html=form.render(), status_code=400)
    logger.info("admin.faq_created id=%s via=form", item.id)
    return RedirectResponse(url="/admin/faqs", status_code=303)


@admin_router.post("/admin/faqs/{faq_id}", response_class=HTMLResponse)
async def admin_update_faq_form(request: Request, faq_id: str):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    values = await _form_values(request, ("question", "answer"))
    try:
        wiring.faq_service().update(faq_id, **values)
    except LookupError:
        return _not_found_page(request)
    except ValueError as exc:
        form = FaqForm(faq_id=faq_id, values=values, errors=_field_errors(exc, FAQ_FORM_ERRORS))
        return _table_page(request, "faqs", editor_html=form.render(), status_code=400)
    logger.info("admin.faq_updated id=%s via=form", faq_id)
    return RedirectResponse(url="/admin/faqs", status_code=303)


@admin_router.post("/admin/categories", response_class=HTMLResponse)
async def admin_create_category_form(request: Request):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    values = await _form_values(request, ("name",))
    try:
        item = wiring.category_service().create(name=values["name"])
    except ValueError as exc:
        form = CategoryForm(values=values, errors=_field_errors(exc, CATEGORY_FORM_ERRORS))
        return _table_page(request, "categories", editor_html=form.render(), status_code=400)
    logger.info("admin.category_created id=%s via=form", item.id)
    return RedirectResponse(url="/admin/categories", status_code=303)


@admin_router.post("/admin/categories/{category_id}", response_class=HTMLResponse)
async def admin_update_category_form(request: Request, category_id: str):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    values = await _form_values(request, ("name",))
    try:
        wiring.category_service().update(category_id, name=values["name"])
    except LookupError:
        return _not_found_page(request)
    except ValueError as exc:
        form = CategoryForm(category_id=category_id, values=values, errors=_field_errors(exc, CATEGORY_FORM_ERRORS))
        return _table_page(request, "categories", editor_html=form.render(), status_code=400)
    logger.info("admin.category_updated id=%s via=form", category_id)
    return RedirectResponse(url="/admin/categories", status_code=303)


# --- Listing API ----------------------------------------------------------------


@admin_router.get("/api/admin/{table}")
async def admin_list_api(table: str, q: str = "", sort: str | None = None, direction: str | None = None):
    """
    List one admin table with filter and sort.

    Behavior:
        - 200 with `{"items": [...], "sort": col, "direction": "ascending"|"descending"}`
        - 400 `invalid_sort` | `invalid_direction`
        - 404 `unknown_table`
    """
    entry = TABLES.get(table)
    if entry is None:
        return not_found("unknown_table")
    try:
        state, rows = _sorted_rows(entry, q, sort, direction)
    except ValueError as exc:
        return bad_request(str(exc))
    return json_private(
        {"items": [entry.serialize(r) for r in rows], "sort": state.column, "direction": state.direction}
    )


# --- Payloads -------------------------------------------------------------------


class FaqPayload(BaseModel):
    question: str = ""
    answer: str = ""


class CategoryPayload(BaseModel):
    name: str = ""


class SiteSettingsPayload(BaseModel):
    email: str = ""
    address: str = ""
    phone: str = ""
    website: str = ""
    facebook: str = ""
    twitter: str = ""
    github: str = ""
    linkedin: str = ""

    @field_validator("website", "facebook", "twitter", "github", "linkedin")
    @classmethod
    def _http_url(cls, v: str) -> str:
        v = (v or "").strip()
        if v and not v.lower().startswith(("http://", "https://")):
            raise ValueError("invalid_url")
        return v

    @field_validator("email", "address", "phone")
    @classmethod
    def _strip(cls, v: str) -> str:
        return (v or "").strip()

    def to_settings(self) -> SiteSettings:
        return SiteSettings(**self.model_dump())


def _deleted(request: Request) -> Response:
    # HTMX removes the row by swapping in the empty body.
    if request.headers.get("HX-Request"):
        return Response(status_code=200, headers=dict(PRIVATE))
    return Response(status_code=204, headers=dict(PRIVATE))


# --- FAQs -----------------------------------------------------------------------


@admin_router.post("/api/admin/faqs")
async def admin_create_faq(request: Request, payload: FaqPayload):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        item = wiring.faq_service().create(question=payload.question, answer=payload.answer)
    except ValueError as exc:
        return bad_request(str(exc))
    logger.info("admin.faq_created id=%s", item.id)
    return json_private(item.to_dict(), status_code=201)


@admin_router.put("/api/admin/faqs/{faq_id}")
async def admin_update_faq(request: Request, faq_id: str, payload: FaqPayload):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        item = wiring.faq_service().update(faq_id, question=payload.question, answer=payload.answer)
    except LookupError:
        return not_found("faq_not_found")
    except ValueError as exc:
        return bad_request(str(exc))
    logger.info("admin.faq_updated id=%s", faq_id)
    return json_private(item.to_dict())


@admin_router.delete("/api/admin/faqs/{faq_id}")
async def admin_delete_faq(request: Request, faq_id: str):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        wiring.faq_service().delete(faq_id)
    except LookupError:
        return not_found("faq_not_found")
    logger.info("admin.faq_deleted id=%s", faq_id)
    return _deleted(request)


# --- Categories -----------------------------------------------------------------


@admin_router.post("/api/admin/categories")
async def admin_create_category(request: Request, payload: CategoryPayload):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        item = wiring.category_service().create(name=payload.name)
    except ValueError as exc:
        return bad_request(str(exc))
    logger.info("admin.category_created id=%s", item.id)
    return json_private(item.to_dict(), status_code=201)


@admin_router.put("/api/admin/categories/{category_id}")
async def admin_update_category(request: Request, category_id: str, payload: CategoryPayload):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        item = wiring.category_service().update(category_id, name=payload.name)
    except LookupError:
        return not_found("category_not_found")
    except ValueError as exc:
        return bad_request(str(exc))
    logger.info("admin.category_updated id=%s", category_id)
    return json_private(item.to_dict())


@admin_router.delete("/api/admin/categories/{category_id}")
async def admin_delete_category(request: Request, category_id: str):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        wiring.category_service().delete(category_id)
    except LookupError:
        return not_found("category_not_found")
    logger.info("admin.category_deleted id=%s", category_id)
    return _deleted(request)


# --- Comments (moderation) ------------------------------------------------------


@admin_router.delete("/api/admin/comments/{comment_id}")
async def admin_delete_comment(request: Request, comment_id: str):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        wiring.comments_service().delete(comment_id)
    except LookupError:
        return not_found("comment_not_found")
    logger.info("admin.comment_deleted id=%s", comment_id)
    return _deleted(request)


# --- Site settings --------------------------------------------------------------


@admin_router.post("/api/admin/site-settings")
async def admin_create_site_settings(request: Request, payload: SiteSettingsPayload):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        settings = wiring.site_settings_service().create(payload.to_settings())
    except ValueError as exc:
        # Only one settings document exists; updates go through PUT.
        return private_error("conflict", str(exc), status_code=409)
    logger.info("admin.site_settings_created id=%s", settings.id)
    return json_private(settings.to_dict(), status_code=201)


@admin_router.put("/api/admin/site-settings/{document_id}")
async def admin_update_site_settings(request: Request, document_id: str, payload: SiteSettingsPayload):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        settings = wiring.site_settings_service().update(document_id, payload.to_settings())
    except LookupError:
        return not_found("settings_not_found")
    logger.info("admin.site_settings_updated id=%s", document_id)
    return json_private(settings.to_dict())

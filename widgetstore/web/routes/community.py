"""
Community routes: widget comments and the Markdown preview.

Why:
    Comments are the only user-written content on public pages. They are
    stored as Markdown source and rendered through the safe renderer on every
    read, never stored as HTML.

Notes:
    - Every write enforces the same-origin check.
    - Logs carry ids and lengths only, never author names or comment text.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel, Field
from pydantic.functional_validators import field_validator

from widgetstore.catalog import get_widget
from widgetstore.store.ports import DocumentStoreError

from .. import wiring
from ..components import CommentsSection, NotFoundPage, WidgetDetailPage
from ..components.markdown import render_markdown_safe
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

community_router = APIRouter(tags=["Community"])
logger = logging.getLogger("widgetstore.web.community")

MAX_PREVIEW_LENGTH = 5000

FORM_ERRORS = {
    "invalid_author": "Please enter your name using letters and spaces only.",
    "invalid_text": "Please write a comment (up to 2000 characters).",
    "invalid_rating": "Please choose a rating from 1 to 5 stars.",
}


class CommentCreatePayload(BaseModel):
    author: str = ""
    text: str = ""
    # Validated by the service so the error detail names the field.
    rating: Any = None

    @field_validator("author", "text", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        return "" if v is None else v


class MarkdownPreviewPayload(BaseModel):
    text: str = Field(default="", max_length=MAX_PREVIEW_LENGTH)


@community_router.get("/api/widgets/{widget_id}/comments")
async def list_comments_api(widget_id: str):
    """
    List comments for a widget, newest first, with the rating summary.

    Behavior:
        - 200 with `{"comments": [...], "rating": {...}}`
        - 404 when the widget does not exist
    """
    if get_widget(widget_id) is None:
        return not_found("widget_not_found")
    service = wiring.comments_service()
    comments = service.list_for_widget(widget_id)
    summary = service.rating_for_widget(widget_id)
    return json_private(
        {
            "comments": [c.to_dict() for c in comments],
            "rating": {"average": summary.average, "count": summary.count, "stars": summary.stars},
        }
    )


@community_router.post("/api/widgets/{widget_id}/comments")
async def create_comment_api(request: Request, widget_id: str, payload: CommentCreatePayload):
    """
    Create a comment.

    Behavior:
        - 201 with the stored comment
        - 400 `invalid_author` | `invalid_text` | `invalid_rating`
        - 403 on cross-origin requests
        - 404 when the widget does not exist
    """
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    try:
        comment = wiring.comments_service().create(
            widget_id, author=payload.author, text=payload.text, rating=payload.rating
        )
    except LookupError as exc:
        return not_found(str(exc))
    except ValueError as exc:
        return bad_request(str(exc))
    except DocumentStoreError as exc:
        logger.warning("comments.store_failed widget_id=%s reason=%s", widget_id, exc.__class__.__name__)
        return private_error("service_unavailable", "store_unavailable", status_code=503)
    logger.info("comments.created widget_id=%s rating=%s text_len=%s", widget_id, comment.rating, len(comment.text))
    return json_private(comment.to_dict(), status_code=201)


def _section(widget_id: str, *, form_values: Optional[dict] = None, form_error: Optional[str] = None) -> CommentsSection:
    service = wiring.comments_service()
    return CommentsSection(
        widget_id,
        service.list_for_widget(widget_id),
        service.rating_for_widget(widget_id),
        form_values=form_values,
        form_error=form_error,
    )


@community_router.post("/widgets/{widget_id}/comments", response_class=HTMLResponse)
async def create_comment_form(request: Request, widget_id: str):
    """
    Form post from the detail page.

    Behavior:
        - HTMX: returns the re-rendered comments section (400 on invalid input).
        - Plain form: 303 redirect back to the comments on success, full page
          with the error otherwise.
    """
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    widget = get_widget(widget_id)
    if widget is None:
        return layout_response(request, "Not Found", NotFoundPage("This widget does not exist.").render(), status_code=404)

    form = await request.form()
    values = {
        "author": str(form.get("author") or ""),
        "text": str(form.get("text") or ""),
        "rating": str(form.get("rating") or ""),
    }
    is_htmx = bool(request.headers.get("HX-Request"))
    try:
        wiring.comments_service().create(widget_id, author=values["author"], text=values["text"], rating=values["rating"])
    except ValueError as exc:
        message = FORM_ERRORS.get(str(exc), "Please check your input.")
        section = _section(widget_id, form_values=values, form_error=message)
        if is_htmx:
            return fragment_response(section.render(), status_code=400, headers=dict(PRIVATE))
        page = WidgetDetailPage(widget, comments_html=section.render())
        return layout_response(request, widget.name, page.render(), status_code=400, headers=dict(PRIVATE))

    logger.info("comments.created widget_id=%s via=form", widget_id)
    if is_htmx:
        return fragment_response(_section(widget_id).render(), headers=dict(PRIVATE))
    return RedirectResponse(url=f"/widgets/{widget_id}#comments", status_code=303)


@community_router.post("/api/markdown/preview")
async def markdown_preview(request: Request, payload: MarkdownPreviewPayload):
    """Render comment Markdown exactly like the published comment will look."""
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    return json_private({"html": render_markdown_safe(payload.text)})

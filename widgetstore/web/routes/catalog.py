"""
Catalogue pages and read-only catalogue API.

Notes:
    - The catalogue itself is static data; only the category list and the
      comments come from the document store.
    - HTMX search requests (target `widget-results`) receive only the grid.
"""

from __future__ import annotations

import logging
from random import choice
from typing import List
from urllib.parse import urlencode

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from widgetstore.catalog import (
    ALL_CATEGORIES,
    ALL_WIDGETS,
    all_tags,
    featured_widgets,
    get_widget,
    resolve_category,
    search_widgets,
    widget_of_the_day,
)
from widgetstore.store.ports import DocumentStoreError

from .. import wiring
from ..components import CataloguePage, CommentsSection, NotFoundPage, WidgetDetailPage
from ..responses import PRIVATE, fragment_response, json_public, layout_response, not_found

catalog_router = APIRouter(tags=["Catalogue"])
logger = logging.getLogger("widgetstore.web.catalog")


def _category_names() -> List[str]:
    """Admin-managed categories, or the categories used by the catalogue when none exist."""
    try:
        names = wiring.category_service().names()
    except DocumentStoreError as exc:
        logger.warning("catalog.categories_unavailable reason=%s", exc.__class__.__name__)
        names = []
    if names:
        return names
    return list(dict.fromkeys(w.category for w in ALL_WIDGETS))


def _active_category(query: str, category: str | None, names: List[str]) -> str:
    if category:
        return category.strip() or ALL_CATEGORIES
    return resolve_category(query, names)


def _search_query(query: str, category: str) -> str:
    # A search term that selected a category is not also used as a text filter.
    if category != ALL_CATEGORIES and query.strip().lower() == category.lower():
        return ""
    return query


@catalog_router.get("/", response_class=HTMLResponse)
async def catalogue_page(request: Request, q: str = "", category: str | None = None, random: bool = False):
    if random:
        # "Surprise me": search all categories for a random catalogue tag.
        tags = all_tags()
        if not tags:
            return RedirectResponse(url="/", status_code=303)
        tag = choice(tags)
        logger.info("catalog.random_search tag=%s", tag)
        return RedirectResponse(url=f"/?{urlencode({'q': tag, 'category': ALL_CATEGORIES})}", status_code=303)
    names = _category_names()
    active = _active_category(q, category, names)
    results = search_widgets(ALL_WIDGETS, query=_search_query(q, active), category=active)
    page = CataloguePage(
        widgets=results,
        featured=featured_widgets(),
        pick=widget_of_the_day(),
        query=q,
        category=active,
        categories=names,
    )
    if request.headers.get("HX-Request") and request.headers.get("HX-Target") == "widget-results":
        return fragment_response(page.render_results())
    return layout_response(request, "Discover Widgets", page.render())


@catalog_router.get("/widgets/{widget_id}", response_class=HTMLResponse)
async def widget_detail_page(request: Request, widget_id: str):
    widget = get_widget(widget_id)
    if widget is None:
        return layout_response(
            request,
            "Not Found",
            NotFoundPage("This widget does not exist.").render(),
            status_code=404,
        )
    service = wiring.comments_service()
    comments = service.list_for_widget(widget.id)
    section = CommentsSection(widget.id, comments, service.rating_for_widget(widget.id))
    page = WidgetDetailPage(widget, comments_html=section.render())
    # Comments change the page; keep it out of shared caches.
    return layout_response(request, widget.name, page.render(), headers=dict(PRIVATE))


@catalog_router.get("/api/widgets")
async def list_widgets_api(q: str = "", category: str = ALL_CATEGORIES):
    results = search_widgets(ALL_WIDGETS, query=q, category=category or ALL_CATEGORIES)
    return json_public([w.summary() for w in results])


@catalog_router.get("/api/widgets/{widget_id}")
async def get_widget_api(widget_id: str):
    widget = get_widget(widget_id)
    if widget is None:
        return not_found("widget_not_found")
    body = widget.summary()
    body.update(
        {
            "imageUrl": widget.image_url,
            "imageHint": widget.image_hint,
            "keyFeatures": list(widget.key_features),
            "whatsNew": widget.whats_new,
            "moreInfo": widget.more_info,
        }
    )
    return json_public(body)


@catalog_router.get("/api/widget-of-the-day")
async def widget_of_the_day_api():
    pick = widget_of_the_day()
    return json_public({"widget": pick.widget.summary(), "reason": pick.reason})

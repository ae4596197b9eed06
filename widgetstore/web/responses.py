"""
Response helpers shared by the route modules.

Why:
    Every JSON endpoint follows the same error contract and cache policy, and
    every HTML page goes through the HTMX-aware Layout with the site footer.
    Keeping these helpers here lets route modules stay thin.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse

from widgetstore.store.ports import DocumentStoreError

from . import wiring
from .components import Layout, SiteFooter

logger = logging.getLogger("widgetstore.web")

PRIVATE = {"Cache-Control": "private, no-store"}
PUBLIC_SHORT = {"Cache-Control": "public, max-age=60"}


def json_private(payload: Any, *, status_code: int = 200) -> JSONResponse:
    """JSON response kept out of shared caches (user-written or admin data)."""
    return JSONResponse(content=payload, status_code=status_code, headers=dict(PRIVATE))


def json_public(payload: Any, *, status_code: int = 200) -> JSONResponse:
    """JSON response for static catalogue data."""
    return JSONResponse(content=payload, status_code=status_code, headers=dict(PUBLIC_SHORT))


def private_error(error: str, detail: Optional[str] = None, *, status_code: int) -> JSONResponse:
    body = {"error": error}
    if detail is not None:
        body["detail"] = detail
    return JSONResponse(content=body, status_code=status_code, headers=dict(PRIVATE))


def bad_request(detail: str) -> JSONResponse:
    return private_error("bad_request", detail, status_code=400)


def not_found(detail: str = "not_found") -> JSONResponse:
    return private_error("not_found", detail, status_code=404)


def footer_html() -> str:
    """Render the footer from the settings document; empty footer on store errors."""
    try:
        settings = wiring.site_settings_service().get()
    except DocumentStoreError as exc:
        logger.warning("footer.settings_unavailable reason=%s", exc.__class__.__name__)
        settings = None
    return SiteFooter(settings.to_dict() if settings else None).render()


def layout_response(
    request: Request,
    title: str,
    content: str,
    *,
    status_code: int = 200,
    headers: dict[str, str] | None = None,
) -> HTMLResponse:
    """Render content inside the Layout with HTMX-aware semantics.

    Behavior:
        - Returns only the main fragment when `HX-Request` is present.
        - Otherwise renders the complete document with header navigation.
        - Merges caller-provided headers onto the response.
    """
    layout = Layout(
        title,
        content,
        current_path=request.url.path,
        show_admin_link=wiring.get_config().enable_admin,
        footer_html=footer_html(),
    )
    if request.headers.get("HX-Request"):
        body = layout.render_fragment()
    else:
        body = layout.render()
    response = HTMLResponse(content=body, status_code=status_code)
    if headers:
        for key, value in headers.items():
            response.headers[key] = value
    return response


def fragment_response(html: str, *, status_code: int = 200, headers: dict[str, str] | None = None) -> HTMLResponse:
    """Bare HTML fragment for HTMX swaps that target a single element."""
    response = HTMLResponse(content=html, status_code=status_code)
    if headers:
        for key, value in headers.items():
            response.headers[key] = value
    return response

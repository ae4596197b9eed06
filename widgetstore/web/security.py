"""
Shared web security helpers for routes.

Contains the same-origin (CSRF) check used by every write endpoint: comment
posting, the contact form, markdown preview and the admin API.
"""
from __future__ import annotations

import os
from typing import Optional, Tuple
from urllib.parse import urlparse

from fastapi import Request
from fastapi.responses import JSONResponse

Origin = Tuple[str, str, int]


def _default_port(scheme: str) -> int:
    return 443 if scheme == "https" else 80


def _parse_origin(url: str) -> Origin:
    p = urlparse(url)
    if not p.scheme or not p.hostname:
        raise ValueError("invalid_origin")
    scheme = p.scheme.lower()
    return scheme, p.hostname.lower(), int(p.port or _default_port(scheme))


def _server_origin(request: Request) -> Origin:
    """Origin the server is reachable under.

    X-Forwarded-* headers are honoured only when WIDGETSTORE_TRUST_PROXY=true.
    """
    trust_proxy = (os.getenv("WIDGETSTORE_TRUST_PROXY", "false") or "").lower() == "true"
    if trust_proxy:
        proto = (request.headers.get("x-forwarded-proto") or request.url.scheme or "http").split(",")[0]
        host = (request.headers.get("x-forwarded-host") or request.headers.get("host") or "").split(",")[0]
        scheme = proto.strip().lower() or "http"
        host = host.strip()
        if host:
            return _parse_origin(f"{scheme}://{host}")
    scheme = (request.url.scheme or "http").lower()
    host = (request.url.hostname or "").lower()
    return scheme, host, int(request.url.port or _default_port(scheme))


def is_same_origin(request: Request) -> bool:
    """Verify same-origin using Origin or Referer headers.

    Behavior:
    - If Origin is present, require exact scheme/host/port match with server.
    - Else if Referer is present, validate its origin similarly.
    - Else (no headers): allow, so non-browser clients keep working.
    """
    claimed = request.headers.get("origin") or request.headers.get("referer")
    if not claimed:
        return True
    try:
        return _parse_origin(claimed) == _server_origin(request)
    except ValueError:
        return False


def csrf_guard(request: Request) -> Optional[JSONResponse]:
    """Return a 403 response for cross-origin writes, else None."""
    if is_same_origin(request):
        return None
    return JSONResponse(
        {"error": "forbidden", "detail": "csrf_violation"},
        status_code=403,
        headers={"Cache-Control": "private, no-store"},
    )

"Widget Store web application"
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles


def _under_pytest() -> bool:
    return "pytest" in sys.modules or bool(os.getenv("PYTEST_CURRENT_TEST"))


def _should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via WIDGETSTORE_ENABLE_DOTENV (default true
      outside pytest).
    """
    if _under_pytest():
        return False
    flag = (os.getenv("WIDGETSTORE_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


from dotenv import load_dotenv

if _should_load_dotenv():
    load_dotenv()

if not _under_pytest():
    level_name = (os.getenv("LOG_LEVEL", "INFO") or "INFO").strip().upper() or "INFO"
    logging.basicConfig(level=level_name, format="%(levelname)s:%(name)s:%(message)s")

from widgetstore.web import config as _cfg

# Minimal production safety checks (fail-fast on insecure config)
_cfg.ensure_secure_config_on_startup()

from widgetstore.web import wiring
from widgetstore.web.routes import (
    admin_router,
    catalog_router,
    community_router,
    contact_router,
    faq_router,
    recommendations_router,
)

logger = logging.getLogger("widgetstore.web")

app = FastAPI(title="Widget Store", description="Widget catalogue with community comments", version="1.0.0")

# --- Static Files & Routers -----------------------------------------------------

static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(static_dir)), name="static")

app.include_router(catalog_router)
app.include_router(community_router)
app.include_router(faq_router)
app.include_router(contact_router)
app.include_router(recommendations_router)

if wiring.get_config().enable_admin:
    app.include_router(admin_router)
    logger.info("admin.enabled")


# --- Error contract & headers ---------------------------------------------------


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Map body/query validation failures to the 400 error contract."""
    fields = sorted({str(err.get("loc", ("",))[-1]) for err in exc.errors()})
    logger.info("request.invalid path=%s fields=%s", request.url.path, ",".join(fields))
    return JSONResponse(
        {"error": "bad_request", "detail": "invalid_input"},
        status_code=400,
        headers={"Cache-Control": "private, no-store"},
    )


@app.middleware("http")
async def security_headers(request: Request, call_next):
    response = await call_next(request)
    # htmx is served from unpkg; everything else is same-origin.
    csp = (
        "default-src 'self'; script-src 'self' https://unpkg.com; style-src 'self'; "
        "img-src 'self' https: data:; connect-src 'self'; frame-ancestors 'self';"
    )
    response.headers.setdefault("Content-Security-Policy", csp)
    response.headers.setdefault("X-Frame-Options", "SAMEORIGIN")
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    # Support Origin/Referer fallback in CSRF checks without leaking cross-site paths.
    response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
    response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")
    if wiring.get_config().environment in ("prod", "production"):
        response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
    return response


@app.get("/health")
async def health():
    return JSONResponse({"status": "healthy"}, headers={"Cache-Control": "no-store"})

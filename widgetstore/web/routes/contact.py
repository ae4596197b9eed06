"""
Contact page.

Behavior:
    - GET renders the empty form.
    - POST validates and forwards the message to the configured relay.
      Invalid input re-renders the form with field errors (400); a failed
      relay keeps the values and shows a soft error (502).
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from widgetstore.storefront import ContactDeliveryError

from .. import wiring
from ..components import ContactForm
from ..responses import PRIVATE, layout_response
from ..security import csrf_guard

contact_router = APIRouter(tags=["Contact"])
logger = logging.getLogger("widgetstore.web.contact")

SUCCESS_MESSAGE = "Thank you for your message! We will get back to you soon."
FAILURE_MESSAGE = "Sorry, your message could not be sent. Please try again later."


def _page(request: Request, form: ContactForm, *, status_code: int = 200):
    content = (
        "<h1>Contact Us</h1>"
        '<p class="text-muted">Questions about a widget or your account? Send us a message.</p>'
        f"{form.render()}"
    )
    return layout_response(request, "Contact", content, status_code=status_code, headers=dict(PRIVATE))


@contact_router.get("/contact", response_class=HTMLResponse)
async def contact_page(request: Request):
    return _page(request, ContactForm())


@contact_router.post("/contact", response_class=HTMLResponse)
async def contact_submit(request: Request):
    csrf = csrf_guard(request)
    if csrf:
        return csrf
    form = await request.form()
    values = {key: str(form.get(key) or "") for key in ("name", "email", "subject", "message")}
    try:
        wiring.contact_service().submit(**values)
    except ValueError as exc:
        errors = exc.args[0] if exc.args and isinstance(exc.args[0], dict) else {}
        logger.info("contact.invalid fields=%s", ",".join(sorted(errors)))
        return _page(request, ContactForm(values=values, errors=errors), status_code=400)
    except ContactDeliveryError as exc:
        logger.warning("contact.delivery_failed detail=%s", exc)
        return _page(
            request,
            ContactForm(values=values, status_message=FAILURE_MESSAGE, status_kind="error"),
            status_code=502,
        )
    return _page(request, ContactForm(status_message=SUCCESS_MESSAGE))

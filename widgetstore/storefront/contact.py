"""
Contact form handling: validation and delivery through a form relay.

Why:
    The store has no mail server of its own. Messages are forwarded to a
    hosted form relay (JSON POST); in development a logging relay keeps the
    flow working without network access.

Privacy:
    Never log message bodies or email addresses; only lengths and outcome.
"""
from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass
from typing import Dict, Protocol

import requests


logger = logging.getLogger("widgetstore.storefront.contact")

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class ContactMessage:
    name: str
    email: str
    subject: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def validate_contact(*, name: str, email: str, subject: str, message: str) -> ContactMessage:
    """Validate and normalise a contact submission.

    Raises:
        ValueError carrying a mapping of field name -> error message in
        `args[0]` when one or more fields are invalid.
    """
    name = (name or "").strip()
    email = (email or "").strip()
    subject = (subject or "").strip()
    message = (message or "").strip()

    errors: Dict[str, str] = {}
    if len(name) < 2:
        errors["name"] = "Name must be at least 2 characters."
    if not _EMAIL_PATTERN.match(email):
        errors["email"] = "Please enter a valid email address."
    if len(subject) < 5:
        errors["subject"] = "Subject must be at least 5 characters long."
    if len(message) < 10:
        errors["message"] = "Message must be at least 10 characters."
    elif len(message) > 500:
        errors["message"] = "Message must not be longer than 500 characters."
    if errors:
        raise ValueError(errors)
    return ContactMessage(name=name, email=email, subject=subject, message=message)


class ContactDeliveryError(Exception):
    """The relay rejected the message or could not be reached."""


class ContactRelayProtocol(Protocol):
    def deliver(self, message: ContactMessage) -> None: ...


class HttpContactRelay:
    """Post messages as JSON to a hosted form endpoint."""

    def __init__(self, url: str, *, timeout: int = 10) -> None:
        self.url = url
        self.timeout = timeout

    def deliver(self, message: ContactMessage) -> None:
        try:
            r = requests.post(
                self.url,
                json=message.to_dict(),
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("contact.relay_unreachable reason=%s", exc.__class__.__name__)
            raise ContactDeliveryError("relay_unreachable") from exc
        if not r.ok:
            detail = "relay_rejected"
            try:
                body = r.json()
                if isinstance(body, dict) and body.get("error"):
                    detail = str(body["error"])
            except ValueError:
                pass
            logger.warning("contact.relay_rejected status=%s", r.status_code)
            raise ContactDeliveryError(detail)


class LoggingContactRelay:
    """Development relay: records that a message arrived, nothing else."""

    def deliver(self, message: ContactMessage) -> None:
        logger.info(
            "contact.received subject_len=%s message_len=%s",
            len(message.subject),
            len(message.message),
        )


@dataclass
class ContactService:
    relay: ContactRelayProtocol

    def submit(self, *, name: str, email: str, subject: str, message: str) -> ContactMessage:
        msg = validate_contact(name=name, email=email, subject=subject, message=message)
        self.relay.deliver(msg)
        logger.info("contact.delivered")
        return msg

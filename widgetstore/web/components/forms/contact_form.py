"""
Contact form component.

Renders the four contact fields with server-side validation feedback. The
same component serves the empty form, the re-rendered form with errors and
the success banner after delivery.
"""

from typing import Dict, Optional

from ..base import Component
from .fields import SubmitButton, TextAreaField, TextInputField


class ContactForm(Component):
    def __init__(
        self,
        *,
        values: Optional[Dict[str, str]] = None,
        errors: Optional[Dict[str, str]] = None,
        status_message: Optional[str] = None,
        status_kind: str = "success",
    ) -> None:
        self.values = values or {}
        self.errors = errors or {}
        self.status_message = status_message
        self.status_kind = status_kind

    def render(self) -> str:
        v = self.values
        banner = ""
        if self.status_message:
            role = "status" if self.status_kind == "success" else "alert"
            banner = (
                f'<div class="alert alert-{self.escape(self.status_kind)}" role="{role}">'
                f"{self.escape(self.status_message)}</div>"
            )
        name_html = TextInputField("name", "Name", required=True, error_text=self.errors.get("name")).render(
            value=v.get("name", ""), autocomplete="name"
        )
        email_html = TextInputField("email", "Email", required=True, error_text=self.errors.get("email")).render(
            value=v.get("email", ""), input_type="email", autocomplete="email"
        )
        subject_html = TextInputField("subject", "Subject", required=True, error_text=self.errors.get("subject")).render(
            value=v.get("subject", "")
        )
        message_html = TextAreaField(
            "message",
            "Message",
            required=True,
            help_text="10 to 500 characters.",
            error_text=self.errors.get("message"),
        ).render(value=v.get("message", ""), rows=6, maxlength="500")
        return (
            '<form class="contact-form" method="post" action="/contact" '
            'hx-post="/contact" hx-target="#main-content">'
            f"{banner}{name_html}{email_html}{subject_html}{message_html}"
            f"{SubmitButton('Send Message').render()}"
            "</form>"
        )

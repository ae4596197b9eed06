"""
Admin editor forms.

Plain POST forms for FAQs, categories and the site settings. Each form is
rendered empty (create), prefilled (edit) or with the submitted values and
field errors after a failed save.
"""

from typing import Dict, Optional

from ..base import Component
from .fields import SubmitButton, TextAreaField, TextInputField

ANSWER_HINT = "Markdown: **bold**, _italic_, `code`, [links](https://example.com), lists, > quotes and | tables |."


class _EditorForm(Component):
    """Shared frame: heading, optional status banner, fields, save and cancel."""

    heading = ""

    def __init__(
        self,
        *,
        values: Optional[Dict[str, str]] = None,
        errors: Optional[Dict[str, str]] = None,
        status_message: Optional[str] = None,
    ) -> None:
        self.values = values or {}
        self.errors = errors or {}
        self.status_message = status_message

    def value(self, name: str) -> str:
        return self.values.get(name, "")

    def frame(self, *, action: str, fields_html: str, submit_label: str, cancel_href: Optional[str] = None) -> str:
        banner = ""
        if self.status_message:
            banner = f'<div class="alert alert-success" role="status">{self.escape(self.status_message)}</div>'
        cancel = ""
        if cancel_href:
            cancel = f' <a class="btn btn-ghost" href="{self.escape(cancel_href)}">Cancel</a>'
        attrs = self.attributes(class_="admin-editor", method="post", action=action, novalidate=True)
        return (
            f"<form {attrs}>"
            f"<h3>{self.escape(self.heading)}</h3>"
            f"{banner}{fields_html}"
            f"{SubmitButton(submit_label).render()}{cancel}"
            "</form>"
        )


class FaqForm(_EditorForm):
    def __init__(self, *, faq_id: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.faq_id = faq_id
        self.heading = "Edit question" if faq_id else "Add a question"

    def render(self) -> str:
        question = TextInputField(
            "question", "Question", required=True, error_text=self.errors.get("question")
        ).render(value=self.value("question"), maxlength="300")
        answer = TextAreaField(
            "answer", "Answer", required=True, help_text=ANSWER_HINT, error_text=self.errors.get("answer")
        ).render(value=self.value("answer"), rows=6)
        if self.faq_id:
            return self.frame(
                action=f"/admin/faqs/{self.faq_id}",
                fields_html=question + answer,
                submit_label="Save question",
                cancel_href="/admin/faqs",
            )
        return self.frame(action="/admin/faqs", fields_html=question + answer, submit_label="Add question")


class CategoryForm(_EditorForm):
    def __init__(self, *, category_id: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.category_id = category_id
        self.heading = "Rename category" if category_id else "Add a category"

    def render(self) -> str:
        name = TextInputField("name", "Name", required=True, error_text=self.errors.get("name")).render(
            value=self.value("name"), maxlength="60"
        )
        if self.category_id:
            return self.frame(
                action=f"/admin/categories/{self.category_id}",
                fields_html=name,
                submit_label="Save category",
                cancel_href="/admin/categories",
            )
        return self.frame(action="/admin/categories", fields_html=name, submit_label="Add category")


# (field, label, input type)
SETTINGS_FIELDS = (
    ("email", "Contact email", "email"),
    ("address", "Address", "text"),
    ("phone", "Phone", "tel"),
    ("website", "Website", "url"),
    ("facebook", "Facebook", "url"),
    ("twitter", "Twitter", "url"),
    ("github", "GitHub", "url"),
    ("linkedin", "LinkedIn", "url"),
)


class SiteSettingsForm(_EditorForm):
    """Contact details and social links shown in the site footer."""

    heading = "Site settings"

    def render(self) -> str:
        fields_html = "".join(
            TextInputField(
                name,
                label,
                help_text="Full URL starting with https://" if input_type == "url" else None,
                error_text=self.errors.get(name),
            ).render(value=self.value(name), input_type=input_type)
            for name, label, input_type in SETTINGS_FIELDS
        )
        return self.frame(action="/admin/settings", fields_html=fields_html, submit_label="Save settings")

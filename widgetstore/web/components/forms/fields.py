"""
Form field components.

Small wrappers that keep label, input, help and error markup consistent
across the contact form, the comment form and the admin editors.
"""

from typing import Optional, Sequence, Tuple

from ..base import Component


class FormField(Component):
    """Wrapper that renders label, input slot, help, and error text."""

    def __init__(
        self,
        field_id: str,
        label: str,
        *,
        required: bool = False,
        help_text: Optional[str] = None,
        error_text: Optional[str] = None,
    ) -> None:
        self.field_id = field_id
        self.label = label
        self.required = required
        self.help_text = help_text
        self.error_text = error_text

    def control_aria(self) -> dict:
        """ARIA attributes for the input: linked help/error text and the invalid state."""
        described = [
            f"{self.field_id}-{suffix}"
            for suffix, text in (("help", self.help_text), ("error", self.error_text))
            if text
        ]
        return self.aria(describedby=" ".join(described) or None, invalid=bool(self.error_text))

    def render(self, input_html: str) -> str:
        state_class = " form-field--error" if self.error_text else ""
        required_marker = '<span class="form-required" aria-hidden="true">*</span>' if self.required else ""
        help_html = (
            f'<p class="form-help" id="{self.field_id}-help">{self.escape(self.help_text)}</p>'
            if self.help_text
            else ""
        )
        error_html = (
            f'<p class="form-error" role="alert" id="{self.field_id}-error">{self.escape(self.error_text)}</p>'
            if self.error_text
            else ""
        )
        label_attrs = self.attributes(for_=self.field_id, class_="form-label")
        return (
            f'<div class="form-field{state_class}">'
            f"<label {label_attrs}>{self.escape(self.label)}{required_marker}</label>"
            f"{input_html}"
            f"{help_html}"
            f"{error_html}"
            "</div>"
        )


class TextInputField(FormField):
    """Single-line text input (text, email, url, ...)."""

    def render(self, *, value: str = "", input_type: str = "text", **attrs: object) -> str:  # type: ignore[override]
        input_attrs = self.attributes(
            id=self.field_id,
            name=self.field_id,
            type=input_type,
            value=value,
            required=self.required,
            **self.control_aria(),
            **attrs,
        )
        return super().render(f"<input {input_attrs}>")


class TextAreaField(FormField):
    """Convenience helper for textareas."""

    def render(self, value: str = "", rows: int = 5, **attrs: object) -> str:  # type: ignore[override]
        textarea_attrs = self.attributes(
            id=self.field_id,
            name=self.field_id,
            rows=str(rows),
            required=self.required,
            **self.control_aria(),
            **attrs,
        )
        return super().render(f"<textarea {textarea_attrs}>{self.escape(value)}</textarea>")


class SelectField(FormField):
    """Select box from (value, label) options."""

    def render(self, options: Sequence[Tuple[str, str]], selected: str = "", **attrs: object) -> str:  # type: ignore[override]
        option_html = "".join(
            f'<option value="{self.escape(value)}"{" selected" if value == selected else ""}>{self.escape(label)}</option>'
            for value, label in options
        )
        select_attrs = self.attributes(id=self.field_id, name=self.field_id, required=self.required, **self.control_aria(), **attrs)
        return super().render(f"<select {select_attrs}>{option_html}</select>")


class SubmitButton(Component):
    def __init__(self, label: str, *, name: Optional[str] = None) -> None:
        self.label = label
        self.name = name

    def render(self) -> str:
        attrs = self.attributes(type="submit", class_="btn btn-primary", name=self.name)
        return f"<button {attrs}>{self.escape(self.label)}</button>"

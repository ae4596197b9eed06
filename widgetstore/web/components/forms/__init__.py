from .fields import FormField, SelectField, SubmitButton, TextAreaField, TextInputField
from .contact_form import ContactForm
from .admin_forms import CategoryForm, FaqForm, SiteSettingsForm

__all__ = [
    "FormField",
    "SelectField",
    "SubmitButton",
    "TextAreaField",
    "TextInputField",
    "ContactForm",
    "CategoryForm",
    "FaqForm",
    "SiteSettingsForm",
]

"""
Component helpers: attribute rendering, ARIA states and form field wiring.
"""
from __future__ import annotations

from widgetstore.catalog.listing import SortState
from widgetstore.web.components import AdminDashboard, AdminTable, Component, SiteSettingsForm
from widgetstore.web.components.forms import TextInputField


def test_attributes_map_names_and_skip_empty_values():
    attrs = Component.attributes(class_="btn", for_="q", hx_get="/a?x=1&y=2", required=True, disabled=False, title=None)
    assert attrs == 'class="btn" for="q" hx-get="/a?x=1&amp;y=2" required'


def test_attributes_escape_quotes():
    assert Component.attributes(value='say "hi" <b>') == 'value="say &quot;hi&quot; &lt;b&gt;"'


def test_aria_uses_explicit_true_false():
    attrs = Component.attributes(**Component.aria(invalid=False, hidden=True, describedby=None, current="page"))
    assert attrs == 'aria-invalid="false" aria-hidden="true" aria-current="page"'


def test_classes_skip_empty_names_and_false_flags():
    assert Component.classes("tab", "", active=True, disabled=False) == "tab active"


def test_escape_none_and_values():
    assert Component.escape(None) == ""
    assert Component.escape("it's <x>") == "it&#x27;s &lt;x&gt;"


def test_text_field_links_help_and_error_text():
    html = TextInputField("email", "Email", help_text="We reply here.", error_text="Invalid.").render(value="a@b")
    assert 'aria-describedby="email-help email-error"' in html
    assert 'aria-invalid="true"' in html
    assert '<p class="form-error" role="alert" id="email-error">Invalid.</p>' in html


def test_text_field_without_hints_is_valid():
    html = TextInputField("name", "Name").render()
    assert "aria-describedby" not in html
    assert 'aria-invalid="false"' in html


def test_admin_table_edit_and_delete_actions():
    rows = [{"id": "f1", "question": "Q?", "answer": "A"}]
    table = AdminTable(
        "faqs",
        "FAQs",
        [("question", "Question"), ("answer", "Answer")],
        rows,
        sort=SortState("question"),
        editable=True,
        deletable=True,
    ).render()
    assert 'href="/admin/faqs/f1/edit"' in table
    assert 'hx-delete="/api/admin/faqs/f1"' in table
    assert table.count("<th scope=\"col\"") == 3


def test_admin_table_read_only_has_no_action_column():
    table = AdminTable("widgets", "Widgets", [("name", "Name")], [{"id": "1", "name": "Zenith"}], sort=SortState("name")).render()
    assert "/edit" not in table
    assert "Actions" not in table


def test_dashboard_marks_settings_tab_current():
    html = AdminDashboard("settings", SiteSettingsForm().render()).render()
    assert '<a href="/admin/settings"' in html
    assert 'aria-current="page"' in html
    assert html.count('aria-current="page"') == 1
    assert 'action="/admin/settings"' in html

"""
Storefront services over the in-memory document store: comments, FAQ,
categories and the site settings document.
"""
from __future__ import annotations

import pytest

from widgetstore.store.memory import InMemoryDocumentStore
from widgetstore.storefront import (
    CategoryService,
    CommentsService,
    FaqService,
    SiteSettings,
    SiteSettingsService,
)
from widgetstore.storefront.comments import validate_author, validate_rating


@pytest.fixture
def mem():
    return InMemoryDocumentStore()


# --- Comments -------------------------------------------------------------------


def test_comment_create_and_list_newest_first(mem):
    svc = CommentsService(mem)
    first = svc.create("1", author="Ada Lovelace", text="Great **widget**", rating=5)
    second = svc.create("1", author="Alan", text="Okay", rating="3")
    svc.create("2", author="Grace", text="Other widget", rating=4)

    listed = svc.list_for_widget("1")
    assert [c.id for c in listed] == [second.id, first.id]
    assert listed[1].text == "Great **widget**"
    assert listed[0].rating == 3
    assert first.to_dict()["widgetId"] == "1"
    assert len(svc.list_all()) == 3


def test_comment_rating_summary(mem):
    svc = CommentsService(mem)
    svc.create("3", author="Ann", text="a", rating=4)
    svc.create("3", author="Bob", text="b", rating=3)
    summary = svc.rating_for_widget("3")
    assert (summary.average, summary.count, summary.stars) == (3.5, 2, 4)


def test_comment_unknown_widget(mem):
    with pytest.raises(LookupError, match="widget_not_found"):
        CommentsService(mem).create("999", author="Ann", text="hi", rating=5)


@pytest.mark.parametrize("text", ["", "   ", "x" * 2001])
def test_comment_invalid_text(mem, text):
    with pytest.raises(ValueError, match="invalid_text"):
        CommentsService(mem).create("1", author="Ann", text=text, rating=5)


@pytest.mark.parametrize("name,expected", [("Jane Doe", "Jane Doe"), ("  José   Müller ", "José Müller")])
def test_validate_author_accepts_letters_and_spaces(name, expected):
    assert validate_author(name) == expected


@pytest.mark.parametrize("name", ["", "   ", "R2D2", "Jane_Doe", "<b>Eve</b>", "a" * 81])
def test_validate_author_rejects(name):
    with pytest.raises(ValueError, match="invalid_author"):
        validate_author(name)


@pytest.mark.parametrize("value,expected", [(1, 1), (5, 5), ("3", 3), (" 4 ", 4)])
def test_validate_rating_accepts(value, expected):
    assert validate_rating(value) == expected


@pytest.mark.parametrize("value", [0, 6, -1, True, 4.0, "4.5", "four", None])
def test_validate_rating_rejects(value):
    with pytest.raises(ValueError, match="invalid_rating"):
        validate_rating(value)


def test_comment_delete(mem):
    svc = CommentsService(mem)
    c = svc.create("1", author="Ann", text="bye", rating=2)
    svc.delete(c.id)
    assert svc.list_for_widget("1") == []
    with pytest.raises(LookupError):
        svc.delete(c.id)


def test_comments_use_configured_collection(mem):
    CommentsService(mem, collection="widget_comments").create("1", author="Ann", text="x", rating=1)
    assert len(mem.list_documents("widget_comments")) == 1
    assert mem.list_documents("comments") == []


# --- FAQ ------------------------------------------------------------------------


def test_faq_crud_and_search(mem):
    svc = FaqService(mem)
    a = svc.create(question="How do I install a widget?", answer="Click **Install**.")
    svc.create(question="Is it free?", answer="Most widgets are free.")

    assert [f.id for f in svc.list("INSTALL")] == [a.id]
    assert len(svc.list("free")) == 1
    assert len(svc.list()) == 2

    updated = svc.update(a.id, question="How to install?", answer="  Use the button.  ")
    assert updated.answer == "Use the button."
    svc.delete(a.id)
    assert [f.question for f in svc.list()] == ["Is it free?"]


def test_faq_validation(mem):
    svc = FaqService(mem)
    with pytest.raises(ValueError, match="invalid_question"):
        svc.create(question=" ", answer="x")
    with pytest.raises(ValueError, match="invalid_answer"):
        svc.create(question="Q?", answer="")
    with pytest.raises(LookupError):
        svc.update("missing", question="Q?", answer="A")


# --- Categories -----------------------------------------------------------------


def test_category_create_rename_delete(mem):
    svc = CategoryService(mem)
    music = svc.create(name="  Music ")
    svc.create(name="Health")
    assert svc.names() == ["Music", "Health"]

    renamed = svc.update(music.id, name="music")  # same entry, case change allowed
    assert renamed.name == "music"
    svc.delete(music.id)
    assert svc.names() == ["Health"]


def test_category_validation(mem):
    svc = CategoryService(mem)
    svc.create(name="Music")
    with pytest.raises(ValueError, match="duplicate_name"):
        svc.create(name="MUSIC")
    with pytest.raises(ValueError, match="reserved_name"):
        svc.create(name="all")
    with pytest.raises(ValueError, match="invalid_name"):
        svc.create(name="")


# --- Site settings --------------------------------------------------------------


def test_site_settings_single_document(mem):
    svc = SiteSettingsService(mem)
    assert svc.get() is None

    created = svc.create(SiteSettings(email="hello@widgets.test", github="https://github.com/widgets"))
    assert created.id
    assert svc.get().email == "hello@widgets.test"

    with pytest.raises(ValueError, match="settings_exist"):
        svc.create(SiteSettings(email="other@widgets.test"))

    updated = svc.update(created.id, SiteSettings(email="team@widgets.test"))
    assert updated.email == "team@widgets.test"
    assert updated.github == ""
    assert "id" not in updated.payload()

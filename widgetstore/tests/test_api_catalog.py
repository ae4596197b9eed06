"""
Catalogue pages and read-only catalogue API.
"""
from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
from httpx import ASGITransport

from widgetstore.catalog import all_tags
from widgetstore.web import main

pytestmark = pytest.mark.anyio("asyncio")


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test")


async def test_home_page_renders_catalogue(store):
    async with _client() as c:
        r = await c.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    body = r.text
    assert body.startswith("<!DOCTYPE html>")
    assert "<title>Discover Widgets - Widget Store</title>" in body
    assert "Widget of the Day" in body
    assert body.count('class="widget-card"') >= 12
    assert r.headers.get("X-Content-Type-Options") == "nosniff"


async def test_home_page_htmx_navigation_returns_fragment(store):
    async with _client() as c:
        r = await c.get("/", headers={"HX-Request": "true"})
    assert r.status_code == 200
    assert "<!DOCTYPE html>" not in r.text
    assert "Discover Widgets" in r.text


async def test_home_page_htmx_search_returns_results_only(store):
    async with _client() as c:
        r = await c.get("/", params={"q": "meditation"}, headers={"HX-Request": "true", "HX-Target": "widget-results"})
    assert r.status_code == 200
    assert r.text.startswith('<div id="widget-results">')
    assert "Zenith" in r.text
    assert "ChronoFlow" not in r.text


async def test_search_term_naming_a_category_selects_it(store):
    async with _client() as c:
        r = await c.get("/", params={"q": "Music"})
    assert '<option value="Music" selected>' in r.text
    results = r.text.split('id="widget-results"')[1]
    assert "SoundWeave" in results and "TuneTrove" in results
    assert "Zenith" not in results


async def test_home_page_empty_search(store):
    async with _client() as c:
        r = await c.get("/", params={"q": "no such widget"})
    assert "No widgets found." in r.text


async def test_widget_detail_renders_markdown_sections(store):
    async with _client() as c:
        r = await c.get("/widgets/1")
    assert r.status_code == 200
    body = r.text
    assert "<h1>ChronoFlow</h1>" in body
    assert "<p><strong>Version 2.0.1</strong></p>" in body
    assert "<td><strong>Version</strong></td>" in body
    assert "Community Comments" in body
    assert "Be the first to comment." in body
    assert "private" in r.headers.get("Cache-Control", "")


async def test_widget_detail_unknown_id_is_404(store):
    async with _client() as c:
        r = await c.get("/widgets/999")
    assert r.status_code == 404
    assert "This widget does not exist." in r.text


async def test_api_widgets_search_and_category(store):
    async with _client() as c:
        r = await c.get("/api/widgets", params={"q": "track"})
        r_cat = await c.get("/api/widgets", params={"category": "Health"})
    assert r.status_code == 200
    assert [w["id"] for w in r.json()] == ["1", "7", "10", "12"]
    assert [w["name"] for w in r_cat.json()] == ["CardioFit", "Zenith", "NutriTrack"]
    assert "public" in r.headers.get("Cache-Control", "")


async def test_api_widget_detail_and_not_found(store):
    async with _client() as c:
        ok = await c.get("/api/widgets/5")
        missing = await c.get("/api/widgets/999")
    assert ok.status_code == 200
    body = ok.json()
    assert body["name"] == "SoundWeave"
    assert body["tags"] == ["playlist", "discovery"]
    assert "**Version 2.0.1**" in body["whatsNew"]
    assert missing.status_code == 404
    assert missing.json() == {"error": "not_found", "detail": "widget_not_found"}


async def test_api_widget_of_the_day(store):
    async with _client() as c:
        r = await c.get("/api/widget-of-the-day")
    assert r.status_code == 200
    body = r.json()
    assert body["widget"]["name"]
    assert body["reason"]


async def test_footer_shows_site_settings(store):
    from widgetstore.storefront import SiteSettings, SiteSettingsService

    SiteSettingsService(store).create(
        SiteSettings(email="hello@widgets.test", github="https://github.com/widgets", twitter="javascript:alert(1)")
    )
    async with _client() as c:
        r = await c.get("/faq")
    assert "hello@widgets.test" in r.text
    assert 'href="https://github.com/widgets"' in r.text
    assert "javascript:alert" not in r.text


async def test_random_search_redirects_to_a_catalogue_tag(store, monkeypatch: pytest.MonkeyPatch):
    from widgetstore.web.routes import catalog as catalog_routes

    monkeypatch.setattr(catalog_routes, "choice", lambda tags: tags[-1])
    async with _client() as c:
        r = await c.get("/", params={"random": "1"})
        page = await c.get(r.headers["location"])
    assert r.status_code == 303
    assert r.headers["location"] == f"/?q={all_tags()[-1]}&category=All"
    assert 'href="/?random=1"' in page.text
    results = page.text.split('id="widget-results"')[1]
    assert "NutriTrack" in results


async def test_random_search_tag_is_always_known(store):
    async with _client() as c:
        r = await c.get("/", params={"random": "true"})
    query = parse_qs(urlsplit(r.headers["location"]).query)
    assert query["category"] == ["All"]
    assert query["q"][0] in all_tags()

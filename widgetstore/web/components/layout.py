"""
Layout Component for the widget store

Main layout wrapper that combines header navigation, page content and footer
into a complete HTML page.
"""

from typing import List, Optional, Tuple
from .base import Component

NAV_ITEMS: List[Tuple[str, str]] = [
    ("/", "Widgets"),
    ("/faq", "FAQ"),
    ("/contact", "Contact"),
]


class Layout(Component):
    """Main layout component that assembles the complete page"""

    def __init__(
        self,
        title: str,
        content: str,
        *,
        current_path: str = "/",
        show_admin_link: bool = False,
        footer_html: str = "",
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered components)
            current_path: Current URL path for active navigation highlighting
            show_admin_link: Whether the admin dashboard is linked in the header
            footer_html: Pre-rendered footer details (site settings)
        """
        self.title = title
        self.content = content
        self.current_path = current_path or "/"
        self.show_admin_link = show_admin_link
        self.footer_html = footer_html

    def render(self) -> str:
        """Render the complete HTML document."""
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{self.escape(self.title)} - Widget Store</title>
    <link rel="stylesheet" href="/static/css/app.css">
    <script src="https://unpkg.com/htmx.org@2.0.3/dist/htmx.min.js" defer></script>
    <script src="/static/js/app.js" defer></script>
</head>
<body>
    <a href="#main-content" class="skip-link">Skip to content</a>
    {self._render_header()}
    <main id="main-content" class="main-content" role="main">
        {self._render_main_inner()}
    </main>
</body>
</html>"""

    def render_fragment(self) -> str:
        """Return only the children of <main> for HTMX navigation swaps."""
        return self._render_main_inner()

    def _nav_items(self) -> List[Tuple[str, str]]:
        items = list(NAV_ITEMS)
        if self.show_admin_link:
            items.append(("/admin", "Admin"))
        return items

    def _is_active(self, href: str) -> bool:
        if href == "/":
            return self.current_path == "/" or self.current_path.startswith("/widgets")
        return self.current_path == href or self.current_path.startswith(href + "/")

    def _render_header(self) -> str:
        links = []
        for href, label in self._nav_items():
            active = self._is_active(href)
            attrs = self.attributes(
                href=href,
                hx_get=href,
                hx_target="#main-content",
                hx_push_url="true",
                class_=self.classes("nav-link", active=active),
                aria_current="page" if active else None,
            )
            links.append(f"<li><a {attrs}>{self.escape(label)}</a></li>")
        return (
            '<header class="site-header">'
            '<a href="/" class="site-logo">Widget Store</a>'
            f'<nav aria-label="Main"><ul class="nav-list">{"".join(links)}</ul></nav>'
            "</header>"
        )

    def _render_main_inner(self) -> str:
        return f"""
        {self.content}
        <footer class="content-footer" role="contentinfo">
            {self.footer_html}
        </footer>
        """


class SiteFooter(Component):
    """Contact details and social links from the site settings document."""

    _SOCIAL = ("website", "facebook", "twitter", "github", "linkedin")

    def __init__(self, settings: Optional[dict] = None) -> None:
        self.settings = settings or {}

    def render(self) -> str:
        if not self.settings:
            return '<p class="text-muted">Widget Store</p>'
        details = []
        for key in ("email", "phone", "address"):
            value = self.settings.get(key)
            if value:
                details.append(f'<li class="footer-{key}">{self.escape(value)}</li>')
        social = []
        for key in self._SOCIAL:
            url = self.settings.get(key)
            if url and str(url).lower().startswith(("http://", "https://")):
                social.append(
                    f'<li><a href="{self.escape(url)}" target="_blank" rel="noopener noreferrer">'
                    f"{self.escape(key.capitalize())}</a></li>"
                )
        return (
            f'<ul class="footer-contact">{"".join(details)}</ul>'
            f'<ul class="footer-social">{"".join(social)}</ul>'
        )

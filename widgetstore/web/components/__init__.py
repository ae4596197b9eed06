"""
Widget store UI components

Pure-Python components rendered to HTML strings.
"""

from .base import Component
from .layout import Layout, SiteFooter
from .markdown import MarkdownRenderer, render_markdown_safe
from .cards import TagBadge, WidgetCard, WidgetGrid, WidgetOfTheDayCard
from .comments import CommentForm, CommentList, CommentsSection, RatingStars
from .faq_accordion import FaqAccordion
from .forms import CategoryForm, ContactForm, FaqForm, SiteSettingsForm
from .admin import AdminDashboard, AdminTable, SortableHeader
from .pages import CataloguePage, NotFoundPage, WidgetDetailPage

__all__ = [
    "Component",
    "Layout",
    "SiteFooter",
    "MarkdownRenderer",
    "render_markdown_safe",
    "TagBadge",
    "WidgetCard",
    "WidgetGrid",
    "WidgetOfTheDayCard",
    "CommentForm",
    "CommentList",
    "CommentsSection",
    "RatingStars",
    "FaqAccordion",
    "CategoryForm",
    "ContactForm",
    "FaqForm",
    "SiteSettingsForm",
    "AdminDashboard",
    "AdminTable",
    "SortableHeader",
    "CataloguePage",
    "NotFoundPage",
    "WidgetDetailPage",
]

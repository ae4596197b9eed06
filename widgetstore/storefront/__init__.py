"""Storefront services: comments, FAQ, categories, site settings, contact."""

from .categories import CategoryItem, CategoryService
from .comments import Comment, CommentsService
from .contact import (
    ContactDeliveryError,
    ContactMessage,
    ContactService,
    HttpContactRelay,
    LoggingContactRelay,
    validate_contact,
)
from .faqs import FaqItem, FaqService
from .site_settings import SiteSettings, SiteSettingsService

__all__ = [
    "CategoryItem",
    "CategoryService",
    "Comment",
    "CommentsService",
    "ContactDeliveryError",
    "ContactMessage",
    "ContactService",
    "HttpContactRelay",
    "LoggingContactRelay",
    "validate_contact",
    "FaqItem",
    "FaqService",
    "SiteSettings",
    "SiteSettingsService",
]

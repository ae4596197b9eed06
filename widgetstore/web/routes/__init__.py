"""FastAPI routers of the widget store."""

from .admin import admin_router
from .catalog import catalog_router
from .community import community_router
from .contact import contact_router
from .faq import faq_router
from .recommendations import recommendations_router

__all__ = [
    "admin_router",
    "catalog_router",
    "community_router",
    "contact_router",
    "faq_router",
    "recommendations_router",
]

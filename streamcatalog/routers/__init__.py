"""API Routers."""

from .content import router as content_router
from .profiles import router as profiles_router

__all__ = [
    "content_router",
    "profiles_router",
]

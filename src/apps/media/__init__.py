"""Media app."""

from .routers.media_router import router as media_router

"""Pages app."""

from .routers.page_router import router as page_router

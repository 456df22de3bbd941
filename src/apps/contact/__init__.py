"""Contact app."""

from .routers.contact_router import router as contact_router

"""Standalone media edge app.

Runs apart from the site (`uvicorn src.edge:app`); every GET path is
forwarded to the storage bucket.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.apps.media import media_router
from src.apps.media.services.media_proxy import create_http_client
from src.core.config import settings
from src.core.logger import get_logger
from src.core.response.handlers import global_exception_handler

logger = get_logger("edge")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.http_client = create_http_client()
    logger.info("Media proxy forwarding to %s%s", settings.MEDIA_ORIGIN, settings.MEDIA_BUCKET_PREFIX)
    yield
    await app.state.http_client.aclose()


app = FastAPI(
    title=f"{settings.PROJECT_NAME} media",
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_exception_handler(Exception, global_exception_handler)

app.include_router(media_router)

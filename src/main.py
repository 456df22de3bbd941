from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlmodel import select

from src.core.config import settings
from src.core.database import create_tables, engine, get_session
from src.core.logger import get_logger
from src.core.middleware import site_rules_middleware
from src.core.response.handlers import (
    global_exception_handler,
    validation_exception_handler,
)
from src.core.templating import TEMPLATES_DIR

# Import routers from apps
from src.apps.blog import post_router
from src.apps.contact import contact_router
from src.apps.pages import page_router

logger = get_logger("main")

STATIC_DIR = TEMPLATES_DIR.parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES:
        await create_tables()
    async with get_session() as session:
        await session.exec(select(1))
    logger.info("Database connection successful")
    yield
    logger.info("Shutting down...")
    await engine.dispose()


# Create FastAPI app
app = FastAPI(
    title=settings.PROJECT_NAME,
    description=settings.PROJECT_INFO,
    version=settings.PROJECT_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.SITE_URL],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)
app.middleware("http")(site_rules_middleware)

app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore
app.add_exception_handler(Exception, global_exception_handler)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.PROJECT_VERSION}


app.include_router(post_router)
app.include_router(contact_router)
app.include_router(page_router)


if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info",
    )

from typing import Any, Callable, Dict, List, Optional

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse

from src.core.schemas.seo import PageMetadata
from src.core.seo import layout_metadata, organization_schema
from src.core.templating import templates


class BaseRouter:
    """Base router for server-rendered pages.

    Subclasses register their routes in `_register_routes` and call
    `render` to produce an HTML response from a template, a metadata
    object and the page context.
    """

    def __init__(
        self,
        tags: Optional[List[str]] = None,
        prefix: str = "",
        dependencies: Optional[List[Callable]] = None,
    ):
        self.tags = tags or [self.__class__.__name__.replace("Router", "")]
        self.prefix = prefix

        self.router = APIRouter(
            prefix=self.prefix,
            tags=self.tags,  # type:ignore
            dependencies=dependencies or [],  # type:ignore
        )

        self._register_routes()

    def _register_routes(self) -> None:
        raise NotImplementedError

    def render(
        self,
        request: Request,
        template: str,
        context: Optional[Dict[str, Any]] = None,
        metadata: Optional[PageMetadata] = None,
        status_code: int = status.HTTP_200_OK,
    ) -> HTMLResponse:
        metadata = metadata or layout_metadata()
        page_context = {
            "metadata": metadata,
            "site_schema": organization_schema(),
        }
        page_context.update(context or {})
        return templates.TemplateResponse(
            request, template, page_context, status_code=status_code
        )

    def get_router(self) -> APIRouter:
        """Get the FastAPI router instance."""
        return self.router

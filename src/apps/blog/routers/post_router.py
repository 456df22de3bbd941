"""Post router."""

from fastapi import Depends, Request, status

from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.services.post_service import PostService
from src.apps.blog.services.seo import build_not_found_metadata
from src.core.bases.base_router import BaseRouter
from src.core.database import get_session


def get_post_repository():
    """Get post repository instance."""
    return PostRepository(get_session)  # type:ignore


def get_post_service():
    """Get post service instance."""
    return PostService(get_post_repository())


class PostRouter(BaseRouter):
    """Post detail pages."""

    def __init__(self):
        super().__init__(prefix="/posts", tags=["Posts"])

    def _register_routes(self) -> None:
        @self.router.get("/{slug}", summary="Post detail page")
        async def post_detail(
            slug: str,
            request: Request,
            service: PostService = Depends(get_post_service),
        ):
            page = await service.get_post_page(slug)
            if page is None:
                return self.render(
                    request,
                    "not_found.html",
                    metadata=build_not_found_metadata(),
                    status_code=status.HTTP_404_NOT_FOUND,
                )
            return self.render(
                request, "posts/detail.html", {"page": page}, metadata=page.metadata
            )


# Router instance
router = PostRouter().get_router()

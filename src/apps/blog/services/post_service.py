"""Post service."""

from typing import Any, List, Optional

from src.apps.blog.models import Post
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.post import PostPage
from src.apps.blog.services import content, seo
from src.core.bases.base_service import BaseService

TEST_POST_SLUG = "ssc-chsl-syllabus"


class PostService(BaseService[Post]):
    """Shapes CMS rows into post, home and sitemap views."""

    repository: PostRepository

    def __init__(self, repository: PostRepository):
        super().__init__(repository)

    async def get_post_page(self, slug: str) -> Optional[PostPage]:
        """Build the full post page, or None when there is nothing to show."""
        post = await self._safe(
            self.repository.get_published_by_slug(slug), None, f"fetch post {slug!r}"
        )
        if post is None:
            self.logger.info("No published post for slug %r", slug)
            return None

        related = await self._safe(
            self.repository.list_related(post), [], f"fetch posts related to {slug!r}"
        )

        headings = content.extract_headings(post.content)
        canonical = seo.post_url(post.slug)
        return PostPage(
            post=post,
            canonical_url=canonical,
            metadata=seo.build_post_metadata(post, headings),
            headings=headings,
            blocks=content.prepare_blocks(post.content),
            reading_time=content.reading_time(post.content),
            breadcrumb=seo.build_breadcrumb(post),
            share_links=seo.build_share_links(canonical, post.title, post.short_description),
            related_posts=related,
            author_url=seo.author_url(post),
        )

    async def get_latest(self, limit: int = 12) -> List[Post]:
        return await self._safe(
            self.repository.list_published(limit=limit), [], "fetch latest posts"
        )

    async def get_sitemap_entries(self, limit: int = 2000) -> List[Any]:
        return await self._safe(
            self.repository.list_sitemap_entries(limit=limit), [], "fetch sitemap entries"
        )

    async def get_test_post(self) -> Optional[Post]:
        return await self._safe(
            self.repository.get_one(slug=TEST_POST_SLUG, status="published"),
            None,
            "fetch test post",
        )

"""Post repository."""

from typing import Any, List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import col, or_, select

from src.apps.blog.models import (
    Examination,
    Post,
    PostCategoryMap,
    PostExamMap,
    PostStatus,
)
from src.core.bases.base_repository import BaseRepository

SUMMARY_OPTIONS = (
    selectinload(Post.author),  # type: ignore
    selectinload(Post.categories),  # type: ignore
)

DETAIL_OPTIONS = (
    selectinload(Post.author),  # type: ignore
    selectinload(Post.categories),  # type: ignore
    selectinload(Post.exams).selectinload(Examination.exam_board),  # type: ignore
    selectinload(Post.tags),  # type: ignore
    selectinload(Post.images),  # type: ignore
)


class PostRepository(BaseRepository[Post]):
    """Post repository class.

    Every public query only ever returns published posts; drafts are
    invisible to the site.
    """

    model = Post

    def _published(self) -> Any:
        return select(Post).where(Post.status == PostStatus.PUBLISHED.value)

    def _newest_first(self, stmt: Any) -> Any:
        return stmt.order_by(col(Post.published_at).desc(), col(Post.id).desc())

    async def get_published_by_slug(self, slug: str) -> Optional[Post]:
        stmt = self._published().where(Post.slug == slug).options(*DETAIL_OPTIONS)
        return await self._fetch_first(stmt, "get_published_by_slug")

    async def list_published(self, limit: int = 12, offset: int = 0) -> List[Post]:
        stmt = self._newest_first(self._published().options(*SUMMARY_OPTIONS))
        return await self._fetch_all(stmt.offset(offset).limit(limit), "list_published")

    async def list_related(self, post: Post, limit: int = 6) -> List[Post]:
        """Published posts sharing a category or exam with `post`, newest first.

        Falls back to the latest published posts when `post` has neither.
        """
        stmt = self._published().where(Post.id != post.id)

        category_ids = [c.id for c in post.categories if c.id is not None]
        exam_ids = [e.id for e in post.exams if e.id is not None]

        conditions = []
        if category_ids:
            conditions.append(
                col(Post.id).in_(
                    select(PostCategoryMap.post_id).where(
                        col(PostCategoryMap.category_id).in_(category_ids)
                    )
                )
            )
        if exam_ids:
            conditions.append(
                col(Post.id).in_(
                    select(PostExamMap.post_id).where(
                        col(PostExamMap.exam_id).in_(exam_ids)
                    )
                )
            )
        if conditions:
            stmt = stmt.where(or_(*conditions))

        stmt = self._newest_first(stmt.options(*SUMMARY_OPTIONS)).limit(limit)
        return await self._fetch_all(stmt, "list_related")

    async def list_sitemap_entries(self, limit: int = 2000) -> List[Any]:
        stmt = self._newest_first(
            select(Post.slug, Post.published_at, Post.updated_at).where(
                Post.status == PostStatus.PUBLISHED.value
            )
        ).limit(limit)
        return await self._fetch_all(stmt, "list_sitemap_entries")

"""Home, debug and sitemap routes."""

import json
from xml.sax.saxutils import escape

from fastapi import Depends, Request, Response

from src.apps.blog.routers.post_router import get_post_service
from src.apps.blog.services.post_service import PostService
from src.core.bases.base_router import BaseRouter
from src.core.seo import absolute_url, layout_metadata
from src.core.utils.utils import isoformat

HOME_POST_LIMIT = 12
SITEMAP_POST_LIMIT = 2000


def render_sitemap(entries) -> str:
    urls = [
        (absolute_url("/"), None, "daily", "1.0"),
        (absolute_url("/contact"), None, "monthly", "0.5"),
    ]
    for slug, published_at, updated_at in entries:
        urls.append(
            (absolute_url(f"/posts/{slug}"), updated_at or published_at, "weekly", "0.8")
        )

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for loc, lastmod, changefreq, priority in urls:
        lines.append("  <url>")
        lines.append(f"    <loc>{escape(loc)}</loc>")
        if lastmod:
            lines.append(f"    <lastmod>{isoformat(lastmod)}</lastmod>")
        lines.append(f"    <changefreq>{changefreq}</changefreq>")
        lines.append(f"    <priority>{priority}</priority>")
        lines.append("  </url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


class PageRouter(BaseRouter):
    """Site-level pages that are not tied to one content type."""

    def __init__(self):
        super().__init__(tags=["Pages"])

    def _register_routes(self) -> None:
        @self.router.get("/", summary="Home page")
        async def home(request: Request, service: PostService = Depends(get_post_service)):
            posts = await service.get_latest(limit=HOME_POST_LIMIT)
            return self.render(
                request,
                "home.html",
                {"posts": posts},
                metadata=layout_metadata(canonical=absolute_url("/")),
            )

        @self.router.get("/test-post", summary="Debug dump of one post row")
        async def test_post(request: Request, service: PostService = Depends(get_post_service)):
            post = await service.get_test_post()
            dump = json.dumps(
                post.model_dump(mode="json") if post else None, indent=2, ensure_ascii=False
            )
            return self.render(request, "test_post.html", {"dump": dump})

        @self.router.get("/sitemap.xml", summary="XML sitemap")
        async def sitemap(service: PostService = Depends(get_post_service)):
            entries = await service.get_sitemap_entries(limit=SITEMAP_POST_LIMIT)
            return Response(render_sitemap(entries), media_type="application/xml")


router = PageRouter().get_router()

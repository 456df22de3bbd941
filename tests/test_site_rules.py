from httpx import AsyncClient

from src.core import middleware
from src.core.middleware import HEADER_RULES, SITEMAP_HEADERS, Redirect


async def test_sitemap_headers(client: AsyncClient):
    response = await client.get("/sitemap.xml")
    assert response.headers["content-type"] == SITEMAP_HEADERS["Content-Type"]
    assert response.headers["cache-control"] == "public, max-age=86400, stale-while-revalidate=43200"


async def test_other_pages_do_not_get_sitemap_headers(client: AsyncClient):
    response = await client.get("/contact")
    assert "stale-while-revalidate" not in response.headers.get("cache-control", "")


async def test_trailing_slash_is_stripped(client: AsyncClient):
    response = await client.get("/posts/ssc-chsl-syllabus/?ref=home")
    assert response.status_code == 308
    assert response.headers["location"] == "/posts/ssc-chsl-syllabus?ref=home"


async def test_root_is_not_redirected(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200


async def test_header_rule_patterns():
    numbered = HEADER_RULES[2]
    assert numbered.pattern.match("/sitemap-3.xml")
    assert numbered.pattern.match("/sitemap-posts.xml")
    assert not numbered.pattern.match("/sitemap-a/b.xml")
    assert not HEADER_RULES[0].pattern.match("/sitemapxxml")


async def test_redirect_table(client: AsyncClient, monkeypatch):
    monkeypatch.setattr(
        middleware, "REDIRECTS", [Redirect("/old/:slug", "/posts/:slug", permanent=False)]
    )
    response = await client.get("/old/ssc-cgl-syllabus")
    assert response.status_code == 307
    assert response.headers["location"] == "/posts/ssc-cgl-syllabus"


async def test_no_redirects_configured():
    assert middleware.REDIRECTS == []


async def test_image_domains_are_preconnected(client: AsyncClient):
    html = (await client.get("/")).text
    assert '<link rel="preconnect" href="https://image.preptive.in">' in html

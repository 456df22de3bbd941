import json
import re

from httpx import AsyncClient

from src.apps.blog.routers.post_router import get_post_repository
from src.apps.blog.services.post_service import PostService
from src.core.config import settings

LD_JSON = re.compile(r'<script type="application/ld\+json">(.*?)</script>', re.S)


def json_ld(html: str):
    return [json.loads(block) for block in LD_JSON.findall(html)]


def by_type(schemas, schema_type):
    return [s for s in schemas if s.get("@type") == schema_type]


async def test_post_page_renders_published_post(client: AsyncClient):
    response = await client.get("/posts/ssc-chsl-syllabus")
    assert response.status_code == 200
    html = response.text
    assert "<title>SSC CHSL Syllabus 2025 - SSC CHSL | PrepTive</title>" in html
    assert '<link rel="canonical" href="https://www.preptive.in/posts/ssc-chsl-syllabus">' in html
    assert '<meta property="og:type" content="article">' in html
    assert '<meta name="twitter:card" content="summary_large_image">' in html
    assert "ssc chsl syllabus" in html


async def test_post_page_table_of_contents_and_anchors(client: AsyncClient):
    html = (await client.get("/posts/ssc-chsl-syllabus")).text
    assert 'href="#heading-0"' in html
    assert 'href="#heading-2"' in html
    assert 'id="heading-0"' in html
    # level 4 headings are rendered but not listed
    assert 'href="#heading-3"' not in html
    assert "Reference Books" in html


async def test_post_page_structured_data(client: AsyncClient):
    schemas = json_ld((await client.get("/posts/ssc-chsl-syllabus")).text)

    organization = by_type(schemas, "EducationalOrganization")
    assert len(organization) == 1

    (article,) = by_type(schemas, "Article")
    assert article["headline"] == "SSC CHSL Syllabus 2025"
    assert article["author"]["name"] == "Ravi Kumar"
    assert article["mainEntityOfPage"]["@id"] == f"{settings.SITE_URL}/posts/ssc-chsl-syllabus"
    assert len(article["description"]) <= 150

    (faq,) = by_type(schemas, "FAQPage")
    assert [q["name"] for q in faq["mainEntity"]] == ["SSC CHSL Exam Pattern", "SSC CHSL Syllabus"]

    (breadcrumb,) = by_type(schemas, "BreadcrumbList")
    positions = [item["position"] for item in breadcrumb["itemListElement"]]
    assert positions == [1, 2, 3, 4]
    assert breadcrumb["itemListElement"][-1]["name"] == "SSC CHSL Syllabus 2025"


async def test_post_without_category_keeps_breadcrumb_positions(client: AsyncClient):
    schemas = json_ld((await client.get("/posts/upsc-prelims-result")).text)
    (breadcrumb,) = by_type(schemas, "BreadcrumbList")
    positions = [item["position"] for item in breadcrumb["itemListElement"]]
    assert positions == [1, 3, 4]


async def test_post_without_subheadings_has_no_faq(client: AsyncClient):
    schemas = json_ld((await client.get("/posts/ssc-cgl-syllabus")).text)
    assert by_type(schemas, "FAQPage") == []


async def test_hindi_post_sets_language(client: AsyncClient):
    html = (await client.get("/posts/upsc-prelims-result")).text
    assert '<html lang="hi"' in html
    assert '<meta property="og:locale" content="hi_IN">' in html


async def test_related_posts_share_category_or_exam(client: AsyncClient):
    html = (await client.get("/posts/ssc-chsl-syllabus")).text
    assert "Related Articles You Might Like" in html
    assert 'href="/posts/ssc-cgl-syllabus"' in html
    assert 'href="/posts/upsc-prelims-result"' not in html
    assert 'href="/posts/ssc-calendar-draft"' not in html


async def test_unknown_slug_is_not_found(client: AsyncClient):
    response = await client.get("/posts/no-such-post")
    assert response.status_code == 404
    assert "<title>Post Not Found | PrepTive</title>" in response.text
    assert '<meta name="robots" content="noindex, nofollow">' in response.text


async def test_draft_post_is_not_found(client: AsyncClient):
    response = await client.get("/posts/ssc-calendar-draft")
    assert response.status_code == 404


async def test_home_lists_latest_published_posts(client: AsyncClient):
    response = await client.get("/")
    assert response.status_code == 200
    html = response.text
    assert html.index("/posts/ssc-cgl-syllabus") < html.index("/posts/upsc-prelims-result")
    assert html.index("/posts/upsc-prelims-result") < html.index("/posts/ssc-chsl-syllabus")
    assert "ssc-calendar-draft" not in html


async def test_test_post_dumps_row(client: AsyncClient):
    response = await client.get("/test-post")
    assert response.status_code == 200
    assert "<h1>Test Post Query</h1>" in response.text
    assert "ssc-chsl-syllabus" in response.text


async def test_sitemap_lists_published_posts(client: AsyncClient):
    response = await client.get("/sitemap.xml")
    assert response.status_code == 200
    assert f"<loc>{settings.SITE_URL}/posts/ssc-chsl-syllabus</loc>" in response.text
    assert "ssc-calendar-draft" not in response.text


async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


async def test_service_counts_and_latest():
    repository = get_post_repository()
    assert await repository.count(status="published") == 3
    assert await repository.count() == 4

    latest = await PostService(repository).get_latest(limit=2)
    assert [post.slug for post in latest] == ["ssc-cgl-syllabus", "upsc-prelims-result"]

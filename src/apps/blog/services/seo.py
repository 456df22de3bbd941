"""SEO metadata and JSON-LD for post pages."""

from typing import Any, Dict, List, Optional
from urllib.parse import quote, quote_plus

from src.apps.blog.models import Post
from src.apps.blog.schemas.post import Heading, ShareLink
from src.core.config import settings
from src.core.schemas.seo import BreadcrumbItem, OgImage, OpenGraph, PageMetadata, TwitterCard
from src.core.seo import (
    absolute_url,
    breadcrumb_list,
    publisher_schema,
    robots,
    verification_codes,
)
from src.core.utils.utils import generate_slug, isoformat

DEFAULT_KEYWORDS = [
    "preparation",
    "exam guide",
    "study material",
    "syllabus",
    "previous year papers",
    "mock tests",
]

GOOGLEBOT_ARTICLE = "index, follow, max-video-preview:-1, max-image-preview:standard, max-snippet:-1"

MAX_FAQ_ENTRIES = 10


def exam_names(post: Post) -> List[str]:
    return [e.name for e in post.exams if e.name]


def category_names(post: Post) -> List[str]:
    return [c.name for c in post.categories if c.name]


def post_url(slug: str) -> str:
    return absolute_url(f"/posts/{slug}")


def author_url(post: Post) -> Optional[str]:
    if not post.author:
        return None
    return post.author.website or absolute_url(f"/authors/{generate_slug(post.author.name)}")


def page_title(post: Post) -> str:
    exams = exam_names(post)
    suffix = f" - {', '.join(exams)}" if exams else ""
    return f"{post.seo_title or post.title}{suffix} | {settings.SITE_NAME}"


def page_description(post: Post) -> str:
    description = post.seo_description or post.short_description or ""
    exams = exam_names(post)
    if not description and exams:
        description = (
            f"Complete guide for {', '.join(exams)} preparation. "
            "Get syllabus, exam pattern, and study tips."
        )
    return description


def page_keywords(post: Post) -> List[str]:
    defaults = exam_names(post) + category_names(post) + DEFAULT_KEYWORDS
    return list(post.seo_keywords or []) + defaults


def featured_image(post: Post) -> str:
    return post.featured_image or absolute_url("/og-default.jpg")


def build_article_schema(post: Post, description: str, keywords: List[str]) -> Dict[str, Any]:
    canonical = post_url(post.slug)
    schema: Dict[str, Any] = {
        "@context": "https://schema.org",
        "@type": "Article",
        "headline": post.title,
        "description": description[:150],
        "image": featured_image(post),
        "datePublished": isoformat(post.published_at),
        "dateModified": isoformat(post.updated_at),
        "publisher": publisher_schema(),
        "mainEntityOfPage": {"@type": "WebPage", "@id": canonical},
        "keywords": ", ".join(keywords),
    }
    if post.author:
        schema["author"] = {
            "@type": "Person",
            "name": post.author.name,
            "url": author_url(post),
        }
    return schema


def build_faq_schema(headings: List[Heading], post: Post) -> Optional[Dict[str, Any]]:
    """FAQPage built from the first level-2 headings, or None if there are none."""
    questions = [h for h in headings if h.level == 2][:MAX_FAQ_ENTRIES]
    if not questions:
        return None
    exams = exam_names(post)
    exam = exams[0] if exams else "competitive exam"
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": heading.text,
                "acceptedAnswer": {
                    "@type": "Answer",
                    "text": (
                        f"Learn about {heading.text} in this comprehensive guide "
                        f"covering all aspects for {exam} preparation."
                    ),
                },
            }
            for heading in questions
        ],
    }


def build_breadcrumb_schema(post: Post) -> Dict[str, Any]:
    # Positions are fixed per level so a missing category or exam leaves a gap.
    items = [{"position": 1, "name": "Home", "item": settings.SITE_URL}]
    if post.categories:
        category = post.categories[0]
        items.append(
            {
                "position": 2,
                "name": category.name,
                "item": absolute_url(f"/category/{category.slug}"),
            }
        )
    if post.exams:
        exam = post.exams[0]
        items.append(
            {
                "position": 3,
                "name": exam.name,
                "item": absolute_url(f"/exam/{generate_slug(exam.name)}"),
            }
        )
    items.append({"position": 4, "name": post.title, "item": post_url(post.slug)})
    return breadcrumb_list(items)


def build_breadcrumb(post: Post) -> List[BreadcrumbItem]:
    items = [BreadcrumbItem(label="Home", href="/")]
    if post.exams:
        exam = post.exams[0]
        items.append(BreadcrumbItem(label=exam.name, href=f"/exam/{generate_slug(exam.name)}"))
    if post.categories:
        category = post.categories[0]
        items.append(BreadcrumbItem(label=category.name, href=f"/category/{category.slug}"))
    items.append(BreadcrumbItem(label=post.title, current=True))
    return items


def build_share_links(url: str, title: str, description: Optional[str] = None) -> List[ShareLink]:
    u, t = quote_plus(url), quote_plus(title)
    body = quote(f"{description}\n\n{url}" if description else url)
    return [
        ShareLink(network="facebook", label="Facebook", url=f"https://www.facebook.com/sharer/sharer.php?u={u}"),
        ShareLink(network="twitter", label="X", url=f"https://twitter.com/intent/tweet?url={u}&text={t}"),
        ShareLink(network="linkedin", label="LinkedIn", url=f"https://www.linkedin.com/sharing/share-offsite/?url={u}"),
        ShareLink(network="whatsapp", label="WhatsApp", url=f"https://wa.me/?text={quote_plus(title + ' ' + url)}"),
        ShareLink(network="telegram", label="Telegram", url=f"https://t.me/share/url?url={u}&text={t}"),
        ShareLink(network="email", label="Email", url=f"mailto:?subject={quote(title)}&body={body}"),
    ]


def build_post_metadata(post: Post, headings: Optional[List[Heading]] = None) -> PageMetadata:
    title = page_title(post)
    description = page_description(post)
    keywords = page_keywords(post)
    canonical = post_url(post.slug)
    image = featured_image(post)
    categories = category_names(post)
    section = categories[0] if categories else "Education"
    authors = [post.author.name] if post.author else []

    json_ld = [build_article_schema(post, description, keywords)]
    faq = build_faq_schema(headings or [], post)
    if faq:
        json_ld.append(faq)
    json_ld.append(build_breadcrumb_schema(post))

    return PageMetadata(
        title=title,
        description=description,
        keywords=keywords,
        canonical=canonical,
        alternates={"en": canonical, "hi": f"{canonical}?lang=hi"},
        robots=robots(),
        googlebot=GOOGLEBOT_ARTICLE,
        open_graph=OpenGraph(
            title=title,
            description=description,
            url=canonical,
            site_name=settings.SITE_NAME,
            images=[OgImage(url=image, width=1200, height=630, alt=post.title)],
            locale="hi_IN" if post.language == "hi" else "en_US",
            type="article",
            published_time=isoformat(post.published_at),
            modified_time=isoformat(post.updated_at),
            authors=authors,
            tags=keywords,
            section=section,
        ),
        twitter=TwitterCard(
            title=title,
            description=description,
            images=[image],
            creator=settings.TWITTER_HANDLE,
            site=settings.TWITTER_HANDLE,
        ),
        verification=verification_codes(),
        authors=authors,
        publisher=settings.SITE_NAME,
        category=section,
        json_ld=json_ld,
    )


def build_not_found_metadata() -> PageMetadata:
    return PageMetadata(
        title=f"Post Not Found | {settings.SITE_NAME}",
        description="The requested article could not be found.",
        robots=robots(index=False, follow=False),
    )

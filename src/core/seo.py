"""Site-wide SEO pieces shared by every page."""

from typing import Any, Dict, List, Optional

from src.core.config import settings
from src.core.schemas.seo import OpenGraph, PageMetadata, TwitterCard

GOOGLEBOT_DEFAULT = "index, follow, max-video-preview:-1, max-image-preview:large, max-snippet:-1"

SOCIAL_PROFILES = [
    "https://twitter.com/preptive_in",
    "https://facebook.com/preptive",
    "https://instagram.com/preptive",
    "https://linkedin.com/company/preptive",
    "https://youtube.com/@preptive",
]


def absolute_url(path: str = "") -> str:
    if path.startswith(("http://", "https://")):
        return path
    if path and not path.startswith("/"):
        path = "/" + path
    return settings.SITE_URL.rstrip("/") + path


def robots(index: bool = True, follow: bool = True) -> str:
    return f"{'index' if index else 'noindex'}, {'follow' if follow else 'nofollow'}"


def verification_codes() -> Dict[str, str]:
    codes = {
        "google-site-verification": settings.GOOGLE_SITE_VERIFICATION,
        "yandex-verification": settings.YANDEX_VERIFICATION,
        "y_key": settings.YAHOO_VERIFICATION,
    }
    return {name: value for name, value in codes.items() if value}


def organization_schema() -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "EducationalOrganization",
        "name": settings.SITE_NAME,
        "description": "Government Job Preparation Portal",
        "url": settings.SITE_URL,
        "logo": absolute_url("/logo.png"),
        "sameAs": [
            "https://facebook.com/preptive",
            "https://twitter.com/preptive",
            "https://linkedin.com/company/preptive",
        ],
    }


def publisher_schema() -> Dict[str, Any]:
    return {
        "@type": "Organization",
        "name": settings.SITE_NAME,
        "logo": absolute_url("/logo.png"),
    }


def breadcrumb_list(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Build a BreadcrumbList from (position, name, item) dicts."""
    return {
        "@context": "https://schema.org",
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": entry["position"],
                "name": entry["name"],
                "item": entry["item"],
            }
            for entry in items
        ],
    }


def layout_metadata(
    title: Optional[str] = None,
    description: Optional[str] = None,
    canonical: Optional[str] = None,
) -> PageMetadata:
    """Default metadata for pages that do not build their own."""
    title = title or (
        f"{settings.SITE_NAME} - Government Job Portal | Latest Updates, Results, Admit Cards"
    )
    description = description or (
        "India's premier platform for government job aspirants. Get latest exam "
        "updates, admit cards, results, syllabus, and study materials for all "
        "competitive exams."
    )
    return PageMetadata(
        title=title,
        description=description,
        keywords=[
            "government jobs",
            "ssc",
            "upsc",
            "banking exams",
            "admit card",
            "results",
            "syllabus",
            "study materials",
        ],
        canonical=canonical,
        authors=[f"{settings.SITE_NAME} Team"],
        open_graph=OpenGraph(
            title=f"{settings.SITE_NAME} - Government Job Portal",
            description="Your gateway to government careers with latest updates and resources",
            url=canonical,
            site_name=settings.SITE_NAME,
            locale="en_IN",
        ),
        twitter=TwitterCard(
            title=f"{settings.SITE_NAME} - Government Job Portal",
            description="Latest government job updates and resources",
        ),
        verification=verification_codes(),
    )

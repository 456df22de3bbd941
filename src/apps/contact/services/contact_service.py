"""Contact service."""

from typing import Any, Dict, List

from src.apps.contact.models import ContactSubmission
from src.apps.contact.repositories.contact_repository import ContactRepository
from src.apps.contact.schemas.contact import ContactCreate
from src.core import exceptions
from src.core.bases.base_repository import RepositoryError
from src.core.bases.base_service import BaseService
from src.core.config import settings
from src.core.schemas.seo import OgImage, OpenGraph, PageMetadata, TwitterCard
from src.core.seo import (
    GOOGLEBOT_DEFAULT,
    SOCIAL_PROFILES,
    absolute_url,
    breadcrumb_list,
    robots,
    verification_codes,
)

SUCCESS_MESSAGE = "Thank you for contacting us! We'll respond within 24-48 hours."

GRADE_OPTIONS = [
    "School Student",
    "10th Class",
    "12th Class",
    "Undergraduate",
    "Graduate",
    "Post Graduate",
    "Working Professional",
    "Other",
]

FAQ_ENTRIES = [
    (
        "How quickly will I get a response from PrepTive?",
        "We respond to all informational queries and update reports within 24-48 hours. "
        "For urgent corrections to exam information, we prioritize review.",
    ),
    (
        "What type of information can I report to PrepTive?",
        "You can report outdated exam information, corrections to admit card dates, result "
        "announcements, job notifications, syllabus changes, and technical issues with our website.",
    ),
    (
        "Is my information secure when contacting PrepTive?",
        "Yes, we maintain strict privacy standards and never share your contact details. "
        "Your information is used only to respond to your query.",
    ),
    (
        "Can I submit new exam updates to PrepTive?",
        "Yes, we welcome submissions of new exam updates, notifications, and important dates. "
        "Please provide official source links for verification.",
    ),
]


class ContactService(BaseService[ContactSubmission]):
    """Contact service class."""

    repository: ContactRepository

    def __init__(self, repository: ContactRepository):
        super().__init__(repository)

    async def submit(self, data: ContactCreate) -> str:
        """Store a submission and return the confirmation message."""
        try:
            submission = await self.repository.create(data)
        except RepositoryError as e:
            self.logger.error("Could not store contact submission: %s", e)
            raise exceptions.ServiceException(
                "Failed to submit your message. Please try again."
            ) from e
        self.logger.info("Contact submission %s received", submission.id)
        return SUCCESS_MESSAGE


def contact_metadata() -> PageMetadata:
    canonical = absolute_url("/contact")
    site = settings.SITE_NAME
    short_title = f"Contact Us | {site} - Report Updates & Get Support"
    image = absolute_url("/og-contact.jpg")
    return PageMetadata(
        title=f"Contact Us | {site} - Report Updates, Get Support & Submit Feedback",
        description=(
            f"Contact {site} team to report exam updates, submit corrections, get technical "
            "support, or provide feedback. Help us maintain accurate information on admit "
            "cards, results, job notifications, and competitive exam updates."
        ),
        keywords=[
            f"contact {site}",
            "report exam updates",
            "submit correction contact",
            "website feedback",
            "technical support help",
            "admit card updates contact",
            "result notification report",
            "job update submission",
            "exam news feedback",
            "government exam updates contact",
            "UPSC notification report",
            "SSC update contact",
            "Banking exam news",
            "competitive exam information",
        ],
        canonical=canonical,
        robots=robots(),
        googlebot=GOOGLEBOT_DEFAULT,
        open_graph=OpenGraph(
            title=short_title,
            description=(
                f"Contact {site} to report exam updates, submit corrections, or provide "
                "feedback on our informational content."
            ),
            url=canonical,
            site_name=site,
            images=[
                OgImage(
                    url=image,
                    width=1200,
                    height=630,
                    alt=f"Contact {site} to Report Exam Updates & Get Support",
                )
            ],
            locale="en_US",
            type="website",
        ),
        twitter=TwitterCard(
            title=short_title,
            description=(
                f"Contact {site} team to report exam updates, submit corrections, or provide "
                "feedback on our informational content."
            ),
            images=[image],
            creator=settings.TWITTER_HANDLE,
            site=settings.TWITTER_HANDLE,
        ),
        verification=verification_codes(),
        authors=[f"{site} Editorial Team"],
        publisher=site,
        category="Education News & Updates",
        json_ld=[contact_page_schema(), contact_faq_schema()],
    )


def contact_page_schema() -> Dict[str, Any]:
    site = settings.SITE_NAME
    breadcrumb = breadcrumb_list(
        [
            {"position": 1, "name": "Home", "item": settings.SITE_URL},
            {"position": 2, "name": "Contact Us", "item": absolute_url("/contact")},
        ]
    )
    breadcrumb.pop("@context")
    return {
        "@context": "https://schema.org",
        "@type": "ContactPage",
        "name": f"Contact {site} - Exam Updates & Information Portal",
        "description": (
            f"Contact page for {site} educational information portal providing latest "
            "updates on UPSC, SSC, Banking, JEE, NEET and other competitive exams"
        ),
        "url": absolute_url("/contact"),
        "mainEntity": {
            "@type": "Organization",
            "name": site,
            "description": (
                "Educational information portal providing latest exam updates, admit "
                "cards, results, and job notifications"
            ),
            "email": settings.CONTACT_EMAIL,
            "telephone": settings.CONTACT_PHONE,
            "address": {
                "@type": "PostalAddress",
                "streetAddress": "Prayagraj",
                "addressLocality": "Prayagraj",
                "addressRegion": "Uttar Pradesh",
                "postalCode": "211001",
                "addressCountry": "IN",
            },
            "areaServed": {"@type": "Country", "name": "India"},
            "sameAs": SOCIAL_PROFILES,
            "knowsAbout": [
                "UPSC Exam Updates",
                "SSC Latest Notifications",
                "Banking Exam Results",
                "JEE Admit Cards",
                "NEET Important Dates",
                "Government Job Notifications",
                "Competitive Exam Syllabus",
                "Exam Calendar Updates",
            ],
        },
        "breadcrumb": breadcrumb,
    }


def contact_faq_schema() -> Dict[str, Any]:
    return {
        "@context": "https://schema.org",
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {"@type": "Answer", "text": answer},
            }
            for question, answer in FAQ_ENTRIES
        ],
    }


def faq_entries() -> List[Dict[str, str]]:
    return [{"question": q, "answer": a} for q, a in FAQ_ENTRIES]

"""Sample CMS content for local development and tests."""

from datetime import timedelta
from typing import Any, Callable

from sqlmodel import select

from src.apps.blog.models import (
    Author,
    Category,
    ExamBoard,
    Examination,
    Post,
    PostImage,
    PostStatus,
    Tag,
)
from src.core.config import settings
from src.core.database import get_session

CHSL_CONTENT = [
    {"type": "paragraph", "text": "The SSC CHSL exam is conducted in two tiers."},
    {"type": "heading", "level": 2, "text": "SSC CHSL Exam Pattern"},
    {"type": "paragraph", "text": "Tier 1 is a computer based objective test of 100 questions."},
    {"type": "heading", "level": 3, "text": "Tier 1 Sections"},
    {
        "type": "list",
        "ordered": False,
        "items": ["English Language", "General Intelligence", "Quantitative Aptitude", "General Awareness"],
    },
    {"type": "heading", "level": 2, "text": "SSC CHSL Syllabus"},
    {"type": "paragraph", "text": "The syllabus covers reasoning, arithmetic, grammar and current affairs."},
    {"type": "heading", "level": 4, "text": "Reference Books"},
    {"type": "quote", "text": "Practice previous year papers every week."},
    {
        "type": "image",
        "url": "https://image.preptive.in/ssc/chsl-pattern.png",
        "alt": "SSC CHSL exam pattern table",
        "caption": "Tier 1 marking scheme",
    },
]


async def seed_sample_content(session_factory: Callable[..., Any] = get_session) -> int:
    """Insert a small linked data set; returns the number of posts created.

    Does nothing when the posts table already has rows.
    """
    now = settings.get_now()

    async with session_factory() as db:
        if (await db.exec(select(Post.id).limit(1))).first() is not None:
            return 0

        author = Author(
            name="Ravi Kumar",
            slug="ravi-kumar",
            bio="Exam analyst covering SSC and UPSC",
            avatar_url="https://image.preptive.in/authors/ravi.jpg",
        )
        syllabus = Category(name="Syllabus", slug="syllabus")
        ssc = ExamBoard(name="Staff Selection Commission", slug="ssc")
        upsc_board = ExamBoard(name="Union Public Service Commission", slug="upsc")
        chsl = Examination(name="SSC CHSL", slug="ssc-chsl", exam_board=ssc)
        cgl = Examination(name="SSC CGL", slug="ssc-cgl", exam_board=ssc)
        prelims = Examination(name="UPSC Prelims", slug="upsc-prelims", exam_board=upsc_board)
        tier1 = Tag(name="Tier 1", slug="tier-1")
        pattern = Tag(name="Exam Pattern", slug="exam-pattern")

        posts = [
            Post(
                title="SSC CHSL Syllabus 2025",
                slug="ssc-chsl-syllabus",
                status=PostStatus.PUBLISHED.value,
                content=CHSL_CONTENT,
                short_description="Complete SSC CHSL syllabus and exam pattern for Tier 1 and Tier 2.",
                featured_image="https://image.preptive.in/ssc/chsl.jpg",
                seo_keywords=["ssc chsl syllabus", "chsl exam pattern"],
                published_at=now - timedelta(days=3),
                author=author,
                categories=[syllabus],
                exams=[chsl],
                tags=[tier1, pattern],
                images=[
                    PostImage(
                        url="https://image.preptive.in/ssc/chsl-tier1.png",
                        alt_text="CHSL Tier 1 sections",
                    )
                ],
            ),
            Post(
                title="SSC CGL Syllabus and Pattern",
                slug="ssc-cgl-syllabus",
                status=PostStatus.PUBLISHED.value,
                content=[{"type": "paragraph", "text": "CGL syllabus overview."}],
                published_at=now - timedelta(days=1),
                author=author,
                categories=[syllabus],
                exams=[cgl],
            ),
            Post(
                title="UPSC Prelims Result Declared",
                slug="upsc-prelims-result",
                status=PostStatus.PUBLISHED.value,
                language="hi",
                content=[{"type": "paragraph", "text": "Result PDF is available on the official site."}],
                published_at=now - timedelta(days=2),
                exams=[prelims],
            ),
            Post(
                title="Upcoming SSC Calendar (Draft)",
                slug="ssc-calendar-draft",
                status=PostStatus.DRAFT.value,
                content=[],
                categories=[syllabus],
            ),
        ]
        db.add_all(posts)
        await db.commit()

    return len(posts)

from pathlib import Path

from fastapi.templating import Jinja2Templates

from src.core.config import settings
from src.core.utils.utils import format_date, isoformat

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

NAV_ITEMS = [
    {"name": "Home", "href": "/"},
    {"name": "Latest Updates", "href": "/updates"},
    {"name": "Jobs", "href": "/jobs"},
    {"name": "Results", "href": "/results"},
    {"name": "Admit Card", "href": "/admit-card"},
    {"name": "Syllabus", "href": "/syllabus"},
]

FOOTER_EXAMS = [
    "UPSC Civil Services",
    "SSC CGL/CHSL",
    "Banking Exams",
    "Railway Recruitment",
    "Defense Exams",
    "Teaching Jobs",
]

FOOTER_RESOURCES = [
    "Study Materials",
    "Previous Papers",
    "Mock Tests",
    "Online Courses",
    "Current Affairs",
    "Exam Calendar",
]

LEGAL_LINKS = ["Privacy Policy", "Terms of Service", "Cookie Policy", "Disclaimer"]

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["format_date"] = format_date
templates.env.filters["isoformat"] = isoformat
templates.env.globals.update(
    settings=settings,
    nav_items=NAV_ITEMS,
    footer_exams=FOOTER_EXAMS,
    footer_resources=FOOTER_RESOURCES,
    legal_links=LEGAL_LINKS,
    now=settings.get_now,
)

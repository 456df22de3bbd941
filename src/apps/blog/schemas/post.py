"""Post page view schemas."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from src.apps.blog.models import Post
from src.core.schemas.seo import BreadcrumbItem, PageMetadata


class Heading(BaseModel):
    id: str
    text: str
    level: int


class ShareLink(BaseModel):
    network: str
    label: str
    url: str


@dataclass
class PostPage:
    """Everything the post template needs, shaped from one CMS row."""

    post: Post
    canonical_url: str
    metadata: PageMetadata
    headings: List[Heading] = field(default_factory=list)
    blocks: List[Dict[str, Any]] = field(default_factory=list)
    reading_time: int = 1
    breadcrumb: List[BreadcrumbItem] = field(default_factory=list)
    share_links: List[ShareLink] = field(default_factory=list)
    related_posts: List[Post] = field(default_factory=list)
    author_url: Optional[str] = None

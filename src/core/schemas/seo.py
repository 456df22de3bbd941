from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class OgImage(BaseModel):
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None


class OpenGraph(BaseModel):
    title: str
    description: str = ""
    url: Optional[str] = None
    site_name: Optional[str] = None
    images: List[OgImage] = Field(default_factory=list)
    locale: str = "en_US"
    type: str = "website"
    published_time: Optional[str] = None
    modified_time: Optional[str] = None
    authors: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    section: Optional[str] = None


class TwitterCard(BaseModel):
    card: str = "summary_large_image"
    title: str
    description: str = ""
    images: List[str] = Field(default_factory=list)
    creator: Optional[str] = None
    site: Optional[str] = None


class PageMetadata(BaseModel):
    """Everything a page emits into <head>."""

    title: str
    description: str = ""
    keywords: List[str] = Field(default_factory=list)
    canonical: Optional[str] = None
    alternates: Dict[str, str] = Field(default_factory=dict)
    robots: str = "index, follow"
    googlebot: Optional[str] = None
    open_graph: Optional[OpenGraph] = None
    twitter: Optional[TwitterCard] = None
    verification: Dict[str, str] = Field(default_factory=dict)
    authors: List[str] = Field(default_factory=list)
    publisher: Optional[str] = None
    category: Optional[str] = None
    json_ld: List[Dict[str, Any]] = Field(default_factory=list)


class BreadcrumbItem(BaseModel):
    label: str
    href: Optional[str] = None
    current: bool = False

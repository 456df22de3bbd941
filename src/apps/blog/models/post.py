"""Post model."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON
from sqlmodel import DateTime, Field, Relationship

from src.apps.blog.models.author import Author
from src.apps.blog.models.links import PostCategoryMap, PostExamMap, PostTagMap
from src.apps.blog.models.taxonomy import Category, Examination, Tag
from src.core.database import BaseModel


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class Post(BaseModel, table=True):
    """Post model class."""

    __tablename__ = "posts"  # type: ignore
    title: str = Field()
    slug: str = Field(unique=True, index=True)
    status: str = Field(default=PostStatus.DRAFT.value, index=True)
    content: Optional[List[Dict[str, Any]]] = Field(default=None, sa_type=JSON)
    short_description: Optional[str] = Field(default=None)
    featured_image: Optional[str] = Field(default=None)
    language: str = Field(default="en")
    seo_title: Optional[str] = Field(default=None)
    seo_description: Optional[str] = Field(default=None)
    seo_keywords: Optional[List[str]] = Field(default=None, sa_type=JSON)
    published_at: Optional[datetime] = Field(
        default=None, sa_type=DateTime(timezone=True), index=True
    )
    author_id: Optional[int] = Field(default=None, foreign_key="authors.id")

    author: Optional[Author] = Relationship(back_populates="posts")
    categories: List[Category] = Relationship(
        back_populates="posts", link_model=PostCategoryMap
    )
    exams: List[Examination] = Relationship(
        back_populates="posts", link_model=PostExamMap
    )
    tags: List[Tag] = Relationship(back_populates="posts", link_model=PostTagMap)
    images: List["PostImage"] = Relationship(back_populates="post")


class PostImage(BaseModel, table=True):
    __tablename__ = "post_images"  # type: ignore
    post_id: int = Field(foreign_key="posts.id", index=True)
    url: str = Field()
    alt_text: Optional[str] = Field(default=None)
    caption: Optional[str] = Field(default=None)

    post: Optional[Post] = Relationship(back_populates="images")

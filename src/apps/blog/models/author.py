"""Author model."""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from src.core.database import BaseModel

if TYPE_CHECKING:
    from src.apps.blog.models.post import Post


class Author(BaseModel, table=True):
    """Post author."""

    __tablename__ = "authors"  # type: ignore
    name: str = Field()
    slug: str = Field(unique=True, index=True)
    bio: Optional[str] = Field(default=None)
    avatar_url: Optional[str] = Field(default=None)
    website: Optional[str] = Field(default=None)

    posts: List["Post"] = Relationship(back_populates="author")

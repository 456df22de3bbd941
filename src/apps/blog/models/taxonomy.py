"""Category, examination, exam board and tag models."""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship

from src.apps.blog.models.links import PostCategoryMap, PostExamMap, PostTagMap
from src.core.database import BaseModel

if TYPE_CHECKING:
    from src.apps.blog.models.post import Post


class Category(BaseModel, table=True):
    __tablename__ = "categories"  # type: ignore
    name: str = Field()
    slug: str = Field(unique=True, index=True)

    posts: List["Post"] = Relationship(
        back_populates="categories", link_model=PostCategoryMap
    )


class ExamBoard(BaseModel, table=True):
    __tablename__ = "exam_boards"  # type: ignore
    name: str = Field()
    slug: str = Field(unique=True, index=True)

    examinations: List["Examination"] = Relationship(back_populates="exam_board")


class Examination(BaseModel, table=True):
    __tablename__ = "examinations"  # type: ignore
    name: str = Field(index=True)
    slug: str = Field(unique=True, index=True)
    exam_board_id: Optional[int] = Field(default=None, foreign_key="exam_boards.id")

    exam_board: Optional[ExamBoard] = Relationship(back_populates="examinations")
    posts: List["Post"] = Relationship(back_populates="exams", link_model=PostExamMap)


class Tag(BaseModel, table=True):
    __tablename__ = "tags"  # type: ignore
    name: str = Field()
    slug: str = Field(unique=True, index=True)

    posts: List["Post"] = Relationship(back_populates="tags", link_model=PostTagMap)

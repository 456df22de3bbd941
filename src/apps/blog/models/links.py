"""Join tables between posts and their taxonomies."""

from typing import Optional

from sqlmodel import Field, SQLModel


class PostCategoryMap(SQLModel, table=True):
    __tablename__ = "post_category_map"  # type: ignore

    post_id: Optional[int] = Field(
        default=None, foreign_key="posts.id", primary_key=True
    )
    category_id: Optional[int] = Field(
        default=None, foreign_key="categories.id", primary_key=True
    )


class PostExamMap(SQLModel, table=True):
    __tablename__ = "post_exam_map"  # type: ignore

    post_id: Optional[int] = Field(
        default=None, foreign_key="posts.id", primary_key=True
    )
    exam_id: Optional[int] = Field(
        default=None, foreign_key="examinations.id", primary_key=True
    )


class PostTagMap(SQLModel, table=True):
    __tablename__ = "post_tag_map"  # type: ignore

    post_id: Optional[int] = Field(
        default=None, foreign_key="posts.id", primary_key=True
    )
    tag_id: Optional[int] = Field(
        default=None, foreign_key="tags.id", primary_key=True
    )

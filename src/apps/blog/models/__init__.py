"""Blog models."""

from src.apps.blog.models.author import Author
from src.apps.blog.models.links import PostCategoryMap, PostExamMap, PostTagMap
from src.apps.blog.models.post import Post, PostImage, PostStatus
from src.apps.blog.models.taxonomy import Category, ExamBoard, Examination, Tag

__all__ = [
    "Author",
    "Category",
    "ExamBoard",
    "Examination",
    "Post",
    "PostCategoryMap",
    "PostExamMap",
    "PostImage",
    "PostStatus",
    "PostTagMap",
    "Tag",
]

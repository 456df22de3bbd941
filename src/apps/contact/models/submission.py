"""Contact submission model."""

from typing import Optional

from sqlmodel import Field

from src.core.database import BaseModel


class ContactSubmission(BaseModel, table=True):
    """One message sent through the contact form."""

    __tablename__ = "contact_submissions"  # type: ignore
    name: str = Field()
    email: str = Field()
    grade: Optional[str] = Field(default=None)
    exam: Optional[str] = Field(default=None)
    message: str = Field()

"""Contact schemas."""

from typing import Optional

from pydantic import BaseModel, EmailStr, field_validator


class ContactCreate(BaseModel):
    """Schema for a contact form submission."""

    name: str
    email: EmailStr
    grade: Optional[str] = None
    exam: Optional[str] = None
    message: str

    @field_validator("name", "message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("grade", "exam")
    @classmethod
    def empty_to_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class ContactResponse(BaseModel):
    success: bool
    message: Optional[str] = None
    error: Optional[str] = None
